"""Explicit application context shared by the lookup client, session and chat."""

from dataclasses import dataclass, field
from typing import Any, Optional

from .config import Settings
from .storage import KeyValueStore, MemoryStore, open_store


@dataclass
class AppContext:
    """Collaborators every component is constructed with.

    ``backend`` is anything exposing the ``OpenAIBackend`` coroutines
    (``complete_json``, ``chat``, ``speak``); tests pass a fake.
    """

    backend: Any
    store: KeyValueStore = field(default_factory=MemoryStore)
    settings: Settings = field(default_factory=Settings)


def build_context(settings: Optional[Settings] = None, in_memory: bool = False) -> AppContext:
    """Build the production context: OpenAI backend plus SQLite store.

    An unusable store file degrades to an in-memory store.
    """
    from .openai_client import OpenAIBackend

    settings = settings or Settings()
    store = MemoryStore() if in_memory else open_store(settings.store_path)
    return AppContext(backend=OpenAIBackend(settings), store=store, settings=settings)
