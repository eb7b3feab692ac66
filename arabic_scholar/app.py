"""Application controller: user intents in, session snapshots out."""

from typing import Optional

import structlog

from . import prompts
from .chat import ChatSession
from .context import AppContext
from .errors import ChatBusyError, ChatInputError, LookupFailedError, QueryValidationError
from .lookup import LookupClient
from .models import SessionSnapshot
from .session import SessionState

log = structlog.get_logger()


class ScholarApp:
    """Wires the lookup client, session state and chat session together.

    The presentation layer calls the intent methods and renders whatever
    ``snapshot()`` returns. Only the latest search can update the displayed
    entry; a lookup and a chat exchange may be pending at the same time.
    """

    def __init__(self, ctx: AppContext):
        self.ctx = ctx
        self.lookup_client = LookupClient(ctx)
        self.session = SessionState.load(ctx.store, history_limit=ctx.settings.history_limit)
        self.chat: Optional[ChatSession] = None

    def snapshot(self) -> SessionSnapshot:
        return self.session.snapshot()

    async def submit_search(self, word: str) -> SessionSnapshot:
        if not (word or "").strip():
            self.session.reject_query(prompts.BLANK_QUERY_MESSAGE)
            return self.snapshot()

        generation = self.session.begin_lookup()
        try:
            entry = await self.lookup_client.lookup(word)
        except QueryValidationError:
            self.session.fail_lookup(generation, prompts.BLANK_QUERY_MESSAGE)
        except LookupFailedError as e:
            log.error("Lookup failed", word=word, error=str(e), error_type=type(e).__name__)
            self.session.fail_lookup(generation, prompts.LOOKUP_FAILED_MESSAGE)
        except BaseException:
            log.exception("Lookup crashed", word=word)
            self.session.fail_lookup(generation, prompts.LOOKUP_FAILED_MESSAGE)
            raise
        else:
            if self.session.complete_lookup(generation, entry):
                self.session.record_search(entry.word)
        return self.snapshot()

    def toggle_bookmark(self, word: str) -> bool:
        return self.session.toggle_bookmark(word)

    def clear_history(self):
        self.session.clear_history()

    def open_chat(self) -> ChatSession:
        if self.chat is None:
            self.chat = ChatSession(self.ctx)
            log.info("Chat session started")
        return self.chat

    async def send_chat_message(self, text: str) -> Optional[str]:
        """Send a chat message; returns None when the send is suppressed."""
        chat = self.open_chat()
        if chat.busy or not (text or "").strip():
            return None
        try:
            return await chat.send(text)
        except (ChatBusyError, ChatInputError):
            return None
