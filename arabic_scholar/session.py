"""In-memory session state with write-through persistence."""

import json
from typing import List, Optional

import structlog

from .config import BOOKMARKS_KEY, HISTORY_KEY, HISTORY_LIMIT
from .errors import StorageError
from .models import DictionaryEntry, SessionSnapshot
from .storage import KeyValueStore

log = structlog.get_logger()


def _decode_word_list(raw: Optional[str], key: str) -> List[str]:
    """Decode a stored JSON list of strings; anything else reads as empty."""
    if raw is None:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError) as e:
        log.warning("Ignoring malformed stored data", key=key, error=str(e))
        return []
    if not isinstance(value, list) or not all(isinstance(w, str) for w in value):
        log.warning("Ignoring malformed stored data", key=key, error="not a list of strings")
        return []
    return value


class SessionState:
    """Current result, loading/error flags, search history and bookmarks.

    Every lookup is tagged with a generation number from ``begin_lookup``;
    completions carrying an older generation are discarded so a slow reply
    can never overwrite the result of a newer search.
    """

    def __init__(self, store: KeyValueStore, history_limit: int = HISTORY_LIMIT,
                 history: Optional[List[str]] = None, bookmarks: Optional[List[str]] = None):
        self.store = store
        self.history_limit = history_limit
        self.history: List[str] = list(history or [])[:history_limit]
        self.bookmarks: List[str] = list(dict.fromkeys(bookmarks or []))
        self.entry: Optional[DictionaryEntry] = None
        self.loading = False
        self.error: Optional[str] = None
        self.generation = 0

    @classmethod
    def load(cls, store: KeyValueStore, history_limit: int = HISTORY_LIMIT) -> "SessionState":
        """Hydrate from ``store``. Unreadable or malformed data means empty state."""
        history: List[str] = []
        bookmarks: List[str] = []
        try:
            history = _decode_word_list(store.get(HISTORY_KEY), HISTORY_KEY)
            bookmarks = _decode_word_list(store.get(BOOKMARKS_KEY), BOOKMARKS_KEY)
        except StorageError as e:
            log.warning("Could not load session, starting empty", error=str(e))
        # Drop duplicates stored by older versions.
        history = list(dict.fromkeys(history))
        log.info("Session loaded", history=len(history), bookmarks=len(bookmarks))
        return cls(store, history_limit=history_limit, history=history, bookmarks=bookmarks)

    # -- persistence --------------------------------------------------------

    def _save(self, key: str, words: List[str]):
        try:
            self.store.set(key, json.dumps(words, ensure_ascii=False))
        except StorageError as e:
            log.error("Failed to persist session", key=key, error=str(e))

    # -- history and bookmarks ----------------------------------------------

    def record_search(self, word: str):
        """Move ``word`` to the front of the history, keeping it bounded."""
        self.history = [word] + [w for w in self.history if w != word]
        del self.history[self.history_limit:]
        self._save(HISTORY_KEY, self.history)

    def clear_history(self):
        self.history = []
        self._save(HISTORY_KEY, self.history)

    def toggle_bookmark(self, word: str) -> bool:
        """Add or remove a bookmark. Returns whether ``word`` is now bookmarked."""
        if word in self.bookmarks:
            self.bookmarks = [w for w in self.bookmarks if w != word]
            bookmarked = False
        else:
            self.bookmarks = self.bookmarks + [word]
            bookmarked = True
        self._save(BOOKMARKS_KEY, self.bookmarks)
        return bookmarked

    def is_bookmarked(self, word: str) -> bool:
        return word in self.bookmarks

    # -- lookup lifecycle ---------------------------------------------------

    def begin_lookup(self) -> int:
        self.generation += 1
        self.loading = True
        self.error = None
        return self.generation

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def complete_lookup(self, generation: int, entry: DictionaryEntry) -> bool:
        """Show ``entry`` unless a newer lookup has started since."""
        if not self.is_current(generation):
            log.info("Discarding stale lookup result", generation=generation,
                     current=self.generation, word=entry.word)
            return False
        self.entry = entry
        self.loading = False
        self.error = None
        return True

    def fail_lookup(self, generation: int, message: str) -> bool:
        """Show ``message``, keeping the previous entry, unless superseded."""
        if not self.is_current(generation):
            log.info("Discarding stale lookup failure", generation=generation,
                     current=self.generation)
            return False
        self.loading = False
        self.error = message
        return True

    def reject_query(self, message: str):
        """Report a user-correctable problem; no lookup was started."""
        self.error = message

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            entry=self.entry,
            loading=self.loading,
            error=self.error,
            history=list(self.history),
            bookmarks=list(self.bookmarks),
        )
