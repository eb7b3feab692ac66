"""Key-value persistence for search history and bookmarks."""

import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Dict, Optional

import structlog

from .errors import StorageError

log = structlog.get_logger()


class KeyValueStore:
    """Named string slots. Implementations raise ``StorageError`` on I/O failure."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """Process-local store, used by tests and ``--db :memory:``."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class SqliteStore(KeyValueStore):
    """Store backed by a single SQLite table.

    A connection is opened per operation and always closed again, so no
    handle outlives a read or a write.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self._init_database()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _init_database(self):
        db_exists = self.db_path.exists()
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            with closing(self._connect()) as conn, conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS kv(
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                """)
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Cannot open store {self.db_path}: {e}") from e

        if db_exists:
            log.info("Store connected", db_path=str(self.db_path))
        else:
            log.info("Store created", db_path=str(self.db_path))

    def get(self, key: str) -> Optional[str]:
        try:
            with closing(self._connect()) as conn:
                row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot read {key!r}: {e}") from e
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute("""
                    INSERT OR REPLACE INTO kv (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                """, (key, value))
        except sqlite3.Error as e:
            raise StorageError(f"Cannot write {key!r}: {e}") from e


def open_store(db_path) -> KeyValueStore:
    """Open the SQLite store, or an empty in-memory one if that fails.

    ``":memory:"`` selects the in-memory store directly.
    """
    if str(db_path) == ":memory:":
        return MemoryStore()
    try:
        return SqliteStore(db_path)
    except StorageError as e:
        log.error("Store unavailable, history and bookmarks will not persist",
                  db_path=str(db_path), error=str(e))
        return MemoryStore()
