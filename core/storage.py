"""Key-value persistence adapters consumed by the prompt repository.

The repository only needs ``get(key)`` and ``set(key, value)``; anything that
provides those two methods can back it. Two adapters ship with the package:
an in-memory store for tests and embedding, and a SQLite-backed store used by
the command line application.

Updates:
  v0.2.0 - 2026-09-16 - Wrap SQLite failures in PromptStorageError.
  v0.1.0 - 2026-09-02 - Extract SQLite connection helpers into key-value adapters.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .exceptions import PromptStorageError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("prompt_manager.storage")


@runtime_checkable
class KeyValueStore(Protocol):
    """Durable byte store addressed by string keys."""

    def get(self, key: str) -> bytes | None:
        """Return the stored bytes for *key*, or ``None`` when nothing is stored."""
        ...

    def set(self, key: str, value: bytes) -> None:
        """Replace the value stored under *key*."""
        ...


class InMemoryKeyValueStore:
    """Dictionary-backed store; contents vanish with the instance."""

    def __init__(self, initial: Mapping[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def __contains__(self, key: object) -> bool:
        return key in self._data


def ensure_directory(path: Path) -> None:
    """Ensure the directory for the SQLite database exists."""
    path.parent.mkdir(parents=True, exist_ok=True)


def connect(db_path: Path) -> sqlite3.Connection:
    """Return a configured SQLite connection."""
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA journal_mode = WAL;")
    conn.execute("PRAGMA synchronous = NORMAL;")
    return conn


class SQLiteKeyValueStore:
    """Persist values in a single ``kv_store`` table of a SQLite database."""

    def __init__(self, db_path: str | Path) -> None:
        """Open (or create) the database file and ensure the table exists."""
        self._db_path = Path(db_path)
        try:
            ensure_directory(self._db_path)
            with closing(self._connection()) as conn, conn:
                conn.execute(
                    "CREATE TABLE IF NOT EXISTS kv_store ("
                    "key TEXT PRIMARY KEY, "
                    "value BLOB NOT NULL"
                    ");"
                )
        except (OSError, sqlite3.Error) as exc:
            raise PromptStorageError(f"Failed to initialise storage at {self._db_path}") from exc
        logger.debug("Opened key-value store", extra={"db_path": str(self._db_path)})

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _connection(self) -> sqlite3.Connection:
        return connect(self._db_path)

    def get(self, key: str) -> bytes | None:
        """Fetch the value stored under *key*."""
        try:
            with closing(self._connection()) as conn:
                row = conn.execute("SELECT value FROM kv_store WHERE key = ?;", (key,)).fetchone()
        except sqlite3.Error as exc:
            raise PromptStorageError(f"Failed to read key {key!r}") from exc
        if row is None:
            return None
        return bytes(row[0])

    def set(self, key: str, value: bytes) -> None:
        """Insert or replace the value stored under *key*."""
        try:
            with closing(self._connection()) as conn, conn:
                conn.execute(
                    "INSERT INTO kv_store (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value;",
                    (key, sqlite3.Binary(bytes(value))),
                )
        except sqlite3.Error as exc:
            raise PromptStorageError(f"Failed to write key {key!r}") from exc


__all__ = [
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "SQLiteKeyValueStore",
    "connect",
    "ensure_directory",
]
