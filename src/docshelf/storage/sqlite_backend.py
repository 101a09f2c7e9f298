"""SQLite-backed key-value persistence."""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from docshelf.storage.schema import SCHEMA

logger = logging.getLogger(__name__)


class SQLiteBackend:
    """Stores opaque blobs by key in a single SQLite file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._initialized = False

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database connections."""
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def initialize(self) -> None:
        """Create schema if not exists."""
        if self._initialized:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.connection() as conn:
            conn.executescript(SCHEMA)
        self._initialized = True

    def load(self, key: str) -> Optional[bytes]:
        """Retrieve a blob by key."""
        self.initialize()
        with self.connection() as conn:
            row = conn.execute(
                "SELECT value FROM blobs WHERE key = ?", (key,)
            ).fetchone()
            return bytes(row["value"]) if row else None

    def save(self, key: str, data: bytes) -> None:
        """Overwrite the blob stored under key."""
        self.initialize()
        with self.connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO blobs (key, value, updated_at) VALUES (?, ?, ?)",
                (key, sqlite3.Binary(data), datetime.now(timezone.utc).isoformat()),
            )
        logger.debug(f"Saved {len(data)} bytes under {key!r} to {self.path}")
