"""
SQLite Key-Value Store Adapter.

Implements the storage port with a single SQLite table of key/value rows.
"""

import sqlite3
from pathlib import Path
from datetime import datetime
from typing import Optional

from ..ports.store_port import StorePort


# SQL Schema
SCHEMA_SQL = """
-- Enable WAL mode so a crash mid-write leaves the last value intact
PRAGMA journal_mode=WAL;

-- Flat key-value store (one row per persisted record)
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


class SqliteStore(StorePort):
    """SQLite implementation of the storage port."""

    def __init__(self, db_path: Path):
        """
        Initialize the SQLite store.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self._conn = sqlite3.connect(
            str(self.db_path),
            isolation_level=None  # Autocommit mode
        )
        self._conn.row_factory = sqlite3.Row
        self._conn.executescript(SCHEMA_SQL)

    def _now(self) -> str:
        """Get current timestamp as ISO string."""
        return datetime.now().isoformat()

    def load(self, key: str) -> Optional[str]:
        row = self._conn.execute(
            "SELECT value FROM kv_store WHERE key = ?", (key,)
        ).fetchone()
        if row:
            return row["value"]
        return None

    def save(self, key: str, value: str) -> None:
        self._conn.execute(
            """INSERT INTO kv_store (key, value, updated_at)
               VALUES (?, ?, ?)
               ON CONFLICT(key) DO UPDATE SET
                 value=excluded.value,
                 updated_at=excluded.updated_at""",
            (key, value, self._now())
        )

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()
