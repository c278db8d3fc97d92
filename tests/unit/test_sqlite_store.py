"""
Tests for the SQLite key-value store adapter.
"""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from knowmap_core.adapters.sqlite_store import SqliteStore
from knowmap_core.services.dataset import DatasetService


class TestSqliteStore:
    """Flat key/value persistence."""

    def test_missing_key(self, tmp_path):
        """Verify an unknown key loads as None."""
        store = SqliteStore(tmp_path / "kv.db")
        assert store.load("nothing") is None
        store.close()

    def test_save_and_load(self, tmp_path):
        """Verify a saved value reads back unchanged."""
        store = SqliteStore(tmp_path / "kv.db")
        store.save("k", '{"a": 1}')
        assert store.load("k") == '{"a": 1}'
        store.close()

    def test_save_overwrites(self, tmp_path):
        """Verify saving twice keeps a single row with the newer value."""
        store = SqliteStore(tmp_path / "kv.db")
        store.save("k", "one")
        store.save("k", "two")
        assert store.load("k") == "two"
        count = store._conn.execute("SELECT COUNT(*) FROM kv_store").fetchone()[0]
        assert count == 1
        store.close()

    def test_survives_reopen(self, tmp_path):
        """Verify values persist after closing and reopening the file."""
        path = tmp_path / "nested" / "kv.db"
        store = SqliteStore(path)
        store.save("k", "persisted")
        store.close()

        reopened = SqliteStore(path)
        assert reopened.load("k") == "persisted"
        reopened.close()

    def test_wal_mode(self, tmp_path):
        """Verify the database runs in WAL journal mode."""
        store = SqliteStore(tmp_path / "kv.db")
        mode = store._conn.execute("PRAGMA journal_mode").fetchone()[0]
        assert mode.lower() == "wal"
        store.close()


class TestDatasetOnSqlite:
    """DatasetService round trip through a real database file."""

    def test_first_run_then_reload(self, tmp_path):
        """Verify a first run seeds, saves, and reloads from disk."""
        path = tmp_path / "knowmap.db"

        store = SqliteStore(path)
        service = DatasetService(store)
        service.load()
        node = service.add_node("Persisted", tags=["disk"])
        store.close()

        store = SqliteStore(path)
        service = DatasetService(store)
        service.load()
        assert service.get_node(node.node_id).label == "Persisted"
        assert len(service.nodes) == 5
        store.close()
