"""
Adapters for KnowMap.

Implementations of the port interfaces.
"""

from .sqlite_store import SqliteStore
from .memory_store import MemoryStore

__all__ = ["SqliteStore", "MemoryStore"]
