"""
In-memory Store Adapter.

Dict-backed storage port for tests and throwaway sessions.
"""

from typing import Dict, Optional

from ..ports.store_port import StorePort


class MemoryStore(StorePort):
    """Storage port that keeps values in a dict."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})
        self.save_count = 0

    def load(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def save(self, key: str, value: str) -> None:
        self._values[key] = value
        self.save_count += 1
