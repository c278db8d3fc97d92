"""
Storage port interface.

Defines the contract for the flat key-value store that persists the dataset.
"""

from abc import ABC, abstractmethod
from typing import Optional


class StorePort(ABC):
    """
    Abstract interface for key-value persistence.

    Values are opaque strings (the dataset is stored as JSON). Every save
    overwrites the previous value wholesale.
    """

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None if absent."""
        pass

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    def close(self) -> None:
        """Release resources. Optional for implementations."""
        pass
