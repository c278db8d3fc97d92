"""
Ports (interfaces) for KnowMap.

These define the contracts that adapters must implement.
This enables dependency injection and testing with in-memory stores.
"""

from .store_port import StorePort

__all__ = ["StorePort"]
