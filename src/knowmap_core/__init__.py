"""
KnowMap Core - Headless library for the personal knowledge map.

Provides the quadrant model, the dataset store, visible-set filtering,
the force layout and the view transform. It has no UI dependencies.
"""

__version__ = "0.1.0"

# Lazy imports to avoid loading everything at once
def __getattr__(name):
    if name == "SqliteStore":
        from .adapters.sqlite_store import SqliteStore
        return SqliteStore
    elif name == "MemoryStore":
        from .adapters.memory_store import MemoryStore
        return MemoryStore
    elif name == "DatasetService":
        from .services.dataset import DatasetService
        return DatasetService
    elif name == "ForceSimulation":
        from .services.layout import ForceSimulation
        return ForceSimulation
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "__version__",
    "SqliteStore",
    "MemoryStore",
    "DatasetService",
    "ForceSimulation",
]
