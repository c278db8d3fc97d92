"""
Shared fixtures for KnowMap tests.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(scope="session")
def qapp():
    """Session QCoreApplication so ViewModels can use signals and QTimer."""
    from PyQt6.QtCore import QCoreApplication
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def store():
    from knowmap_core.adapters.memory_store import MemoryStore
    return MemoryStore()


@pytest.fixture
def dataset(store):
    """DatasetService loaded with the seed dataset."""
    from knowmap_core.services.dataset import DatasetService
    service = DatasetService(store)
    service.load()
    return service
