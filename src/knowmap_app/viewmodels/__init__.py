"""
ViewModels for the KnowMap app.

MVVM architecture separating interaction logic from UI:
- ViewModels handle state and commands
- Views (Qt widgets) handle rendering and user input
- Services (knowmap_core) handle data and layout
"""

from .base import BaseViewModel
from .map_vm import MapVM
from .filter_vm import FilterVM
from .entry_vm import EntryVM, split_tags
from .inspector_vm import InspectorVM, LinkedNode
from .coordinator import AppCoordinator

__all__ = [
    # Base
    "BaseViewModel",

    # ViewModels
    "MapVM",
    "FilterVM",
    "EntryVM",
    "InspectorVM",
    "AppCoordinator",

    # Helpers / data classes
    "split_tags",
    "LinkedNode",
]
