"""
Filter ViewModel for the search box and filter panel.

Manages:
- Search text (label substring)
- Active tag filter
- Per-quadrant visibility
"""

from typing import List
from PyQt6.QtCore import pyqtSignal

from .base import BaseViewModel
from knowmap_core.services.dataset import DatasetService
from knowmap_core.domain.models import FilterState
from knowmap_core.domain.enums import Quadrant


class FilterVM(BaseViewModel):
    """
    ViewModel for filter state.

    Signals:
        filter_changed: Emitted with a FilterState copy when any predicate changes
        tags_changed: Emitted when the list of available tags changes

    State:
        state: Copy of the current FilterState
        available_tags: Tag registry of the dataset
    """

    filter_changed = pyqtSignal(object)  # FilterState
    tags_changed = pyqtSignal()

    def __init__(self, dataset: DatasetService):
        """
        Initialize the ViewModel.

        Args:
            dataset: Dataset service (source of the tag registry)
        """
        super().__init__()

        self._dataset = dataset
        self._state = FilterState()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def state(self) -> FilterState:
        """Get a copy of the current filter state."""
        return self._state.copy()

    @property
    def available_tags(self) -> List[str]:
        return self._dataset.tags

    @property
    def search(self) -> str:
        return self._state.search

    @property
    def is_active(self) -> bool:
        """Whether any predicate currently hides nodes."""
        return self._state.is_active()

    @property
    def active_tags(self) -> List[str]:
        """Selected tags, in registry order."""
        return [t for t in self.available_tags if t in self._state.tags]

    def is_quadrant_visible(self, quadrant: Quadrant) -> bool:
        return self._state.is_quadrant_visible(Quadrant.parse(quadrant))

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def set_search(self, text: str) -> None:
        if text == self._state.search:
            return
        self._state.search = text
        self._emit()

    def toggle_tag(self, tag: str) -> None:
        if tag in self._state.tags:
            self._state.tags.discard(tag)
        else:
            self._state.tags.add(tag)
        self._emit()

    def clear_tags(self) -> None:
        if not self._state.tags:
            return
        self._state.tags.clear()
        self._emit()

    def set_quadrant_visible(self, quadrant: Quadrant, visible: bool) -> None:
        quadrant = Quadrant.parse(quadrant)
        if self._state.is_quadrant_visible(quadrant) == visible:
            return
        self._state.visible_quadrants[quadrant] = visible
        self._emit()

    def toggle_quadrant(self, quadrant: Quadrant) -> None:
        quadrant = Quadrant.parse(quadrant)
        self.set_quadrant_visible(quadrant, not self._state.is_quadrant_visible(quadrant))

    def reset(self) -> None:
        """Clear every predicate."""
        if not self._state.is_active():
            return
        self._state = FilterState()
        self._emit()

    def refresh_tags(self) -> None:
        """Re-read the tag registry (after nodes were added or edited)."""
        self.tags_changed.emit()

    def _emit(self) -> None:
        self.filter_changed.emit(self._state.copy())
