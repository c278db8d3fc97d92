"""
Entry ViewModel for the "Add note" form.
"""

from typing import List
from PyQt6.QtCore import pyqtSignal

from .base import BaseViewModel
from knowmap_core.services.dataset import DatasetService
from knowmap_core.domain.enums import Quadrant


def split_tags(text: str) -> List[str]:
    """Split comma-separated tag input, dropping blanks."""
    return [t.strip() for t in text.split(",") if t.strip()]


class EntryVM(BaseViewModel):
    """
    ViewModel for the add form.

    Signals:
        form_changed: Emitted when fields are set programmatically (reset, placement)
        validation_failed: Emitted with a message when submit() is rejected
        node_added: Emitted with the new node id
    """

    form_changed = pyqtSignal()
    validation_failed = pyqtSignal(str)
    node_added = pyqtSignal(str)

    def __init__(self, dataset: DatasetService):
        super().__init__()

        self._dataset = dataset

        self.label = ""
        self.description = ""
        self.quadrant = Quadrant.Q1
        self.tags_text = ""

    def set_default_quadrant(self, quadrant: Quadrant) -> None:
        """Preselect the quadrant (from a double-click on the map)."""
        self.quadrant = Quadrant.parse(quadrant)
        self.form_changed.emit()

    def submit(self) -> bool:
        """
        Validate and add the node.

        Returns:
            True if the node was added
        """
        if not self.label.strip():
            self.validation_failed.emit("A title is required.")
            return False

        node = self._dataset.add_node(
            label=self.label,
            description=self.description,
            quadrant=self.quadrant,
            tags=split_tags(self.tags_text),
        )
        self.reset()
        self.node_added.emit(node.node_id)
        return True

    def reset(self) -> None:
        self.label = ""
        self.description = ""
        self.quadrant = Quadrant.Q1
        self.tags_text = ""
        self.form_changed.emit()
