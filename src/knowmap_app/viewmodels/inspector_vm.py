"""
Inspector ViewModel for the node details panel.

Manages:
- Selected node and its quadrant descriptor
- Linked nodes
- Edit, delete, link and unlink commands
"""

from dataclasses import dataclass
from typing import Optional, List, Iterable
from PyQt6.QtCore import pyqtSignal

from .base import BaseViewModel
from knowmap_core.services.dataset import DatasetService
from knowmap_core.domain.models import KnowledgeNode
from knowmap_core.domain.quadrants import QuadrantDescriptor, get_descriptor
from knowmap_core.domain.enums import Quadrant


@dataclass
class LinkedNode:
    """A node linked to the inspected node."""
    link_id: str
    node_id: str
    label: str
    quadrant: Quadrant


class InspectorVM(BaseViewModel):
    """
    ViewModel for the details panel.

    Signals:
        node_changed: Emitted when the inspected node changes (or is cleared)
        node_deleted: Emitted with the id of a deleted node
        node_updated: Emitted with the id of an edited node
        links_changed: Emitted when a link was added or removed

    State:
        node: Currently inspected node
        descriptor: Its quadrant descriptor
        linked_nodes: Nodes linked to it
    """

    node_changed = pyqtSignal()
    node_deleted = pyqtSignal(str)
    node_updated = pyqtSignal(str)
    links_changed = pyqtSignal()

    def __init__(self, dataset: DatasetService):
        """
        Initialize the ViewModel.

        Args:
            dataset: Dataset service
        """
        super().__init__()

        self._dataset = dataset
        self._node: Optional[KnowledgeNode] = None
        self._linked: List[LinkedNode] = []

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def node(self) -> Optional[KnowledgeNode]:
        return self._node

    @property
    def has_node(self) -> bool:
        return self._node is not None

    @property
    def descriptor(self) -> Optional[QuadrantDescriptor]:
        if self._node is None:
            return None
        return get_descriptor(self._node.quadrant)

    @property
    def linked_nodes(self) -> List[LinkedNode]:
        return self._linked.copy()

    @property
    def link_candidates(self) -> List[KnowledgeNode]:
        """Nodes that could be linked to the inspected node."""
        if self._node is None:
            return []
        linked_ids = {l.node_id for l in self._linked}
        return [
            n for n in self._dataset.nodes
            if n.node_id != self._node.node_id and n.node_id not in linked_ids
        ]

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def load_node(self, node_id: str) -> bool:
        """
        Load a node for inspection.

        Returns:
            True if the node exists
        """
        node = self._dataset.get_node(node_id) if node_id else None
        if node is None:
            self.clear()
            return False

        self._node = node
        self._load_links()
        self.node_changed.emit()
        return True

    def clear(self) -> None:
        self._node = None
        self._linked = []
        self.node_changed.emit()

    def _load_links(self) -> None:
        self._linked = []
        if self._node is None:
            return
        for link, other in self._dataset.neighbors(self._node.node_id):
            self._linked.append(
                LinkedNode(link.link_id, other.node_id, other.label, other.quadrant)
            )

    def delete_node(self) -> bool:
        """Delete the inspected node (and its links)."""
        if self._node is None:
            return False

        node_id = self._node.node_id
        if not self._dataset.delete_node(node_id):
            return False

        self.clear()
        self.node_deleted.emit(node_id)
        return True

    def save_edits(
        self,
        label: Optional[str] = None,
        description: Optional[str] = None,
        quadrant: Optional[Quadrant] = None,
        tags: Optional[Iterable[str]] = None,
    ) -> bool:
        """
        Save edits to the inspected node.

        Returns:
            True if the node was updated (False for an empty title)
        """
        if self._node is None:
            return False

        updated = self._dataset.edit_node(
            self._node.node_id,
            label=label,
            description=description,
            quadrant=quadrant,
            tags=tags,
        )
        if updated is None:
            return False

        self._node = updated
        self.node_changed.emit()
        self.node_updated.emit(updated.node_id)
        return True

    def link_to(self, other_id: str) -> bool:
        if self._node is None:
            return False
        if self._dataset.add_link(self._node.node_id, other_id) is None:
            return False

        self._load_links()
        self.node_changed.emit()
        self.links_changed.emit()
        return True

    def unlink(self, link_id: str) -> bool:
        if self._node is None:
            return False
        if not self._dataset.remove_link(link_id):
            return False

        self._load_links()
        self.node_changed.emit()
        self.links_changed.emit()
        return True
