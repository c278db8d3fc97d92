"""
App Coordinator for cross-ViewModel communication.

Handles:
- Filter changes → Map rebuild
- Map selection → Inspector update
- Map double-click → Add form quadrant
- Dataset mutations → Map rebuild and tag list refresh
"""

from PyQt6.QtCore import QObject, pyqtSignal

from knowmap_core.domain.enums import Quadrant
from knowmap_core.domain.quadrants import get_descriptor
from .map_vm import MapVM
from .filter_vm import FilterVM
from .entry_vm import EntryVM
from .inspector_vm import InspectorVM


class AppCoordinator(QObject):
    """
    Coordinates communication between ViewModels.

    This allows ViewModels to remain decoupled while still responding
    to changes in other ViewModels.
    """

    # Signal emitted when status bar should update
    status_message = pyqtSignal(str, int)  # message, timeout_ms

    # Signal emitted when the Add panel should be shown
    show_entry_requested = pyqtSignal()

    def __init__(
        self,
        map_vm: MapVM,
        filter_vm: FilterVM,
        entry_vm: EntryVM,
        inspector_vm: InspectorVM,
    ):
        """
        Initialize the coordinator.

        Args:
            map_vm: Map ViewModel
            filter_vm: Filter ViewModel
            entry_vm: Add form ViewModel
            inspector_vm: Details ViewModel
        """
        super().__init__()

        self._map_vm = map_vm
        self._filter_vm = filter_vm
        self._entry_vm = entry_vm
        self._inspector_vm = inspector_vm

        # Wire up cross-VM connections
        self._connect_signals()

    def _connect_signals(self) -> None:
        """Connect cross-ViewModel signals."""

        self._filter_vm.filter_changed.connect(self._map_vm.set_filter)

        self._map_vm.selection_changed.connect(self._on_selection_changed)
        self._map_vm.placement_requested.connect(self._on_placement_requested)

        self._entry_vm.node_added.connect(self._on_node_added)
        self._entry_vm.validation_failed.connect(self._on_validation_failed)

        self._inspector_vm.node_deleted.connect(self._on_node_deleted)
        self._inspector_vm.node_updated.connect(self._on_dataset_changed)
        self._inspector_vm.links_changed.connect(self._on_dataset_changed)

    # -------------------------------------------------------------------------
    # Map Handlers
    # -------------------------------------------------------------------------

    def _on_selection_changed(self, node_id: str) -> None:
        if node_id:
            self._inspector_vm.load_node(node_id)
        else:
            self._inspector_vm.clear()

    def _on_placement_requested(self, quadrant: Quadrant) -> None:
        self._entry_vm.set_default_quadrant(quadrant)
        self.show_entry_requested.emit()
        self.status_message.emit(
            f"Adding to {get_descriptor(quadrant).label}", 3000
        )

    # -------------------------------------------------------------------------
    # Dataset Handlers
    # -------------------------------------------------------------------------

    def _on_node_added(self, node_id: str) -> None:
        self._refresh()
        self._map_vm.select_node(node_id)
        self.status_message.emit("Note added", 3000)

    def _on_validation_failed(self, message: str) -> None:
        self.status_message.emit(message, 3000)

    def _on_node_deleted(self, node_id: str) -> None:
        self._map_vm.clear_selection()
        self._refresh()
        self.status_message.emit("Note deleted", 3000)

    def _on_dataset_changed(self, *args) -> None:
        self._refresh()

    def _refresh(self) -> None:
        self._map_vm.rebuild()
        self._filter_vm.refresh_tags()

    # -------------------------------------------------------------------------
    # Public Methods
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Build the first layout run."""
        self._map_vm.rebuild()
        self._filter_vm.refresh_tags()
