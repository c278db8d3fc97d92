"""
Map ViewModel - interaction controller and layout owner.

Manages:
- The visible set and the force simulation run built from it
- Cooperative ticking through a QTimer
- Pan/zoom view transform
- Node drag, selection and placement requests

The MapCanvas widget renders state from this ViewModel and forwards raw
pointer input to it in screen coordinates.
"""

import logging
from typing import Optional, Dict, Tuple
from PyQt6.QtCore import pyqtSignal, QTimer

from .base import BaseViewModel
from knowmap_core.config import LayoutSettings, ViewSettings
from knowmap_core.domain.enums import Quadrant
from knowmap_core.domain.models import FilterState, VisibleSet
from knowmap_core.domain.quadrants import classify_point
from knowmap_core.services.dataset import DatasetService
from knowmap_core.services.filtering import compute_visible_set
from knowmap_core.services.layout import ForceSimulation
from knowmap_core.services.transform import ViewTransform

logger = logging.getLogger(__name__)


class MapVM(BaseViewModel):
    """
    ViewModel for the knowledge map canvas.

    Signals:
        scene_rebuilt: Emitted when the visible set (and simulation run) is replaced
        positions_changed: Emitted after every simulation tick
        transform_changed: Emitted when pan/zoom changes
        selection_changed: Emitted with the selected node id ("" = none)
        placement_requested: Emitted with the Quadrant under a double-click

    State:
        visible_set: Nodes and links currently laid out
        transform: Current ViewTransform
        selected_id: Selected node id (None = none)
        is_ticking: Whether the tick timer is active
    """

    scene_rebuilt = pyqtSignal()
    positions_changed = pyqtSignal()
    transform_changed = pyqtSignal()
    selection_changed = pyqtSignal(str)
    placement_requested = pyqtSignal(object)  # Quadrant

    def __init__(
        self,
        dataset: DatasetService,
        layout_settings: Optional[LayoutSettings] = None,
        view_settings: Optional[ViewSettings] = None,
    ):
        """
        Initialize the ViewModel.

        Args:
            dataset: Dataset service (read only from here)
            layout_settings: Force simulation constants
            view_settings: Zoom limits and tick interval
        """
        super().__init__()

        self._dataset = dataset
        self._layout_settings = layout_settings or LayoutSettings()
        self._view_settings = view_settings or ViewSettings()

        # State
        self._filter = FilterState()
        self._visible = VisibleSet()
        self._sim: Optional[ForceSimulation] = None
        self._transform = ViewTransform(settings=self._view_settings)
        self._selected_id: Optional[str] = None
        self._dragging_id: Optional[str] = None

        self._timer = QTimer(self)
        self._timer.setInterval(self._view_settings.tick_interval_ms)
        self._timer.timeout.connect(self.tick)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def visible_set(self) -> VisibleSet:
        return self._visible

    @property
    def simulation(self) -> Optional[ForceSimulation]:
        return self._sim

    @property
    def transform(self) -> ViewTransform:
        return self._transform

    @property
    def filter_state(self) -> FilterState:
        return self._filter.copy()

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def dragging_id(self) -> Optional[str]:
        return self._dragging_id

    @property
    def is_ticking(self) -> bool:
        return self._timer.isActive()

    @property
    def view_settings(self) -> ViewSettings:
        return self._view_settings

    @property
    def layout_settings(self) -> LayoutSettings:
        return self._layout_settings

    def positions(self) -> Dict[str, Tuple[float, float]]:
        """World positions of the visible nodes."""
        if self._sim is None:
            return {}
        return self._sim.positions()

    # -------------------------------------------------------------------------
    # Layout run
    # -------------------------------------------------------------------------

    def set_filter(self, state: FilterState) -> None:
        """Apply new filter predicates and rebuild."""
        self._filter = state.copy()
        self.rebuild()

    def rebuild(self) -> None:
        """Recompute the visible set and start a fresh simulation run."""
        if self._sim is not None:
            self._sim.stop()

        self._visible = compute_visible_set(
            self._dataset.nodes, self._dataset.links, self._filter
        )
        self._sim = ForceSimulation(self._visible, self._layout_settings)
        self._dragging_id = None

        if self._selected_id and self._dataset.get_node(self._selected_id) is None:
            self.clear_selection()

        logger.debug(
            "Map rebuilt: %d visible nodes, %d visible links",
            len(self._visible.nodes), len(self._visible.links)
        )
        self.scene_rebuilt.emit()
        self._ensure_ticking()

    def tick(self) -> bool:
        """
        Advance the simulation one step.

        Returns:
            True while the run is still active
        """
        if self._sim is None:
            self._timer.stop()
            return False

        active = self._sim.step()
        self.positions_changed.emit()
        if not active:
            self._timer.stop()
        return active

    def _ensure_ticking(self) -> None:
        if self._sim is not None and self._sim.is_running and not self._timer.isActive():
            self._timer.start()

    def shutdown(self) -> None:
        """Stop the run and the timer (map view going away)."""
        self._timer.stop()
        if self._sim is not None:
            self._sim.stop()

    # -------------------------------------------------------------------------
    # Pan & zoom
    # -------------------------------------------------------------------------

    def pan_by(self, dx: float, dy: float) -> None:
        if dx == 0 and dy == 0:
            return
        self._transform.pan_by(dx, dy)
        self.transform_changed.emit()

    def zoom_at(self, factor: float, sx: float, sy: float) -> None:
        if self._transform.zoom_at(factor, sx, sy):
            self.transform_changed.emit()

    def zoom_in(self, sx: float, sy: float) -> None:
        self.zoom_at(self._view_settings.zoom_factor, sx, sy)

    def zoom_out(self, sx: float, sy: float) -> None:
        self.zoom_at(1 / self._view_settings.zoom_factor, sx, sy)

    def reset_view(self, width: float, height: float) -> None:
        """Center the world origin in a viewport of the given size."""
        self._transform.center_on_origin(width, height)
        self.transform_changed.emit()

    # -------------------------------------------------------------------------
    # Drag & selection
    # -------------------------------------------------------------------------

    def begin_drag(self, node_id: str) -> bool:
        if self._sim is None or not self._sim.drag_start(node_id):
            return False
        self._dragging_id = node_id
        self._ensure_ticking()
        return True

    def drag_to(self, node_id: str, sx: float, sy: float) -> bool:
        """Move a dragged node to a screen position."""
        if self._sim is None:
            return False
        wx, wy = self._transform.to_world(sx, sy)
        if not self._sim.drag_to(node_id, wx, wy):
            return False
        self._ensure_ticking()
        return True

    def end_drag(self, node_id: str, moved: bool) -> None:
        """
        Release a dragged node.

        Args:
            node_id: Node being released
            moved: False if the pointer never left the click tolerance,
                in which case the release counts as a click and selects
        """
        if self._sim is not None:
            self._sim.drag_end(node_id)
        self._dragging_id = None
        if not moved:
            self.select_node(node_id)

    def select_node(self, node_id: str) -> None:
        if node_id == self._selected_id:
            return
        self._selected_id = node_id
        self.selection_changed.emit(node_id)

    def clear_selection(self) -> None:
        if self._selected_id is None:
            return
        self._selected_id = None
        self.selection_changed.emit("")

    # -------------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------------

    def request_placement(self, sx: float, sy: float) -> Quadrant:
        """Classify the world point under a screen position and announce it."""
        wx, wy = self._transform.to_world(sx, sy)
        quadrant = classify_point(wx, wy)
        logger.debug("Placement requested at world (%.1f, %.1f) -> %s", wx, wy, quadrant.value)
        self.placement_requested.emit(quadrant)
        return quadrant
