"""
MapCanvas - QGraphicsView for the knowledge map.

The view keeps an identity transform and a scene rect equal to the
viewport, so scene coordinates are widget (screen) coordinates. Pan and
zoom live in MapVM and are applied to the scene's world layer.

Input:
- Wheel zooms about the cursor
- Dragging the background pans
- Press/move/release on a node drags it (a release without movement selects)
- Click on the background clears the selection
- Double-click on the background requests placement of a new note
"""

from typing import Optional

from PyQt6.QtWidgets import QGraphicsView
from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QWheelEvent, QMouseEvent, QPainter, QResizeEvent

from knowmap_app.viewmodels.map_vm import MapVM
from .scene import MapScene
from .style_manager import StyleManager


class MapCanvas(QGraphicsView):
    """QGraphicsView bound to a MapVM."""

    def __init__(self, vm: MapVM, parent=None):
        super().__init__(parent)

        self._vm = vm
        self._style = StyleManager()
        self._scene = MapScene(
            self._style,
            watermark_radius=vm.layout_settings.quadrant_radius,
        )
        self.setScene(self._scene)

        # Pointer state
        self._press_pos: Optional[QPointF] = None
        self._last_pos: Optional[QPointF] = None
        self._drag_id: Optional[str] = None
        self._grab_offset = QPointF(0, 0)
        self._panning = False
        self._moved = False
        self._view_initialized = False

        self._setup_view()
        self._connect_vm()

    def _setup_view(self):
        """Configure the QGraphicsView."""
        # Rendering
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setRenderHint(QPainter.RenderHint.TextAntialiasing)

        # Optimization
        self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.SmartViewportUpdate)
        self.setOptimizationFlag(QGraphicsView.OptimizationFlag.DontAdjustForAntialiasing)

        # Scene coordinates == viewport coordinates
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.NoAnchor)
        self.setResizeAnchor(QGraphicsView.ViewportAnchor.NoAnchor)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setFrameShape(QGraphicsView.Shape.NoFrame)

        # Scrollbars
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self.setMouseTracking(True)
        self.setMinimumSize(400, 300)

    def _connect_vm(self):
        self._vm.scene_rebuilt.connect(self._on_scene_rebuilt)
        self._vm.positions_changed.connect(self._on_positions_changed)
        self._vm.transform_changed.connect(self._on_transform_changed)
        self._vm.selection_changed.connect(self._scene.set_selected)

    # -------------------------------------------------------------------------
    # VM Handlers
    # -------------------------------------------------------------------------

    def _on_scene_rebuilt(self):
        self._drag_id = None
        self._scene.build(self._vm.visible_set, self._vm.positions())
        self._scene.set_selected(self._vm.selected_id)

    def _on_positions_changed(self):
        self._scene.update_positions(self._vm.positions())

    def _on_transform_changed(self):
        self._scene.set_view_transform(*self._vm.transform.as_tuple())

    def reset_view(self):
        """Center the world origin in the viewport at scale 1."""
        size = self.viewport().size()
        self._vm.reset_view(size.width(), size.height())

    def zoom_in(self):
        """Zoom in about the viewport center (toolbar / keyboard)."""
        size = self.viewport().size()
        self._vm.zoom_in(size.width() / 2, size.height() / 2)

    def zoom_out(self):
        size = self.viewport().size()
        self._vm.zoom_out(size.width() / 2, size.height() / 2)

    # -------------------------------------------------------------------------
    # Resize
    # -------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent):
        size = self.viewport().size()
        self.setSceneRect(QRectF(0, 0, size.width(), size.height()))
        if not self._view_initialized and size.width() > 0 and size.height() > 0:
            self._view_initialized = True
            self.reset_view()
        super().resizeEvent(event)

    # -------------------------------------------------------------------------
    # Zoom and Pan
    # -------------------------------------------------------------------------

    def wheelEvent(self, event: QWheelEvent):
        """Zoom about the cursor."""
        delta = event.angleDelta().y()
        if delta == 0:
            return

        factor = self._vm.view_settings.zoom_factor
        if delta < 0:
            factor = 1 / factor

        pos = event.position()
        self._vm.zoom_at(factor, pos.x(), pos.y())
        event.accept()

    def mousePressEvent(self, event: QMouseEvent):
        """Start a node drag or a background pan."""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.position()
        self._press_pos = pos
        self._last_pos = pos
        self._moved = False

        item = self._scene.node_item_at(self.mapToScene(pos.toPoint()))
        if item is not None:
            self._drag_id = item.node_id
            # Keep the grab point under the cursor instead of snapping to center
            self._grab_offset = pos - item.scenePos()
            self._vm.begin_drag(item.node_id)
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
        else:
            self._panning = True
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent):
        if self._press_pos is None:
            super().mouseMoveEvent(event)
            return

        pos = event.position()
        if not self._moved:
            travel = pos - self._press_pos
            tolerance = self._vm.view_settings.click_tolerance
            if abs(travel.x()) + abs(travel.y()) < tolerance:
                return
            self._moved = True

        if self._drag_id is not None:
            target = pos - self._grab_offset
            self._vm.drag_to(self._drag_id, target.x(), target.y())
        elif self._panning:
            delta = pos - self._last_pos
            self._vm.pan_by(delta.x(), delta.y())

        self._last_pos = pos
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton or self._press_pos is None:
            super().mouseReleaseEvent(event)
            return

        if self._drag_id is not None:
            self._vm.end_drag(self._drag_id, self._moved)
        elif self._panning and not self._moved:
            self._vm.clear_selection()

        self._drag_id = None
        self._panning = False
        self._press_pos = None
        self._last_pos = None
        self.unsetCursor()
        event.accept()

    def mouseDoubleClickEvent(self, event: QMouseEvent):
        """Double-click on the background places a new note."""
        if event.button() != Qt.MouseButton.LeftButton:
            return

        pos = event.position()
        if self._scene.node_item_at(self.mapToScene(pos.toPoint())) is None:
            self._vm.request_placement(pos.x(), pos.y())
        event.accept()
