"""
MapScene - QGraphicsScene subclass holding the knowledge map items.

All map items live under a single world layer item. The pan/zoom view
transform is applied to that layer, so scene coordinates stay equal to
widget (screen) coordinates and item positions are world coordinates.
"""

from typing import Dict, Optional, Tuple

from PyQt6.QtWidgets import QGraphicsScene, QGraphicsItem, QStyleOptionGraphicsItem, QWidget
from PyQt6.QtCore import QRectF, QPointF
from PyQt6.QtGui import QBrush, QPainter, QTransform

from knowmap_core.domain.models import VisibleSet
from knowmap_core.domain.quadrants import all_descriptors

from .items import NodeItem, LinkItem, QuadrantItem, AxesItem
from .style_manager import StyleManager


class _WorldLayer(QGraphicsItem):
    """Contentless parent carrying the world -> screen transform."""

    def __init__(self):
        super().__init__()
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemHasNoContents, True)

    def boundingRect(self) -> QRectF:
        return QRectF()

    def paint(
        self,
        painter: QPainter,
        option: QStyleOptionGraphicsItem,
        widget: Optional[QWidget] = None,
    ):
        pass


class MapScene(QGraphicsScene):
    """
    QGraphicsScene for the knowledge map.

    Responsibilities:
    - Static quadrant backgrounds and axes
    - One NodeItem per visible node and one LinkItem per visible link
    - Moving items to simulation positions
    - Selection highlight
    """

    def __init__(
        self,
        style_manager: Optional[StyleManager] = None,
        watermark_radius: float = 250.0,
    ):
        """
        Initialize the scene.

        Args:
            style_manager: Styling (default MapStyle if None)
            watermark_radius: Distance of quadrant watermarks from the axes
        """
        super().__init__()

        self._style = style_manager or StyleManager()
        self._watermark_radius = watermark_radius

        self._world = _WorldLayer()
        self.addItem(self._world)

        # Item lookups
        self._node_items: Dict[str, NodeItem] = {}   # node_id -> NodeItem
        self._link_items: Dict[str, LinkItem] = {}   # link_id -> LinkItem

        self._selected_id: Optional[str] = None

        self.setBackgroundBrush(QBrush(self._style.style.bg_color))
        self._build_static()

    def _build_static(self):
        for descriptor in all_descriptors():
            item = QuadrantItem(descriptor, self._watermark_radius, self._style)
            item.setParentItem(self._world)
        AxesItem(self._style).setParentItem(self._world)

    # -------------------------------------------------------------------------
    # Building
    # -------------------------------------------------------------------------

    def clear_map(self):
        """Remove node and link items (static items stay)."""
        for item in list(self._node_items.values()) + list(self._link_items.values()):
            self.removeItem(item)
        self._node_items.clear()
        self._link_items.clear()

    def build(
        self,
        visible: VisibleSet,
        positions: Optional[Dict[str, Tuple[float, float]]] = None,
    ):
        """
        Create items for a visible set.

        Args:
            visible: Nodes and links to draw
            positions: Initial world positions {node_id: (x, y)}
        """
        self.clear_map()

        for link in visible.links:
            item = LinkItem(link.link_id, link.source, link.target, self._style)
            item.setParentItem(self._world)
            self._link_items[link.link_id] = item

        for node in visible.nodes:
            item = NodeItem(
                node.node_id, node.label, node.quadrant,
                description=node.description,
                style_manager=self._style,
            )
            item.selected = node.node_id == self._selected_id
            item.setParentItem(self._world)
            self._node_items[node.node_id] = item

        if positions:
            self.update_positions(positions)

    def update_positions(self, positions: Dict[str, Tuple[float, float]]):
        """Move node and link items to world positions."""
        for node_id, (x, y) in positions.items():
            item = self._node_items.get(node_id)
            if item is not None:
                item.setPos(x, y)

        for item in self._link_items.values():
            src = self._node_items.get(item.source_id)
            dst = self._node_items.get(item.target_id)
            if src is not None and dst is not None:
                item.set_positions(src.pos(), dst.pos())

    # -------------------------------------------------------------------------
    # View state
    # -------------------------------------------------------------------------

    def set_view_transform(self, k: float, x: float, y: float):
        """Apply screen = world * k + (x, y) to the world layer."""
        self._world.setTransform(QTransform(k, 0, 0, k, x, y))

    def set_selected(self, node_id: Optional[str]):
        self._selected_id = node_id or None
        for item_id, item in self._node_items.items():
            item.selected = item_id == self._selected_id

    def node_item_at(self, scene_pos: QPointF) -> Optional[NodeItem]:
        """Find the topmost NodeItem under a scene (screen) point."""
        for item in self.items(scene_pos):
            if isinstance(item, NodeItem):
                return item
        return None
