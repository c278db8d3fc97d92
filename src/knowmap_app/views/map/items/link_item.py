"""
Link QGraphicsItem.

Renders a straight line between two linked nodes.
"""

from typing import Optional, TYPE_CHECKING

from PyQt6.QtWidgets import QGraphicsItem, QStyleOptionGraphicsItem, QWidget
from PyQt6.QtCore import Qt, QRectF, QPointF, QLineF
from PyQt6.QtGui import QPainter

if TYPE_CHECKING:
    from ..style_manager import StyleManager


class LinkItem(QGraphicsItem):
    """QGraphicsItem for a link between two nodes."""

    def __init__(
        self,
        link_id: str,
        source_id: str,
        target_id: str,
        style_manager: Optional["StyleManager"] = None,
    ):
        super().__init__()

        self.link_id = link_id
        self.source_id = source_id
        self.target_id = target_id
        self._style = style_manager
        self._line = QLineF()

        # Links sit behind nodes
        self.setZValue(1)

        # Don't intercept mouse events - allows panning through links
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setAcceptHoverEvents(False)

    def set_positions(self, src: QPointF, dst: QPointF):
        """Update the endpoints (world coordinates)."""
        if self._line.p1() != src or self._line.p2() != dst:
            self.prepareGeometryChange()
            self._line = QLineF(src, dst)
            self.update()

    def boundingRect(self) -> QRectF:
        pad = 2.0
        return QRectF(self._line.p1(), self._line.p2()).normalized().adjusted(
            -pad, -pad, pad, pad
        )

    def paint(
        self,
        painter: QPainter,
        option: QStyleOptionGraphicsItem,
        widget: Optional[QWidget] = None,
    ):
        if not self._style:
            return
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(self._style.get_link_pen())
        painter.drawLine(self._line)
