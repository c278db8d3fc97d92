"""
Knowledge node QGraphicsItem.

Renders a node as a white circle outlined in its quadrant color, with the
label's initial inside and the full label below.
"""

from typing import Optional, TYPE_CHECKING

from PyQt6.QtWidgets import QGraphicsItem, QStyleOptionGraphicsItem, QWidget
from PyQt6.QtCore import Qt, QRectF, QPointF
from PyQt6.QtGui import QPainter, QPainterPath, QFontMetrics

from knowmap_core.domain.enums import Quadrant
from knowmap_core.domain.quadrants import get_descriptor

if TYPE_CHECKING:
    from ..style_manager import StyleManager


class NodeItem(QGraphicsItem):
    """
    QGraphicsItem for rendering a knowledge node.

    The item's position is the node's world position; the canvas uses
    node_id to route drags and clicks.
    """

    # Width reserved for the label below the node
    LABEL_WIDTH = 160

    def __init__(
        self,
        node_id: str,
        label: str,
        quadrant: Quadrant,
        description: str = "",
        style_manager: Optional["StyleManager"] = None,
    ):
        super().__init__()

        self.node_id = node_id
        self.label = label
        self.quadrant = quadrant
        self._style = style_manager

        # State
        self._selected = False
        self._hovered = False

        self.setAcceptHoverEvents(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setZValue(2)

        tooltip = f"{label}\n{get_descriptor(quadrant).label}"
        if description:
            tooltip += f"\n\n{description}"
        self.setToolTip(tooltip)

    @property
    def radius(self) -> float:
        return self._style.style.node_radius if self._style else 24.0

    # -------------------------------------------------------------------------
    # State Properties
    # -------------------------------------------------------------------------

    @property
    def selected(self) -> bool:
        return self._selected

    @selected.setter
    def selected(self, value: bool):
        if self._selected != value:
            self._selected = value
            self.update()

    # -------------------------------------------------------------------------
    # QGraphicsItem Interface
    # -------------------------------------------------------------------------

    def boundingRect(self) -> QRectF:
        """Circle plus the label area below it."""
        r = self.radius + 4
        label_bottom = (self._style.style.label_offset if self._style else 42.0) + 8
        half_w = max(r, self.LABEL_WIDTH / 2)
        return QRectF(-half_w, -r, half_w * 2, r + label_bottom)

    def shape(self) -> QPainterPath:
        """Hit test on the circle only."""
        path = QPainterPath()
        r = self.radius
        path.addEllipse(QPointF(0, 0), r, r)
        return path

    def paint(
        self,
        painter: QPainter,
        option: QStyleOptionGraphicsItem,
        widget: Optional[QWidget] = None,
    ):
        if not self._style:
            return

        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        r = self.radius

        # Circle
        painter.setPen(self._style.get_node_pen(self.quadrant, self._selected))
        painter.setBrush(self._style.get_node_brush())
        painter.drawEllipse(QPointF(0, 0), r, r)

        # Hover tint
        if self._hovered:
            tint = self._style.quadrant_background(self.quadrant)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(tint)
            painter.drawEllipse(QPointF(0, 0), r - 2, r - 2)

        # Initial letter
        painter.setFont(self._style.letter_font())
        painter.setPen(self._style.quadrant_color(self.quadrant))
        painter.drawText(
            QRectF(-r, -r, r * 2, r * 2),
            Qt.AlignmentFlag.AlignCenter,
            self.label[:1].upper(),
        )

        self._draw_label(painter)

    def _draw_label(self, painter: QPainter):
        """Draw the label centered below the node, baseline at label_offset."""
        font = self._style.label_font()
        painter.setFont(font)
        painter.setPen(self._style.get_text_pen())

        fm = QFontMetrics(font)
        text = fm.elidedText(self.label, Qt.TextElideMode.ElideRight, self.LABEL_WIDTH)
        baseline = self._style.style.label_offset
        text_rect = QRectF(
            -self.LABEL_WIDTH / 2,
            baseline - fm.ascent(),
            self.LABEL_WIDTH,
            fm.height(),
        )
        painter.drawText(text_rect, Qt.AlignmentFlag.AlignHCenter, text)

    # -------------------------------------------------------------------------
    # Event Handlers
    # -------------------------------------------------------------------------

    def hoverEnterEvent(self, event):
        self._hovered = True
        self.update()
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event):
        self._hovered = False
        self.update()
        super().hoverLeaveEvent(event)
