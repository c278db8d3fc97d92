"""
Quadrant background and axes QGraphicsItems.

QuadrantItem fills one quarter of the plane with the quadrant background
and draws its label watermark at the quadrant's centering target.
AxesItem draws the dashed axes and the origin marker.
"""

from typing import Optional, TYPE_CHECKING

from PyQt6.QtWidgets import QGraphicsItem, QStyleOptionGraphicsItem, QWidget
from PyQt6.QtCore import Qt, QRectF, QPointF
from PyQt6.QtGui import QPainter, QColor, QFontMetrics

from knowmap_core.domain.quadrants import QuadrantDescriptor

if TYPE_CHECKING:
    from ..style_manager import StyleManager


class QuadrantItem(QGraphicsItem):
    """Background rectangle and watermark for one quadrant."""

    def __init__(
        self,
        descriptor: QuadrantDescriptor,
        watermark_radius: float,
        style_manager: "StyleManager",
    ):
        super().__init__()

        self.descriptor = descriptor
        self._style = style_manager
        self._watermark_center = QPointF(*descriptor.center(watermark_radius))

        extent = style_manager.style.quadrant_extent
        left = 0.0 if descriptor.x_dir > 0 else -extent
        top = 0.0 if descriptor.y_dir > 0 else -extent
        self._rect = QRectF(left, top, extent, extent)

        self.setZValue(-2)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)

    def boundingRect(self) -> QRectF:
        return self._rect

    def paint(
        self,
        painter: QPainter,
        option: QStyleOptionGraphicsItem,
        widget: Optional[QWidget] = None,
    ):
        style = self._style.style

        # Background
        bg = QColor(self.descriptor.background)
        bg.setAlphaF(style.quadrant_opacity)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(bg)
        painter.drawRect(self._rect)

        # Watermark
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        color = QColor(self.descriptor.color)
        color.setAlphaF(style.watermark_opacity)
        painter.setPen(color)

        cx = self._watermark_center.x()
        cy = self._watermark_center.y()

        title_font = self._style.watermark_font()
        painter.setFont(title_font)
        fm = QFontMetrics(title_font)
        width = fm.horizontalAdvance(self.descriptor.label) + 20
        painter.drawText(
            QRectF(cx - width / 2, cy - fm.ascent(), width, fm.height()),
            Qt.AlignmentFlag.AlignHCenter,
            self.descriptor.label,
        )

        sub_font = self._style.watermark_sub_font()
        painter.setFont(sub_font)
        fm = QFontMetrics(sub_font)
        width = fm.horizontalAdvance(self.descriptor.subtitle) + 20
        sub_y = cy + style.watermark_sub_offset
        painter.drawText(
            QRectF(cx - width / 2, sub_y - fm.ascent(), width, fm.height()),
            Qt.AlignmentFlag.AlignHCenter,
            self.descriptor.subtitle,
        )


class AxesItem(QGraphicsItem):
    """Dashed x/y axes through the origin plus an origin dot."""

    def __init__(self, style_manager: "StyleManager"):
        super().__init__()
        self._style = style_manager
        self.setZValue(-1)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)

    def boundingRect(self) -> QRectF:
        extent = self._style.style.quadrant_extent
        return QRectF(-extent, -extent, extent * 2, extent * 2)

    def paint(
        self,
        painter: QPainter,
        option: QStyleOptionGraphicsItem,
        widget: Optional[QWidget] = None,
    ):
        style = self._style.style
        extent = style.quadrant_extent

        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(self._style.get_axis_pen())
        painter.drawLine(QPointF(-extent, 0), QPointF(extent, 0))
        painter.drawLine(QPointF(0, -extent), QPointF(0, extent))

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(style.origin_color)
        painter.drawEllipse(QPointF(0, 0), style.origin_radius, style.origin_radius)
