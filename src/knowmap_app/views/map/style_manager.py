"""
Style manager for the knowledge map.

Centralizes colors, sizes, fonts and pens used by the map items.
Quadrant colors come from the domain descriptors.
"""

from dataclasses import dataclass, field
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QPen, QBrush

from knowmap_core.domain.enums import Quadrant
from knowmap_core.domain.quadrants import get_descriptor


@dataclass
class MapStyle:
    """All styling parameters for the map."""

    # Background
    bg_color: QColor = field(default_factory=lambda: QColor("#ffffff"))

    # Quadrant backgrounds
    quadrant_extent: float = 4000.0     # Each background rect is extent x extent
    quadrant_opacity: float = 0.6
    watermark_opacity: float = 0.15
    watermark_font_size: int = 48
    watermark_sub_font_size: int = 24
    watermark_sub_offset: float = 50.0

    # Axes
    axis_color: QColor = field(default_factory=lambda: QColor("#cbd5e1"))
    axis_width: float = 2.0
    origin_color: QColor = field(default_factory=lambda: QColor("#64748b"))
    origin_radius: float = 6.0

    # Links
    link_color: QColor = field(default_factory=lambda: QColor("#94a3b8"))
    link_width: float = 1.5
    link_opacity: float = 0.6

    # Nodes
    node_radius: float = 24.0
    node_fill: QColor = field(default_factory=lambda: QColor("#ffffff"))
    node_stroke_width: float = 3.0
    letter_font_size: int = 14
    label_font_size: int = 12
    label_offset: float = 42.0          # Baseline distance below the node center
    label_color: QColor = field(default_factory=lambda: QColor("#1e293b"))

    # Selection
    selection_color: QColor = field(default_factory=lambda: QColor("#4f46e5"))


class StyleManager:
    """Manages all styling for the map visualization."""

    FONT_FAMILY = "Segoe UI"

    def __init__(self, style: Optional[MapStyle] = None):
        self.style = style or MapStyle()

    # -------------------------------------------------------------------------
    # Color Methods
    # -------------------------------------------------------------------------

    def quadrant_color(self, quadrant: Quadrant) -> QColor:
        return QColor(get_descriptor(quadrant).color)

    def quadrant_background(self, quadrant: Quadrant) -> QColor:
        return QColor(get_descriptor(quadrant).background)

    # -------------------------------------------------------------------------
    # Fonts
    # -------------------------------------------------------------------------

    def get_font(self, pixel_size: int, bold: bool = False) -> QFont:
        font = QFont(self.FONT_FAMILY)
        font.setPixelSize(pixel_size)
        font.setBold(bold)
        return font

    def letter_font(self) -> QFont:
        return self.get_font(self.style.letter_font_size, bold=True)

    def label_font(self) -> QFont:
        font = self.get_font(self.style.label_font_size)
        font.setWeight(QFont.Weight.Medium)
        return font

    def watermark_font(self) -> QFont:
        return self.get_font(self.style.watermark_font_size, bold=True)

    def watermark_sub_font(self) -> QFont:
        return self.get_font(self.style.watermark_sub_font_size)

    # -------------------------------------------------------------------------
    # Pen/Brush Helpers
    # -------------------------------------------------------------------------

    def get_node_pen(self, quadrant: Quadrant, selected: bool = False) -> QPen:
        """Outline in the quadrant color (selection color when selected)."""
        color = self.style.selection_color if selected else self.quadrant_color(quadrant)
        width = self.style.node_stroke_width + (1 if selected else 0)
        return QPen(color, width)

    def get_node_brush(self) -> QBrush:
        return QBrush(self.style.node_fill)

    def get_link_pen(self) -> QPen:
        color = QColor(self.style.link_color)
        color.setAlphaF(self.style.link_opacity)
        return QPen(color, self.style.link_width)

    def get_axis_pen(self) -> QPen:
        pen = QPen(self.style.axis_color, self.style.axis_width)
        pen.setStyle(Qt.PenStyle.DashLine)
        return pen

    def get_text_pen(self) -> QPen:
        return QPen(self.style.label_color)
