"""
Knowledge map package - QGraphicsView-based implementation.

This package provides the interactive quadrant map with:
- Quadrant backgrounds, axes and watermarks
- Live force layout driven by MapVM
- Pan, zoom, node drag and double-click placement
"""

from .canvas import MapCanvas
from .scene import MapScene
from .style_manager import StyleManager, MapStyle

__all__ = ["MapCanvas", "MapScene", "StyleManager", "MapStyle"]
