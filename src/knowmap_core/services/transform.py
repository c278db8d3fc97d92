"""
View transform between screen (widget) and world (simulation) coordinates.
"""

from typing import Optional, Tuple

from ..config import ViewSettings


class ViewTransform:
    """
    Uniform scale + translation: screen = world * k + (x, y).

    The scale is always clamped to the configured zoom range.
    """

    def __init__(
        self,
        k: float = 1.0,
        x: float = 0.0,
        y: float = 0.0,
        settings: Optional[ViewSettings] = None,
    ):
        self.settings = settings or ViewSettings()
        self.k = self._clamp(k)
        self.x = x
        self.y = y

    def _clamp(self, k: float) -> float:
        return max(self.settings.min_scale, min(self.settings.max_scale, k))

    def to_world(self, sx: float, sy: float) -> Tuple[float, float]:
        return ((sx - self.x) / self.k, (sy - self.y) / self.k)

    def to_screen(self, wx: float, wy: float) -> Tuple[float, float]:
        return (wx * self.k + self.x, wy * self.k + self.y)

    def pan_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def zoom_at(self, factor: float, sx: float, sy: float) -> bool:
        """
        Scale by factor, keeping the world point under (sx, sy) fixed.

        Returns:
            True if the scale changed (False when already at a limit)
        """
        new_k = self._clamp(self.k * factor)
        if new_k == self.k:
            return False

        wx, wy = self.to_world(sx, sy)
        self.k = new_k
        self.x = sx - wx * new_k
        self.y = sy - wy * new_k
        return True

    def center_on_origin(self, width: float, height: float) -> None:
        """Initial view: world origin in the middle of the viewport, k = 1."""
        self.k = self._clamp(1.0)
        self.x = width / 2
        self.y = height / 2

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.k, self.x, self.y)

    def __repr__(self) -> str:
        return f"ViewTransform(k={self.k:.3f}, x={self.x:.1f}, y={self.y:.1f})"
