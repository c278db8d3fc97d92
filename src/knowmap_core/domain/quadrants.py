"""
Static quadrant descriptors and the placement classifier.

World coordinates follow screen orientation: x grows to the right and
y grows downward, so a negative y_dir places a quadrant above the origin.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .enums import Quadrant


@dataclass(frozen=True)
class QuadrantDescriptor:
    """Display and layout description of one quadrant."""
    quadrant: Quadrant
    label: str
    subtitle: str
    color: str          # Accent color (node stroke, letter, watermark)
    background: str     # Background rectangle fill
    x_dir: int          # -1 = left of origin, +1 = right
    y_dir: int          # -1 = above origin, +1 = below

    def center(self, radius: float) -> Tuple[float, float]:
        """Centering target for nodes assigned to this quadrant."""
        return (self.x_dir * radius, self.y_dir * radius)


QUADRANTS: Dict[Quadrant, QuadrantDescriptor] = {
    Quadrant.Q2: QuadrantDescriptor(
        Quadrant.Q2, "Learning Zone", "AI Knows · I Don't",
        "#3b82f6", "#eff6ff", -1, -1,
    ),
    Quadrant.Q1: QuadrantDescriptor(
        Quadrant.Q1, "Common Knowledge", "AI Knows · I Know",
        "#10b981", "#ecfdf5", 1, -1,
    ),
    Quadrant.Q4: QuadrantDescriptor(
        Quadrant.Q4, "The Unknown", "AI Doesn't · I Don't",
        "#64748b", "#f1f5f9", -1, 1,
    ),
    Quadrant.Q3: QuadrantDescriptor(
        Quadrant.Q3, "My Insights", "AI Doesn't · I Know",
        "#f59e0b", "#fffbeb", 1, 1,
    ),
}


def get_descriptor(quadrant: Quadrant) -> QuadrantDescriptor:
    """Look up the descriptor for a quadrant id."""
    return QUADRANTS[Quadrant(quadrant)]


def all_descriptors() -> List[QuadrantDescriptor]:
    """Descriptors in display order (top-left, top-right, bottom-left, bottom-right)."""
    return list(QUADRANTS.values())


def validate_partition() -> None:
    """Raise if the descriptors do not cover the four sign combinations exactly once."""
    signs = {(d.x_dir, d.y_dir) for d in QUADRANTS.values()}
    expected = {(-1, -1), (1, -1), (-1, 1), (1, 1)}
    if len(QUADRANTS) != 4 or signs != expected:
        raise ValueError(f"Quadrant descriptors do not partition the plane: {sorted(signs)}")


_BY_SIGNS: Dict[Tuple[int, int], Quadrant] = {
    (d.x_dir, d.y_dir): d.quadrant for d in QUADRANTS.values()
}


def _side(value: float) -> int:
    # Zero belongs to the non-negative side on both axes
    return -1 if value < 0 else 1


def classify_point(x: float, y: float) -> Quadrant:
    """
    Classify a world point into the quadrant whose signs it matches.

    A coordinate of exactly zero counts as non-negative, so the origin and
    the positive half-axes resolve to the right/bottom neighbours:

        x < 0,  y < 0   -> q2 (Learning Zone)
        x >= 0, y < 0   -> q1 (Common Knowledge)
        x < 0,  y >= 0  -> q4 (The Unknown)
        x >= 0, y >= 0  -> q3 (My Insights)
    """
    return _BY_SIGNS[(_side(x), _side(y))]


validate_partition()
