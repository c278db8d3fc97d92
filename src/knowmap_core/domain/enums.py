"""
Enumerations for the KnowMap domain.
"""

from enum import Enum


class Quadrant(str, Enum):
    """The four categories of the knowledge map."""
    Q1 = "q1"  # Common Knowledge (top-right)
    Q2 = "q2"  # Learning Zone (top-left)
    Q3 = "q3"  # My Insights (bottom-right)
    Q4 = "q4"  # The Unknown (bottom-left)

    @classmethod
    def parse(cls, value: str) -> "Quadrant":
        """Parse a quadrant id, tolerating case and whitespace."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


class PinState(str, Enum):
    """Per-node state of a simulation working copy."""
    FREE = "free"         # Moved by forces
    PINNED = "pinned"     # Held by a drag, fixed to the pin target
    SETTLED = "settled"   # Run has cooled below alpha_min
