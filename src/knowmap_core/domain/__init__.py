"""
Domain models for KnowMap.

Contains DTOs, enums, and the static quadrant descriptors.
"""

from .models import (
    KnowledgeNode,
    KnowledgeLink,
    TagRegistry,
    Dataset,
    FilterState,
    VisibleSet,
    DatasetFormatError,
    seed_dataset,
)
from .enums import (
    Quadrant,
    PinState,
)
from .quadrants import (
    QuadrantDescriptor,
    QUADRANTS,
    get_descriptor,
    all_descriptors,
    classify_point,
)

__all__ = [
    # Models
    "KnowledgeNode",
    "KnowledgeLink",
    "TagRegistry",
    "Dataset",
    "FilterState",
    "VisibleSet",
    "DatasetFormatError",
    "seed_dataset",
    # Enums
    "Quadrant",
    "PinState",
    # Quadrants
    "QuadrantDescriptor",
    "QUADRANTS",
    "get_descriptor",
    "all_descriptors",
    "classify_point",
]
