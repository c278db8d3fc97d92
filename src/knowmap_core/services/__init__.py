"""
Services for KnowMap.

Business logic for the dataset, filtering, layout and view transform.
"""

from .dataset import DatasetService
from .filtering import compute_visible_set, node_matches
from .layout import ForceSimulation, SimNode
from .transform import ViewTransform

__all__ = [
    "DatasetService",
    "compute_visible_set",
    "node_matches",
    "ForceSimulation",
    "SimNode",
    "ViewTransform",
]
