"""Custom QGraphicsItems for the knowledge map."""

from .node_item import NodeItem
from .link_item import LinkItem
from .quadrant_item import QuadrantItem, AxesItem

__all__ = ["NodeItem", "LinkItem", "QuadrantItem", "AxesItem"]
