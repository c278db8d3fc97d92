"""Side panel tabs: Add, Filter and Details."""

from .entry_panel import EntryPanel
from .filter_panel import FilterPanel
from .details_panel import DetailsPanel

__all__ = ["EntryPanel", "FilterPanel", "DetailsPanel"]
