"""
Configuration & Path Management
===============================
Central registry for layout tuning, view limits and the storage location.

Exports:
    LayoutSettings: Force simulation constants.
    ViewSettings: Pan/zoom limits and interaction timing.
    STORAGE_KEY (str): Key under which the dataset is persisted.
    get_data_dir / get_db_path: Where the key-value store lives.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


STORAGE_KEY: str = "knowledge-graph-data"
DB_FILENAME: str = "knowmap.db"


def _default_alpha_decay(alpha_min: float = 0.001, ticks: int = 300) -> float:
    # Decay that cools alpha from 1 to alpha_min in `ticks` steps
    return 1 - alpha_min ** (1 / ticks)


@dataclass
class LayoutSettings:
    """Force simulation tuning."""
    # Forces
    link_distance: float = 100.0
    charge: float = -300.0
    collide_radius: float = 40.0
    quadrant_radius: float = 250.0
    quadrant_strength: float = 0.4

    # Cooling
    alpha_min: float = 0.001
    alpha_decay: float = field(default_factory=_default_alpha_decay)
    velocity_decay: float = 0.4
    reheat_target: float = 0.3  # alpha_target while a node is dragged

    # Phyllotaxis seeding
    initial_radius: float = 10.0

    # Jiggle RNG seed (coincident points)
    seed: int = 42


@dataclass
class ViewSettings:
    """Pan/zoom and pointer interaction settings."""
    min_scale: float = 0.1
    max_scale: float = 4.0
    zoom_factor: float = 1.25
    tick_interval_ms: int = 16   # ~60 FPS
    click_tolerance: float = 3.0  # px of movement before a press becomes a drag


def get_data_dir() -> Path:
    """
    Get the directory holding the KnowMap store.

    KNOWMAP_DATA_DIR wins; otherwise %APPDATA%/KnowMap, falling back to the
    current directory when APPDATA is not set.
    """
    override = os.environ.get("KNOWMAP_DATA_DIR")
    if override:
        data_dir = Path(override)
    else:
        data_dir = Path(os.environ.get("APPDATA", ".")) / "KnowMap"
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_db_path() -> Path:
    """Get the SQLite key-value store path."""
    return get_data_dir() / DB_FILENAME
