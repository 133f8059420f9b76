"""
Grid navigation core.

Provides:
- Grid: immutable obstacle grid with start / end and neighbor queries
- find_path: A* search returning PathFound or NoPathFound
- parse_layout / render_layout: plain-text grid snapshots
"""

from __future__ import annotations

from .grid import GRID_SIZE, Coord, Grid, neighbors
from .layout import LayoutError, load_layout, parse_layout, render_layout
from .pathfinder import (
    FRONTIERS,
    InvalidEndpoints,
    NoPathFound,
    PathFound,
    find_path,
    manhattan,
)

__all__ = [
    "GRID_SIZE",
    "Coord",
    "Grid",
    "neighbors",
    "FRONTIERS",
    "InvalidEndpoints",
    "NoPathFound",
    "PathFound",
    "find_path",
    "manhattan",
    "LayoutError",
    "load_layout",
    "parse_layout",
    "render_layout",
]
