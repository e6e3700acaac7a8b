"""gridwalk - Grid model for the pathfinding visualizer."""
from __future__ import annotations

from gridwalk.config import GridConfig
from gridwalk.errors import (
    GridError,
    InvalidConfigurationError,
    InvalidDimensionError,
    OutOfBoundsError,
)
from gridwalk.grid import Grid, default_endpoints, dimensions_for_width
from gridwalk.maze import carve_path, generate_maze
from gridwalk.types import Cell, CellKind, CellState, Coord

__all__ = [
    "Cell",
    "CellKind",
    "CellState",
    "Coord",
    "Grid",
    "GridConfig",
    "GridError",
    "InvalidConfigurationError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "carve_path",
    "default_endpoints",
    "dimensions_for_width",
    "generate_maze",
]
