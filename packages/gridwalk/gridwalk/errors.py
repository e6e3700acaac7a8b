"""Exceptions raised by the grid model and the search engine."""
from __future__ import annotations


class GridError(Exception):
    """Base class for grid and search failures."""


class InvalidDimensionError(GridError, ValueError):
    """Raised when a grid is created or resized with unusable dimensions."""

    def __init__(self, rows: int, cols: int, message: str | None = None) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(message or f"Invalid grid dimensions {rows}x{cols}")


class OutOfBoundsError(GridError, ValueError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        self.row = row
        self.col = col
        super().__init__(f"({row}, {col}) out of bounds for {rows}x{cols} grid")


class InvalidConfigurationError(GridError, ValueError):
    """Raised when start/end placement is missing, duplicated or conflicting."""
