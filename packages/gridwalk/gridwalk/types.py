"""Cell types for gridwalk."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

Coord = tuple[int, int]


class CellKind(Enum):
    """Public role of a cell, as a renderer sees it."""

    EMPTY = "empty"
    START = "start"
    END = "end"
    WALL = "wall"
    WEIGHT = "weight"


@dataclass(eq=False)
class Cell:
    """One grid position with its authored role and search scratch state.

    Role fields (``is_start``, ``is_end``, ``is_wall``, ``is_weighted``,
    ``weight``) are written by the grid. Scratch fields (``visited``,
    ``distance``, ``g``, ``f``, ``h``, ``came_from``) are written by the
    search engine and reset before every run. ``came_from`` holds the
    predecessor's ``(row, col)``.
    """

    row: int
    col: int
    is_start: bool = False
    is_end: bool = False
    is_wall: bool = False
    is_weighted: bool = False
    weight: float = 1.0
    visited: bool = False
    distance: float = math.inf
    g: float = math.inf
    f: float = math.inf
    h: float = math.inf
    came_from: Coord | None = field(default=None)

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def kind(self) -> CellKind:
        if self.is_start:
            return CellKind.START
        if self.is_end:
            return CellKind.END
        if self.is_wall:
            return CellKind.WALL
        if self.is_weighted:
            return CellKind.WEIGHT
        return CellKind.EMPTY

    def reset_search(self) -> None:
        self.visited = False
        self.distance = math.inf
        self.g = math.inf
        self.f = math.inf
        self.h = math.inf
        self.came_from = None

    def reset_role(self) -> None:
        """Drop wall/weight status. Start/end flags are left alone."""
        self.is_wall = False
        self.is_weighted = False
        self.weight = 1.0

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col}, {self.kind.value})"


@dataclass(frozen=True)
class CellState:
    """Read-only snapshot of a cell for rendering."""

    row: int
    col: int
    kind: CellKind
    weight: float
