"""A* heuristics over (row, col) cells."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from gridwalk import Cell, Grid

SQRT2 = math.sqrt(2)


def manhattan(a: Cell, b: Cell) -> float:
    return float(abs(a.row - b.row) + abs(a.col - b.col))


def octile(a: Cell, b: Cell) -> float:
    """Diagonal distance with orthogonal cost 1 and diagonal cost sqrt(2)."""
    dx = abs(a.row - b.row)
    dy = abs(a.col - b.col)
    return (dx + dy) + (SQRT2 - 2) * min(dx, dy)


def heuristic_for(grid: Grid) -> Callable[[Cell, Cell], float]:
    """Pick the admissible heuristic for the grid's move set."""
    return octile if grid.allow_diagonal else manhattan
