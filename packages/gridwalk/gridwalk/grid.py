"""Grid - rectangular cell grid with start/end, walls and weights."""
from __future__ import annotations

import logging
import random
from typing import Iterator

from gridwalk.config import GridConfig
from gridwalk.errors import (
    InvalidConfigurationError,
    InvalidDimensionError,
    OutOfBoundsError,
)
from gridwalk.maze import generate_maze
from gridwalk.types import Cell, CellState, Coord

logger = logging.getLogger(__name__)

_ORTHOGONAL = [(-1, 0), (1, 0), (0, -1), (0, 1)]
_DIAGONAL = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


def default_endpoints(rows: int, cols: int) -> tuple[Coord, Coord]:
    """Default start and end coordinates for a ``rows x cols`` grid."""
    start = (rows // 2, cols // 4)
    end = (rows // 2, 3 * cols // 4)
    if end == start:
        end = (rows - 1, cols - 1)
    if end == start:
        end = (0, 0)
    return start, end


def dimensions_for_width(width: int) -> tuple[int, int]:
    """Preset ``(rows, cols)`` for a viewport ``width`` in pixels."""
    if width < 480:
        return (10, 10)
    if width < 768:
        return (15, 15)
    if width < 1200:
        return (15, 20)
    return (20, 25)


class Grid:
    def __init__(
        self,
        rows: int,
        cols: int,
        *,
        allow_diagonal: bool = False,
        use_weighted_nodes: bool = False,
        config: GridConfig | None = None,
    ) -> None:
        self.allow_diagonal = allow_diagonal
        self.use_weighted_nodes = use_weighted_nodes
        self._config = config if config is not None else GridConfig()
        self._rows = 0
        self._cols = 0
        self._cells: list[Cell] = []
        self._start: Cell | None = None
        self._end: Cell | None = None
        self.resize(rows, cols)

    # --- Properties ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def start_cell(self) -> Cell:
        assert self._start is not None
        return self._start

    @property
    def end_cell(self) -> Cell:
        assert self._end is not None
        return self._end

    # --- Lookup ---

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self._rows, self._cols)

    def cell(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self._cells[row * self._cols + col]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def states(self) -> list[CellState]:
        """Row-major snapshot of every cell's public state."""
        return [CellState(c.row, c.col, c.kind, c.weight) for c in self._cells]

    # --- Lifecycle ---

    def resize(self, rows: int, cols: int) -> None:
        """Reallocate all cells and place default start/end.

        Any authoring and any previous search result are discarded.
        """
        if rows <= 0 or cols <= 0:
            raise InvalidDimensionError(rows, cols)
        if rows * cols < 2:
            raise InvalidDimensionError(
                rows, cols, f"Grid {rows}x{cols} cannot hold distinct start and end"
            )
        self._rows = rows
        self._cols = cols
        self._cells = [Cell(r, c) for r in range(rows) for c in range(cols)]
        start, end = default_endpoints(rows, cols)
        self._start = self._cells[start[0] * cols + start[1]]
        self._start.is_start = True
        self._end = self._cells[end[0] * cols + end[1]]
        self._end.is_end = True
        logger.debug("grid allocated %dx%d start=%s end=%s", rows, cols, start, end)

    def validate(self) -> None:
        """Check the single-start, single-end invariant."""
        starts = [c for c in self._cells if c.is_start]
        ends = [c for c in self._cells if c.is_end]
        if len(starts) != 1 or len(ends) != 1:
            raise InvalidConfigurationError(
                f"Grid needs exactly one start and one end, "
                f"found {len(starts)} start(s) and {len(ends)} end(s)"
            )
        if starts[0] is not self._start or ends[0] is not self._end:
            raise InvalidConfigurationError("Start/end flags disagree with grid state")
        if self._start is self._end:
            raise InvalidConfigurationError("Start and end must be different cells")

    # --- Authoring ---

    def set_start(self, row: int, col: int) -> None:
        target = self.cell(row, col)
        if target.is_end:
            raise InvalidConfigurationError(f"({row}, {col}) is the end cell")
        self.start_cell.is_start = False
        target.reset_role()
        target.is_start = True
        self._start = target

    def set_end(self, row: int, col: int) -> None:
        target = self.cell(row, col)
        if target.is_start:
            raise InvalidConfigurationError(f"({row}, {col}) is the start cell")
        self.end_cell.is_end = False
        target.reset_role()
        target.is_end = True
        self._end = target

    def toggle_wall(self, row: int, col: int) -> None:
        cell = self.cell(row, col)
        if cell.is_start or cell.is_end:
            return
        if cell.is_weighted:
            cell.is_weighted = False
            cell.weight = 1.0
        cell.is_wall = not cell.is_wall

    def toggle_weighted(self, row: int, col: int) -> None:
        cell = self.cell(row, col)
        if not self.use_weighted_nodes:
            return
        if cell.is_start or cell.is_end:
            return
        cell.is_wall = False
        cell.is_weighted = not cell.is_weighted
        cell.weight = self._config.weighted_cost if cell.is_weighted else 1.0

    def clear_walls(self) -> None:
        """Reset walls, weights and search state. Start/end stay put."""
        for cell in self._cells:
            cell.reset_role()
            cell.reset_search()

    def clear_search_state(self) -> None:
        for cell in self._cells:
            cell.reset_search()

    def generate_maze(self, rng: random.Random | None = None) -> None:
        generate_maze(self, rng)

    # --- Neighbors ---

    def _open(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and not self._cells[row * self._cols + col].is_wall

    def neighbors(self, cell: Cell) -> list[Cell]:
        """Open cells one step from ``cell``.

        Orthogonal steps come first (up, down, left, right). With diagonal
        movement on, a diagonal step is offered only when both orthogonal
        cells framing it are open.
        """
        row, col = cell.row, cell.col
        result: list[Cell] = []
        for dr, dc in _ORTHOGONAL:
            if self._open(row + dr, col + dc):
                result.append(self._cells[(row + dr) * self._cols + col + dc])
        if self.allow_diagonal:
            for dr, dc in _DIAGONAL:
                if not self._open(row + dr, col + dc):
                    continue
                if self._open(row + dr, col) and self._open(row, col + dc):
                    result.append(self._cells[(row + dr) * self._cols + col + dc])
        return result
