"""Random maze generation with a guaranteed start-to-end corridor."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridwalk.grid import Grid

logger = logging.getLogger(__name__)


def generate_maze(grid: Grid, rng: random.Random | None = None) -> None:
    """Scatter walls (and weights) over a cleared grid, then carve a corridor.

    Layout: wall border -> random interior walls/weights -> a monotone walk
    from start to end cleared of obstacles. Start and end are never touched.
    """
    rng = rng if rng is not None else random.Random()
    config = grid.config
    grid.clear_walls()

    last_row, last_col = grid.rows - 1, grid.cols - 1
    walls = weights = 0
    for cell in grid:
        if cell.is_start or cell.is_end:
            continue
        if cell.row in (0, last_row) or cell.col in (0, last_col):
            cell.is_wall = True
            walls += 1
            continue
        roll = rng.random()
        if roll < config.wall_density:
            cell.is_wall = True
            walls += 1
        elif grid.use_weighted_nodes and roll < config.wall_density + config.weight_density:
            cell.is_weighted = True
            cell.weight = config.weighted_cost
            weights += 1

    carved = carve_path(grid, rng)
    logger.debug(
        "maze generated on %dx%d grid: %d walls, %d weights, %d-step corridor",
        grid.rows, grid.cols, walls, weights, carved,
    )


def carve_path(grid: Grid, rng: random.Random) -> int:
    """Clear a random monotone walk from start to end. Returns steps taken.

    Each step moves one cell horizontally or vertically toward the end,
    never increasing the remaining offset on either axis.
    """
    row, col = grid.start_cell.coord
    end_row, end_col = grid.end_cell.coord
    steps = 0

    while (row, col) != (end_row, end_col):
        horizontal = rng.random() < 0.5
        if horizontal and col == end_col:
            horizontal = False
        elif not horizontal and row == end_row:
            horizontal = True
        if horizontal:
            col += 1 if col < end_col else -1
        else:
            row += 1 if row < end_row else -1
        steps += 1

        cell = grid.cell(row, col)
        if not cell.is_start and not cell.is_end:
            cell.reset_role()

    return steps
