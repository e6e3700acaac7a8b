"""Search engine - dispatch, path reconstruction and cost accounting."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridwalk import Coord, InvalidConfigurationError
from gridwalk_search.algorithms import SearchFn, astar, bfs, dfs, dijkstra, step_cost
from gridwalk_search.types import (
    Algorithm,
    SearchOutcome,
    SearchResult,
    SearchState,
    SearchStats,
)

if TYPE_CHECKING:
    from gridwalk import Cell, Grid

logger = logging.getLogger(__name__)

ALGORITHMS: dict[Algorithm, SearchFn] = {
    Algorithm.DIJKSTRA: dijkstra,
    Algorithm.ASTAR: astar,
    Algorithm.BFS: bfs,
    Algorithm.DFS: dfs,
}


def resolve_algorithm(name: str | Algorithm) -> Algorithm:
    """Map a selector to an Algorithm. Unknown names fall back to Dijkstra."""
    try:
        return Algorithm(name)
    except ValueError:
        logger.warning("unknown algorithm %r, falling back to dijkstra", name)
        return Algorithm.DIJKSTRA


def reconstruct_path(grid: Grid, end: Cell) -> list[Cell]:
    """Follow ``came_from`` links back from ``end``.

    Returns the chain in forward order. It starts at the search's start cell
    only if ``end`` was reached; otherwise it is just ``[end]`` or a partial
    chain, and callers should check its first element.
    """
    chain: list[Cell] = [end]
    current = end
    while current.came_from is not None:
        current = grid.cell(*current.came_from)
        chain.append(current)
    chain.reverse()
    return chain


def path_cost(path: list[Cell]) -> float:
    """Sum of step costs along ``path``, recomputed from cell weights."""
    total = 0.0
    for prev, nxt in zip(path, path[1:]):
        total += step_cost(prev, nxt)
    return total


def _endpoint(grid: Grid, coord: Coord | None, default: Cell) -> Cell:
    cell = default if coord is None else grid.cell(*coord)
    if cell.is_wall:
        raise InvalidConfigurationError(f"Endpoint {cell.coord} is a wall")
    return cell


def run(
    grid: Grid,
    algorithm: str | Algorithm = Algorithm.DIJKSTRA,
    start: Coord | None = None,
    end: Coord | None = None,
) -> SearchResult:
    """Run one search on ``grid`` and package the result.

    ``start`` and ``end`` default to the grid's own start and end cells.
    Raises InvalidConfigurationError if the grid's start/end placement is
    broken or an endpoint is a wall, and OutOfBoundsError for off-grid
    overrides; nothing is mutated in either case.
    """
    grid.validate()
    start_cell = _endpoint(grid, start, grid.start_cell)
    end_cell = _endpoint(grid, end, grid.end_cell)
    kind = resolve_algorithm(algorithm)

    grid.clear_search_state()

    if start_cell is end_cell:
        start_cell.visited = True
        start_cell.distance = start_cell.g = 0.0
        visited = [start_cell]
    else:
        visited = ALGORITHMS[kind](grid, start_cell, end_cell)

    chain = reconstruct_path(grid, end_cell)
    if chain[0] is start_cell:
        outcome = SearchOutcome.COMPLETED
        path = chain
        cost = path_cost(path)
    else:
        outcome = SearchOutcome.TRAPPED
        path = []
        cost = 0.0

    stats = SearchStats(
        visited_count=len(visited),
        path_length=len(path),
        total_path_cost=cost,
    )
    logger.debug(
        "%s %s: visited=%d path=%d cost=%.1f",
        kind.value, outcome.value, stats.visited_count, stats.path_length, cost,
    )
    return SearchResult(
        algorithm=kind,
        outcome=outcome,
        visited=tuple(c.coord for c in visited),
        path=tuple(c.coord for c in path),
        stats=stats,
    )


class Pathfinder:
    """Runs searches against one grid and tracks the latest outcome.

    State goes IDLE -> RUNNING -> COMPLETED | TRAPPED on each run, and back
    to IDLE on ``invalidate()``. Runs are synchronous; calling ``run`` again
    while one is in progress is not supported.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._state = SearchState.IDLE
        self._last: SearchResult | None = None

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def last_result(self) -> SearchResult | None:
        return self._last

    def run(
        self,
        algorithm: str | Algorithm = Algorithm.DIJKSTRA,
        start: Coord | None = None,
        end: Coord | None = None,
    ) -> SearchResult:
        previous = self._state
        self._state = SearchState.RUNNING
        try:
            result = run(self._grid, algorithm, start, end)
        except Exception:
            self._state = previous
            raise
        self._last = result
        self._state = (
            SearchState.COMPLETED if result.reached else SearchState.TRAPPED
        )
        return result

    def invalidate(self) -> None:
        """Drop the last result, e.g. after the grid was edited or resized."""
        self._last = None
        self._state = SearchState.IDLE
        self._grid.clear_search_state()
