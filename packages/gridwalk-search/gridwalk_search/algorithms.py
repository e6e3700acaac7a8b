"""Dijkstra, A*, BFS and DFS over a gridwalk Grid.

Each algorithm takes ``(grid, start, end)`` with freshly reset scratch state,
records predecessors in ``Cell.came_from`` and returns the cells in the order
it visited them.
"""
from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import TYPE_CHECKING, Callable

from gridwalk_search.heuristics import SQRT2, heuristic_for

if TYPE_CHECKING:
    from gridwalk import Cell, Grid

SearchFn = Callable[["Grid", "Cell", "Cell"], "list[Cell]"]


def is_diagonal(a: Cell, b: Cell) -> bool:
    return a.row != b.row and a.col != b.col


def step_cost(current: Cell, neighbor: Cell) -> float:
    """Cost of stepping into ``neighbor``: its weight, times sqrt(2) on a diagonal."""
    cost = neighbor.weight
    if is_diagonal(current, neighbor):
        cost *= SQRT2
    return cost


def _order(grid: Grid, cell: Cell) -> int:
    # row-major index, the tie-break after equal costs
    return cell.row * grid.cols + cell.col


def dijkstra(grid: Grid, start: Cell, end: Cell) -> list[Cell]:
    visited: list[Cell] = []
    start.distance = 0.0
    counter = itertools.count()
    open_set: list[tuple[float, int, int, Cell]] = [
        (0.0, _order(grid, start), next(counter), start)
    ]

    while open_set:
        *_, current = heapq.heappop(open_set)
        if current.visited:
            continue
        current.visited = True
        visited.append(current)
        if current is end:
            break

        for neighbor in grid.neighbors(current):
            if neighbor.visited:
                continue
            candidate = current.distance + step_cost(current, neighbor)
            if candidate < neighbor.distance:
                neighbor.distance = candidate
                neighbor.came_from = current.coord
                heapq.heappush(
                    open_set, (candidate, _order(grid, neighbor), next(counter), neighbor)
                )

    return visited


def astar(grid: Grid, start: Cell, end: Cell) -> list[Cell]:
    heuristic = heuristic_for(grid)
    visited: list[Cell] = []
    start.g = start.distance = 0.0
    start.h = heuristic(start, end)
    start.f = start.h
    counter = itertools.count()
    open_set: list[tuple[float, float, int, int, Cell]] = [
        (start.f, start.h, _order(grid, start), next(counter), start)
    ]

    while open_set:
        *_, current = heapq.heappop(open_set)
        if current.visited:
            continue
        current.visited = True
        visited.append(current)
        if current is end:
            break

        for neighbor in grid.neighbors(current):
            if neighbor.visited:
                continue
            tentative = current.g + step_cost(current, neighbor)
            if tentative < neighbor.g:
                neighbor.came_from = current.coord
                neighbor.g = neighbor.distance = tentative
                neighbor.h = heuristic(neighbor, end)
                neighbor.f = neighbor.g + neighbor.h
                order = _order(grid, neighbor)
                heapq.heappush(
                    open_set, (neighbor.f, neighbor.h, order, next(counter), neighbor)
                )

    return visited


def bfs(grid: Grid, start: Cell, end: Cell) -> list[Cell]:
    start.visited = True
    visited: list[Cell] = [start]
    queue: deque[Cell] = deque([start])

    while queue:
        current = queue.popleft()
        if current is end:
            break
        for neighbor in grid.neighbors(current):
            if neighbor.visited:
                continue
            neighbor.visited = True
            neighbor.came_from = current.coord
            visited.append(neighbor)
            queue.append(neighbor)

    return visited


def dfs(grid: Grid, start: Cell, end: Cell) -> list[Cell]:
    start.visited = True
    visited: list[Cell] = [start]
    stack: list[Cell] = [start]

    while stack:
        current = stack.pop()
        if current is end:
            break
        for neighbor in grid.neighbors(current):
            if neighbor.visited:
                continue
            neighbor.visited = True
            neighbor.came_from = current.coord
            visited.append(neighbor)
            stack.append(neighbor)

    return visited
