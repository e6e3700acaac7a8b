"""gridwalk-search - Pathfinding engine over gridwalk grids."""
from __future__ import annotations

from gridwalk_search.algorithms import astar, bfs, dfs, dijkstra, step_cost
from gridwalk_search.engine import (
    ALGORITHMS,
    Pathfinder,
    path_cost,
    reconstruct_path,
    resolve_algorithm,
    run,
)
from gridwalk_search.heuristics import heuristic_for, manhattan, octile
from gridwalk_search.types import (
    Algorithm,
    SearchOutcome,
    SearchResult,
    SearchState,
    SearchStats,
)

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "Pathfinder",
    "SearchOutcome",
    "SearchResult",
    "SearchState",
    "SearchStats",
    "astar",
    "bfs",
    "dfs",
    "dijkstra",
    "heuristic_for",
    "manhattan",
    "octile",
    "path_cost",
    "reconstruct_path",
    "resolve_algorithm",
    "run",
    "step_cost",
]
