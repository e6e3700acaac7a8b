"""Result types for gridwalk-search."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gridwalk import Coord


class Algorithm(str, Enum):
    """Selectable search algorithms."""

    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    BFS = "bfs"
    DFS = "dfs"

    @property
    def weighted(self) -> bool:
        """True if the search orders by accumulated cell weight."""
        return self in (Algorithm.DIJKSTRA, Algorithm.ASTAR)

    @property
    def shortest(self) -> bool:
        """True if the returned path is guaranteed cheapest.

        BFS finds the fewest steps, which is only the cheapest path when
        every step costs the same.
        """
        return self.weighted


class SearchOutcome(Enum):
    """Terminal outcome of a run."""

    COMPLETED = "completed"
    TRAPPED = "trapped"


class SearchState(Enum):
    """Lifecycle of a Pathfinder."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    TRAPPED = "trapped"


@dataclass(frozen=True)
class SearchStats:
    visited_count: int
    path_length: int
    total_path_cost: float

    @property
    def cost_label(self) -> str:
        """Path cost rendered to one decimal place."""
        return f"{self.total_path_cost:.1f}"


@dataclass(frozen=True)
class SearchResult:
    """Everything one run produced.

    Attributes:
        algorithm: The algorithm that actually ran.
        outcome: COMPLETED if the end was reached, else TRAPPED.
        visited: Coordinates in visitation order.
        path: Coordinates from start to end; empty when TRAPPED.
        stats: Aggregate counts and the recomputed path cost.
    """

    algorithm: Algorithm
    outcome: SearchOutcome
    visited: tuple[Coord, ...]
    path: tuple[Coord, ...]
    stats: SearchStats

    @property
    def reached(self) -> bool:
        return self.outcome is SearchOutcome.COMPLETED
