"""Session - grid, search and replay state behind the window."""
from __future__ import annotations

import logging
import random

from gridwalk import Coord, Grid, GridError
from gridwalk_replay import PATH, Replay
from gridwalk_search import Algorithm, Pathfinder, SearchResult

logger = logging.getLogger(__name__)

ALGORITHM_LABELS: dict[Algorithm, str] = {
    Algorithm.DIJKSTRA: "Dijkstra",
    Algorithm.ASTAR: "A*",
    Algorithm.BFS: "Breadth-first",
    Algorithm.DFS: "Depth-first",
}


class Session:
    """Everything the window reads and the input handlers write.

    Authoring is locked while a replay is running.
    """

    def __init__(self, rows: int, cols: int, seed: int | None = None) -> None:
        self.grid = Grid(rows, cols)
        self.finder = Pathfinder(self.grid)
        self.rng = random.Random(seed)
        self.algorithm = Algorithm.DIJKSTRA
        self.speed = 50
        self.replay: Replay | None = None
        self.revealed_visited: set[Coord] = set()
        self.revealed_path: set[Coord] = set()
        self.drag: str | None = None
        self._last_painted: Coord | None = None

    # --- State ---

    @property
    def busy(self) -> bool:
        return self.replay is not None and not self.replay.finished

    @property
    def result(self) -> SearchResult | None:
        return self.finder.last_result

    @property
    def progress(self) -> float:
        return self.replay.progress if self.replay is not None else 0.0

    def clear_path(self) -> None:
        if self.replay is not None:
            self.replay.cancel()
        self.replay = None
        self.revealed_visited.clear()
        self.revealed_path.clear()
        self.finder.invalidate()

    # --- Search ---

    def run(self) -> SearchResult | None:
        if self.busy:
            return None
        self.clear_path()
        result = self.finder.run(self.algorithm)
        self.replay = Replay.from_result(result, self.speed)
        logger.info(
            "%s: visited %d, path %d, cost %s",
            ALGORITHM_LABELS[result.algorithm],
            result.stats.visited_count,
            result.stats.path_length,
            result.stats.cost_label,
        )
        return result

    def update(self, dt_ms: float) -> None:
        if self.replay is None:
            return
        for reveal in self.replay.advance(dt_ms):
            if reveal.phase == PATH:
                self.revealed_path.add(reveal.coord)
            else:
                self.revealed_visited.add(reveal.coord)

    def skip_replay(self) -> None:
        if self.replay is None:
            return
        for reveal in self.replay.skip():
            if reveal.phase == PATH:
                self.revealed_path.add(reveal.coord)
            else:
                self.revealed_visited.add(reveal.coord)

    # --- Settings ---

    def select_algorithm(self, algorithm: Algorithm) -> None:
        if not self.busy:
            self.algorithm = algorithm

    def set_speed(self, speed: int) -> None:
        self.speed = max(1, min(100, speed))

    def toggle_diagonal(self) -> None:
        if self.busy:
            return
        self.grid.allow_diagonal = not self.grid.allow_diagonal
        self.clear_path()

    def toggle_weights(self) -> None:
        if self.busy:
            return
        self.grid.use_weighted_nodes = not self.grid.use_weighted_nodes
        self.clear_path()

    # --- Authoring ---

    def generate_maze(self) -> None:
        if self.busy:
            return
        self.clear_path()
        self.grid.generate_maze(self.rng)

    def clear_walls(self) -> None:
        if self.busy:
            return
        self.clear_path()
        self.grid.clear_walls()

    def resize(self, rows: int, cols: int) -> None:
        if self.busy or (rows, cols) == (self.grid.rows, self.grid.cols):
            return
        self.clear_path()
        self.grid.resize(rows, cols)

    def press(self, coord: Coord, weight_mode: bool) -> None:
        """Mouse down on a cell: grab start/end or start painting."""
        if self.busy:
            return
        cell = self.grid.cell(*coord)
        if cell.is_start:
            self.drag = "start"
        elif cell.is_end:
            self.drag = "end"
        else:
            self.drag = "weight" if weight_mode else "wall"
            self._paint(coord)

    def hover(self, coord: Coord) -> None:
        """Mouse moved onto a cell while the button is held."""
        if self.busy or self.drag is None or coord == self._last_painted:
            return
        try:
            if self.drag == "start":
                self.grid.set_start(*coord)
                self.clear_path()
            elif self.drag == "end":
                self.grid.set_end(*coord)
                self.clear_path()
            else:
                self._paint(coord)
        except GridError as exc:
            logger.debug("ignored drag onto %s: %s", coord, exc)
        self._last_painted = coord

    def release(self) -> None:
        self.drag = None
        self._last_painted = None

    def _paint(self, coord: Coord) -> None:
        self.clear_path()
        if self.drag == "weight":
            self.grid.toggle_weighted(*coord)
        else:
            self.grid.toggle_wall(*coord)
        self._last_painted = coord
