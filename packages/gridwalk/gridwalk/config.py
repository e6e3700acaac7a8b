"""Grid configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridConfig:
    """Immutable tuning for authoring and maze generation.

    Attributes:
        weighted_cost: Traversal cost of a weighted cell (must be >= 1 so the
            A* heuristics stay admissible).
        wall_density: Chance an interior cell becomes a wall in a maze.
        weight_density: Extra chance, on the same roll, that an interior cell
            becomes weighted when weighted nodes are enabled.
    """

    weighted_cost: float = 5.0
    wall_density: float = 0.25
    weight_density: float = 0.10

    def __post_init__(self) -> None:
        if self.weighted_cost < 1:
            raise ValueError(f"weighted_cost must be >= 1, got {self.weighted_cost}")
        if not 0.0 <= self.wall_density <= 1.0:
            raise ValueError(f"wall_density must be in [0, 1], got {self.wall_density}")
        if not 0.0 <= self.weight_density <= 1.0:
            raise ValueError(
                f"weight_density must be in [0, 1], got {self.weight_density}"
            )
        if self.wall_density + self.weight_density > 1.0:
            raise ValueError("wall_density + weight_density must not exceed 1")
