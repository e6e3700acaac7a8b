"""Timing rules for replaying a finished search."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

Coord = tuple[int, int]

VISITED = "visited"
PATH = "path"

MIN_SPEED = 1
MAX_SPEED = 100


@dataclass(frozen=True)
class Reveal:
    """One cell to reveal.

    Attributes:
        phase: ``"visited"`` or ``"path"``.
        coord: ``(row, col)`` of the cell.
        at_ms: Offset from replay start, in milliseconds.
        progress: Overall progress percentage once this reveal is shown.
    """

    phase: str
    coord: Coord
    at_ms: int
    progress: float


def interval_for_speed(speed: int) -> int:
    """Milliseconds between visited reveals for a 1..100 speed setting."""
    if not MIN_SPEED <= speed <= MAX_SPEED:
        raise ValueError(f"speed must be in [{MIN_SPEED}, {MAX_SPEED}], got {speed}")
    return MAX_SPEED + 1 - speed


def schedule(
    visited: Sequence[Coord],
    path: Sequence[Coord],
    speed: int,
) -> list[Reveal]:
    """Lay out visited reveals, then path reveals at half the pace.

    Visited cells fill the first half of the progress range, path cells the
    second half. The final path reveal reports 100.
    """
    interval = interval_for_speed(speed)
    reveals: list[Reveal] = []

    for i, coord in enumerate(visited):
        progress = i / len(visited) * 50
        reveals.append(Reveal(VISITED, tuple(coord), i * interval, progress))

    path_start = len(visited) * interval
    for j, coord in enumerate(path):
        if j == len(path) - 1:
            progress = 100.0
        else:
            progress = 50 + j / len(path) * 50
        reveals.append(Reveal(PATH, tuple(coord), path_start + j * interval * 2, progress))

    return reveals
