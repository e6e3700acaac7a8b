"""Replay - frame-driven cursor over a reveal schedule."""
from __future__ import annotations

import logging
from typing import Any, Sequence

from gridwalk_replay.schedule import Coord, Reveal, schedule

logger = logging.getLogger(__name__)


class Replay:
    """Hands out reveals as time advances.

    The caller owns the clock: feed elapsed milliseconds to ``advance`` from
    a frame loop and draw what comes back.
    """

    def __init__(
        self,
        visited: Sequence[Coord],
        path: Sequence[Coord],
        speed: int = 50,
    ) -> None:
        self._reveals = schedule(visited, path, speed)
        self._speed = speed
        self._elapsed = 0.0
        self._cursor = 0
        self._cancelled = False

    @classmethod
    def from_result(cls, result: Any, speed: int = 50) -> Replay:
        """Build from anything with ``visited`` and ``path`` sequences."""
        return cls(result.visited, result.path, speed)

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed

    @property
    def duration_ms(self) -> int:
        if not self._reveals:
            return 0
        return self._reveals[-1].at_ms

    @property
    def finished(self) -> bool:
        return self._cancelled or self._cursor >= len(self._reveals)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def progress(self) -> float:
        if self._cancelled:
            return self._last_progress()
        if self._cursor >= len(self._reveals):
            return 100.0
        return self._last_progress()

    def _last_progress(self) -> float:
        if self._cursor == 0:
            return 0.0
        return self._reveals[self._cursor - 1].progress

    def advance(self, dt_ms: float) -> list[Reveal]:
        """Move the clock forward and return reveals that came due."""
        if dt_ms < 0:
            raise ValueError(f"dt_ms must be >= 0, got {dt_ms}")
        if self.finished:
            return []
        self._elapsed += dt_ms
        start = self._cursor
        while (
            self._cursor < len(self._reveals)
            and self._reveals[self._cursor].at_ms <= self._elapsed
        ):
            self._cursor += 1
        return self._reveals[start:self._cursor]

    def skip(self) -> list[Reveal]:
        """Return every remaining reveal at once."""
        if self.finished:
            return []
        remaining = self._reveals[self._cursor:]
        self._cursor = len(self._reveals)
        self._elapsed = max(self._elapsed, float(self.duration_ms))
        return remaining

    def cancel(self) -> None:
        if not self.finished:
            logger.debug("replay cancelled at %d/%d", self._cursor, len(self._reveals))
        self._cancelled = True
