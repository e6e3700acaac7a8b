"""gridwalk-replay - Timed reveal of search results for front-ends."""
from __future__ import annotations

from gridwalk_replay.replay import Replay
from gridwalk_replay.schedule import (
    MAX_SPEED,
    MIN_SPEED,
    PATH,
    VISITED,
    Reveal,
    interval_for_speed,
    schedule,
)

__all__ = [
    "MAX_SPEED",
    "MIN_SPEED",
    "PATH",
    "VISITED",
    "Replay",
    "Reveal",
    "interval_for_speed",
    "schedule",
]
