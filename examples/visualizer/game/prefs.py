"""Local preference flags: dark mode and first visit."""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".gridwalk.json"


@dataclass(frozen=True)
class Preferences:
    dark_mode: bool = False
    seen_tutorial: bool = False


def load_prefs(path: Path = DEFAULT_PATH) -> Preferences:
    """Read preferences, falling back to defaults on a missing or bad file."""
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        return Preferences()
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable preferences at %s: %s", path, exc)
        return Preferences()
    if not isinstance(data, dict):
        logger.warning("ignoring malformed preferences at %s", path)
        return Preferences()
    return Preferences(
        dark_mode=bool(data.get("dark_mode", False)),
        seen_tutorial=bool(data.get("seen_tutorial", False)),
    )


def save_prefs(prefs: Preferences, path: Path = DEFAULT_PATH) -> None:
    try:
        path.write_text(json.dumps(asdict(prefs)))
    except OSError as exc:
        logger.warning("could not save preferences to %s: %s", path, exc)
