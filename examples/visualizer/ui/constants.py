"""Layout, color, and rendering constants."""
from __future__ import annotations

from gridwalk import CellKind

TILE_SIZE = 25
SIDEBAR_W = 240
STATUS_H = 32
FPS = 60

Color = tuple[int, int, int]

LIGHT_THEME: dict[str, Color] = {
    "bg": (236, 240, 241),
    "grid_line": (200, 206, 210),
    "sidebar_bg": (248, 249, 250),
    "status_bg": (220, 224, 228),
    "text": (44, 62, 80),
    "text_dim": (127, 140, 141),
    "visited": (130, 204, 221),
    "path": (255, 214, 0),
    "progress_bg": (210, 214, 218),
    "progress": (46, 204, 113),
}

DARK_THEME: dict[str, Color] = {
    "bg": (30, 30, 40),
    "grid_line": (50, 50, 62),
    "sidebar_bg": (25, 25, 35),
    "status_bg": (20, 20, 28),
    "text": (210, 210, 215),
    "text_dim": (130, 130, 140),
    "visited": (52, 110, 150),
    "path": (230, 190, 40),
    "progress_bg": (45, 45, 58),
    "progress": (46, 204, 113),
}

KIND_COLORS: dict[CellKind, Color] = {
    CellKind.START: (26, 188, 156),
    CellKind.END: (231, 76, 60),
    CellKind.WALL: (52, 73, 94),
    CellKind.WEIGHT: (155, 89, 182),
}
