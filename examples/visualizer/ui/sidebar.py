"""Sidebar panel - algorithm, toggles, speed, stats and progress."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from game.session import ALGORITHM_LABELS
from gridwalk_search import Algorithm
from ui.constants import Color

if TYPE_CHECKING:
    from game.session import Session

HELP_LINES = [
    "1-4     pick algorithm",
    "Space   run / skip replay",
    "Drag    paint walls",
    "W+drag  paint weights",
    "M       random maze",
    "C       clear walls",
    "P       clear path",
    "D       diagonal moves",
    "G       weighted nodes",
    "+/-     replay speed",
    "T       dark mode",
    "R       grid size",
    "H       help",
]


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    session: Session,
    x0: int,
    height: int,
    theme: dict[str, Color],
    show_help: bool,
) -> None:
    """Draw the right sidebar."""
    w = surface.get_width() - x0
    pygame.draw.rect(surface, theme["sidebar_bg"], (x0, 0, w, height))
    pad = x0 + 10
    y = 10

    for i, algorithm in enumerate(Algorithm, start=1):
        selected = algorithm is session.algorithm
        color = theme["text"] if selected else theme["text_dim"]
        marker = ">" if selected else " "
        _draw_text(surface, font, f"{marker} {i}. {ALGORITHM_LABELS[algorithm]}", pad, y, color)
        y += 18

    current = session.algorithm
    _draw_text(surface, font, "weighted" if current.weighted else "unweighted", pad, y, theme["text_dim"])
    y += 16
    note = "shortest: guaranteed" if current.shortest else "shortest: not guaranteed"
    _draw_text(surface, font, note, pad, y, theme["text_dim"])
    y += 26

    grid = session.grid
    _draw_text(surface, font, f"Diagonal: {'on' if grid.allow_diagonal else 'off'}", pad, y, theme["text"])
    y += 18
    _draw_text(surface, font, f"Weights:  {'on' if grid.use_weighted_nodes else 'off'}", pad, y, theme["text"])
    y += 18
    _draw_text(surface, font, f"Speed:    {session.speed}", pad, y, theme["text"])
    y += 26

    result = session.result
    if result is not None:
        _draw_text(surface, font, f"Visited:  {result.stats.visited_count}", pad, y, theme["text"])
        y += 18
        _draw_text(surface, font, f"Path:     {result.stats.path_length}", pad, y, theme["text"])
        y += 18
        _draw_text(surface, font, f"Distance: {result.stats.cost_label}", pad, y, theme["text"])
        y += 18
        if not result.reached:
            _draw_text(surface, font, "No path found", pad, y, (231, 76, 60))
            y += 18

    if session.replay is not None:
        y += 6
        bar_w = w - 20
        pygame.draw.rect(surface, theme["progress_bg"], (pad, y, bar_w, 10))
        fill = int(bar_w * session.progress / 100)
        pygame.draw.rect(surface, theme["progress"], (pad, y, fill, 10))
        y += 20

    if show_help:
        y += 10
        for line in HELP_LINES:
            _draw_text(surface, font, line, pad, y, theme["text_dim"])
            y += 16


def _draw_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    x: int,
    y: int,
    color: Color,
) -> None:
    surface.blit(font.render(text, True, color), (x, y))
