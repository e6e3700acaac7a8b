"""Bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import STATUS_H, Color


class StatusBar:
    """Displays messages at the bottom of the screen."""

    def __init__(self) -> None:
        self._message = ""
        self._color: Color | None = None
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def set(self, message: str, color: Color | None = None) -> None:
        self._message = message
        self._color = color

    def draw(self, surface: pygame.Surface, theme: dict[str, Color]) -> None:
        top = surface.get_height() - STATUS_H
        bar_rect = pygame.Rect(0, top, surface.get_width(), STATUS_H)
        pygame.draw.rect(surface, theme["status_bg"], bar_rect)

        if self._message:
            color = self._color if self._color is not None else theme["text"]
            text = self._get_font().render(self._message, True, color)
            surface.blit(text, (8, top + 8))
