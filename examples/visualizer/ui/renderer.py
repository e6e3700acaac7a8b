"""Grid rendering."""
from __future__ import annotations

import pygame

from gridwalk import CellKind, Coord, Grid
from ui.constants import KIND_COLORS, TILE_SIZE, Color


def draw_grid(
    surface: pygame.Surface,
    grid: Grid,
    visited: set[Coord],
    path: set[Coord],
    theme: dict[str, Color],
) -> None:
    """Draw cells, then replay overlays. Start and end keep their colors."""
    for state in grid.states():
        coord = (state.row, state.col)
        rect = pygame.Rect(state.col * TILE_SIZE, state.row * TILE_SIZE, TILE_SIZE, TILE_SIZE)
        if state.kind in (CellKind.START, CellKind.END, CellKind.WALL):
            color = KIND_COLORS[state.kind]
        elif coord in path:
            color = theme["path"]
        elif coord in visited:
            color = theme["visited"]
        elif state.kind is CellKind.WEIGHT:
            color = KIND_COLORS[CellKind.WEIGHT]
        else:
            color = theme["bg"]
        pygame.draw.rect(surface, color, rect)
        if state.kind is CellKind.WEIGHT and (coord in path or coord in visited):
            # keep weights visible under the overlay
            pygame.draw.rect(surface, KIND_COLORS[CellKind.WEIGHT], rect.inflate(-12, -12))

    grid_w = grid.cols * TILE_SIZE
    grid_h = grid.rows * TILE_SIZE
    for col in range(grid.cols + 1):
        x = col * TILE_SIZE
        pygame.draw.line(surface, theme["grid_line"], (x, 0), (x, grid_h))
    for row in range(grid.rows + 1):
        y = row * TILE_SIZE
        pygame.draw.line(surface, theme["grid_line"], (0, y), (grid_w, y))


def cell_at(pos: tuple[int, int], grid: Grid) -> Coord | None:
    """Map a mouse position to a grid coordinate, or None off-grid."""
    row, col = pos[1] // TILE_SIZE, pos[0] // TILE_SIZE
    if grid.in_bounds(row, col):
        return (row, col)
    return None
