"""Pathfinding visualizer - paint a grid, pick an algorithm, watch it search.

Usage:
    python main.py [--width 1280] [--rows R --cols C] [--seed N] [--speed S]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from game.prefs import DEFAULT_PATH, Preferences, load_prefs, save_prefs
from game.session import ALGORITHM_LABELS, Session
from gridwalk import dimensions_for_width
from gridwalk_search import Algorithm
from ui.constants import DARK_THEME, FPS, LIGHT_THEME, SIDEBAR_W, STATUS_H, TILE_SIZE
from ui.renderer import cell_at, draw_grid
from ui.sidebar import draw_sidebar
from ui.status import StatusBar

ALGORITHM_KEYS = {
    pygame.K_1: Algorithm.DIJKSTRA,
    pygame.K_2: Algorithm.ASTAR,
    pygame.K_3: Algorithm.BFS,
    pygame.K_4: Algorithm.DFS,
}

# Viewport widths cycled with R, one per size preset.
PRESET_WIDTHS = (400, 600, 1000, 1280)


def open_window(rows: int, cols: int) -> tuple[pygame.Surface, int, int]:
    """Size the display for the grid. Returns (screen, grid_w, screen_h)."""
    grid_w, grid_h = cols * TILE_SIZE, rows * TILE_SIZE
    screen_h = max(grid_h, 420) + STATUS_H
    screen = pygame.display.set_mode((grid_w + SIDEBAR_W, screen_h))
    return screen, grid_w, screen_h


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="gridwalk pathfinding visualizer")
    p.add_argument("--width", type=int, default=1280,
                   help="Viewport width used to pick a grid size preset (default: 1280)")
    p.add_argument("--rows", type=int, default=None, help="Override grid rows")
    p.add_argument("--cols", type=int, default=None, help="Override grid columns")
    p.add_argument("--seed", type=int, default=None, help="Maze random seed")
    p.add_argument("--speed", type=int, default=50, help="Replay speed 1-100 (default: 50)")
    p.add_argument("--prefs", type=Path, default=DEFAULT_PATH, help="Preferences file")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rows, cols = dimensions_for_width(args.width)
    rows = args.rows or rows
    cols = args.cols or cols

    session = Session(rows, cols, seed=args.seed)
    session.set_speed(args.speed)
    prefs = load_prefs(args.prefs)
    show_help = not prefs.seen_tutorial
    if show_help:
        prefs = Preferences(dark_mode=prefs.dark_mode, seen_tutorial=True)
        save_prefs(prefs, args.prefs)

    preset = PRESET_WIDTHS.index(args.width) if args.width in PRESET_WIDTHS else len(PRESET_WIDTHS) - 1

    pygame.init()
    screen, grid_w, screen_h = open_window(rows, cols)
    pygame.display.set_caption("gridwalk")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    status = StatusBar()
    status.set("Drag start/end, paint walls, press Space to search")

    running = True
    while running:
        dt_ms = clock.tick(FPS)
        theme = DARK_THEME if prefs.dark_mode else LIGHT_THEME

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in ALGORITHM_KEYS:
                    session.select_algorithm(ALGORITHM_KEYS[event.key])
                    status.set(f"Algorithm: {ALGORITHM_LABELS[session.algorithm]}")
                elif event.key == pygame.K_SPACE:
                    if session.busy:
                        session.skip_replay()
                    else:
                        result = session.run()
                        if result is not None and not result.reached:
                            status.set("No path: the end is walled off", (231, 76, 60))
                        elif result is not None:
                            status.set(
                                f"{ALGORITHM_LABELS[result.algorithm]}: "
                                f"{result.stats.visited_count} visited, "
                                f"distance {result.stats.cost_label}"
                            )
                elif event.key == pygame.K_m:
                    session.generate_maze()
                elif event.key == pygame.K_c:
                    session.clear_walls()
                elif event.key == pygame.K_p:
                    session.clear_path()
                elif event.key == pygame.K_d:
                    session.toggle_diagonal()
                    status.set(f"Diagonal moves {'on' if session.grid.allow_diagonal else 'off'}")
                elif event.key == pygame.K_g:
                    session.toggle_weights()
                    status.set(f"Weighted nodes {'on' if session.grid.use_weighted_nodes else 'off'}")
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    session.set_speed(session.speed + 10)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    session.set_speed(session.speed - 10)
                elif event.key == pygame.K_t:
                    prefs = Preferences(dark_mode=not prefs.dark_mode, seen_tutorial=True)
                    save_prefs(prefs, args.prefs)
                elif event.key == pygame.K_h:
                    show_help = not show_help
                elif event.key == pygame.K_r and not session.busy:
                    preset = (preset + 1) % len(PRESET_WIDTHS)
                    rows, cols = dimensions_for_width(PRESET_WIDTHS[preset])
                    session.resize(rows, cols)
                    screen, grid_w, screen_h = open_window(rows, cols)
                    status.set(f"Grid {rows}x{cols}")

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                coord = cell_at(event.pos, session.grid)
                if coord is not None:
                    weight_mode = bool(pygame.key.get_pressed()[pygame.K_w])
                    session.press(coord, weight_mode)

            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                coord = cell_at(event.pos, session.grid)
                if coord is not None:
                    session.hover(coord)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                session.release()

        session.update(dt_ms)

        # --- Render ---
        screen.fill(theme["sidebar_bg"])
        draw_grid(screen, session.grid, session.revealed_visited, session.revealed_path, theme)
        draw_sidebar(screen, font, session, grid_w, screen_h - STATUS_H, theme, show_help)
        status.draw(screen, theme)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
