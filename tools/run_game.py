# tools/run_game.py
# Runtime for the tower: five stacked columns of cubes plus the held cube.
# Keys 1-5 or a click pick a column, Enter continues after a clear/time-up,
# PageUp/PageDown jump levels, Esc quits.

from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Tuple

import pygame

try:
    from flagtower.config import DEFAULT_CONFIG
    from flagtower.countries import continent_of
    from flagtower.engine.interaction import InteractionController
    from flagtower.engine.session import GameSession, Outcome
    from flagtower.grid import GameMode
    from flagtower.progress import JsonProgressStore, Progression
    from flagtower.render.labels import PillowLabelProvider
    from flagtower.ui.hud import completion_labels
    from flagtower.ui.status_bar import render_status_bar
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

BAR_H = 32


def to_surface(img) -> pygame.Surface:
    # Pillow RGBA -> pygame surface
    return pygame.image.frombuffer(img.tobytes(), img.size, "RGBA").convert_alpha()


class SurfaceCache:
    def __init__(self, labels: PillowLabelProvider) -> None:
        self.labels = labels
        self._cache: Dict[Tuple, pygame.Surface] = {}

    def cube(self, code: str, show_text: bool, size: int) -> pygame.Surface:
        key = ("cube", code, show_text, size)
        if key not in self._cache:
            img = self.labels.render_cube(code, continent_of(code), show_text=show_text)
            self._cache[key] = pygame.transform.scale(to_surface(img), (size, size))
        return self._cache[key]

    def label(self, title: str, subtitle: Optional[str], size: Tuple[int, int]) -> pygame.Surface:
        key = ("label", title, subtitle, size)
        if key not in self._cache:
            img = self.labels.render_text(title, subtitle)
            self._cache[key] = pygame.transform.scale(to_surface(img), size)
        return self._cache[key]


def column_at(x: int, tile: int, n_columns: int) -> Optional[int]:
    idx = x // (tile * 2) - 1
    return idx if 0 <= idx < n_columns else None


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Tower of Flags runtime")
    parser.add_argument("--level", type=int, default=None, help="1-based level to start at (overrides saved progress)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--tile", type=int, default=40, help="cube size in pixels")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--progress", type=str, default=DEFAULT_CONFIG.progress_path)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    config = DEFAULT_CONFIG.replace(progress_path=args.progress)
    progression = Progression(store=JsonProgressStore(config.progress_path))
    session = GameSession(progression, config=config)
    if args.level is not None:
        progression.jump_to(args.level - 1)
    session.start_level(seed=args.seed)
    controls = InteractionController(session)

    if not pygame.get_init():
        pygame.init()
    if not pygame.font.get_init():
        pygame.font.init()

    n_cols = config.columns
    layers = config.layers_per_column
    tile = args.tile
    width = tile * 2 * (n_cols + 1) + tile
    height = BAR_H + tile * (layers + 3)
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("Tower of Flags")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Consolas", 16)
    surfaces = SurfaceCache(PillowLabelProvider())

    running = True
    while running:
        # --- Input ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif pygame.K_1 <= event.key <= pygame.K_5:
                    controls.push(event.key - pygame.K_1)
                elif event.key == pygame.K_RETURN:
                    session.dismiss_notice()
                    session.continue_()
                elif event.key == pygame.K_PAGEUP:
                    session.jump_to(progression.current_index + 1)
                elif event.key == pygame.K_PAGEDOWN:
                    session.jump_to(progression.current_index - 1)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                idx = column_at(event.pos[0], tile, n_cols)
                if idx is not None:
                    controls.push(idx)

        # --- Engine tick ---
        session.tick()
        controls.tick()
        session.tick()

        # --- Rendering ---
        screen.fill((11, 15, 20))
        hud = session.hud()
        render_status_bar(screen, (0, 0), width, BAR_H, hud)

        snap = session.snapshot()
        show_text = session.level.mode is not GameMode.VISUAL
        base_y = BAR_H + tile * (layers + 1)
        for i, column in enumerate(snap.columns):
            x = tile * 2 * (i + 1)
            for layer, code in enumerate(column):
                screen.blit(surfaces.cube(code, show_text, tile), (x, base_y - (layer + 1) * tile))

        for i, (title, sub) in enumerate(completion_labels(session.completion)):
            x = tile * 2 * (i + 1) - tile // 2
            screen.blit(surfaces.label(title, sub, (tile * 2, tile)), (x, base_y + tile // 4))

        screen.blit(surfaces.cube(snap.held, show_text, int(tile * 1.1)), (tile // 4, base_y - tile))

        if session.outcome is not Outcome.PLAYING:
            msg = "Level cleared! Enter for next level" if session.outcome is Outcome.CLEARED \
                else "Time's up! Enter to try again"
            surf = font.render(msg, True, (255, 255, 0))
            screen.blit(surf, ((width - surf.get_width()) // 2, BAR_H + tile // 2))
        elif hud.hint:
            surf = font.render(hud.hint, True, (180, 180, 180))
            screen.blit(surf, ((width - surf.get_width()) // 2, BAR_H + tile // 2))

        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
