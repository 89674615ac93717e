"""Window, main loop and wiring of game, menu, audio and leaderboard."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

import pygame

from blocktris.audio import Audio, AudioError
from blocktris.game import GameState, Key
from blocktris.leaderboard import DEFAULT_PATH, display_leaderboard, save_leaderboard
from blocktris.menu import MenuAction, MenuState
from blocktris.render import CANVAS_SIZE, Renderer

WINDOW_TITLE = "Тетрис"
FRAMES_PER_SECOND = 60

_KEY_BINDINGS = (
    (pygame.K_LEFT, Key.LEFT),
    (pygame.K_RIGHT, Key.RIGHT),
    (pygame.K_DOWN, Key.DOWN),
    (pygame.K_UP, Key.UP),
    (pygame.K_RETURN, Key.ENTER),
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="blocktris", description="Falling-block puzzle game.")
    parser.add_argument(
        "--assets",
        default="..",
        help="directory holding the audio/ and textures/ folders (default: ..)",
    )
    parser.add_argument(
        "--leaderboard",
        default=DEFAULT_PATH,
        help=f"high-score file (default: {DEFAULT_PATH})",
    )
    return parser.parse_args(argv)


def pressed_keys(state: Any) -> frozenset[Key]:
    """Game keys held down according to a pygame key-state lookup."""
    return frozenset(key for code, key in _KEY_BINDINGS if state[code])


def _now() -> float:
    return pygame.time.get_ticks() / 1000.0


def _run(renderer: Renderer, leaderboard: str) -> GameState:
    clock = pygame.time.Clock()
    game = GameState(_now())
    menu = MenuState()
    running = True
    while running:
        renderer.surface = pygame.display.get_surface()
        if menu.active:
            renderer.render_menu(menu)
            action = menu.handle_input(pressed_keys(pygame.key.get_pressed()), game, _now())
            if action is MenuAction.SHOW_LEADERBOARD:
                display_leaderboard(leaderboard)
            elif action is MenuAction.QUIT:
                running = False
        else:
            game.update(_now())
            renderer.render_game(game)
            game.handle_input(pressed_keys(pygame.key.get_pressed()), _now())
        pygame.display.flip()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        clock.tick(FRAMES_PER_SECOND)
    return game


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window, run the game until it is closed and save the score."""
    args = parse_args(argv)
    pygame.init()
    try:
        try:
            surface = pygame.display.set_mode(CANVAS_SIZE, pygame.RESIZABLE)
        except pygame.error as exc:
            print(f"Ошибка создания окна: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption(WINDOW_TITLE)

        audio = Audio(args.assets)
        try:
            audio.start()
        except AudioError as exc:
            print(exc, file=sys.stderr)
            print("Ошибка инициализации аудио", file=sys.stderr)
            return 1

        with audio:
            game = _run(Renderer(surface, args.assets), args.leaderboard)
        save_leaderboard(game, args.leaderboard)
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())