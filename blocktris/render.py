"""Drawing of the board, the falling piece and the menu onto a pygame surface."""

from __future__ import annotations

import sys
from pathlib import Path

import pygame

from blocktris.game import BOARD_HEIGHT, BOARD_WIDTH, GameState
from blocktris.menu import MenuState

CANVAS_SIZE = (800, 600)
CELL_SIZE = 30
CLEAR_COLOR = (51, 77, 77)
FALLBACK_BLOCK_COLOR = (200, 200, 200)
MENU_TOP = 50
MENU_SPACING = 50
MENU_ITEM_WIDTH = 180
MENU_SELECTED_WIDTH = 200
MENU_ITEM_HEIGHT = 40


def _to_screen(world_x: int, world_y: int) -> tuple[int, int]:
    """Map world coordinates (origin at the centre, y up) to canvas pixels."""
    return CANVAS_SIZE[0] // 2 + world_x, CANVAS_SIZE[1] // 2 - world_y


def cell_center(x: int, y: int) -> tuple[int, int]:
    """Canvas pixel at the centre of board cell (x, y)."""
    return _to_screen(
        (x - BOARD_WIDTH // 2) * CELL_SIZE,
        (BOARD_HEIGHT // 2 - y) * CELL_SIZE,
    )


def board_cells(game: GameState) -> list[tuple[int, int]]:
    """Board cells to draw: settled blocks, then the visible part of the piece."""
    cells = [
        (x, y)
        for y, row in enumerate(game.board)
        for x, filled in enumerate(row)
        if filled
    ]
    cells.extend(
        (game.piece_x + x, game.piece_y + y)
        for y, row in enumerate(game.piece)
        for x, filled in enumerate(row)
        if filled and game.piece_y + y >= 0
    )
    return cells


def menu_item_rects(menu: MenuState) -> list[pygame.Rect]:
    """Canvas rectangles of the menu items; the selected one is wider."""
    rects = []
    for index in range(menu.item_count):
        width = MENU_SELECTED_WIDTH if index == menu.selected else MENU_ITEM_WIDTH
        rect = pygame.Rect(0, 0, width, MENU_ITEM_HEIGHT)
        rect.center = _to_screen(0, MENU_TOP - index * MENU_SPACING)
        rects.append(rect)
    return rects


def _load_texture(path: Path) -> pygame.Surface | None:
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError):
        print(f"Ошибка загрузки текстуры: {path}", file=sys.stderr)
        return None
    # Texture rows run bottom-up on the quad.
    return pygame.transform.flip(image, False, True)


class Renderer:
    """Draws frames on a fixed-size canvas and scales them onto ``surface``."""

    def __init__(self, surface: pygame.Surface, asset_dir: str | Path = "..") -> None:
        self.surface = surface
        self._canvas = pygame.Surface(CANVAS_SIZE)
        textures = Path(asset_dir) / "textures"
        block = _load_texture(textures / "block.png")
        if block is None:
            block = pygame.Surface((1, 1))
            block.fill(FALLBACK_BLOCK_COLOR)
        self._block_source = block
        self._block_cache: dict[tuple[int, int], pygame.Surface] = {}
        background = _load_texture(textures / "background.png")
        self._background = (
            pygame.transform.scale(background, CANVAS_SIZE) if background is not None else None
        )

    def _block(self, size: tuple[int, int]) -> pygame.Surface:
        scaled = self._block_cache.get(size)
        if scaled is None:
            scaled = pygame.transform.scale(self._block_source, size)
            self._block_cache[size] = scaled
        return scaled

    def _begin(self) -> None:
        self._canvas.fill(CLEAR_COLOR)
        if self._background is not None:
            self._canvas.blit(self._background, (0, 0))

    def _present(self) -> None:
        if self.surface.get_size() == CANVAS_SIZE:
            self.surface.blit(self._canvas, (0, 0))
        else:
            self.surface.blit(
                pygame.transform.scale(self._canvas, self.surface.get_size()), (0, 0)
            )

    def render_game(self, game: GameState) -> None:
        """Draw the background, the settled blocks and the falling piece."""
        self._begin()
        block = self._block((CELL_SIZE, CELL_SIZE))
        for x, y in board_cells(game):
            rect = block.get_rect(center=cell_center(x, y))
            self._canvas.blit(block, rect)
        self._present()

    def render_menu(self, menu: MenuState) -> None:
        """Draw the background and one bar per menu item."""
        self._begin()
        for rect in menu_item_rects(menu):
            self._canvas.blit(self._block(rect.size), rect)
        self._present()