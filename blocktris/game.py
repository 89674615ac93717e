"""Falling-block game state: board, active piece, gravity and input rules."""

from __future__ import annotations

import enum
import random
from collections.abc import Collection, Iterator, Sequence

BOARD_WIDTH = 10
BOARD_HEIGHT = 20
MAX_LEADERBOARD = 5
FALL_INTERVAL = 0.5
LINE_SCORE = 100
DEFAULT_PLAYER = "Player"
SPAWN_X = BOARD_WIDTH // 2 - 2
SPAWN_Y = -1

Piece = tuple[tuple[int, ...], ...]

TETROMINOES: tuple[Piece, ...] = (
    ((1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # I
    ((1, 1, 0, 0), (1, 1, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # O
    ((1, 1, 1, 0), (0, 1, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # T
    ((1, 1, 1, 0), (1, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # L
    ((1, 1, 1, 0), (0, 0, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # J
    ((1, 1, 0, 0), (0, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # S
    ((0, 1, 1, 0), (1, 1, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),  # Z
)


class Key(enum.Enum):
    """Keys the game and the menu react to."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    DOWN = enum.auto()
    UP = enum.auto()
    ENTER = enum.auto()


def rotate_piece(piece: Sequence[Sequence[int]]) -> Piece:
    """Return the piece rotated a quarter turn clockwise inside its square."""
    size = len(piece)
    return tuple(
        tuple(piece[size - 1 - col][row] for col in range(size)) for row in range(size)
    )


def _cells(piece: Sequence[Sequence[int]]) -> Iterator[tuple[int, int]]:
    for y, row in enumerate(piece):
        for x, filled in enumerate(row):
            if filled:
                yield x, y


def _empty_board() -> list[list[int]]:
    return [[0] * BOARD_WIDTH for _ in range(BOARD_HEIGHT)]


class GameState:
    """The board, the falling piece, the score and the game-over flag."""

    def __init__(self, now: float = 0.0, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.board: list[list[int]] = _empty_board()
        self.piece: Piece = TETROMINOES[0]
        self.piece_x = SPAWN_X
        self.piece_y = SPAWN_Y
        self.score = 0
        self.game_over = False
        self.last_fall_time = now
        self.player_name = DEFAULT_PLAYER
        self.reset(now)

    def reset(self, now: float) -> None:
        """Start a fresh game at time ``now``."""
        self.board = _empty_board()
        self.score = 0
        self.game_over = False
        self.last_fall_time = now
        self.player_name = DEFAULT_PLAYER
        self.spawn_piece()

    def spawn_piece(self) -> None:
        """Pick a random tetromino and place it at the spawn position."""
        self.piece = TETROMINOES[self._rng.randrange(len(TETROMINOES))]
        self.piece_x = SPAWN_X
        self.piece_y = SPAWN_Y

    def collides(self, x: int, y: int, piece: Sequence[Sequence[int]]) -> bool:
        """Whether ``piece`` placed at (x, y) hits a wall, the floor or a block."""
        for cx, cy in _cells(piece):
            bx, by = x + cx, y + cy
            if bx < 0 or bx >= BOARD_WIDTH or by >= BOARD_HEIGHT:
                return True
            if by >= 0 and self.board[by][bx]:
                return True
        return False

    def _lock_piece(self) -> None:
        for cx, cy in _cells(self.piece):
            by = self.piece_y + cy
            if by >= 0:
                self.board[by][self.piece_x + cx] = 1

    def _clear_lines(self) -> int:
        remaining = [row for row in self.board if not all(row)]
        cleared = BOARD_HEIGHT - len(remaining)
        self.board = [[0] * BOARD_WIDTH for _ in range(cleared)] + remaining
        return cleared

    def update(self, now: float) -> int:
        """Apply gravity at time ``now``; return the number of lines cleared."""
        if self.game_over or now - self.last_fall_time <= FALL_INTERVAL:
            return 0
        if not self.collides(self.piece_x, self.piece_y + 1, self.piece):
            # The fall timer is only reset when a piece locks or is pushed down.
            self.piece_y += 1
            return 0
        self._lock_piece()
        cleared = self._clear_lines()
        self.score += cleared * LINE_SCORE
        self.spawn_piece()
        if self.collides(self.piece_x, self.piece_y, self.piece):
            self.game_over = True
        self.last_fall_time = now
        return cleared

    def handle_input(self, keys: Collection[Key], now: float) -> None:
        """React to the set of keys held down at time ``now``."""
        if self.game_over:
            if Key.ENTER in keys:
                self.reset(now)
            return
        if Key.LEFT in keys and not self.collides(self.piece_x - 1, self.piece_y, self.piece):
            self.piece_x -= 1
        if Key.RIGHT in keys and not self.collides(self.piece_x + 1, self.piece_y, self.piece):
            self.piece_x += 1
        if Key.DOWN in keys and not self.collides(self.piece_x, self.piece_y + 1, self.piece):
            self.piece_y += 1
            self.last_fall_time = now
        if Key.UP in keys:
            rotated = rotate_piece(self.piece)
            if not self.collides(self.piece_x, self.piece_y, rotated):
                self.piece = rotated