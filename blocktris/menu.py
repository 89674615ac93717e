"""Start menu: item selection and the action chosen."""

from __future__ import annotations

import enum
from collections.abc import Collection
from dataclasses import dataclass

from blocktris.game import GameState, Key

DEFAULT_ITEMS = ("Начать", "Таблица лидеров", "Выход")


class MenuAction(enum.Enum):
    """What the caller should do after a menu input frame."""

    NONE = enum.auto()
    START = enum.auto()
    SHOW_LEADERBOARD = enum.auto()
    QUIT = enum.auto()


_ACTIONS = (MenuAction.START, MenuAction.SHOW_LEADERBOARD, MenuAction.QUIT)


@dataclass
class MenuState:
    """Whether the menu is shown, which item is selected and the item labels."""

    active: bool = True
    selected: int = 0
    items: tuple[str, ...] = DEFAULT_ITEMS

    @property
    def item_count(self) -> int:
        return len(self.items)

    def handle_input(self, keys: Collection[Key], game: GameState, now: float) -> MenuAction:
        """Move the selection and act on Enter; starting resets ``game``."""
        if Key.UP in keys:
            self.selected = (self.selected - 1) % self.item_count
        if Key.DOWN in keys:
            self.selected = (self.selected + 1) % self.item_count
        if Key.ENTER not in keys or not 0 <= self.selected < len(_ACTIONS):
            return MenuAction.NONE
        action = _ACTIONS[self.selected]
        if action is MenuAction.START:
            self.active = False
            game.reset(now)
        return action