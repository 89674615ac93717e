"""High-score table kept in a plain text file of ``name score`` lines."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from blocktris.game import MAX_LEADERBOARD

if TYPE_CHECKING:
    from blocktris.game import GameState

DEFAULT_PATH = "leaderboard.txt"
EMPTY_MESSAGE = "Таблица лидеров пуста"
HEADER = "Таблица лидеров:"


@dataclass(frozen=True)
class LeaderboardEntry:
    """One player's result."""

    name: str
    score: int


def read_leaderboard(path: str | Path = DEFAULT_PATH) -> list[LeaderboardEntry]:
    """Read up to the table size of entries; stop at the first malformed one."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    tokens = text.split()
    entries: list[LeaderboardEntry] = []
    for name, score in zip(tokens[0::2], tokens[1::2]):
        if len(entries) >= MAX_LEADERBOARD:
            break
        try:
            entries.append(LeaderboardEntry(name, int(score)))
        except ValueError:
            break
    return entries


def format_leaderboard(entries: list[LeaderboardEntry]) -> str:
    """Render the table as numbered lines under a header."""
    lines = [HEADER]
    lines.extend(
        f"{rank}. {entry.name} - {entry.score}" for rank, entry in enumerate(entries, 1)
    )
    return "\n".join(lines) + "\n"


def display_leaderboard(path: str | Path = DEFAULT_PATH, out: TextIO | None = None) -> None:
    """Print the table, or a notice when there is no table file."""
    stream = out if out is not None else sys.stdout
    if not Path(path).exists():
        stream.write(EMPTY_MESSAGE + "\n")
        return
    stream.write(format_leaderboard(read_leaderboard(path)))


def save_leaderboard(game: GameState, path: str | Path = DEFAULT_PATH) -> list[LeaderboardEntry]:
    """Add the game's result, keep the best entries and return what was written."""
    entries = read_leaderboard(path)
    entries.append(LeaderboardEntry(game.player_name, game.score))
    entries.sort(key=lambda entry: entry.score, reverse=True)
    top = entries[:MAX_LEADERBOARD]
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{entry.name} {entry.score}\n" for entry in top)
    return top