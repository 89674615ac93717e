import io
import random

from blocktris.game import MAX_LEADERBOARD, GameState
from blocktris.leaderboard import (
    EMPTY_MESSAGE,
    HEADER,
    LeaderboardEntry,
    display_leaderboard,
    format_leaderboard,
    read_leaderboard,
    save_leaderboard,
)


def _game(name, score):
    game = GameState(0.0, random.Random(0))
    game.player_name = name
    game.score = score
    return game


def test_read_missing_file(tmp_path):
    assert read_leaderboard(tmp_path / "none.txt") == []


def test_save_then_read_round_trip(tmp_path):
    path = tmp_path / "board.txt"
    written = save_leaderboard(_game("alice", 300), path)
    assert written == [LeaderboardEntry("alice", 300)]
    assert read_leaderboard(path) == written
    assert path.read_text(encoding="utf-8") == "alice 300\n"


def test_save_sorts_descending_and_keeps_top(tmp_path):
    path = tmp_path / "board.txt"
    for index, score in enumerate([100, 500, 200, 400, 300, 600, 50]):
        save_leaderboard(_game(f"p{index}", score), path)
    entries = read_leaderboard(path)
    assert len(entries) == MAX_LEADERBOARD
    scores = [entry.score for entry in entries]
    assert scores == sorted(scores, reverse=True)
    assert entries[0] == LeaderboardEntry("p5", 600)
    assert all(entry.score >= 200 for entry in entries)


def test_ties_keep_existing_entry_first(tmp_path):
    path = tmp_path / "board.txt"
    save_leaderboard(_game("first", 100), path)
    save_leaderboard(_game("second", 100), path)
    assert [entry.name for entry in read_leaderboard(path)] == ["first", "second"]


def test_read_stops_at_malformed_entry(tmp_path):
    path = tmp_path / "board.txt"
    path.write_text("bob 10\ncarol x\ndave 5\n", encoding="utf-8")
    assert read_leaderboard(path) == [LeaderboardEntry("bob", 10)]


def test_read_limits_to_table_size(tmp_path):
    path = tmp_path / "board.txt"
    path.write_text("".join(f"n{i} {i}\n" for i in range(8)), encoding="utf-8")
    assert len(read_leaderboard(path)) == MAX_LEADERBOARD


def test_format_leaderboard():
    text = format_leaderboard([LeaderboardEntry("alice", 300), LeaderboardEntry("bob", 20)])
    assert text == f"{HEADER}\n1. alice - 300\n2. bob - 20\n"


def test_display_missing_file(tmp_path):
    out = io.StringIO()
    display_leaderboard(tmp_path / "none.txt", out)
    assert out.getvalue() == EMPTY_MESSAGE + "\n"


def test_display_empty_file_prints_header(tmp_path):
    path = tmp_path / "board.txt"
    path.write_text("", encoding="utf-8")
    out = io.StringIO()
    display_leaderboard(path, out)
    assert out.getvalue() == HEADER + "\n"


def test_display_existing_file(tmp_path):
    path = tmp_path / "board.txt"
    save_leaderboard(_game("alice", 300), path)
    out = io.StringIO()
    display_leaderboard(path, out)
    assert out.getvalue() == f"{HEADER}\n1. alice - 300\n"