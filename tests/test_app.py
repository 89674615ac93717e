import wave
from collections import defaultdict
from unittest import mock

import pygame
import pytest

from blocktris.app import main, parse_args, pressed_keys
from blocktris.game import Key
from blocktris.leaderboard import DEFAULT_PATH


def _write_wav(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(path), "wb") as handle:
        handle.setnchannels(1)
        handle.setsampwidth(2)
        handle.setframerate(44100)
        handle.writeframes(b"\x00\x00" * 4410)


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_parse_args_defaults():
    args = parse_args([])
    assert args.assets == ".."
    assert args.leaderboard == DEFAULT_PATH


def test_parse_args_overrides():
    args = parse_args(["--assets", "data", "--leaderboard", "scores.txt"])
    assert (args.assets, args.leaderboard) == ("data", "scores.txt")


def test_pressed_keys_maps_pygame_codes():
    state = defaultdict(bool, {pygame.K_LEFT: True, pygame.K_RETURN: True, pygame.K_a: True})
    assert pressed_keys(state) == frozenset({Key.LEFT, Key.ENTER})


def test_pressed_keys_all_bindings():
    codes = (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_DOWN, pygame.K_UP, pygame.K_RETURN)
    state = defaultdict(bool, {code: True for code in codes})
    assert pressed_keys(state) == frozenset(Key)


def test_pressed_keys_nothing_held():
    assert pressed_keys(defaultdict(bool)) == frozenset()


def test_main_fails_without_audio_assets(headless, tmp_path):
    board = tmp_path / "scores.txt"
    code = main(["--assets", str(tmp_path), "--leaderboard", str(board)])
    assert code == 1
    assert not board.exists()
    assert pygame.get_init() is False


def test_main_saves_score_when_window_closes(headless, tmp_path):
    _write_wav(tmp_path / "audio" / "background.wav")
    _write_wav(tmp_path / "audio" / "clear.wav")
    board = tmp_path / "scores.txt"
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        code = main(["--assets", str(tmp_path), "--leaderboard", str(board)])
    assert code == 0
    assert board.read_text(encoding="utf-8") == "Player 0\n"
    assert pygame.get_init() is False