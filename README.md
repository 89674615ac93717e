# blocktris

A small falling-blocks puzzle game. Pieces drop down a 10 × 20 board. You
steer each piece and turn it so that rows fill up. Every full row you clear
scores 100 points. When a new piece has no room to appear, the game is over.

## Installing

```
pip install .
```

This installs pygame, which draws the window and plays the sound.

## Playing

```
blocktris
```

The window opens on a menu with three items: start the game, show the
leaderboard, and quit. The items are drawn as bars, and the selected bar is
wider than the others.

- **Up / Down** move through the menu items. **Enter** picks one.
- **Left / Right** move the piece sideways while you play.
- **Down** makes the piece drop faster.
- **Up** turns the piece a quarter turn clockwise.
- **Enter** starts a new game after the game is over.

Without input, a piece drops one row every half second.

### Options

```
blocktris [--assets DIR] [--leaderboard FILE]
```

- `--assets DIR` is the directory that holds the `audio/` and `textures/`
  folders. The default is `..`. The game loads `audio/background.wav`,
  `audio/clear.wav`, `textures/block.png` and `textures/background.png` from it.
- `--leaderboard FILE` is the high-score file. The default is
  `leaderboard.txt` in the current directory.

If the mixer cannot be opened, or the background music or the line-clear
sound cannot be loaded, the game prints an error and exits with status 1. A
texture that cannot be loaded only prints a warning. Blocks are then drawn as
plain grey squares, and the background is left as a flat colour.

## Leaderboard

When the window closes, the score from the last game is saved to the
leaderboard file under the name `Player`. The file keeps the five best
results, highest first, one `name score` pair per line. Picking the
leaderboard item in the menu prints the numbered list to the console, or
prints a notice if there is no file yet.

## What it does not do

- The window shows no text. The menu labels, the score and the game-over
  state are not drawn. The score reaches you only through the leaderboard
  file and the console.
- The line-clear sound is loaded but never played. Only the background music
  is heard.
- You cannot enter a player name. Every result is saved as `Player`.

## Using it as a library

The game rules do not depend on the window:

- `blocktris.game.GameState` holds the board, the falling piece and the score.
  `update(now)` applies gravity and returns the number of lines cleared.
  `handle_input(keys, now)` takes a collection of `blocktris.game.Key` values.
  `collides(x, y, piece)`, `spawn_piece()` and `reset(now)` are also public.
  You can pass a `random.Random` as `rng` to get a repeatable piece order.
- `blocktris.game.rotate_piece` turns a 4 × 4 piece a quarter turn clockwise.
- `blocktris.leaderboard` has `LeaderboardEntry`, `read_leaderboard`,
  `format_leaderboard`, `display_leaderboard` and `save_leaderboard`.
- `blocktris.menu.MenuState` is the start menu. Its
  `handle_input(keys, game, now)` method reports the chosen item as a
  `MenuAction`. Choosing to start resets the game.
- `blocktris.render` has `Renderer`, which draws on a pygame surface. It also
  has the pure helpers `cell_center`, `board_cells` and `menu_item_rects`.
- `blocktris.audio.Audio` opens the mixer and loops the music. It can be used
  as a context manager, and it raises `AudioError` on failure.

## Running the tests

```
pip install .[test]
pytest
```