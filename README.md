# termtetris

termtetris is a small falling-blocks puzzle game that you play in a terminal window. The board is 10 columns wide and 20 rows tall. The active piece is drawn in colour. Pieces that have landed are drawn as `#`. When a row is full, it is removed and the rows above it move down.

## Requirements

- Python 3.10 or later
- A POSIX terminal (Linux, macOS) that understands ANSI escape codes. Input handling uses `termios` and `select`.

## Installing

```
pip install .
```

## Playing

```
termtetris
```

`termtetris --help` shows the usage. The command takes no other options.

Controls:

| Key | Action                                        |
|-----|-----------------------------------------------|
| `a` | move left                                     |
| `d` | move right                                    |
| `w` | rotate                                        |
| `s` | drop to the bottom and lock the piece at once |
| `q` | quit                                          |

Play works as follows:

- The active piece falls one row every half second. The screen is redrawn about 60 times a second.
- A rotation or move that would leave the board or overlap landed blocks is ignored.
- When a piece can fall no further, it is locked into the board and a new random piece appears at the top.
- The game ends when the active piece overlaps landed blocks where it stands. "Game Over!" is then shown for two seconds and the program exits.

While the game runs, `termtetris.terminal.RawTerminal` turns off line buffering and echo on standard input, so each key takes effect at once. The previous settings are restored when the game exits.

## Using it as a library

The modules can be used without a terminal:

- `termtetris.game.Game` holds the board and the active piece and applies the rules:
  - moving: `move_left`, `move_right`, `rotate`, `drop`, `tick`
  - checks: `can_move`, `can_rotate`, `is_piece_at`, `is_game_over`
  - board updates: `lock_piece`, and `clear_lines`, which returns how many rows were removed
- You can pass a `random.Random` to `Game` to make the sequence of pieces repeatable.
- `termtetris.render.render` returns one full frame as a string.
- `termtetris.pieces` holds the seven shapes. `piece_cells` gives the block offsets for a piece and rotation, and `color_code` gives a piece's colour escape.
- `termtetris.cli.handle_key` applies one key press to a game.

```python
import random

from termtetris.game import Game
from termtetris.render import render

game = Game(random.Random(1))
game.move_left()
game.rotate()
game.drop()
print(render(game))
```

## What it does not do

The game has no:

- score, level or speed-up
- preview of the next piece
- hold piece
- soft drop
- saved high scores

Landed blocks are drawn without colour.

## Running the tests

```
pip install ".[test]"
pytest
```