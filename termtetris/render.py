"""Text rendering of the playing field."""

from .game import HEIGHT, WIDTH
from .pieces import RESET, color_code

HOME = "\033[H"
CONTROLS = "Controls: A/Left D/Right S/Drop W/Rotate Q/Quit "


def _cell(game, x, y):
    if game.board[y][x]:
        return "#"
    if game.is_piece_at(x, y):
        return f"{color_code(game.piece)}■{RESET}"
    return " "


def render(game):
    """Return the full frame for the current game state."""
    rows = [
        "│" + "".join(_cell(game, x, y) for x in range(WIDTH)) + "│\n"
        for y in range(HEIGHT)
    ]
    return (
        HOME
        + "┌" + "-" * WIDTH + "┐\n"
        + "".join(rows)
        + "└" + "─" * WIDTH + "┘\n"
        + "\n" + CONTROLS + "\n"
    )