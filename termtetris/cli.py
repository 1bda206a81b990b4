"""Command-line entry point running the game loop."""

import argparse
import sys
import time

from .game import Game
from .render import render
from .terminal import RawTerminal, key_hit, read_char

CLEAR = "\033[2J\033[H"
TICK_SECONDS = 0.5
FRAME_SECONDS = (1000 // 60) / 1000
GAME_OVER_PAUSE = 2

_ACTIONS = {
    "w": Game.rotate,
    "a": Game.move_left,
    "d": Game.move_right,
    "s": Game.drop,
}


def handle_key(game, key):
    """Apply a key press to the game; return False when the player quits."""
    if key == "q":
        return False
    action = _ACTIONS.get(key)
    if action is not None:
        action(game)
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="termtetris", description="Play falling-block puzzles in the terminal."
    )
    parser.parse_args(argv)

    game = Game()
    out = sys.stdout
    fd = sys.stdin.fileno()
    with RawTerminal(fd):
        out.write(CLEAR)
        out.flush()
        last_tick = time.monotonic()
        running = True
        while running:
            now = time.monotonic()
            if key_hit(fd):
                running = handle_key(game, read_char(fd))
            if now - last_tick >= TICK_SECONDS:
                game.tick()
                last_tick = now
            out.write(render(game))
            out.flush()
            if game.is_game_over():
                out.write(CLEAR + "Game Over!\n")
                out.flush()
                time.sleep(GAME_OVER_PAUSE)
                break
            time.sleep(FRAME_SECONDS)
        out.write(CLEAR)
        out.flush()
    return 0