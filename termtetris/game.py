"""Board state and rules of the falling-block game."""

import random

from .pieces import PIECES, ROTATIONS, piece_cells

WIDTH = 10
HEIGHT = 20
SPAWN_X = 3


class Game:
    """A playing field with one active falling piece."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.board = [[0] * WIDTH for _ in range(HEIGHT)]
        self.piece = 0
        self.rotation = 0
        self.x = SPAWN_X
        self.y = 0

    def _cells(self, rotation=None, dx=0, dy=0):
        rot = self.rotation if rotation is None else rotation
        for px, py in piece_cells(self.piece, rot):
            yield self.x + px + dx, self.y + py + dy

    def _fits(self, cells):
        return all(
            0 <= x < WIDTH and 0 <= y < HEIGHT and not self.board[y][x]
            for x, y in cells
        )

    def _spawn(self):
        self.piece = self.rng.randrange(len(PIECES))
        self.x = SPAWN_X
        self.y = 0
        self.rotation = 0

    def is_piece_at(self, x, y):
        """Whether the active piece occupies board cell (x, y)."""
        return (x, y) in set(self._cells())

    def can_move(self, dx, dy):
        """Whether the active piece can be shifted by (dx, dy)."""
        return self._fits(self._cells(dx=dx, dy=dy))

    def can_rotate(self, new_rotation):
        """Whether the active piece fits in the given rotation at its place."""
        return self._fits(self._cells(rotation=new_rotation))

    def tick(self):
        """Apply gravity; lock the piece and spawn a new one when it lands."""
        if self.can_move(0, 1):
            self.y += 1
        else:
            self.lock_piece()
            self._spawn()

    def lock_piece(self):
        """Merge the active piece into the board and clear full lines."""
        for x, y in self._cells():
            if 0 <= x < WIDTH and 0 <= y < HEIGHT:
                self.board[y][x] = 1
        self.clear_lines()

    def move_left(self):
        if self.can_move(-1, 0):
            self.x -= 1

    def move_right(self):
        if self.can_move(1, 0):
            self.x += 1

    def rotate(self):
        new_rotation = (self.rotation + 1) % ROTATIONS
        if self.can_rotate(new_rotation):
            self.rotation = new_rotation

    def drop(self):
        """Hard drop: fall as far as possible, then lock and spawn."""
        while self.can_move(0, 1):
            self.y += 1
        self.tick()

    def clear_lines(self):
        """Remove full rows, shifting rows above down; return how many were cleared."""
        kept = [row for row in self.board if not all(row)]
        cleared = HEIGHT - len(kept)
        self.board[:] = [[0] * WIDTH for _ in range(cleared)] + kept
        return cleared

    def is_game_over(self):
        """Whether the active piece overlaps locked blocks where it stands."""
        return not self.can_move(0, 0)