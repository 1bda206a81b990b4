"""Tetromino shapes and their display colours."""

RESET = "\033[0m"

_COLORS = (
    "\033[36m",  # I - cyan
    "\033[34m",  # J - blue
    "\033[33m",  # L - yellow/orange
    "\033[32m",  # O - green
    "\033[31m",  # S - red
    "\033[35m",  # T - magenta
    "\033[91m",  # Z - bright red
)

# Each piece has four rotations, each a 4x4 grid where '#' marks a block.
PIECES = (
    # I
    (
        ("....", "####", "....", "...."),
        ("..#.", "..#.", "..#.", "..#."),
        ("....", "....", "####", "...."),
        (".#..", ".#..", ".#..", ".#.."),
    ),
    # J
    (
        ("#...", "###.", "....", "...."),
        (".##.", ".#..", ".#..", "...."),
        ("....", "###.", "..#.", "...."),
        (".#..", ".#..", "##..", "...."),
    ),
    # L
    (
        ("..#.", "###.", "....", "...."),
        (".#..", ".#..", ".##.", "...."),
        ("....", "###.", "#...", "...."),
        ("##..", ".#..", ".#..", "...."),
    ),
    # O
    (
        (".##.", ".##.", "....", "...."),
        (".##.", ".##.", "....", "...."),
        (".##.", ".##.", "....", "...."),
        (".##.", ".##.", "....", "...."),
    ),
    # S
    (
        (".##.", "##..", "....", "...."),
        (".#..", ".##.", "..#.", "...."),
        ("....", ".##.", "##..", "...."),
        ("#...", "##..", ".#..", "...."),
    ),
    # T
    (
        (".#..", "###.", "....", "...."),
        (".#..", ".##.", ".#..", "...."),
        ("....", "###.", ".#..", "...."),
        (".#..", "##..", ".#..", "...."),
    ),
    # Z
    (
        ("##..", ".##.", "....", "...."),
        ("..#.", ".##.", ".#..", "...."),
        ("....", "##..", ".##.", "...."),
        (".#..", "##..", "#...", "...."),
    ),
)

ROTATIONS = 4

_CELLS = tuple(
    tuple(
        tuple(
            (px, py)
            for py, row in enumerate(shape)
            for px, ch in enumerate(row)
            if ch == "#"
        )
        for shape in rotations
    )
    for rotations in PIECES
)


def color_code(piece_index):
    """Return the ANSI colour escape for a piece, or the reset code if unknown."""
    if 0 <= piece_index < len(_COLORS):
        return _COLORS[piece_index]
    return RESET


def piece_cells(piece_index, rotation):
    """Return the (x, y) offsets of the blocks of a piece in a given rotation."""
    if not 0 <= piece_index < len(PIECES):
        raise IndexError(f"no piece {piece_index}")
    if not 0 <= rotation < ROTATIONS:
        raise IndexError(f"no rotation {rotation}")
    return _CELLS[piece_index][rotation]