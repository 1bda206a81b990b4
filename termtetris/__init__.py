"""A falling-blocks puzzle game for the terminal: rules, rendering, raw-mode input and a command."""

__version__ = "0.1.0"
__all__ = ["cli", "game", "pieces", "render", "terminal"]