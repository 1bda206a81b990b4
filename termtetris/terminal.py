"""Raw-mode terminal input helpers."""

import os
import select
import sys
import termios


class RawTerminal:
    """Context manager that turns off line buffering and echo on a terminal."""

    def __init__(self, fd=None):
        self.fd = fd
        self._saved = None

    def __enter__(self):
        if self.fd is None:
            self.fd = sys.stdin.fileno()
        self._saved = termios.tcgetattr(self.fd)
        raw = termios.tcgetattr(self.fd)
        raw[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved)
            self._saved = None
        return False


def key_hit(fd):
    """Whether input is waiting on fd, without blocking."""
    readable, _, _ = select.select([fd], [], [], 0)
    return bool(readable)


def read_char(fd):
    """Read one byte from fd as a character; empty string at end of input."""
    return os.read(fd, 1).decode("latin-1")