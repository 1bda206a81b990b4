import copy
import os
import termios
from unittest import mock

import pytest

from termtetris.terminal import RawTerminal, key_hit, read_char


@pytest.fixture
def pipe():
    r, w = os.pipe()
    yield r, w
    for fd in (r, w):
        try:
            os.close(fd)
        except OSError:
            pass


def test_key_hit_and_read_char(pipe):
    r, w = pipe
    assert key_hit(r) is False
    os.write(w, b"wa")
    assert key_hit(r) is True
    assert read_char(r) == "w"
    assert read_char(r) == "a"
    assert key_hit(r) is False


def test_read_char_at_end_of_input(pipe):
    r, w = pipe
    os.close(w)
    assert read_char(r) == ""


def _fake_attrs():
    lflag = termios.ICANON | termios.ECHO | termios.ISIG
    return [1, 2, 3, lflag, 9600, 9600, [b"\x00"] * 32]


class _Boom(Exception):
    pass


def _patched_termios(original, applied):
    def fake_getattr(fd):
        assert fd == 7
        return copy.deepcopy(original)

    def fake_setattr(fd, when, attrs):
        assert fd == 7
        applied.append((when, copy.deepcopy(attrs)))

    return (
        mock.patch.object(termios, "tcgetattr", side_effect=fake_getattr),
        mock.patch.object(termios, "tcsetattr", side_effect=fake_setattr),
    )


def test_raw_mode_is_restored():
    original = _fake_attrs()
    applied = []
    get_patch, set_patch = _patched_termios(original, applied)

    with get_patch, set_patch:
        term = RawTerminal(7)
        term.__enter__()
        assert len(applied) == 1
        when, raw = applied[0]
        assert when == termios.TCSAFLUSH
        assert raw[3] & termios.ICANON == 0
        assert raw[3] & termios.ECHO == 0
        assert raw[3] & termios.ISIG == termios.ISIG

        err = _Boom()
        suppressed = term.__exit__(_Boom, err, None)

    assert not suppressed
    assert len(applied) == 2
    when, restored = applied[-1]
    assert when == termios.TCSAFLUSH
    assert restored == original


def test_raw_mode_does_not_swallow_errors():
    original = _fake_attrs()
    applied = []
    get_patch, set_patch = _patched_termios(original, applied)

    with get_patch, set_patch:
        term = RawTerminal(7)
        term.__enter__()
        try:
            raise ValueError("inside")
        except ValueError as err:
            suppressed = term.__exit__(type(err), err, err.__traceback__)

        with pytest.raises(ValueError, match="inside") as excinfo:
            with RawTerminal(7):
                raise ValueError("inside")

    assert not suppressed
    assert str(excinfo.value) == "inside"
    assert [when for when, _ in applied] == [termios.TCSAFLUSH] * 4
    assert applied[1][1] == original
    assert applied[-1][1] == original


def test_exit_without_error_returns_falsy_and_restores():
    original = _fake_attrs()
    applied = []
    get_patch, set_patch = _patched_termios(original, applied)

    with get_patch, set_patch:
        term = RawTerminal(7)
        term.__enter__()
        result = term.__exit__(None, None, None)

    assert not result
    assert applied[-1] == (termios.TCSAFLUSH, original)


def test_raw_mode_on_non_terminal_fails(pipe):
    r, _ = pipe
    with pytest.raises(termios.error):
        with RawTerminal(r):
            pass