"""Terminal helpers: clearing the screen and reading single key presses."""

from __future__ import annotations

import os
import subprocess
import sys
from contextlib import contextmanager
from typing import Iterator

try:
    import termios
except ImportError:  # not available on Windows
    termios = None  # type: ignore[assignment]

try:
    import msvcrt
except ImportError:  # only available on Windows
    msvcrt = None  # type: ignore[assignment]

_ANSI_CLEAR = "\033[2J\033[H"


def clear_terminal() -> None:
    """Clear the terminal screen; does nothing when stdout is not a terminal."""
    out = sys.stdout
    if not out.isatty():
        return
    out.flush()
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        out.write(_ANSI_CLEAR)
        out.flush()


@contextmanager
def raw_mode() -> Iterator[bool]:
    """Turn off line buffering and echo on stdin for the duration of the block.

    Yields True if the terminal mode was changed, False when stdin is not a
    terminal or the platform has no terminal modes to change.
    """
    stream = sys.stdin
    if termios is None or not stream.isatty():
        yield False
        return

    fd = stream.fileno()
    original = termios.tcgetattr(fd)
    raw = list(original)
    raw[3] = raw[3] & ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        yield True
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, original)


def wait_for_any_key() -> str:
    """Block until a single key is pressed and return it."""
    if msvcrt is not None:
        return msvcrt.getwch()
    with raw_mode():
        return sys.stdin.read(1)