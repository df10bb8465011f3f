"""Translation of key presses into game actions."""

from __future__ import annotations

import sys
from typing import Callable

from .kinds import GameAction
from .terminal import raw_mode

try:
    import msvcrt
except ImportError:  # only available on Windows
    msvcrt = None  # type: ignore[assignment]

_ESCAPE = "\x1b"

_ANSI_ARROWS = {
    "A": GameAction.MOVE_UP,
    "B": GameAction.MOVE_DOWN,
    "C": GameAction.MOVE_RIGHT,
    "D": GameAction.MOVE_LEFT,
}

_WINDOWS_PREFIXES = {0, 224}
_WINDOWS_ARROWS = {
    72: GameAction.MOVE_UP,
    80: GameAction.MOVE_DOWN,
    75: GameAction.MOVE_LEFT,
    77: GameAction.MOVE_RIGHT,
}

_COMMAND_KEYS = {"s": GameAction.SAVE, "x": GameAction.EXIT}


def _next_char(read_char: Callable[[], str]) -> str:
    ch = read_char()
    if not ch:
        raise EOFError("input ended while waiting for a key")
    return ch


def _decode_ansi(read_char: Callable[[], str]) -> GameAction:
    while True:
        ch = _next_char(read_char)
        if ch == _ESCAPE:
            if _next_char(read_char) == "[":
                action = _ANSI_ARROWS.get(_next_char(read_char))
                if action is not None:
                    return action
        elif ch in _COMMAND_KEYS:
            return _COMMAND_KEYS[ch]


def _decode_windows(read_char: Callable[[], str]) -> GameAction:
    while True:
        ch = _next_char(read_char)
        if ord(ch) in _WINDOWS_PREFIXES:
            action = _WINDOWS_ARROWS.get(ord(_next_char(read_char)))
            if action is not None:
                return action
        elif ch in _COMMAND_KEYS:
            return _COMMAND_KEYS[ch]


def get_input(read_char: Callable[[], str] | None = None) -> GameAction:
    """Wait for an arrow key, 's' (save) or 'x' (exit) and return its action.

    Other keys are ignored. `read_char` returns one character per call and an
    empty string at end of input; by default keys are read from the terminal.
    """
    if read_char is not None:
        return _decode_ansi(read_char)
    if msvcrt is not None:
        return _decode_windows(msvcrt.getwch)
    with raw_mode():
        return _decode_ansi(lambda: sys.stdin.read(1))