"""Keyboard state tracking."""

from __future__ import annotations

from enum import IntEnum
from typing import NoReturn

MAX_KEYS = 65536


class Key(IntEnum):
    """X11 key symbols the game reacts to."""

    W = 119
    S = 115
    D = 100
    A = 97
    ESC = 65307
    SHIFT = 65505


class WindowClosed(Exception):
    """Raised when the player asks to close the window."""


def _check(keycode: int) -> int:
    if not 0 <= keycode < MAX_KEYS:
        raise ValueError(f"keycode {keycode} out of range 0..{MAX_KEYS - 1}")
    return keycode


class KeyState:
    """Which keys are currently held down."""

    def __init__(self) -> None:
        self._pressed: set[int] = set()

    def keydown(self, keycode: int) -> None:
        """Record a press; Escape closes the window."""
        self._pressed.add(_check(keycode))
        if keycode == Key.ESC:
            raise WindowClosed("escape pressed")

    def keyup(self, keycode: int) -> None:
        """Record a release."""
        self._pressed.discard(_check(keycode))

    def reset(self) -> None:
        """Release every key."""
        self._pressed.clear()

    def is_pressed(self, keycode: int) -> bool:
        return _check(keycode) in self._pressed


def request_close() -> NoReturn:
    """Handle the window's close button."""
    raise WindowClosed("window closed")