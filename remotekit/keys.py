"""Keyboard keys and mouse buttons understood by the input controllers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class MouseButton(Enum):
    """A mouse button.

    The ``SCROLL_*`` buttons are not meant for general use and may not work
    on every platform.
    """

    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()
    SCROLL_LEFT = auto()
    SCROLL_RIGHT = auto()


class Key(Enum):
    """A named key on the keyboard.

    For layout-dependent character keys use :class:`Layout`; for a raw
    platform keycode use :class:`Raw`.
    """

    ALT = auto()
    BACKSPACE = auto()
    CAPS_LOCK = auto()
    COMMAND = auto()
    CONTROL = auto()
    DELETE = auto()
    DOWN_ARROW = auto()
    END = auto()
    ESCAPE = auto()
    F1 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    HOME = auto()
    LEFT_ARROW = auto()
    META = auto()
    OPTION = auto()
    PAGE_DOWN = auto()
    PAGE_UP = auto()
    RETURN = auto()
    RIGHT_ARROW = auto()
    SHIFT = auto()
    SPACE = auto()
    SUPER = auto()
    TAB = auto()
    UP_ARROW = auto()
    WINDOWS = auto()
    NUMPAD0 = auto()
    NUMPAD1 = auto()
    NUMPAD2 = auto()
    NUMPAD3 = auto()
    NUMPAD4 = auto()
    NUMPAD5 = auto()
    NUMPAD6 = auto()
    NUMPAD7 = auto()
    NUMPAD8 = auto()
    NUMPAD9 = auto()
    CANCEL = auto()
    CLEAR = auto()
    PAUSE = auto()
    KANA = auto()
    HANGUL = auto()
    JUNJA = auto()
    FINAL = auto()
    HANJA = auto()
    KANJI = auto()
    CONVERT = auto()
    SELECT = auto()
    PRINT = auto()
    EXECUTE = auto()
    SNAPSHOT = auto()
    INSERT = auto()
    HELP = auto()
    SLEEP = auto()
    SEPARATOR = auto()
    VOLUME_UP = auto()
    VOLUME_DOWN = auto()
    MUTE = auto()
    SCROLL = auto()
    NUM_LOCK = auto()
    RWIN = auto()
    APPS = auto()
    MULTIPLY = auto()
    ADD = auto()
    SUBTRACT = auto()
    DECIMAL = auto()
    DIVIDE = auto()
    EQUALS = auto()
    NUMPAD_ENTER = auto()
    RIGHT_SHIFT = auto()
    RIGHT_CONTROL = auto()
    RIGHT_ALT = auto()

    @property
    def deprecated(self) -> bool:
        """True for the old names that have been replaced by ``META``."""
        return self in _DEPRECATED


_DEPRECATED = frozenset({Key.COMMAND, Key.SUPER, Key.WINDOWS})


@dataclass(frozen=True)
class Layout:
    """A keyboard-layout dependent key, identified by the character it types."""

    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"layout key needs exactly one character, got {self.char!r}")


@dataclass(frozen=True)
class Raw:
    """A raw platform keycode (an unsigned 16-bit value)."""

    code: int

    def __post_init__(self) -> None:
        if not isinstance(self.code, int) or not 0 <= self.code <= 0xFFFF:
            raise ValueError(f"raw keycode must be in 0..0xFFFF, got {self.code!r}")


AnyKey = Union[Key, Layout, Raw]