"""Virtual-key codes, UTF-16 input units, key state and wheel data for the Windows backend."""

from __future__ import annotations

from typing import Callable, Optional

from remotekit.keys import AnyKey, Key, Layout, Raw

EVK_RETURN = 0x0D
EVK_TAB = 0x09
EVK_SPACE = 0x20
EVK_BACK = 0x08
EVK_ESCAPE = 0x1B
EVK_LWIN = 0x5B
EVK_SHIFT = 0x10
EVK_RSHIFT = 0xA1
EVK_RMENU = 0xA5
EVK_CAPITAL = 0x14
EVK_MENU = 0x12
EVK_LCONTROL = 0xA2
EVK_RCONTROL = 0xA3
EVK_HOME = 0x24
EVK_PRIOR = 0x21
EVK_NEXT = 0x22
EVK_END = 0x23
EVK_LEFT = 0x25
EVK_RIGHT = 0x27
EVK_UP = 0x26
EVK_DOWN = 0x28
EVK_DELETE = 0x2E
EVK_F1 = 0x70
EVK_F2 = 0x71
EVK_F3 = 0x72
EVK_F4 = 0x73
EVK_F5 = 0x74
EVK_F6 = 0x75
EVK_F7 = 0x76
EVK_F8 = 0x77
EVK_F9 = 0x78
EVK_F10 = 0x79
EVK_F11 = 0x7A
EVK_F12 = 0x7B
EVK_NUMPAD0 = 0x60
EVK_NUMPAD1 = 0x61
EVK_NUMPAD2 = 0x62
EVK_NUMPAD3 = 0x63
EVK_NUMPAD4 = 0x64
EVK_NUMPAD5 = 0x65
EVK_NUMPAD6 = 0x66
EVK_NUMPAD7 = 0x67
EVK_NUMPAD8 = 0x68
EVK_NUMPAD9 = 0x69
EVK_CANCEL = 0x03
EVK_CLEAR = 0x0C
EVK_PAUSE = 0x13
EVK_KANA = 0x15
EVK_HANGUL = 0x15
EVK_JUNJA = 0x17
EVK_FINAL = 0x18
EVK_HANJA = 0x19
EVK_KANJI = 0x19
EVK_CONVERT = 0x1C
EVK_SELECT = 0x29
EVK_PRINT = 0x2A
EVK_EXECUTE = 0x2B
EVK_SNAPSHOT = 0x2C
EVK_INSERT = 0x2D
EVK_HELP = 0x2F
EVK_SLEEP = 0x5F
EVK_SEPARATOR = 0x6C
EVK_VOLUME_MUTE = 0xAD
EVK_VOLUME_DOWN = 0xAE
EVK_VOLUME_UP = 0xAF
EVK_NUMLOCK = 0x90
EVK_SCROLL = 0x91
EVK_RWIN = 0x5C
EVK_APPS = 0x5D
EVK_ADD = 0x6B
EVK_MULTIPLY = 0x6A
EVK_SUBTRACT = 0x6D
EVK_DECIMAL = 0x6E
EVK_DIVIDE = 0x6F

WHEEL_DELTA = 120

_KEY_CODES = {
    Key.ALT: EVK_MENU,
    Key.BACKSPACE: EVK_BACK,
    Key.CAPS_LOCK: EVK_CAPITAL,
    Key.CONTROL: EVK_LCONTROL,
    Key.DELETE: EVK_DELETE,
    Key.DOWN_ARROW: EVK_DOWN,
    Key.END: EVK_END,
    Key.ESCAPE: EVK_ESCAPE,
    Key.F1: EVK_F1,
    Key.F10: EVK_F10,
    Key.F11: EVK_F11,
    Key.F12: EVK_F12,
    Key.F2: EVK_F2,
    Key.F3: EVK_F3,
    Key.F4: EVK_F4,
    Key.F5: EVK_F5,
    Key.F6: EVK_F6,
    Key.F7: EVK_F7,
    Key.F8: EVK_F8,
    Key.F9: EVK_F9,
    Key.HOME: EVK_HOME,
    Key.LEFT_ARROW: EVK_LEFT,
    Key.OPTION: EVK_MENU,
    Key.PAGE_DOWN: EVK_NEXT,
    Key.PAGE_UP: EVK_PRIOR,
    Key.RETURN: EVK_RETURN,
    Key.RIGHT_ARROW: EVK_RIGHT,
    Key.SHIFT: EVK_SHIFT,
    Key.SPACE: EVK_SPACE,
    Key.TAB: EVK_TAB,
    Key.UP_ARROW: EVK_UP,
    Key.NUMPAD0: EVK_NUMPAD0,
    Key.NUMPAD1: EVK_NUMPAD1,
    Key.NUMPAD2: EVK_NUMPAD2,
    Key.NUMPAD3: EVK_NUMPAD3,
    Key.NUMPAD4: EVK_NUMPAD4,
    Key.NUMPAD5: EVK_NUMPAD5,
    Key.NUMPAD6: EVK_NUMPAD6,
    Key.NUMPAD7: EVK_NUMPAD7,
    Key.NUMPAD8: EVK_NUMPAD8,
    Key.NUMPAD9: EVK_NUMPAD9,
    Key.CANCEL: EVK_CANCEL,
    Key.CLEAR: EVK_CLEAR,
    Key.PAUSE: EVK_PAUSE,
    Key.KANA: EVK_KANA,
    Key.HANGUL: EVK_HANGUL,
    Key.JUNJA: EVK_JUNJA,
    Key.FINAL: EVK_FINAL,
    Key.HANJA: EVK_HANJA,
    Key.KANJI: EVK_KANJI,
    Key.CONVERT: EVK_CONVERT,
    Key.SELECT: EVK_SELECT,
    Key.PRINT: EVK_PRINT,
    Key.EXECUTE: EVK_EXECUTE,
    Key.SNAPSHOT: EVK_SNAPSHOT,
    Key.INSERT: EVK_INSERT,
    Key.HELP: EVK_HELP,
    Key.SLEEP: EVK_SLEEP,
    Key.SEPARATOR: EVK_SEPARATOR,
    Key.MUTE: EVK_VOLUME_MUTE,
    Key.VOLUME_DOWN: EVK_VOLUME_DOWN,
    Key.VOLUME_UP: EVK_VOLUME_UP,
    Key.SCROLL: EVK_SCROLL,
    Key.NUM_LOCK: EVK_NUMLOCK,
    Key.RWIN: EVK_RWIN,
    Key.APPS: EVK_APPS,
    Key.ADD: EVK_ADD,
    Key.MULTIPLY: EVK_MULTIPLY,
    Key.DECIMAL: EVK_DECIMAL,
    Key.SUBTRACT: EVK_SUBTRACT,
    Key.DIVIDE: EVK_DIVIDE,
    Key.NUMPAD_ENTER: EVK_RETURN,
    Key.EQUALS: ord("="),
    Key.RIGHT_SHIFT: EVK_RSHIFT,
    Key.RIGHT_CONTROL: EVK_RCONTROL,
    Key.RIGHT_ALT: EVK_RMENU,
    Key.SUPER: EVK_LWIN,
    Key.COMMAND: EVK_LWIN,
    Key.WINDOWS: EVK_LWIN,
    Key.META: EVK_LWIN,
}

# Lock keys report their toggle state rather than whether they are held.
_TOGGLE_KEYS = frozenset({Key.CAPS_LOCK, Key.NUM_LOCK, Key.SCROLL})

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def virtual_key_code(
    key: AnyKey, layout_lookup: Optional[Callable[[str], int]] = None
) -> int:
    """The Windows virtual-key code for ``key``.

    Layout keys are resolved through ``layout_lookup``, which maps a character
    to the keyboard layout's combined keycode and shift state (as a signed or
    unsigned 16-bit value); the result is returned as an unsigned 16-bit value.
    """
    if isinstance(key, Raw):
        return key.code
    if isinstance(key, Layout):
        if layout_lookup is None:
            raise ValueError("a layout lookup is needed to resolve layout keys")
        return layout_lookup(key.char) & 0xFFFF
    if isinstance(key, Key):
        return _KEY_CODES[key]
    raise TypeError(f"not a key: {key!r}")


def utf16_units(text: str) -> list[tuple[int, ...]]:
    """The UTF-16 code units of each character of ``text``.

    Characters in the basic plane give one unit; others give a high and a low
    surrogate, which must be sent without an intervening key release.
    """
    result = []
    for ch in text:
        encoded = ch.encode("utf-16-le", "surrogatepass")
        result.append(
            tuple(int.from_bytes(encoded[i:i + 2], "little") for i in range(0, len(encoded), 2))
        )
    return result


def key_state_from_flags(key: AnyKey, state: int) -> bool:
    """Interpret a key-state word: the toggle bit for lock keys, the down bit otherwise."""
    if isinstance(key, Key) and key in _TOGGLE_KEYS:
        return state & 0x1 == 0x1
    return (state & 0xFFFF) & 0x8000 == 0x8000


def wheel_delta(length: int) -> int:
    """The 32-bit mouse-data word that scrolls the wheel by ``length`` notches."""
    value = length * WHEEL_DELTA
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"scroll length {length} is out of range")
    return value & 0xFFFFFFFF