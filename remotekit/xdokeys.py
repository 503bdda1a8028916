"""Key names, button numbers and modifier masks used by the X11 ``xdo`` backend."""

from __future__ import annotations

from remotekit.keys import AnyKey, Key, Layout, MouseButton, Raw

_BUTTON_CODES = {
    MouseButton.LEFT: 1,
    MouseButton.MIDDLE: 2,
    MouseButton.RIGHT: 3,
    MouseButton.SCROLL_UP: 4,
    MouseButton.SCROLL_DOWN: 5,
    MouseButton.SCROLL_LEFT: 6,
    MouseButton.SCROLL_RIGHT: 7,
}

_KEY_NAMES = {
    Key.ALT: "Alt",
    Key.BACKSPACE: "BackSpace",
    Key.CAPS_LOCK: "Caps_Lock",
    Key.CONTROL: "Control",
    Key.DELETE: "Delete",
    Key.DOWN_ARROW: "Down",
    Key.END: "End",
    Key.ESCAPE: "Escape",
    Key.F1: "F1",
    Key.F10: "F10",
    Key.F11: "F11",
    Key.F12: "F12",
    Key.F2: "F2",
    Key.F3: "F3",
    Key.F4: "F4",
    Key.F5: "F5",
    Key.F6: "F6",
    Key.F7: "F7",
    Key.F8: "F8",
    Key.F9: "F9",
    Key.HOME: "Home",
    Key.LEFT_ARROW: "Left",
    Key.OPTION: "Option",
    Key.PAGE_DOWN: "Page_Down",
    Key.PAGE_UP: "Page_Up",
    Key.RETURN: "Return",
    Key.RIGHT_ARROW: "Right",
    Key.SHIFT: "Shift",
    Key.SPACE: "space",
    Key.TAB: "Tab",
    Key.UP_ARROW: "Up",
    # Numpad digits are sent as the plain characters they type.
    Key.NUMPAD0: "U30",
    Key.NUMPAD1: "U31",
    Key.NUMPAD2: "U32",
    Key.NUMPAD3: "U33",
    Key.NUMPAD4: "U34",
    Key.NUMPAD5: "U35",
    Key.NUMPAD6: "U36",
    Key.NUMPAD7: "U37",
    Key.NUMPAD8: "U38",
    Key.NUMPAD9: "U39",
    Key.DECIMAL: "U2E",
    Key.CANCEL: "Cancel",
    Key.CLEAR: "Clear",
    Key.PAUSE: "Pause",
    Key.KANA: "Kana",
    Key.HANGUL: "Hangul",
    Key.JUNJA: "",
    Key.FINAL: "",
    Key.HANJA: "Hanja",
    Key.KANJI: "Kanji",
    Key.CONVERT: "",
    Key.SELECT: "Select",
    Key.PRINT: "Print",
    Key.EXECUTE: "Execute",
    Key.SNAPSHOT: "3270_PrintScreen",
    Key.INSERT: "Insert",
    Key.HELP: "Help",
    Key.SLEEP: "",
    Key.SEPARATOR: "KP_Separator",
    Key.VOLUME_UP: "",
    Key.VOLUME_DOWN: "",
    Key.MUTE: "",
    Key.SCROLL: "Scroll_Lock",
    Key.NUM_LOCK: "Num_Lock",
    Key.RWIN: "Super_R",
    Key.APPS: "Menu",
    Key.MULTIPLY: "KP_Multiply",
    Key.ADD: "KP_Add",
    Key.SUBTRACT: "KP_Subtract",
    Key.DIVIDE: "KP_Divide",
    Key.EQUALS: "KP_Equal",
    Key.NUMPAD_ENTER: "KP_Enter",
    Key.RIGHT_SHIFT: "Shift_R",
    Key.RIGHT_CONTROL: "Control_R",
    Key.RIGHT_ALT: "Alt_R",
    Key.COMMAND: "Super",
    Key.SUPER: "Super",
    Key.WINDOWS: "Super",
    Key.META: "Super",
}

_MOD_SHIFT = 1 << 0
_MOD_LOCK = 1 << 1
_MOD_CONTROL = 1 << 2
_MOD_ALT = 1 << 3
_MOD_NUMLOCK = 1 << 4
_MOD_META = 1 << 6

_STATE_BITS = {
    Key.SHIFT: _MOD_SHIFT,
    Key.CAPS_LOCK: _MOD_LOCK,
    Key.CONTROL: _MOD_CONTROL,
    Key.ALT: _MOD_ALT,
    Key.NUM_LOCK: _MOD_NUMLOCK,
    Key.META: _MOD_META,
}


def mouse_button_code(button: MouseButton) -> int:
    """The X11 button number for a mouse button."""
    return _BUTTON_CODES[button]


def key_sequence_name(key: AnyKey) -> str:
    """The key-sequence name xdo understands for ``key``.

    Layout keys become ``U`` followed by the upper-case hex code point, raw
    keycodes become their decimal number, and named keys without an X11
    counterpart become the empty string.
    """
    if isinstance(key, Layout):
        return f"U{ord(key.char):X}"
    if isinstance(key, Raw):
        return str(key.code)
    if isinstance(key, Key):
        return _KEY_NAMES.get(key, "")
    raise TypeError(f"not a key: {key!r}")


def key_state_from_mask(key: AnyKey, mask: int) -> bool:
    """Whether ``key`` is active in an X11 modifier ``mask``.

    Only modifier and lock keys are tracked; every other key reports False.
    """
    bit = _STATE_BITS.get(key) if isinstance(key, Key) else None
    return bit is not None and mask & bit != 0


def scroll_clicks(length: int, horizontal: bool) -> list[MouseButton]:
    """The button clicks that scroll by ``length`` lines.

    Negative lengths scroll left (or up), others right (or down); one click
    per line.
    """
    if horizontal:
        button = MouseButton.SCROLL_LEFT if length < 0 else MouseButton.SCROLL_RIGHT
    else:
        button = MouseButton.SCROLL_UP if length < 0 else MouseButton.SCROLL_DOWN
    return [button] * abs(length)