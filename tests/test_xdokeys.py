import pytest

from remotekit.keys import Key, Layout, MouseButton, Raw
from remotekit.xdokeys import (
    key_sequence_name,
    key_state_from_mask,
    mouse_button_code,
    scroll_clicks,
)


@pytest.mark.parametrize(
    "button, code",
    [
        (MouseButton.LEFT, 1),
        (MouseButton.MIDDLE, 2),
        (MouseButton.RIGHT, 3),
        (MouseButton.SCROLL_UP, 4),
        (MouseButton.SCROLL_DOWN, 5),
        (MouseButton.SCROLL_LEFT, 6),
        (MouseButton.SCROLL_RIGHT, 7),
    ],
)
def test_mouse_button_code(button, code):
    assert mouse_button_code(button) == code


def test_mouse_button_codes_are_distinct():
    codes = {mouse_button_code(b) for b in MouseButton}
    assert len(codes) == len(MouseButton)


@pytest.mark.parametrize(
    "key, name",
    [
        (Key.ALT, "Alt"),
        (Key.BACKSPACE, "BackSpace"),
        (Key.CAPS_LOCK, "Caps_Lock"),
        (Key.SPACE, "space"),
        (Key.PAGE_DOWN, "Page_Down"),
        (Key.NUMPAD0, "U30"),
        (Key.DECIMAL, "U2E"),
        (Key.SNAPSHOT, "3270_PrintScreen"),
        (Key.RWIN, "Super_R"),
        (Key.NUMPAD_ENTER, "KP_Enter"),
        (Key.RIGHT_ALT, "Alt_R"),
    ],
)
def test_named_keys(key, name):
    assert key_sequence_name(key) == name


@pytest.mark.parametrize("key", [Key.COMMAND, Key.SUPER, Key.WINDOWS, Key.META])
def test_meta_aliases_map_to_super(key):
    assert key_sequence_name(key) == "Super"


@pytest.mark.parametrize(
    "key", [Key.JUNJA, Key.FINAL, Key.CONVERT, Key.SLEEP, Key.VOLUME_UP, Key.MUTE]
)
def test_unmapped_keys_are_empty(key):
    assert key_sequence_name(key) == ""


def test_layout_key_matches_numpad_digit():
    assert key_sequence_name(Layout("0")) == key_sequence_name(Key.NUMPAD0)
    assert key_sequence_name(Layout(".")) == key_sequence_name(Key.DECIMAL)


@pytest.mark.parametrize("char", ["a", "Z", "{", "\u2764"])
def test_layout_key_encodes_code_point(char):
    name = key_sequence_name(Layout(char))
    assert name.startswith("U")
    assert int(name[1:], 16) == ord(char)
    assert name[1:] == name[1:].upper()


@pytest.mark.parametrize("code", [0, 0x38, 0xFFFF])
def test_raw_key_is_decimal(code):
    name = key_sequence_name(Raw(code))
    assert name.isdigit()
    assert int(name) == code


def test_non_key_rejected():
    with pytest.raises(TypeError):
        key_sequence_name("a")


@pytest.mark.parametrize(
    "key, bit",
    [
        (Key.SHIFT, 1 << 0),
        (Key.CAPS_LOCK, 1 << 1),
        (Key.CONTROL, 1 << 2),
        (Key.ALT, 1 << 3),
        (Key.NUM_LOCK, 1 << 4),
        (Key.META, 1 << 6),
    ],
)
def test_key_state_bits(key, bit):
    assert key_state_from_mask(key, bit) is True
    assert key_state_from_mask(key, 0) is False
    assert key_state_from_mask(key, 0xFFFF & ~bit) is False


def test_key_state_untracked_keys():
    assert key_state_from_mask(Key.TAB, 0xFFFF) is False
    assert key_state_from_mask(Layout("a"), 0xFFFF) is False
    assert key_state_from_mask(Key.SUPER, 1 << 6) is False


def test_scroll_clicks_directions():
    assert scroll_clicks(2, horizontal=True) == [MouseButton.SCROLL_RIGHT] * 2
    assert scroll_clicks(-2, horizontal=True) == [MouseButton.SCROLL_LEFT] * 2
    assert scroll_clicks(3, horizontal=False) == [MouseButton.SCROLL_DOWN] * 3
    assert scroll_clicks(-1, horizontal=False) == [MouseButton.SCROLL_UP]


@pytest.mark.parametrize("horizontal", [True, False])
def test_scroll_zero_is_empty(horizontal):
    assert scroll_clicks(0, horizontal) == []


@pytest.mark.parametrize("length", [-7, -1, 1, 5])
def test_scroll_count_is_absolute(length):
    assert len(scroll_clicks(length, True)) == abs(length)
    assert len(scroll_clicks(length, False)) == abs(length)