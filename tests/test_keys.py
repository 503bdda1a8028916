import pytest

from remotekit.keys import Key, Layout, MouseButton, Raw


def test_layout_holds_its_character():
    assert Layout("a").char == "a"


@pytest.mark.parametrize("bad", ["", "ab", 5])
def test_layout_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        Layout(bad)


def test_layout_accepts_non_ascii_character():
    assert Layout("❤").char == "❤"


def test_layout_equality_and_hashing():
    assert Layout("a") == Layout("a")
    assert Layout("a") != Layout("b")
    assert len({Layout("a"), Layout("a"), Layout("b")}) == 2


def test_raw_holds_its_code():
    assert Raw(0x38).code == 0x38


@pytest.mark.parametrize("bad", [-1, 0x10000, "1"])
def test_raw_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        Raw(bad)


def test_raw_bounds_accepted():
    assert Raw(0).code == 0
    assert Raw(0xFFFF).code == 0xFFFF


def test_raw_and_layout_are_immutable():
    key = Raw(1)
    with pytest.raises(AttributeError):
        key.code = 2
    assert key.code == 1
    layout = Layout("a")
    with pytest.raises(AttributeError):
        layout.char = "b"
    assert layout.char == "a"


def test_deprecated_keys():
    assert Key(Key.COMMAND.value).deprecated is True
    assert Key(Key.SUPER.value).deprecated is True
    assert Key(Key.WINDOWS.value).deprecated is True
    assert Key(Key.META.value).deprecated is False
    assert Key(Key.CONTROL.value).deprecated is False


def test_key_members_are_distinct():
    assert all(Key(member.value) is member for member in Key)


def test_mouse_buttons_listed():
    names = [MouseButton(button.value).name for button in MouseButton]
    assert names == [
        "LEFT",
        "MIDDLE",
        "RIGHT",
        "SCROLL_UP",
        "SCROLL_DOWN",
        "SCROLL_LEFT",
        "SCROLL_RIGHT",
    ]


def test_named_key_differs_from_layout_key():
    assert len({Key.SPACE, Layout(" ")}) == 2