import pytest

from remotekit import mackeys
from remotekit.keys import Key, Layout, Raw
from remotekit.mackeys import (
    ClickCounter,
    layout_key_code,
    scroll_steps,
    virtual_key_code,
)


def test_return_key_code():
    assert virtual_key_code(Key.RETURN) == 0x24


def test_meta_aliases_share_command_code():
    codes = {virtual_key_code(k) for k in (Key.META, Key.SUPER, Key.COMMAND, Key.WINDOWS)}
    assert codes == {0x37}


def test_volume_keys_are_crossed():
    assert virtual_key_code(Key.VOLUME_UP) == mackeys.KVK_VOLUME_DOWN
    assert virtual_key_code(Key.VOLUME_DOWN) == mackeys.KVK_VOLUME_UP


def test_num_lock_and_clear_share_code():
    assert virtual_key_code(Key.NUM_LOCK) == virtual_key_code(Key.CLEAR) == 0x47


@pytest.mark.parametrize("key", [Key.PAUSE, Key.CANCEL, Key.KANA, Key.SLEEP, Key.APPS])
def test_unmapped_keys_are_zero(key):
    assert virtual_key_code(key) == 0


def test_raw_key_passes_through():
    assert virtual_key_code(Raw(0x38)) == 0x38


def test_layout_key_uses_layout_table():
    assert virtual_key_code(Layout("a")) == 0x00
    assert virtual_key_code(Layout("v")) == layout_key_code("v") == 0x09


def test_layout_unknown_char_is_zero():
    assert layout_key_code("A") == 0
    assert layout_key_code("é") == 0


def test_layout_codes_are_distinct():
    chars = "abcdefghijklmnopqrstuvwxyz0123456789-=[]\\;',./`"
    codes = [layout_key_code(c) for c in chars]
    assert len(set(codes)) == len(chars)


def test_non_key_rejected():
    with pytest.raises(TypeError):
        virtual_key_code("a")


def test_scroll_steps_direction_and_count():
    assert scroll_steps(3) == [-1, -1, -1]
    assert scroll_steps(-2) == [1, 1]
    assert scroll_steps(0) == []


def test_click_counter_counts_fast_clicks():
    counter = ClickCounter()
    assert counter.register(10.0) == 1
    assert counter.register(10.2) == 2
    assert counter.register(10.4) == 3


def test_click_counter_boundary_is_inclusive():
    counter = ClickCounter()
    counter.register(10.0)
    assert counter.register(10.5) == 2


def test_click_counter_resets_after_interval():
    counter = ClickCounter()
    counter.register(10.0)
    counter.register(10.1)
    assert counter.register(12.0) == 1
    assert counter.count == 1


def test_click_counter_custom_interval():
    counter = ClickCounter(interval_ms=100)
    counter.register(1.0)
    assert counter.register(1.3) == 1
    assert counter.register(1.35) == 2


def test_click_counter_defaults_to_monotonic_clock():
    counter = ClickCounter()
    counter.register()
    assert counter.register() == 2
    assert counter.last is not None