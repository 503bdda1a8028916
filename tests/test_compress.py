import pytest

from remotekit.compress import compress, decompress

ZSTD_MAGIC = b"\x28\xb5\x2f\xfd"


@pytest.mark.parametrize("level", [0, 1, 3, 19])
def test_round_trip(level):
    data = b"the quick brown fox jumps over the lazy dog " * 200
    packed = compress(data, level)
    assert decompress(packed) == data


def test_output_is_zstd_frame():
    assert compress(b"hello hello hello", 3).startswith(ZSTD_MAGIC)


def test_repetitive_data_shrinks():
    data = b"a" * 100_000
    packed = compress(data, 3)
    assert len(packed) < len(data)


def test_round_trip_binary():
    data = bytes(range(256)) * 50
    assert decompress(compress(data, 0)) == data


def test_decompress_garbage_gives_empty():
    assert decompress(b"not a zstd frame at all") == b""


def test_decompress_empty_input_gives_empty():
    assert decompress(b"") == b""


def test_decompress_output_above_limit_gives_empty():
    data = bytes(2 * 1024 * 1024)
    packed = compress(data, 3)
    assert 30 * len(packed) < 1024 * 1024
    assert decompress(packed) == b""


def test_decompress_output_at_minimum_limit():
    data = bytes(1024 * 1024)
    assert decompress(compress(data, 3)) == data


def test_accepts_bytearray():
    data = bytearray(b"xyz" * 1000)
    assert decompress(bytearray(compress(data, 1))) == bytes(data)