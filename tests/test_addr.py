from unittest import mock

import pytest

from remotekit.addr import demangle, get_version_from_url, mangle, to_socket_addr


def test_mangle_round_trip():
    addr = ("192.168.16.32", 21116)
    assert demangle(mangle(addr)) == addr


@pytest.mark.parametrize("micros", [0, 1, 0xFFFF, 0x10000, 0xFFFFFFFF, (1 << 32) + 5, 1_700_000_000_123_456])
def test_mangle_round_trip_at_fixed_times(micros):
    addr = ("192.168.16.32", 21116)
    with mock.patch("time.time_ns", return_value=micros * 1000):
        encoded = mangle(addr)
    assert demangle(encoded) == addr


@pytest.mark.parametrize(
    "addr",
    [("0.0.0.0", 0), ("255.255.255.255", 65535), ("10.0.0.1", 1), ("127.0.0.1", 8080)],
)
def test_mangle_round_trip_extremes(addr):
    with mock.patch("time.time_ns", return_value=123_456_789_000):
        assert demangle(mangle(addr)) == addr


def test_mangle_strips_trailing_zero_bytes():
    encoded = mangle(("192.168.16.32", 21116))
    assert 0 < len(encoded) <= 16
    assert encoded[-1] != 0


def test_mangle_hides_the_address():
    with mock.patch("time.time_ns", return_value=987_654_321_000):
        encoded = mangle(("192.168.16.32", 21116))
    assert bytes([192, 168, 16, 32]) not in encoded


def test_mangle_rejects_ipv6():
    with pytest.raises(ValueError):
        mangle(("::1", 80))


def test_mangle_rejects_bad_port():
    with pytest.raises(ValueError):
        mangle(("127.0.0.1", 70000))


def test_demangle_rejects_long_input():
    with pytest.raises(ValueError):
        demangle(bytes(17))


@pytest.mark.parametrize(
    "url, expected",
    [
        ("app-1.1.9.exe", "1.1.9"),
        ("app-1.1.9", "1.1.9"),
        ("app-1.2.10", "1.2.10"),
        ("app-1.2.3-x86_64.dmg", "x86_64"),
        ("v1.0-beta", "beta"),
        ("no_dash.txt", ""),
        ("app-1", ""),
        ("", ""),
    ],
)
def test_get_version_from_url(url, expected):
    assert get_version_from_url(url) == expected


def test_to_socket_addr_numeric():
    assert to_socket_addr("127.0.0.1:21116") == ("127.0.0.1", 21116)


@pytest.mark.parametrize("host", ["127.0.0.1", "127.0.0.1:port", "127.0.0.1:70000", "127.0.0.1:"])
def test_to_socket_addr_invalid(host):
    with pytest.raises(ValueError):
        to_socket_addr(host)