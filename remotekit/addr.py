"""Address helpers: NAT-safe address mangling, host resolution and version strings."""

from __future__ import annotations

import ipaddress
import re
import socket
import time
from typing import Tuple, Union

_U32 = 0xFFFFFFFF
_MANGLED_MAX = 16
_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1
_I32_PATTERN = re.compile(r"[+-]?[0-9]+")
_PORT_PATTERN = re.compile(r"\+?[0-9]+")

Address = Tuple[str, int]
HostLike = Union[str, ipaddress.IPv4Address]


def mangle(address: Tuple[HostLike, int]) -> bytes:
    """Encode an IPv4 ``(host, port)`` so that routers do not recognise the address.

    Some routers and firewalls rewrite any of their own addresses they find in
    a packet; mixing in the current time hides it. Raises ``ValueError`` for
    anything but an IPv4 address with a port in 0..65535.
    """
    host, port = address
    ip = ipaddress.ip_address(host)
    if ip.version != 4:
        raise ValueError("Only support ipv4")
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    tm = (time.time_ns() // 1000) & _U32
    ip_number = int.from_bytes(ip.packed, "little")
    value = ((ip_number + tm) << 49) | (tm << 17) | (port + (tm & 0xFFFF))
    return value.to_bytes(_MANGLED_MAX, "little").rstrip(b"\x00")


def demangle(data: bytes) -> Address:
    """Decode bytes produced by :func:`mangle` back into ``(host, port)``."""
    if len(data) > _MANGLED_MAX:
        raise ValueError(f"mangled address is at most {_MANGLED_MAX} bytes, got {len(data)}")
    number = int.from_bytes(bytes(data), "little")
    tm = (number >> 17) & _U32
    ip_number = ((number >> 49) - tm) & _U32
    port = ((number & 0xFFFFFF) - (tm & 0xFFFF)) & 0xFFFF
    return str(ipaddress.IPv4Address(ip_number.to_bytes(4, "little"))), port


def _is_i32(text: str) -> bool:
    return bool(_I32_PATTERN.fullmatch(text)) and _I32_MIN <= int(text) <= _I32_MAX


def get_version_from_url(url: str) -> str:
    """Extract the version from a download name such as ``app-1.2.3.exe``.

    The version follows the last ``-``; a trailing extension is dropped unless
    it is a number. Returns an empty string when there is no ``-`` or ``.``.
    """
    dash = url.rfind("-")
    dot = url.rfind(".")
    if dash < 0 or dot < 0:
        return ""
    after_dash = url[dash + 1:]
    if dash < dot and not _is_i32(url[dot + 1:]):
        return url[dash + 1:dot]
    return after_dash


def to_socket_addr(host: str) -> Address:
    """Resolve ``"host:port"`` to the first ``(address, port)`` it names.

    Raises ``ValueError`` when the port is missing or invalid and ``OSError``
    when the name cannot be resolved.
    """
    name, sep, port_text = host.rpartition(":")
    if not sep:
        raise ValueError("invalid socket address")
    if not _PORT_PATTERN.fullmatch(port_text) or int(port_text) > 0xFFFF:
        raise ValueError("invalid port value")
    if name.startswith("[") and name.endswith("]"):
        name = name[1:-1]
    infos = socket.getaddrinfo(name, int(port_text), type=socket.SOCK_STREAM)
    if not infos:
        raise OSError(f"Failed to solve {host}")
    sockaddr = infos[0][4]
    return sockaddr[0], sockaddr[1]