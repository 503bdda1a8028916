"""UDP sockets over asyncio that deliver whole datagrams with their sender."""

from __future__ import annotations

import asyncio
import socket
from typing import Optional, Tuple, Union

Address = Tuple[str, int]
Datagram = Tuple[bytes, Address]

_CLOSED = object()


class _Protocol(asyncio.DatagramProtocol):
    def __init__(self) -> None:
        self.queue: asyncio.Queue = asyncio.Queue()

    def datagram_received(self, data: bytes, addr) -> None:
        self.queue.put_nowait((data, addr))

    def error_received(self, exc: Exception) -> None:
        self.queue.put_nowait(exc)

    def connection_lost(self, exc: Optional[Exception]) -> None:
        self.queue.put_nowait(_CLOSED)


class FramedSocket:
    """A bound UDP socket; each received datagram comes with its sender's address."""

    def __init__(self, transport: asyncio.DatagramTransport, protocol: _Protocol) -> None:
        self._transport = transport
        self._protocol = protocol
        self._finished = False

    async def __aenter__(self) -> "FramedSocket":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()

    @property
    def local_addr(self):
        """The address the socket is bound to."""
        return self._transport.get_extra_info("sockname")

    async def send_raw(self, data: bytes, addr: Address) -> None:
        """Send ``data`` as one datagram to ``addr``."""
        self._transport.sendto(bytes(data), addr)

    async def next(self) -> Optional[Datagram]:
        """Receive the next ``(data, sender)``, or None once the socket is closed.

        Errors reported by the system for earlier sends are raised.
        """
        if self._finished:
            return None
        item = await self._protocol.queue.get()
        if item is _CLOSED:
            self._finished = True
            return None
        if isinstance(item, Exception):
            raise item
        return item

    async def next_timeout(self, ms: float) -> Optional[Datagram]:
        """Like :meth:`next`, but return None if nothing arrives within ``ms`` milliseconds."""
        try:
            return await asyncio.wait_for(self.next(), ms / 1000)
        except asyncio.TimeoutError:
            return None

    def close(self) -> None:
        """Close the socket."""
        self._transport.close()


async def bind_socket(addr: Address) -> FramedSocket:
    """Bind a UDP socket to ``addr``."""
    loop = asyncio.get_running_loop()
    transport, protocol = await loop.create_datagram_endpoint(_Protocol, local_addr=addr)
    return FramedSocket(transport, protocol)


def _reuse_socket(family: int, sockaddr) -> socket.socket:
    sock = socket.socket(family, socket.SOCK_DGRAM)
    try:
        if hasattr(socket, "SO_REUSEPORT"):
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(sockaddr)
        sock.setblocking(False)
    except BaseException:
        sock.close()
        raise
    return sock


async def bind_reuse(addr: Union[Address, Tuple[str, int]]) -> FramedSocket:
    """Bind a UDP socket to ``addr`` with address (and port) reuse enabled."""
    host, port = addr
    infos = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)
    if not infos:
        raise OSError("could not resolve to any address")
    family, _, _, _, sockaddr = infos[0]
    sock = _reuse_socket(family, sockaddr)
    loop = asyncio.get_running_loop()
    try:
        transport, protocol = await loop.create_datagram_endpoint(_Protocol, sock=sock)
    except BaseException:
        sock.close()
        raise
    return FramedSocket(transport, protocol)