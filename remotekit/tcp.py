"""Length-framed TCP streams over asyncio, optionally sealed with a secret key."""

from __future__ import annotations

import asyncio
import socket
from typing import Awaitable, Callable, Optional, Tuple

import nacl.exceptions
import nacl.secret

from remotekit.bytes_codec import BytesCodec

DEFAULT_BACKLOG = 128
_READ_SIZE = 64 * 1024

Address = Tuple[str, int]


def _nonce(seqnum: int) -> bytes:
    return seqnum.to_bytes(8, "little") + bytes(nacl.secret.SecretBox.NONCE_SIZE - 8)


def _new_socket(family: int, addr, reuse: bool) -> socket.socket:
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        if reuse:
            if hasattr(socket, "SO_REUSEPORT"):
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(addr)
    except BaseException:
        sock.close()
        raise
    return sock


async def _resolve(addr: Address, family: int = 0) -> list:
    host, port = addr
    loop = asyncio.get_running_loop()
    infos = await loop.getaddrinfo(host, port, family=family, type=socket.SOCK_STREAM)
    return [(info[0], info[4]) for info in infos]


class FramedStream:
    """A TCP connection exchanging length-prefixed packets.

    Once a key is set, every packet is sealed with it; the nonce is a
    per-direction sequence number starting at 1.
    """

    def __init__(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        self._reader = reader
        self._writer = writer
        self.codec = BytesCodec()
        self._buffer = bytearray()
        self._eof = False
        self._box: Optional[nacl.secret.SecretBox] = None
        self._send_seq = 0
        self._recv_seq = 0

    async def __aenter__(self) -> "FramedStream":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    @property
    def local_addr(self):
        """The local socket address."""
        return self._writer.get_extra_info("sockname")

    @property
    def peer_addr(self):
        """The remote socket address."""
        return self._writer.get_extra_info("peername")

    def set_raw(self) -> None:
        """Stop framing and encrypting; bytes pass through unchanged."""
        self.codec.set_raw()
        self._box = None

    def is_secured(self) -> bool:
        """Whether packets are encrypted."""
        return self._box is not None

    def set_key(self, key: bytes) -> None:
        """Encrypt all further packets with a 32-byte secret key."""
        self._box = nacl.secret.SecretBox(bytes(key))
        self._send_seq = 0
        self._recv_seq = 0

    async def send_raw(self, data: bytes) -> None:
        """Send one packet, encrypted if a key is set."""
        payload = bytes(data)
        if self._box is not None:
            self._send_seq += 1
            payload = self._box.encrypt(payload, _nonce(self._send_seq)).ciphertext
        await self._write(payload)

    async def send_bytes(self, data: bytes) -> None:
        """Send one packet without encryption."""
        await self._write(bytes(data))

    async def _write(self, payload: bytes) -> None:
        self._writer.write(self.codec.encode(payload))
        await self._writer.drain()

    async def _next_frame(self) -> Optional[bytes]:
        while True:
            frame = self.codec.decode(self._buffer)
            if frame is not None:
                return frame
            if self._eof:
                if self._buffer:
                    self._buffer.clear()
                    raise OSError("bytes remaining on stream")
                return None
            chunk = await self._reader.read(_READ_SIZE)
            if chunk:
                self._buffer.extend(chunk)
            else:
                self._eof = True

    async def next(self) -> Optional[bytes]:
        """Receive the next packet, or None once the peer has closed.

        Raises ``OSError`` if a packet cannot be decrypted or the stream ends
        inside a packet.
        """
        frame = await self._next_frame()
        if frame is None or self._box is None:
            return frame
        self._recv_seq += 1
        try:
            return self._box.decrypt(frame, _nonce(self._recv_seq))
        except (nacl.exceptions.CryptoError, ValueError):
            raise OSError("decryption error") from None

    async def next_timeout(self, ms: float) -> Optional[bytes]:
        """Like :meth:`next`, but return None if nothing arrives within ``ms`` milliseconds."""
        try:
            return await asyncio.wait_for(self.next(), ms / 1000)
        except asyncio.TimeoutError:
            return None

    async def close(self) -> None:
        """Close the connection."""
        self._writer.close()
        try:
            await self._writer.wait_closed()
        except OSError:
            pass


async def open_stream(remote_addr: Address, local_addr: Address, ms_timeout: float) -> FramedStream:
    """Connect from ``local_addr`` (bound with address reuse) to ``remote_addr``.

    Raises ``TimeoutError`` if the connection is not made within
    ``ms_timeout`` milliseconds.
    """
    loop = asyncio.get_running_loop()
    local = await _resolve(local_addr)
    if not local:
        raise OSError("could not resolve to any address")
    family, local_sockaddr = local[0]
    remote = await _resolve(remote_addr, family)
    if not remote:
        raise OSError("could not resolve to any address")
    remote_sockaddr = remote[0][1]

    sock = _new_socket(family, local_sockaddr, True)
    sock.setblocking(False)
    try:
        await asyncio.wait_for(loop.sock_connect(sock, remote_sockaddr), ms_timeout / 1000)
    except asyncio.TimeoutError as exc:
        sock.close()
        raise TimeoutError(f"connecting to {remote_addr} timed out") from exc
    except BaseException:
        sock.close()
        raise
    reader, writer = await asyncio.open_connection(sock=sock)
    return FramedStream(reader, writer)


async def new_listener(
    addr: Address,
    reuse: bool,
    handler: Callable[[FramedStream], Awaitable[None]],
) -> asyncio.AbstractServer:
    """Listen on ``addr`` and call ``handler`` with a stream for each connection."""

    async def on_connect(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        await handler(FramedStream(reader, writer))

    if not reuse:
        host, port = addr
        return await asyncio.start_server(on_connect, host, port)

    resolved = await _resolve(addr)
    if not resolved:
        raise OSError("could not resolve to any address")
    family, sockaddr = resolved[0]
    sock = _new_socket(family, sockaddr, True)
    sock.setblocking(False)
    try:
        return await asyncio.start_server(on_connect, sock=sock, backlog=DEFAULT_BACKLOG)
    except BaseException:
        sock.close()
        raise