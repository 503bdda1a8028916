"""Length-prefixed framing of byte packets.

Each packet is preceded by a little-endian header of one to four bytes. The
two lowest bits of the first byte give the header length minus one; the
remaining bits hold the packet length.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

_MAX_ONE_BYTE = 0x3F
_MAX_TWO_BYTES = 0x3FFF
_MAX_THREE_BYTES = 0x3FFFFF
_MAX_FOUR_BYTES = 0x3FFFFFFF

BytesLike = Union[bytes, bytearray, memoryview]


class CodecError(ValueError):
    """Raised for packets that are too big to encode or to accept."""


class BytesCodec:
    """Encoder and incremental decoder for length-prefixed packets.

    In raw mode no headers are written or expected: encoding passes data
    through and decoding returns whatever has been received.
    """

    def __init__(self) -> None:
        self.raw = False
        self.max_packet_length = sys.maxsize
        self._pending: Optional[int] = None

    def set_raw(self) -> None:
        """Switch to raw mode, without framing."""
        self.raw = True

    def set_max_packet_length(self, n: int) -> None:
        """Reject incoming packets longer than ``n`` bytes."""
        self.max_packet_length = n

    def _decode_head(self, buffer: bytearray) -> Optional[int]:
        if not buffer:
            return None
        head_len = (buffer[0] & 0x3) + 1
        if len(buffer) < head_len:
            return None
        n = int.from_bytes(buffer[:head_len], "little") >> 2
        if n > self.max_packet_length:
            raise CodecError("Too big packet")
        del buffer[:head_len]
        return n

    def decode(self, buffer: bytearray) -> Optional[bytes]:
        """Take one complete packet from the front of ``buffer``.

        ``buffer`` is consumed in place. Returns None if it does not yet hold
        a whole packet; the header already read is remembered for the next
        call. Raises :class:`CodecError` if the announced length exceeds the
        maximum packet length.
        """
        if self.raw:
            if not buffer:
                return None
            data = bytes(buffer)
            buffer.clear()
            return data

        n = self._pending
        if n is None:
            n = self._decode_head(buffer)
            if n is None:
                return None
            self._pending = n

        if len(buffer) < n:
            return None
        data = bytes(buffer[:n])
        del buffer[:n]
        self._pending = None
        return data

    def encode(self, data: BytesLike) -> bytes:
        """Return ``data`` framed with its length header.

        Raises :class:`CodecError` if ``data`` is longer than 0x3FFFFFFF bytes.
        """
        size = len(data)
        if self.raw:
            return bytes(data)
        if size <= _MAX_ONE_BYTE:
            header = (size << 2).to_bytes(1, "little")
        elif size <= _MAX_TWO_BYTES:
            header = ((size << 2) | 0x1).to_bytes(2, "little")
        elif size <= _MAX_THREE_BYTES:
            header = ((size << 2) | 0x2).to_bytes(3, "little")
        elif size <= _MAX_FOUR_BYTES:
            header = ((size << 2) | 0x3).to_bytes(4, "little")
        else:
            raise CodecError("Overflow")
        return header + bytes(data)