"""Zstandard compression of transfer blocks.

Failures are logged and reported as empty output, never raised.
"""

from __future__ import annotations

import logging
import threading

import zstandard

_log = logging.getLogger(__name__)

_MAX_OUTPUT = 1024 * 1024 * 64
_MIN_OUTPUT = 1024 * 1024

_local = threading.local()


def _compressor(level: int) -> zstandard.ZstdCompressor:
    cache = getattr(_local, "compressors", None)
    if cache is None:
        cache = _local.compressors = {}
    compressor = cache.get(level)
    if compressor is None:
        compressor = cache[level] = zstandard.ZstdCompressor(level=level)
    return compressor


def _decompressor() -> zstandard.ZstdDecompressor:
    decompressor = getattr(_local, "decompressor", None)
    if decompressor is None:
        decompressor = _local.decompressor = zstandard.ZstdDecompressor()
    return decompressor


def compress(data: bytes, level: int) -> bytes:
    """Compress ``data`` into a zstd frame; level 0 selects the default level.

    Returns an empty result if compression fails.
    """
    try:
        return _compressor(level).compress(bytes(data))
    except (zstandard.ZstdError, ValueError) as err:
        _log.debug("Failed to compress: %s", err)
        return b""


def decompress(data: bytes) -> bytes:
    """Decompress a zstd frame.

    The output may be at most 30 times the input size, but never less than
    1 MiB nor more than 64 MiB is allowed. Returns an empty result for
    invalid input or output beyond that limit.
    """
    data = bytes(data)
    limit = min(max(30 * len(data), _MIN_OUTPUT), _MAX_OUTPUT)
    try:
        content_size = zstandard.frame_content_size(data)
        if content_size > limit:
            raise zstandard.ZstdError(
                f"content size {content_size} exceeds limit {limit}"
            )
        result = _decompressor().decompress(data, max_output_size=limit)
    except (zstandard.ZstdError, ValueError) as err:
        _log.debug("Failed to decompress: %s", err)
        return b""
    if len(result) > limit:
        _log.debug("Failed to decompress: output exceeds limit %d", limit)
        return b""
    return result