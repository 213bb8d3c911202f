"""Gzip envelope transform.

This module reads exactly one complete gzip member eagerly. Header,
truncation, checksum, and trailing-data problems are reported as
``TransformError``.
"""

from __future__ import annotations

import gzip
import zlib

from core.errors import TransformError

_GZIP_WBITS = 16 + zlib.MAX_WBITS


def gunzip_bytes(data: bytes) -> bytes:
    """Decompress a single gzip member.

    Args:
        data: Bytes expected to start with a gzip header.

    Returns:
        Decompressed bytes.

    Raises:
        TransformError: If the stream is empty, malformed, truncated, or
            followed by extra bytes.
    """
    if not data:
        raise TransformError("Gzip decompress failed: input is empty.")
    decompressor = zlib.decompressobj(_GZIP_WBITS)
    try:
        decompressed = decompressor.decompress(data)
    except zlib.error as error:
        raise TransformError(f"Gzip decompress failed: {error}") from error
    if not decompressor.eof:
        raise TransformError("Gzip decompress failed: stream ended before the trailer.")
    if decompressor.unused_data:
        raise TransformError(
            f"Gzip decompress failed: {len(decompressor.unused_data)} bytes "
            "of trailing data after the gzip member."
        )
    return decompressed


def gzip_bytes(data: bytes) -> bytes:
    """Compress bytes into a gzip stream with a fixed header timestamp."""
    return gzip.compress(data, mtime=0)
