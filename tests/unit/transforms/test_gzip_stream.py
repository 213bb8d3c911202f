"""Unit tests for the gzip transform."""

from __future__ import annotations

import pytest

from core.errors import TransformError
from transforms.gzip_stream import gunzip_bytes, gzip_bytes


def test_gunzip_restores_original_bytes() -> None:
    """Decompression should reverse producer compression exactly."""
    payload = bytes(range(256)) * 8

    assert gunzip_bytes(gzip_bytes(payload)) == payload


def test_gunzip_raises_for_missing_header() -> None:
    """Bytes without gzip magic should fail as a transform error."""
    with pytest.raises(TransformError):
        gunzip_bytes(b"\x0a\x03abc")


def test_gunzip_raises_for_truncated_stream() -> None:
    """A stream cut before its trailer should fail."""
    compressed = gzip_bytes(b"event payload " * 20)

    with pytest.raises(TransformError):
        gunzip_bytes(compressed[:-6])


def test_gunzip_raises_for_checksum_mismatch() -> None:
    """A corrupted CRC trailer should fail."""
    compressed = bytearray(gzip_bytes(b"event payload"))
    compressed[-8] ^= 0xFF

    with pytest.raises(TransformError):
        gunzip_bytes(bytes(compressed))


def test_gunzip_raises_for_empty_input() -> None:
    """Empty input has no gzip header."""
    with pytest.raises(TransformError):
        gunzip_bytes(b"")


def test_gunzip_raises_for_trailing_zero_bytes() -> None:
    """Padding after the gzip trailer should not be silently ignored."""
    with pytest.raises(TransformError, match="trailing data"):
        gunzip_bytes(gzip_bytes(b"abc") + b"\x00" * 4)


def test_gunzip_raises_for_concatenated_members() -> None:
    """Only one gzip member is read; a second member is trailing data."""
    with pytest.raises(TransformError, match="trailing data"):
        gunzip_bytes(gzip_bytes(b"abc") + gzip_bytes(b"def"))
