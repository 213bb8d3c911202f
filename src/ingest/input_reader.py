"""Raw input readers for decode requests.

This module loads raw bytes from encoded text or local files.
Failures raise ``InputAcquisitionError`` before any strategy runs.
"""

from __future__ import annotations

import base64
import binascii
from pathlib import Path

from core.errors import InputAcquisitionError
from core.types import RawInput


def read_base64_input(text: str, max_input_bytes: int | None = None) -> RawInput:
    """Decode standard base64 text into raw input.

    Args:
        text: Base64 payload with standard alphabet and padding.
        max_input_bytes: Optional upper bound on decoded size.

    Returns:
        Raw input tagged with ``base64`` origin.

    Raises:
        InputAcquisitionError: If the text is not valid base64.
    """
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as error:
        raise InputAcquisitionError(f"Input is not valid Base64: {error}") from error
    return _bounded(RawInput(data=data, origin="base64"), max_input_bytes)


def read_hex_input(text: str, max_input_bytes: int | None = None) -> RawInput:
    """Decode hexadecimal text into raw input.

    Args:
        text: Even-length hex string without separators.
        max_input_bytes: Optional upper bound on decoded size.

    Returns:
        Raw input tagged with ``hex`` origin.

    Raises:
        InputAcquisitionError: If the text is not valid hex.
    """
    try:
        data = binascii.unhexlify(text)
    except (binascii.Error, ValueError) as error:
        raise InputAcquisitionError(f"Input is not valid hex: {error}") from error
    return _bounded(RawInput(data=data, origin="hex"), max_input_bytes)


def read_file_input(path: str, max_input_bytes: int | None = None) -> RawInput:
    """Read a local file wholesale into raw input.

    Args:
        path: Local file path.
        max_input_bytes: Optional upper bound on file size.

    Returns:
        Raw input tagged with the file path as origin.

    Raises:
        InputAcquisitionError: If the path is empty, missing, or unreadable.
    """
    if not path.strip():
        raise InputAcquisitionError("File path is empty.")
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise InputAcquisitionError(f"File does not exist: {path}")
    try:
        data = file_path.read_bytes()
    except OSError as error:
        raise InputAcquisitionError(f"Failed to read file: {error}") from error
    return _bounded(RawInput(data=data, origin=str(file_path)), max_input_bytes)


def _bounded(raw_input: RawInput, max_input_bytes: int | None) -> RawInput:
    """Reject inputs above the configured size bound."""
    if max_input_bytes is not None and len(raw_input.data) > max_input_bytes:
        raise InputAcquisitionError(
            f"Input from {raw_input.origin} is {len(raw_input.data)} bytes, "
            f"above the configured limit of {max_input_bytes} bytes."
        )
    return raw_input
