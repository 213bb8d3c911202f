"""Runtime configuration model for the decode toolkit.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os

from core.constants import (
    CIPHER_BLOCK_SIZE_BYTES,
    CIPHER_IV,
    CIPHER_KEY,
    DEFAULT_LOG_LEVEL,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import BatchDecodeConfigError


@dataclass(frozen=True)
class CipherSettings:
    """Fixed symmetric cipher parameters of the legacy producer.

    Attributes:
        key: AES-128 key bytes.
        iv: CBC initialization vector bytes.
    """

    key: bytes = CIPHER_KEY
    iv: bytes = CIPHER_IV

    def __post_init__(self) -> None:
        if len(self.key) != CIPHER_BLOCK_SIZE_BYTES:
            raise BatchDecodeConfigError(
                f"Invalid cipher key length {len(self.key)}: "
                f"expected {CIPHER_BLOCK_SIZE_BYTES} bytes for AES-128."
            )
        if len(self.iv) != CIPHER_BLOCK_SIZE_BYTES:
            raise BatchDecodeConfigError(
                f"Invalid cipher IV length {len(self.iv)}: "
                f"expected {CIPHER_BLOCK_SIZE_BYTES} bytes for CBC mode."
            )


@dataclass(frozen=True)
class DecodeConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum structured log level.
        max_input_bytes: Optional upper bound on acquired input size.
        cipher: Process-wide cipher parameters.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    max_input_bytes: int | None = None
    cipher: CipherSettings = field(default_factory=CipherSettings)

    @classmethod
    def from_env(cls) -> "DecodeConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            BatchDecodeConfigError: If environment values are invalid.
        """
        log_level = _parse_log_level(os.getenv("BATCH_DECODE_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        max_input_bytes = _parse_max_input_bytes(os.getenv("BATCH_DECODE_MAX_INPUT_BYTES"))
        return cls(log_level=log_level, max_input_bytes=max_input_bytes)


def _parse_log_level(raw_value: str) -> str:
    """Parse and validate the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased level name.

    Raises:
        BatchDecodeConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise BatchDecodeConfigError(
            "Invalid BATCH_DECODE_LOG_LEVEL value: "
            f"expected one of {SUPPORTED_LOG_LEVELS}, got '{raw_value}'."
        )
    return level


def _parse_max_input_bytes(raw_value: str | None) -> int | None:
    """Parse the optional input size bound.

    Args:
        raw_value: Raw string from environment, or None when unset.

    Returns:
        Positive byte count, or None when unset.

    Raises:
        BatchDecodeConfigError: If value is not a positive integer.
    """
    if raw_value is None or not raw_value.strip():
        return None
    try:
        parsed = int(raw_value)
    except ValueError as error:
        raise BatchDecodeConfigError(
            "Invalid BATCH_DECODE_MAX_INPUT_BYTES value: "
            f"expected integer, got '{raw_value}'. "
            "Set BATCH_DECODE_MAX_INPUT_BYTES to a positive byte count."
        ) from error
    if parsed <= 0:
        raise BatchDecodeConfigError(
            f"Invalid BATCH_DECODE_MAX_INPUT_BYTES value {parsed}: must be positive."
        )
    return parsed
