"""Decode toolkit exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class BatchDecodeError(Exception):
    """Base exception for all decode toolkit failures."""


class BatchDecodeConfigError(BatchDecodeError):
    """Raised for invalid runtime configuration."""


class InputAcquisitionError(BatchDecodeError):
    """Raised when raw input bytes cannot be obtained."""


class TransformError(BatchDecodeError):
    """Raised when a reversing transform (decrypt, decompress) fails."""


class RecordDecodeError(BatchDecodeError):
    """Raised when bytes do not parse as a structured record."""


class ResponseSerializationError(BatchDecodeError):
    """Raised when a decoded record cannot be rendered into a response."""
