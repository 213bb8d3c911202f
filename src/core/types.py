"""Shared typed models.

This module defines immutable data models used by ingest, transforms,
the strategy chain, and the reporter to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping

OutcomeStatus = Literal["success", "structural_failure", "transform_failure"]


@dataclass(frozen=True)
class RawInput:
    """Immutable byte blob acquired for one decode request.

    Attributes:
        data: Raw bytes exactly as acquired.
        origin: Acquisition source label (``base64``, ``hex`` or a path).
    """

    data: bytes
    origin: str


@dataclass(frozen=True)
class TransformStep:
    """One named reversing transform.

    Attributes:
        name: Short step identifier used in logs.
        apply: Callable mapping input bytes to output bytes; raises
            ``TransformError`` on failure.
    """

    name: str
    apply: Callable[[bytes], bytes]


@dataclass(frozen=True)
class DecodeStrategy:
    """Named ordered transform pipeline tried before record decoding.

    Attributes:
        name: Strategy identifier shown in the decode trace.
        steps: Transforms applied in order; empty means identity.
    """

    name: str
    steps: tuple[TransformStep, ...] = ()


@dataclass(frozen=True)
class StrategyOutcome:
    """Result of attempting one strategy.

    Attributes:
        strategy_name: Attempted strategy.
        status: Outcome classification.
        reason: Failure detail, empty on success.
    """

    strategy_name: str
    status: OutcomeStatus
    reason: str = ""

    @property
    def succeeded(self) -> bool:
        """Return whether this attempt produced a record."""
        return self.status == "success"


@dataclass(frozen=True)
class ChainResult:
    """Strategy chain output.

    Attributes:
        trace: Ordered outcomes, one per attempted strategy.
        record: Decoded record on success, else None.
        strategy_name: Winning strategy on success, else None.
        decoded_bytes: Post-transform bytes fed to the decoder on success.
    """

    trace: tuple[StrategyOutcome, ...]
    record: Any = None
    strategy_name: str | None = None
    decoded_bytes: bytes | None = None

    @property
    def succeeded(self) -> bool:
        """Return whether any strategy produced a record."""
        return self.strategy_name is not None


@dataclass(frozen=True)
class IntegrityVerdict:
    """Digest comparison between raw input and re-encoded record.

    Attributes:
        input_md5: Uppercase hex MD5 of the original raw input.
        result_md5: Uppercase hex MD5 of the re-serialized record.
        is_match: Case-insensitive digest equality.
    """

    input_md5: str
    result_md5: str
    is_match: bool


@dataclass(frozen=True)
class DecodedPayload:
    """Success payload carried in a tool response.

    Attributes:
        data: Generic structured value with empty fields removed.
        decompressed_hex: Lowercase hex of post-transform bytes.
        verdict: Integrity verdict for the decoded record.
    """

    data: Mapping[str, Any]
    decompressed_hex: str
    verdict: IntegrityVerdict


@dataclass(frozen=True)
class CallResult:
    """Transport-facing response envelope.

    Attributes:
        success: Whether a record was decoded.
        message: Human-readable summary including the decode trace.
        data: Decoded payload on success, else None.
    """

    success: bool
    message: str
    data: DecodedPayload | None = None

    @classmethod
    def ok(cls, message: str, data: DecodedPayload) -> "CallResult":
        """Build a success response."""
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str) -> "CallResult":
        """Build a failure response without payload."""
        return cls(success=False, message=message, data=None)


@dataclass(frozen=True)
class ToolkitInfo:
    """Descriptor a hosting transport advertises for this toolkit."""

    name: str
    version: str
    title: str
    instructions: str
    tool_names: tuple[str, ...]
