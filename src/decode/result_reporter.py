"""Tool response assembly.

This module renders the typed decode trace into the response message
and converts decoded records into JSON-safe payloads.
"""

from __future__ import annotations

from typing import Any, Iterable

from core.constants import TRACE_SEPARATOR
from core.types import (
    CallResult,
    ChainResult,
    DecodedPayload,
    IntegrityVerdict,
    StrategyOutcome,
)
from schema.record_schema import RecordSchema

_FAILURE_LABELS = {
    "transform_failure": "transform error",
    "structural_failure": "record parse failed",
}


def build_call_result(
    chain_result: ChainResult,
    schema: RecordSchema,
    verdict: IntegrityVerdict | None,
) -> CallResult:
    """Assemble the response for a finished strategy chain.

    Args:
        chain_result: Output of the strategy chain.
        schema: Schema used to render the record.
        verdict: Integrity verdict, required when the chain succeeded.

    Returns:
        Success response with payload, or failure response with trace only.

    Raises:
        ResponseSerializationError: If the record cannot be rendered.
    """
    trace_text = render_trace(chain_result.trace)
    if not chain_result.succeeded or verdict is None:
        return CallResult.fail(f"Decode failed, attempted strategies: {trace_text}")
    payload = DecodedPayload(
        data=strip_empty_values(schema.to_value(chain_result.record)) or {},
        decompressed_hex=(chain_result.decoded_bytes or b"").hex(),
        verdict=verdict,
    )
    return CallResult.ok(f"Decode succeeded, attempted strategies: {trace_text}", payload)


def render_trace(trace: Iterable[StrategyOutcome]) -> str:
    """Join trace entries into one arrow-separated line."""
    return TRACE_SEPARATOR.join(render_outcome(outcome) for outcome in trace)


def render_outcome(outcome: StrategyOutcome) -> str:
    """Render a single strategy outcome."""
    if outcome.succeeded:
        return f"succeeded: {outcome.strategy_name}"
    label = _FAILURE_LABELS[outcome.status]
    return f"failed: {outcome.strategy_name} ({label}: {outcome.reason})"


def strip_empty_values(value: Any) -> Any:
    """Recursively drop None, empty strings, and empty containers.

    Containers emptied by the removal are dropped too. Numbers and
    booleans are kept. Returns None when the whole value is empty.
    """
    if isinstance(value, dict):
        stripped = {}
        for key, item in value.items():
            cleaned = strip_empty_values(item)
            if cleaned is not None:
                stripped[key] = cleaned
        return stripped or None
    if isinstance(value, list):
        items = [cleaned for cleaned in map(strip_empty_values, value) if cleaned is not None]
        return items or None
    if value is None or value == "":
        return None
    return value


def call_result_to_payload(result: CallResult) -> dict[str, Any]:
    """Serialize a response into the transport JSON shape.

    Args:
        result: Response envelope.

    Returns:
        JSON-safe dictionary.
    """
    data: dict[str, Any] | None = None
    if result.data is not None:
        verdict = result.data.verdict
        data = {
            "data": dict(result.data.data),
            "decompressed_hex": result.data.decompressed_hex,
            "input_md5": verdict.input_md5,
            "result_md5": verdict.result_md5,
            "is_match": verdict.is_match,
        }
    return {"success": result.success, "message": result.message, "data": data}
