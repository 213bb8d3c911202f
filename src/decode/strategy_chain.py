"""Ordered fallback over decode strategies.

This module applies each strategy's transforms and hands the result to
the record schema. Transform and parse failures become trace entries;
the first strategy that parses wins and later strategies are skipped.
"""

from __future__ import annotations

from typing import Sequence

from core.errors import RecordDecodeError, TransformError
from core.logging_config import get_logger
from core.types import ChainResult, DecodeStrategy, OutcomeStatus, RawInput, StrategyOutcome
from schema.record_schema import RecordSchema

_LOGGER = get_logger(__name__)


def run_strategy_chain(
    raw_input: RawInput,
    strategies: Sequence[DecodeStrategy],
    schema: RecordSchema,
) -> ChainResult:
    """Try strategies in order until one yields a record.

    Args:
        raw_input: Immutable acquired bytes.
        strategies: Strategies in priority order.
        schema: Record decode capability.

    Returns:
        Chain result with the full attempt trace. On exhaustion the
        record, strategy name, and decoded bytes are None.
    """
    trace: list[StrategyOutcome] = []
    for strategy in strategies:
        _LOGGER.debug(
            "strategy_attempted",
            strategy=strategy.name,
            origin=raw_input.origin,
            input_size=len(raw_input.data),
        )
        try:
            transformed = _apply_steps(strategy, raw_input.data)
        except TransformError as error:
            trace.append(_failed(strategy, "transform_failure", error))
            continue
        try:
            record = schema.decode(transformed)
        except RecordDecodeError as error:
            trace.append(_failed(strategy, "structural_failure", error))
            continue
        trace.append(StrategyOutcome(strategy_name=strategy.name, status="success"))
        _LOGGER.info(
            "strategy_succeeded",
            strategy=strategy.name,
            origin=raw_input.origin,
            decoded_size=len(transformed),
            attempts=len(trace),
        )
        return ChainResult(
            trace=tuple(trace),
            record=record,
            strategy_name=strategy.name,
            decoded_bytes=transformed,
        )
    _LOGGER.warning("decode_exhausted", origin=raw_input.origin, attempts=len(trace))
    return ChainResult(trace=tuple(trace))


def _apply_steps(strategy: DecodeStrategy, data: bytes) -> bytes:
    """Run a strategy's transforms in order; identity when it has none."""
    for step in strategy.steps:
        data = step.apply(data)
    return data


def _failed(
    strategy: DecodeStrategy, status: OutcomeStatus, error: Exception
) -> StrategyOutcome:
    _LOGGER.info("strategy_failed", strategy=strategy.name, status=status, reason=str(error))
    return StrategyOutcome(strategy_name=strategy.name, status=status, reason=str(error))
