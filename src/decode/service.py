"""Decode request runner.

This module wires the strategy chain, integrity checker, and reporter
into one request-scoped call. Instances hold only immutable settings,
so one decoder can serve concurrent requests.
"""

from __future__ import annotations

from core.config import DecodeConfig
from core.types import CallResult, DecodeStrategy, RawInput
from decode.integrity import check_integrity
from decode.result_reporter import build_call_result
from decode.strategies import build_default_strategies
from decode.strategy_chain import run_strategy_chain
from schema.batch_report import batch_report_schema
from schema.record_schema import RecordSchema


class BatchDecoder:
    """Runs the decode pipeline for one record schema."""

    def __init__(
        self,
        config: DecodeConfig,
        schema: RecordSchema | None = None,
        strategies: tuple[DecodeStrategy, ...] | None = None,
    ) -> None:
        self._config = config
        self._schema = schema if schema is not None else batch_report_schema()
        self._strategies = (
            strategies if strategies is not None else build_default_strategies(config.cipher)
        )

    @property
    def config(self) -> DecodeConfig:
        """Return the runtime config this decoder was built with."""
        return self._config

    @property
    def strategies(self) -> tuple[DecodeStrategy, ...]:
        """Return strategies in priority order."""
        return self._strategies

    def decode(self, raw_input: RawInput) -> CallResult:
        """Decode raw input into a response envelope.

        Args:
            raw_input: Acquired bytes for this request.

        Returns:
            Success response with payload, or failure response with trace.

        Raises:
            ResponseSerializationError: If the decoded record cannot be rendered.
        """
        chain_result = run_strategy_chain(raw_input, self._strategies, self._schema)
        verdict = None
        if chain_result.succeeded:
            verdict = check_integrity(chain_result.record, raw_input, self._schema)
        return build_call_result(chain_result, self._schema, verdict)
