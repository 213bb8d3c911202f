"""Public SDK surface for the batch decode toolkit.

This module provides a stable import path for library users.
It re-exports the decoder, toolkit handlers, and typed models.
"""

from __future__ import annotations

from core.config import CipherSettings, DecodeConfig
from core.types import CallResult, DecodeStrategy, IntegrityVerdict, RawInput
from decode.result_reporter import call_result_to_payload, strip_empty_values
from decode.service import BatchDecoder
from decode.strategies import build_default_strategies
from decode.tool_handlers import DecodeToolkit, toolkit_info
from schema.batch_report import batch_report_schema
from schema.record_schema import ProtobufRecordSchema, RecordSchema

__all__ = [
    "BatchDecoder",
    "CallResult",
    "CipherSettings",
    "DecodeConfig",
    "DecodeStrategy",
    "DecodeToolkit",
    "IntegrityVerdict",
    "ProtobufRecordSchema",
    "RawInput",
    "RecordSchema",
    "batch_report_schema",
    "build_default_strategies",
    "call_result_to_payload",
    "strip_empty_values",
    "toolkit_info",
]
