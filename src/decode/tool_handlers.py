"""Tool-call handlers exposed to hosting transports.

Each handler acquires raw bytes from its argument form, runs the decode
pipeline, and returns the JSON-safe response shape. Acquisition errors
become failure responses without running any strategy.
"""

from __future__ import annotations

from typing import Any, Callable

from core.constants import TOOLKIT_NAME, TOOLKIT_TITLE, TOOLKIT_VERSION
from core.errors import InputAcquisitionError
from core.logging_config import get_logger
from core.types import CallResult, RawInput, ToolkitInfo
from decode.result_reporter import call_result_to_payload
from decode.service import BatchDecoder
from ingest.input_reader import read_base64_input, read_file_input, read_hex_input

_LOGGER = get_logger(__name__)

TOOL_NAMES = ("parse_batch_from_base64", "parse_batch_from_hex", "parse_batch_from_file")


class DecodeToolkit:
    """Base64, hex, and file entry points over a shared decoder."""

    def __init__(self, decoder: BatchDecoder) -> None:
        self._decoder = decoder

    def parse_batch_from_base64(self, base64_data: str) -> dict[str, Any]:
        """Decode a base64-encoded batch report payload."""
        return self._run("base64", lambda limit: read_base64_input(base64_data, limit))

    def parse_batch_from_hex(self, hex_data: str) -> dict[str, Any]:
        """Decode a hex-encoded batch report payload."""
        return self._run("hex", lambda limit: read_hex_input(hex_data, limit))

    def parse_batch_from_file(self, path: str) -> dict[str, Any]:
        """Decode a batch report payload stored in a local file."""
        return self._run("file", lambda limit: read_file_input(path, limit))

    def _run(self, source: str, acquire: Callable[[int | None], RawInput]) -> dict[str, Any]:
        try:
            raw_input = acquire(self._decoder.config.max_input_bytes)
        except InputAcquisitionError as error:
            _LOGGER.warning("input_rejected", source=source, reason=str(error))
            return call_result_to_payload(CallResult.fail(str(error)))
        return call_result_to_payload(self._decoder.decode(raw_input))


def toolkit_info() -> ToolkitInfo:
    """Describe the toolkit for transport registration."""
    instructions = "Batch report event decode tools:\n" + "\n".join(
        f"- {name}" for name in TOOL_NAMES
    )
    return ToolkitInfo(
        name=TOOLKIT_NAME,
        version=TOOLKIT_VERSION,
        title=TOOLKIT_TITLE,
        instructions=instructions,
        tool_names=TOOL_NAMES,
    )
