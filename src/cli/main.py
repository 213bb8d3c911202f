"""Batch decode CLI entry points.
This module exposes the decode tools as subcommands.
It maps argparse commands onto toolkit calls and prints JSON responses.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import replace
from typing import Any, Sequence

from core.config import DecodeConfig
from core.constants import SUPPORTED_LOG_LEVELS
from core.logging_config import configure_logging
from decode.service import BatchDecoder
from decode.tool_handlers import DecodeToolkit


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="batch-decode",
        description="Decode batch report event blobs",
    )
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override BATCH_DECODE_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_base64_command(subparsers)
    _add_hex_command(subparsers)
    _add_file_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the batch decode CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code: 0 when a record was decoded, 1 otherwise.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    toolkit = _build_toolkit(args.log_level)
    if args.command == "base64":
        return _print_response(toolkit.parse_batch_from_base64(args.data))
    if args.command == "hex":
        return _print_response(toolkit.parse_batch_from_hex(args.data))
    if args.command == "file":
        return _print_response(toolkit.parse_batch_from_file(args.path))
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_toolkit(log_level: str | None) -> DecodeToolkit:
    """Build the toolkit with optional log-level override.

    Args:
        log_level: Optional override level name.

    Returns:
        Configured toolkit.
    """
    config = DecodeConfig.from_env()
    if log_level:
        config = replace(config, log_level=log_level)
    configure_logging(config.log_level)
    return DecodeToolkit(BatchDecoder(config))


def _print_response(payload: dict[str, Any]) -> int:
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0 if payload["success"] else 1


def _add_base64_command(subparsers: Any) -> None:
    """Register base64 subcommand."""
    parser = subparsers.add_parser("base64", help="Decode a base64-encoded payload")
    parser.add_argument("data", help="Base64 text")


def _add_hex_command(subparsers: Any) -> None:
    """Register hex subcommand."""
    parser = subparsers.add_parser("hex", help="Decode a hex-encoded payload")
    parser.add_argument("data", help="Hexadecimal text")


def _add_file_command(subparsers: Any) -> None:
    """Register file subcommand."""
    parser = subparsers.add_parser("file", help="Decode a payload stored in a file")
    parser.add_argument("path", help="Local file path")
