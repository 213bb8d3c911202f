"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

SRC_PATH = Path(__file__).resolve().parent.parent / "src"


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    if str(SRC_PATH) not in sys.path:
        sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def sample_record_bytes() -> bytes:
    """Serialized batch report with two events and a common package."""
    from schema.batch_report import message_class

    batch = message_class("BatchReportEvent")()
    batch.send_timestamp = 1700000000123
    batch.common_package.identity_package.device_id = "ANDROID_4f2a9c"
    batch.common_package.app_package.version_name = "11.2.30"
    batch.common_package.app_package.platform = "android"
    first = batch.event.add()
    first.client_timestamp = 1700000000001
    first.client_increment_id = 7
    first.session_id = "sess-01"
    first.event_package.action = "CLICK"
    first.event_package.page = "HOME"
    second = batch.event.add()
    second.client_timestamp = 1700000000042
    second.client_increment_id = 8
    second.event_package.action = "SHOW"
    second.event_package.tags.append("feed")
    return batch.SerializeToString()


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Rebind structured logging to the live stderr after each test."""
    yield
    from core.logging_config import configure_logging

    configure_logging()
