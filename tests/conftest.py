"""Pytest configuration and fixtures for Honeycomb exporter tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from honeycomb_exporter.core.tracing.sinks import InMemoryEventSink

HONEYCOMB_ENV_VARS = (
    "HONEYCOMB_WRITE_KEY",
    "HONEYCOMB_DATASET",
    "HONEYCOMB_API_HOST",
    "OTEL_SERVICE_NAME",
)


@pytest.fixture(autouse=True)
def clean_honeycomb_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's Honeycomb environment out of the tests."""
    for name in HONEYCOMB_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def in_memory_sink() -> InMemoryEventSink:
    """Create a fresh InMemoryEventSink for testing."""
    from honeycomb_exporter.core.tracing.sinks import InMemoryEventSink

    return InMemoryEventSink()


@pytest.fixture
def reset_package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the package logger after tests that reconfigure it."""
    from honeycomb_exporter.core import logger as logger_module

    package_logger = logging.getLogger(logger_module.ROOT_LOGGER_NAME)
    yield package_logger
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    logger_module._handler = None
    logger_module._current_level = "info"
