"""Test utilities for Honeycomb exporter tests."""

from .test_helpers import (
    EXPECTED_SPAN_ID,
    EXPECTED_TRACE_ID,
    TEST_SPAN_ID,
    TEST_START_NS,
    TEST_TRACE_ID,
    create_test_event,
    create_test_snapshot,
)

__all__ = [
    "EXPECTED_SPAN_ID",
    "EXPECTED_TRACE_ID",
    "TEST_SPAN_ID",
    "TEST_START_NS",
    "TEST_TRACE_ID",
    "create_test_event",
    "create_test_snapshot",
]
