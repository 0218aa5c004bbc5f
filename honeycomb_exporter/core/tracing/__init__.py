"""Tracing infrastructure for the Honeycomb exporter."""

from .span_exporter import HoneycombSpanExporter
from .translator import SpanTranslator, duration_ms
from .otel_converter import (
    otel_span_to_snapshot,
    format_trace_id,
    format_span_id,
)
from .sinks import (
    EventSink,
    InMemoryEventSink,
    LibhoneyEventSink,
    LibhoneySinkConfig,
    create_libhoney_sink,
)

__all__ = [
    # Exporter
    "HoneycombSpanExporter",
    # Translation
    "SpanTranslator",
    "duration_ms",
    # Converters
    "otel_span_to_snapshot",
    "format_trace_id",
    "format_span_id",
    # Sinks
    "EventSink",
    "InMemoryEventSink",
    "LibhoneyEventSink",
    "LibhoneySinkConfig",
    "create_libhoney_sink",
]
