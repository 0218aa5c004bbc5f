"""OpenTelemetry span exporter for Honeycomb."""

from .core import (
    AttributeKind,
    AttributeValue,
    ConfigurationError,
    EventRecord,
    HoneycombExporterConfig,
    HoneycombExporterError,
    LinkSnapshot,
    SinkError,
    SpanEventSnapshot,
    SpanSnapshot,
    StatusCode,
    resolve_exporter_config,
)
from .core.logger import LogLevel, configure_logger, get_log_level, set_log_level
from .core.tracing import (
    EventSink,
    HoneycombSpanExporter,
    InMemoryEventSink,
    LibhoneyEventSink,
    LibhoneySinkConfig,
    SpanTranslator,
    create_libhoney_sink,
    format_span_id,
    format_trace_id,
    otel_span_to_snapshot,
)

__version__ = "0.1.0"

__all__ = [
    # Exporter
    "HoneycombSpanExporter",
    "SpanTranslator",
    # Config
    "HoneycombExporterConfig",
    "resolve_exporter_config",
    # Errors
    "HoneycombExporterError",
    "ConfigurationError",
    "SinkError",
    # Types
    "AttributeKind",
    "AttributeValue",
    "EventRecord",
    "LinkSnapshot",
    "SpanEventSnapshot",
    "SpanSnapshot",
    "StatusCode",
    # Logger
    "LogLevel",
    "configure_logger",
    "set_log_level",
    "get_log_level",
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
