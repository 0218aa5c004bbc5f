"""Core module for the Honeycomb exporter."""

from .config import HoneycombExporterConfig, resolve_exporter_config
from .errors import ConfigurationError, HoneycombExporterError, SinkError
from .types import (
    AttributeKind,
    AttributeValue,
    EventRecord,
    LinkSnapshot,
    SpanEventSnapshot,
    SpanSnapshot,
    StatusCode,
)

__all__ = [
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
]
