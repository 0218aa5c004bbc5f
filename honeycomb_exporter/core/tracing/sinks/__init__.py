"""Event sinks for the Honeycomb exporter."""

from .base import EventSink
from .memory import InMemoryEventSink
from .honeycomb import LibhoneyEventSink, LibhoneySinkConfig, create_libhoney_sink

__all__ = [
    # Base
    "EventSink",
    # Sinks
    "InMemoryEventSink",
    "LibhoneyEventSink",
    "LibhoneySinkConfig",
    # Helpers
    "create_libhoney_sink",
]
