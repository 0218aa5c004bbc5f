"""Exceptions raised by the Honeycomb exporter."""


class HoneycombExporterError(Exception):
    """Base class for exporter errors."""


class ConfigurationError(HoneycombExporterError, ValueError):
    """The exporter cannot be built from the given configuration."""


class SinkError(HoneycombExporterError):
    """The event sink rejected a record or failed to flush."""
