"""Exporter configuration and environment variable resolution."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .logger import LogLevel
    from .tracing.sinks.base import EventSink

logger = logging.getLogger(__name__)

DEFAULT_API_HOST = "https://api.honeycomb.io"
DEFAULT_DATASET = "opentelemetry"
DEFAULT_SERVICE_NAME = "unknown_service"

WRITE_KEY_ENV = "HONEYCOMB_WRITE_KEY"
DATASET_ENV = "HONEYCOMB_DATASET"
API_HOST_ENV = "HONEYCOMB_API_HOST"
SERVICE_NAME_ENV = "OTEL_SERVICE_NAME"


@dataclass
class HoneycombExporterConfig:
    write_key: Optional[str] = None
    dataset: Optional[str] = None
    service_name: Optional[str] = None
    api_host: Optional[str] = None
    sink: Optional["EventSink"] = None
    log_level: Optional["LogLevel"] = None


def resolve_exporter_config(
    config: HoneycombExporterConfig | None = None,
    **overrides: object,
) -> HoneycombExporterConfig:
    """
    Build the effective exporter configuration.

    Configuration precedence (highest to lowest):
    1. Keyword overrides that are not None
    2. Values already set on ``config``
    3. Environment variables
    4. Built-in defaults

    The write key has no default; whether it is required depends on whether
    a sink was supplied, which is checked by the exporter.

    Returns:
        A new HoneycombExporterConfig; ``config`` is left untouched
    """
    base = config or HoneycombExporterConfig()
    explicit = {key: value for key, value in overrides.items() if value is not None}
    unknown = set(explicit) - set(HoneycombExporterConfig.__dataclass_fields__)
    if unknown:
        raise TypeError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")
    resolved = replace(base, **explicit)

    if not resolved.write_key:
        resolved.write_key = os.environ.get(WRITE_KEY_ENV) or None

    if not resolved.dataset:
        env_dataset = os.environ.get(DATASET_ENV)
        if env_dataset:
            logger.debug(f"Using dataset '{env_dataset}' from {DATASET_ENV}")
        resolved.dataset = env_dataset or DEFAULT_DATASET

    if not resolved.service_name:
        resolved.service_name = os.environ.get(SERVICE_NAME_ENV) or DEFAULT_SERVICE_NAME

    if not resolved.api_host:
        resolved.api_host = os.environ.get(API_HOST_ENV) or DEFAULT_API_HOST
    resolved.api_host = resolved.api_host.rstrip("/")

    return resolved
