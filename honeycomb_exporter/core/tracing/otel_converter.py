"""Conversion of OpenTelemetry ReadableSpan objects into SpanSnapshot."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from opentelemetry.trace import INVALID_SPAN_ID
from opentelemetry.trace.status import StatusCode as OTelStatusCode

from ..types import (
    Attributes,
    AttributeValue,
    LinkSnapshot,
    SpanEventSnapshot,
    SpanSnapshot,
    StatusCode,
)

if TYPE_CHECKING:
    from opentelemetry.sdk.trace import Event, ReadableSpan
    from opentelemetry.trace import Link

logger = logging.getLogger(__name__)


def format_trace_id(trace_id: int | str) -> str:
    """
    Format a 128-bit trace ID as a Honeycomb trace ID.

    Honeycomb trace IDs use the hyphenated UUID layout (8-4-4-4-12 lowercase
    hex digits). Hex string input of any case, with or without hyphens, is
    normalized the same way.
    """
    if isinstance(trace_id, str):
        return str(uuid.UUID(hex=trace_id))
    return str(uuid.UUID(int=trace_id))


def format_span_id(span_id: int | str) -> str:
    """Format a 64-bit span ID as a 16-character lowercase hex string."""
    if isinstance(span_id, str):
        span_id = int(span_id, 16)
    return format(span_id, "016x")


def otel_status_to_status_code(status: Any) -> StatusCode:
    """Map an OpenTelemetry Status (or None) to StatusCode."""
    if status is None:
        return StatusCode.UNSET

    code = getattr(status, "status_code", status)
    if code == OTelStatusCode.ERROR:
        return StatusCode.ERROR
    if code == OTelStatusCode.OK:
        return StatusCode.OK
    return StatusCode.UNSET


def convert_attributes(attributes: Mapping[str, Any] | None) -> Attributes:
    """Convert OpenTelemetry attributes to ordered (key, AttributeValue) pairs."""
    if not attributes:
        return []

    converted: Attributes = []
    for key, value in attributes.items():
        if value is None:
            logger.debug(f"Skipping attribute '{key}' with no value")
            continue
        converted.append((key, AttributeValue.from_otel(value)))
    return converted


def qualified_span_name(span: ReadableSpan) -> str:
    """Prefix the span name with the name of the tracer that created it."""
    scope = getattr(span, "instrumentation_scope", None)
    scope_name = getattr(scope, "name", None) if scope is not None else None
    if scope_name:
        return f"{scope_name}/{span.name}"
    return span.name


def _convert_event(event: Event) -> SpanEventSnapshot:
    return SpanEventSnapshot(
        name=event.name,
        timestamp_ns=event.timestamp,
        attributes=convert_attributes(event.attributes),
    )


def _convert_link(link: Link) -> LinkSnapshot:
    return LinkSnapshot(trace_id=link.context.trace_id, span_id=link.context.span_id)


def otel_span_to_snapshot(span: ReadableSpan) -> SpanSnapshot:
    """
    Convert an ended OpenTelemetry span into a SpanSnapshot.

    Identifiers are copied as-is; their validity is the SDK's responsibility.
    A span that has not ended uses its start time as end time.
    """
    context = span.get_span_context()
    parent = span.parent
    parent_span_id = parent.span_id if parent is not None else None
    if parent_span_id == INVALID_SPAN_ID:
        parent_span_id = None

    start_time_ns = span.start_time or 0
    end_time_ns = span.end_time if span.end_time is not None else start_time_ns

    return SpanSnapshot(
        trace_id=context.trace_id,
        span_id=context.span_id,
        parent_span_id=parent_span_id,
        name=qualified_span_name(span),
        start_time_ns=start_time_ns,
        end_time_ns=end_time_ns,
        status=otel_status_to_status_code(span.status),
        attributes=convert_attributes(span.attributes),
        events=[_convert_event(event) for event in span.events],
        links=[_convert_link(link) for link in span.links],
    )
