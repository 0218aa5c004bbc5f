"""Translation of span snapshots into Honeycomb event records."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from ..types import (
    SPAN_TYPE_FIELD,
    SPAN_TYPE_LINK,
    SPAN_TYPE_SPAN_EVENT,
    EventRecord,
    LinkSnapshot,
    SpanEventSnapshot,
    SpanSnapshot,
)
from .otel_converter import format_span_id, format_trace_id

TRACE_ID_FIELD = "trace.trace_id"
SPAN_ID_FIELD = "trace.span_id"
PARENT_ID_FIELD = "trace.parent_id"
LINK_TRACE_ID_FIELD = "trace.link.trace_id"
LINK_SPAN_ID_FIELD = "trace.link.span_id"
NAME_FIELD = "name"
SERVICE_NAME_FIELD = "service_name"
DURATION_FIELD = "duration_ms"
ERROR_FIELD = "error"

NANOS_PER_MILLI = 1_000_000


def duration_ms(start_time_ns: int, end_time_ns: int) -> float:
    """Elapsed time between two nanosecond timestamps, in milliseconds."""
    return (end_time_ns - start_time_ns) / NANOS_PER_MILLI


def ns_to_datetime(timestamp_ns: int) -> datetime:
    """Convert nanoseconds since epoch to an aware UTC datetime (microsecond precision)."""
    seconds, nanos = divmod(timestamp_ns, 1_000_000_000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=nanos // 1000)


def _default_record_factory(dataset: str) -> EventRecord:
    return EventRecord(dataset=dataset)


class SpanTranslator:
    """
    Builds the Honeycomb events for a single span.

    One span yields one primary record, one record per span event and one
    record per link. The translator holds only read-only configuration, so a
    single instance can serve concurrent callers.
    """

    def __init__(
        self,
        dataset: str,
        service_name: str,
        new_record: Callable[[str], EventRecord] | None = None,
    ) -> None:
        """
        Args:
            dataset: Dataset every record is tagged with
            service_name: Value of the ``service_name`` field on every record
            new_record: Factory creating an empty record for a dataset (usually the sink's)
        """
        self._dataset = dataset
        self._service_name = service_name
        self._new_record = new_record or _default_record_factory

    @property
    def dataset(self) -> str:
        return self._dataset

    @property
    def service_name(self) -> str:
        return self._service_name

    def translate(self, span: SpanSnapshot) -> list[EventRecord]:
        """
        Return every record for ``span`` in send order.

        Span events come first, then links, then the primary span record.
        Link records must reach the sink before the record of the span that
        owns them.
        """
        records = [self.span_event_record(span, event) for event in span.events]
        records.extend(self.link_record(span, link) for link in span.links)
        records.append(self.span_record(span))
        return records

    def span_record(self, span: SpanSnapshot) -> EventRecord:
        record = self._new_record(self._dataset)
        record.timestamp = ns_to_datetime(span.start_time_ns)

        record.add_field(TRACE_ID_FIELD, format_trace_id(span.trace_id))
        record.add_field(SPAN_ID_FIELD, format_span_id(span.span_id))
        if span.parent_span_id:
            record.add_field(PARENT_ID_FIELD, format_span_id(span.parent_span_id))
        record.add_field(NAME_FIELD, span.name)
        record.add_field(SERVICE_NAME_FIELD, self._service_name)
        record.add_field(DURATION_FIELD, duration_ms(span.start_time_ns, span.end_time_ns))
        record.add_field(ERROR_FIELD, span.status.is_error)

        # Empty strings are kept: an empty attribute is still a value
        for key, value in span.attributes:
            record.add_field(key, value.as_field())
        return record

    def span_event_record(self, span: SpanSnapshot, event: SpanEventSnapshot) -> EventRecord:
        record = self._new_record(self._dataset)
        record.timestamp = ns_to_datetime(event.timestamp_ns)

        record.add_field(TRACE_ID_FIELD, format_trace_id(span.trace_id))
        record.add_field(PARENT_ID_FIELD, format_span_id(span.span_id))
        record.add_field(NAME_FIELD, event.name)
        record.add_field(SERVICE_NAME_FIELD, self._service_name)
        record.add_field(SPAN_TYPE_FIELD, SPAN_TYPE_SPAN_EVENT)
        record.add_field(DURATION_FIELD, 0.0)

        for key, value in event.attributes:
            record.add_field(key, value.as_text())
        return record

    def link_record(self, span: SpanSnapshot, link: LinkSnapshot) -> EventRecord:
        record = self._new_record(self._dataset)
        record.timestamp = ns_to_datetime(span.start_time_ns)

        record.add_field(TRACE_ID_FIELD, format_trace_id(span.trace_id))
        record.add_field(PARENT_ID_FIELD, format_span_id(span.span_id))
        record.add_field(LINK_TRACE_ID_FIELD, format_trace_id(link.trace_id))
        record.add_field(LINK_SPAN_ID_FIELD, format_span_id(link.span_id))
        record.add_field(SERVICE_NAME_FIELD, self._service_name)
        record.add_field(SPAN_TYPE_FIELD, SPAN_TYPE_LINK)
        return record
