"""End-to-end tests: OpenTelemetry SDK spans through the exporter into an in-memory sink."""

from __future__ import annotations

import uuid

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.trace import Link, SpanContext

from honeycomb_exporter.core.tracing.otel_converter import format_trace_id
from honeycomb_exporter.core.tracing.sinks import InMemoryEventSink
from honeycomb_exporter.core.tracing.span_exporter import HoneycombSpanExporter
from tests.utils import TEST_START_NS


@pytest.fixture
def honeycomb_setup():
    """Tracer named "honeycomb/test" exporting synchronously into an in-memory sink."""
    sink = InMemoryEventSink()
    exporter = HoneycombSpanExporter(
        write_key="overridden",
        dataset="test",
        service_name="opentelemetry-test",
        sink=sink,
    )
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    tracer = provider.get_tracer("honeycomb/test")
    yield tracer, sink
    provider.shutdown()


def _honeycomb_trace_id(span: trace.Span) -> str:
    return str(uuid.UUID(format(span.get_span_context().trace_id, "032x")))


def _span_id(span: trace.Span) -> str:
    return format(span.get_span_context().span_id, "016x")


class TestHoneycombOutput:
    def test_span_with_attributes(self, honeycomb_setup):
        tracer, sink = honeycomb_setup

        span = tracer.start_span("myTestSpan", start_time=TEST_START_NS)
        span.set_attributes(
            {
                "ex.com/string": "yes",
                "ex.com/bool": True,
                "ex.com/int64": 42,
                "ex.com/float64": 3.14,
                "ex.com/nil": "",
            }
        )
        span.end(end_time=TEST_START_NS + 500_000)

        records = sink.get_all_records()
        assert len(records) == 1
        fields = records[0].fields

        assert fields["trace.trace_id"] == _honeycomb_trace_id(span)
        assert fields["trace.span_id"] == _span_id(span)
        assert fields["name"] == "honeycomb/test/myTestSpan"

        duration = fields["duration_ms"]
        assert isinstance(duration, float)
        assert 0 < duration < 1

        assert fields["service_name"] == "opentelemetry-test"
        assert records[0].dataset == "test"

        assert fields["ex.com/string"] == "yes"
        assert fields["ex.com/bool"] is True
        assert fields["ex.com/int64"] == 42
        assert fields["ex.com/float64"] == 3.14
        assert fields["ex.com/nil"] == ""
        assert fields["error"] is False
        assert "trace.parent_id" not in fields

    def test_span_with_message_event(self, honeycomb_setup):
        tracer, sink = honeycomb_setup

        span = tracer.start_span("myTestSpan", start_time=TEST_START_NS)
        span.add_event(
            "handling this...",
            {"request-handled": 100},
            timestamp=TEST_START_NS + 100_000,
        )
        span.end(end_time=TEST_START_NS + 500_000)

        records = sink.get_all_records()
        assert len(records) == 2

        span_fields = records[1].fields
        assert span_fields["trace.trace_id"] == _honeycomb_trace_id(span)
        assert span_fields["trace.span_id"] == _span_id(span)
        assert span_fields["name"] == "honeycomb/test/myTestSpan"
        assert span_fields["duration_ms"] > 0
        assert span_fields["service_name"] == "opentelemetry-test"
        assert records[1].dataset == "test"

        event_fields = records[0].fields
        assert event_fields["name"] == "handling this..."
        assert event_fields["request-handled"] == "100"
        assert event_fields["trace.trace_id"] == _honeycomb_trace_id(span)
        assert event_fields["trace.parent_id"] == span_fields["trace.span_id"]
        assert event_fields["service_name"] == "opentelemetry-test"
        assert event_fields["meta.span_type"] == "span_event"
        assert event_fields["duration_ms"] == 0

    def test_span_with_links(self, honeycomb_setup):
        tracer, sink = honeycomb_setup
        link_trace_id = 0x0102030405060709090A0B0C0D0E0F11
        link_span_id = 0x0102030405060709

        span = tracer.start_span(
            "myTestSpan",
            links=[Link(SpanContext(trace_id=link_trace_id, span_id=link_span_id, is_remote=True))],
        )
        span.end()

        records = sink.get_all_records()
        assert len(records) == 2

        link_fields = records[0].fields
        span_fields = records[1].fields

        assert link_fields["trace.trace_id"] == _honeycomb_trace_id(span)
        assert link_fields["trace.parent_id"] == span_fields["trace.span_id"]
        assert link_fields["trace.link.trace_id"] == format_trace_id(format(link_trace_id, "032x"))
        assert link_fields["trace.link.trace_id"] == "01020304-0506-0709-090a-0b0c0d0e0f11"
        assert link_fields["trace.link.span_id"] == "0102030405060709"
        assert link_fields["meta.span_type"] == "link"
        assert "meta.span_type" not in span_fields

    def test_child_span_has_parent_id(self, honeycomb_setup):
        tracer, sink = honeycomb_setup

        parent = tracer.start_span("parent")
        child = tracer.start_span("child", context=trace.set_span_in_context(parent))
        child.end()
        parent.end()

        child_fields, parent_fields = (r.fields for r in sink.get_all_records())
        assert child_fields["trace.parent_id"] == _span_id(parent)
        assert child_fields["trace.trace_id"] == parent_fields["trace.trace_id"]
        assert "trace.parent_id" not in parent_fields

    def test_error_status(self, honeycomb_setup):
        tracer, sink = honeycomb_setup

        span = tracer.start_span("failing")
        span.set_status(trace.Status(trace.StatusCode.ERROR, "permission denied"))
        span.end()

        assert sink.get_all_records()[0].get("error") is True


def test_provider_shutdown_flushes_and_closes_sink():
    sink = InMemoryEventSink()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(HoneycombSpanExporter(sink=sink)))

    provider.get_tracer("honeycomb/test").start_span("one").end()
    provider.shutdown()

    assert len(sink.get_all_records()) == 1
    assert sink.flush_count >= 1
    assert sink.closed
