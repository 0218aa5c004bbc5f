"""OpenTelemetry span exporter that forwards spans to Honeycomb as events."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult

from ..config import HoneycombExporterConfig, resolve_exporter_config
from ..logger import set_log_level
from .otel_converter import otel_span_to_snapshot
from .sinks.honeycomb import create_libhoney_sink
from .translator import SpanTranslator

if TYPE_CHECKING:
    from opentelemetry.sdk.trace import ReadableSpan

    from ..types import SpanSnapshot
    from .sinks.base import EventSink

logger = logging.getLogger(__name__)


class HoneycombSpanExporter(SpanExporter):
    """
    Translates finished spans into Honeycomb events and sends them to an event sink.

    Every span produces one event, plus one per span event and one per link.
    Records are sent one by one and synchronously; a sink error aborts the
    export call and propagates to the caller unchanged.

    When no sink is supplied, a libhoney-backed sink is built from the write
    key, dataset and API host.
    """

    def __init__(
        self,
        config: HoneycombExporterConfig | None = None,
        *,
        write_key: str | None = None,
        dataset: str | None = None,
        service_name: str | None = None,
        api_host: str | None = None,
        sink: "EventSink | None" = None,
    ) -> None:
        """
        Initialize the exporter.

        Args:
            config: Base configuration; keyword arguments take precedence over it
            write_key: Honeycomb write key, required unless ``sink`` is given.
                Can also be set via HONEYCOMB_WRITE_KEY env var.
            dataset: Destination dataset. Can also be set via HONEYCOMB_DATASET env var.
            service_name: Service name stamped on every event. Can also be set via OTEL_SERVICE_NAME env var.
            api_host: Honeycomb API base URL override. Can also be set via HONEYCOMB_API_HOST env var.
            sink: Pre-built event sink

        Raises:
            ConfigurationError: If no sink is given and one cannot be built
        """
        self.config = resolve_exporter_config(
            config,
            write_key=write_key,
            dataset=dataset,
            service_name=service_name,
            api_host=api_host,
            sink=sink,
        )
        if self.config.log_level is not None:
            set_log_level(self.config.log_level)

        if self.config.sink is not None:
            self._sink = self.config.sink
        else:
            self._sink = create_libhoney_sink(
                write_key=self.config.write_key,
                dataset=self.config.dataset,
                api_host=self.config.api_host,
            )
            logger.debug(f"Created {self._sink.name} sink for {self.config.api_host}")

        self._translator = SpanTranslator(
            dataset=self.config.dataset,
            service_name=self.config.service_name,
            new_record=self._sink.new_record,
        )
        self._is_shutdown = False

        logger.debug(
            f"HoneycombSpanExporter initialized with dataset '{self.config.dataset}' "
            f"and service '{self.config.service_name}'"
        )

    def __repr__(self) -> str:
        return f"HoneycombSpanExporter(dataset={self.config.dataset}, sink={self._sink.name})"

    @property
    def sink(self) -> "EventSink":
        return self._sink

    @property
    def translator(self) -> SpanTranslator:
        return self._translator

    @property
    def is_shutdown(self) -> bool:
        return self._is_shutdown

    def export(self, spans: Sequence["ReadableSpan"]) -> SpanExportResult:
        """Export a batch of finished OpenTelemetry spans."""
        if self._is_shutdown:
            logger.warning(f"Exporter already shut down, dropping {len(spans)} span(s)")
            return SpanExportResult.FAILURE

        for span in spans:
            self.export_span(otel_span_to_snapshot(span))
        return SpanExportResult.SUCCESS

    def export_span(self, span: "SpanSnapshot") -> None:
        """
        Translate a single span and send each resulting record.

        Raises:
            Whatever the sink raises while sending; remaining records are not sent
        """
        records = self._translator.translate(span)
        for record in records:
            self._sink.send(record)
        logger.debug(f"Sent {len(records)} event(s) for span '{span.name}'")

    def force_flush(self, timeout_millis: int = 30000) -> bool:
        """Flush the sink. The sink owns batching and timeouts."""
        if self._is_shutdown:
            return True
        self._sink.flush()
        return True

    def shutdown(self) -> None:
        """Flush and close the sink. Calling it more than once is a no-op."""
        if self._is_shutdown:
            logger.debug("Exporter already shut down")
            return

        self._is_shutdown = True
        first_error: Exception | None = None
        try:
            self._sink.flush()
        except Exception as e:
            first_error = e
        # Close even when the flush failed so the sink's workers are stopped
        try:
            self._sink.close()
        except Exception as e:
            first_error = first_error or e

        if first_error is not None:
            logger.error(f"Error shutting down {self._sink.name} sink: {first_error}")
            raise first_error
        logger.debug("HoneycombSpanExporter shut down")
