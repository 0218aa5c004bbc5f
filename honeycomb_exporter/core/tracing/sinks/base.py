"""Base class for event sinks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...types import EventRecord


class EventSink(ABC):
    """
    Destination for translated Honeycomb events.

    The exporter only relies on this contract: create a record for a dataset,
    fill its fields, send it. Batching, transport and retries belong to the
    implementation. ``send``, ``flush`` and ``close`` raise on failure.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name used in logs."""

    def new_record(self, dataset: str) -> EventRecord:
        """Create an empty record bound to ``dataset``."""
        return EventRecord(dataset=dataset)

    @abstractmethod
    def send(self, record: EventRecord) -> None:
        """Hand a single record over for delivery."""

    def flush(self) -> None:
        """Block until records handed over so far have been dispatched."""

    def close(self) -> None:
        """Flush and release resources."""
        self.flush()
