"""In-memory event sink for testing and development."""

from __future__ import annotations

import threading
from typing import override

from ...errors import SinkError
from ...types import SPAN_TYPE_FIELD, EventRecord
from .base import EventSink


class InMemoryEventSink(EventSink):
    """
    Stores sent records in memory - useful for testing and development.

    Records keep the order in which they were sent. Provides helper methods
    to query records by ``meta.span_type``.
    """

    def __init__(self) -> None:
        self._records: list[EventRecord] = []
        self._lock = threading.Lock()
        self._failure: BaseException | None = None
        self.flush_count = 0
        self.closed = False

    def __repr__(self) -> str:
        return f"InMemoryEventSink(records={len(self._records)})"

    @property
    @override
    def name(self) -> str:
        return "in-memory"

    def fail_with(self, error: BaseException | None) -> None:
        """Make subsequent sends raise ``error``; pass None to recover."""
        self._failure = error

    @override
    def send(self, record: EventRecord) -> None:
        if self.closed:
            raise SinkError("Cannot send to a closed in-memory sink")
        if self._failure is not None:
            raise self._failure
        with self._lock:
            self._records.append(record)

    def get_all_records(self) -> list[EventRecord]:
        """Get all stored records."""
        with self._lock:
            return list(self._records)

    def get_records_by_span_type(self, span_type: str | None) -> list[EventRecord]:
        """Get records with the given ``meta.span_type``; None selects primary span records."""
        return [
            record for record in self.get_all_records() if record.get(SPAN_TYPE_FIELD) == span_type
        ]

    def clear(self) -> None:
        """Clear all stored records."""
        with self._lock:
            self._records.clear()

    @override
    def flush(self) -> None:
        self.flush_count += 1

    @override
    def close(self) -> None:
        """Flush and stop accepting records; stored records stay readable."""
        self.flush()
        self.closed = True
