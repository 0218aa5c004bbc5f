"""Core types and data structures for the Honeycomb exporter."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Iterator, Mapping, Union

FieldValue = Union[str, bool, int, float]
"""Value types a Honeycomb event field may hold."""

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

SPAN_TYPE_FIELD = "meta.span_type"
SPAN_TYPE_SPAN_EVENT = "span_event"
SPAN_TYPE_LINK = "link"


class StatusCode(Enum):
    """
    Span status code.
    Mirrors opentelemetry.trace.StatusCode; only ERROR marks a span as failed.
    """

    UNSET = 0
    OK = 1
    ERROR = 2

    @property
    def is_error(self) -> bool:
        return self is StatusCode.ERROR


class AttributeKind(Enum):
    """Tag of an AttributeValue."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"


@dataclass(frozen=True)
class AttributeValue:
    """
    Tagged attribute value.

    Span attributes keep their native type on the primary record
    (``as_field``); span events and links render them as text (``as_text``).
    """

    kind: AttributeKind
    value: FieldValue

    @classmethod
    def string(cls, value: str) -> AttributeValue:
        return cls(AttributeKind.STRING, value)

    @classmethod
    def boolean(cls, value: bool) -> AttributeValue:
        return cls(AttributeKind.BOOL, value)

    @classmethod
    def int64(cls, value: int) -> AttributeValue:
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"Integer attribute out of 64-bit range: {value}")
        return cls(AttributeKind.INT, value)

    @classmethod
    def float64(cls, value: float) -> AttributeValue:
        return cls(AttributeKind.FLOAT, float(value))

    @classmethod
    def from_otel(cls, value: Any) -> AttributeValue:
        """
        Build the variant from an OpenTelemetry attribute value.

        bool is checked before int since bool subclasses int. Integers outside
        the 64-bit range keep their decimal text as a string. Sequence
        attributes are rendered as a JSON array string.
        """
        if isinstance(value, str):
            return cls.string(value)
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            if not INT64_MIN <= value <= INT64_MAX:
                return cls.string(str(value))
            return cls.int64(value)
        if isinstance(value, float):
            return cls.float64(value)
        if isinstance(value, (list, tuple)):
            return cls.string(json.dumps(list(value)))
        raise TypeError(f"Unsupported attribute value type: {type(value).__name__}")

    def as_field(self) -> FieldValue:
        """Return the value with its original type."""
        if self.kind is AttributeKind.STRING:
            return str(self.value)
        if self.kind is AttributeKind.BOOL:
            return bool(self.value)
        if self.kind is AttributeKind.INT:
            return int(self.value)
        if self.kind is AttributeKind.FLOAT:
            return float(self.value)
        raise AssertionError(f"Unhandled attribute kind: {self.kind}")

    def as_text(self) -> str:
        """Return the value rendered as a string."""
        if self.kind is AttributeKind.STRING:
            return str(self.value)
        if self.kind is AttributeKind.BOOL:
            return "true" if self.value else "false"
        if self.kind is AttributeKind.INT:
            return str(int(self.value))
        if self.kind is AttributeKind.FLOAT:
            return str(float(self.value))
        raise AssertionError(f"Unhandled attribute kind: {self.kind}")


Attributes = list[tuple[str, AttributeValue]]


@dataclass
class SpanEventSnapshot:
    """A timestamped event recorded on a span."""

    name: str
    timestamp_ns: int
    attributes: Attributes = field(default_factory=list)


@dataclass
class LinkSnapshot:
    """Reference from a span to another span."""

    trace_id: int
    span_id: int


@dataclass
class SpanSnapshot:
    """
    Finalized span, as handed over by the tracing SDK.
    This is the internal representation the translator works on.
    """

    # Identity
    trace_id: int
    span_id: int
    name: str
    parent_span_id: int | None = None

    # Timing (nanoseconds since epoch)
    start_time_ns: int = 0
    end_time_ns: int = 0

    # Status
    status: StatusCode = StatusCode.UNSET

    # Payload
    attributes: Attributes = field(default_factory=list)
    events: list[SpanEventSnapshot] = field(default_factory=list)
    links: list[LinkSnapshot] = field(default_factory=list)


@dataclass
class EventRecord:
    """
    A flat Honeycomb event waiting to be sent.

    Fields keep insertion order. ``timestamp`` becomes the event's creation
    time on the Honeycomb side.
    """

    dataset: str
    fields: dict[str, FieldValue] = field(default_factory=dict)
    timestamp: datetime | None = None

    def add_field(self, key: str, value: FieldValue) -> None:
        self.fields[key] = value

    def add_fields(self, values: Mapping[str, FieldValue]) -> None:
        for key, value in values.items():
            self.add_field(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)
