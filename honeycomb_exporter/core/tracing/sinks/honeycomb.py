"""Event sink backed by the libhoney client."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, override

import libhoney
from libhoney.errors import SendError

from ...config import DEFAULT_API_HOST
from ...errors import ConfigurationError, SinkError
from ...types import EventRecord
from .base import EventSink

if TYPE_CHECKING:
    from libhoney import Client

logger = logging.getLogger(__name__)

USER_AGENT_ADDITION = "honeycomb-opentelemetry-exporter"
DEFAULT_MAX_CONCURRENT_BATCHES = 10
DEFAULT_MAX_BATCH_SIZE = 100
DEFAULT_SEND_FREQUENCY_SECONDS = 0.25


@dataclass
class LibhoneySinkConfig:
    """Configuration for the libhoney event sink."""

    write_key: str
    dataset: str
    api_host: str = DEFAULT_API_HOST
    max_concurrent_batches: int = DEFAULT_MAX_CONCURRENT_BATCHES
    max_batch_size: int = DEFAULT_MAX_BATCH_SIZE
    send_frequency: float = DEFAULT_SEND_FREQUENCY_SECONDS
    # Block instead of dropping events when libhoney's queue is full
    block_on_send: bool = True
    debug: bool = False


class LibhoneyEventSink(EventSink):
    """
    Sends records to Honeycomb through a libhoney Client.

    libhoney batches events and delivers them from background threads; this
    sink only converts records into libhoney events.
    """

    def __init__(self, config: LibhoneySinkConfig, client: Client | None = None) -> None:
        """
        Initialize the sink.

        Args:
            config: Credentials and batching options for libhoney
            client: Pre-built libhoney Client; one is created from ``config`` when omitted
        """
        self._config = config
        self._client = client or libhoney.Client(
            writekey=config.write_key,
            dataset=config.dataset,
            api_host=config.api_host,
            max_concurrent_batches=config.max_concurrent_batches,
            max_batch_size=config.max_batch_size,
            send_frequency=config.send_frequency,
            block_on_send=config.block_on_send,
            user_agent_addition=USER_AGENT_ADDITION,
            debug=config.debug,
        )
        self._closed = False

        logger.debug("LibhoneyEventSink initialized")

    def __repr__(self) -> str:
        return f"LibhoneyEventSink(api_host={self._config.api_host}, dataset={self._config.dataset})"

    @property
    @override
    def name(self) -> str:
        return "libhoney"

    @property
    def client(self) -> Client:
        return self._client

    @override
    def send(self, record: EventRecord) -> None:
        if self._closed:
            raise SinkError("Cannot send events after the libhoney sink was closed")

        event = self._client.new_event()
        event.dataset = record.dataset
        event.add(record.fields)
        if record.timestamp is not None:
            event.created_at = record.timestamp

        try:
            event.send()
        except SendError as e:
            raise SinkError(f"libhoney rejected event for dataset '{record.dataset}': {e}") from e

    @override
    def flush(self) -> None:
        if self._closed:
            return
        try:
            self._client.flush()
        except Exception as e:
            raise SinkError(f"Failed to flush libhoney client: {e}") from e

    @override
    def close(self) -> None:
        """Flush pending events and stop libhoney's worker threads."""
        if self._closed:
            return
        self._closed = True
        try:
            self._client.close()
        except Exception as e:
            raise SinkError(f"Failed to close libhoney client: {e}") from e


def create_libhoney_sink(
    write_key: str | None,
    dataset: str,
    api_host: str = DEFAULT_API_HOST,
) -> LibhoneyEventSink:
    """
    Create a libhoney event sink with the given configuration.

    Args:
        write_key: Honeycomb write key (API key)
        dataset: Default dataset for events
        api_host: Base URL of the Honeycomb API

    Returns:
        Configured LibhoneyEventSink instance

    Raises:
        ConfigurationError: If the write key is missing or libhoney cannot be set up
    """
    if not write_key:
        raise ConfigurationError(
            "Honeycomb write key not provided. Pass write_key, set the HONEYCOMB_WRITE_KEY "
            "environment variable, or supply a pre-built sink."
        )

    config = LibhoneySinkConfig(write_key=write_key, dataset=dataset, api_host=api_host)
    try:
        return LibhoneyEventSink(config)
    except Exception as e:
        raise ConfigurationError(f"Failed to create libhoney client: {e}") from e
