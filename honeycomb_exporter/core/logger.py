"""Logging setup for the Honeycomb exporter."""

from __future__ import annotations

import logging
from typing import Literal

LogLevel = Literal["silent", "error", "warn", "info", "debug"]

ROOT_LOGGER_NAME = "honeycomb_exporter"
DEFAULT_PREFIX = "HoneycombExporter"

_LEVELS: dict[str, int] = {
    "silent": logging.CRITICAL + 10,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_current_level: LogLevel = "info"
_handler: logging.Handler | None = None


def _root_logger() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def configure_logger(log_level: LogLevel = "info", prefix: str = DEFAULT_PREFIX) -> None:
    """
    Attach a single prefixed stream handler to the package logger.

    Calling it again replaces the previous handler instead of stacking a new one.

    Args:
        log_level: Logging level (silent, error, warn, info, debug)
        prefix: Text shown in front of every message
    """
    global _handler

    logger = _root_logger()
    if _handler is not None:
        logger.removeHandler(_handler)

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(f"[{prefix}] %(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
    _handler = handler

    set_log_level(log_level)


def set_log_level(log_level: LogLevel) -> None:
    """Set the level of the package logger."""
    global _current_level

    if log_level not in _LEVELS:
        raise ValueError(f"Invalid log level: {log_level!r}. Expected one of {sorted(_LEVELS)}")
    _current_level = log_level
    _root_logger().setLevel(_LEVELS[log_level])


def get_log_level() -> LogLevel:
    """Get the level last set through set_log_level."""
    return _current_level
