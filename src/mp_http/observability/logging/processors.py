"""Observability – structlog logger helpers.

``get_logger(name)`` returns a bound structlog logger; ``nop_logger()``
returns one that discards every event.
"""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def drop_event(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """structlog processor that discards every event."""
    raise structlog.DropEvent


def nop_logger() -> Any:
    """Return a structlog logger that never emits anything."""
    return structlog.wrap_logger(structlog.ReturnLogger(), processors=[drop_event])


__all__ = ["drop_event", "get_logger", "nop_logger"]
