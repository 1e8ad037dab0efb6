"""Observability – structured logging ports and helpers."""
from mp_http.observability.logging.factory import JsonLoggerFactory
from mp_http.observability.logging.processors import drop_event, get_logger, nop_logger
from mp_http.observability.logging.protocol import Logger

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "drop_event",
    "get_logger",
    "nop_logger",
]
