"""Observability – structured logging."""
from mp_http.observability.logging import JsonLoggerFactory, Logger, get_logger, nop_logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger", "nop_logger"]
