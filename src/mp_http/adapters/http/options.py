"""HTTP adapter – functional options for :class:`HttpClient` construction.

Typical usage::

    HttpClient(base_url, with_timeout(5.0), with_logger(get_logger(__name__)))

Options are applied in the order given; when the same setting is supplied
more than once, the last one wins.
"""
from __future__ import annotations

import dataclasses
from typing import Callable, Final

import httpx

from mp_http.config.validation import InvalidSettingValueError
from mp_http.kernel.types import Headers, HeadersLike
from mp_http.observability.logging import Logger, nop_logger

DEFAULT_TIMEOUT: Final[float] = 10.0


@dataclasses.dataclass
class OptionList:
    """Configuration collected from options before a client is constructed.

    After :func:`apply_options` every field except ``transport`` and
    ``user_agent`` is guaranteed to be set.
    """

    logger: Logger | None = None
    timeout: float | None = None
    headers: Headers | None = None
    transport: httpx.AsyncBaseTransport | None = None
    user_agent: str | None = None


Option = Callable[[OptionList], None]


def with_logger(logger: Logger | None) -> Option:
    """Use *logger* (structlog-style) for request diagnostics; ``None`` means no-op."""

    def _apply(o: OptionList) -> None:
        o.logger = logger

    return _apply


def with_timeout(timeout: float | None) -> Option:
    """Set the transport timeout in seconds; ``0`` or ``None`` means :data:`DEFAULT_TIMEOUT`."""

    def _apply(o: OptionList) -> None:
        o.timeout = timeout

    return _apply


def with_headers(headers: HeadersLike | None) -> Option:
    """Set the default headers sent with every request (copied)."""

    def _apply(o: OptionList) -> None:
        o.headers = None if headers is None else Headers(headers)

    return _apply


def with_transport(transport: httpx.AsyncBaseTransport | None) -> Option:
    """Send requests through *transport* instead of the default network transport."""

    def _apply(o: OptionList) -> None:
        o.transport = transport

    return _apply


def with_user_agent(user_agent: str) -> Option:
    def _apply(o: OptionList) -> None:
        o.user_agent = user_agent

    return _apply


def apply_options(*opts: Option) -> OptionList:
    """Apply *opts* in order, then normalise unset values to safe defaults."""
    o = OptionList()
    for opt in opts:
        opt(o)

    o.logger = normalize_logger(o.logger)
    o.timeout = normalize_timeout(o.timeout)
    o.headers = normalize_headers(o.headers)
    if o.user_agent:
        o.headers.set("User-Agent", o.user_agent)

    return o


def normalize_logger(logger: Logger | None) -> Logger:
    return nop_logger() if logger is None else logger


def normalize_timeout(timeout: float | None) -> float:
    if timeout is None or timeout == 0:
        return DEFAULT_TIMEOUT
    if timeout < 0:
        raise InvalidSettingValueError("timeout", timeout, "must be positive")
    return float(timeout)


def normalize_headers(headers: Headers | None) -> Headers:
    return Headers() if headers is None else headers


__all__ = [
    "DEFAULT_TIMEOUT",
    "Option",
    "OptionList",
    "apply_options",
    "normalize_headers",
    "normalize_logger",
    "normalize_timeout",
    "with_headers",
    "with_logger",
    "with_timeout",
    "with_transport",
    "with_user_agent",
]
