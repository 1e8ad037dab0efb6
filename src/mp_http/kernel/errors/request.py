"""Request validation errors — raised while a request is being prepared."""

from __future__ import annotations

from typing import Any

from mp_http.kernel.errors.base import BaseError, ErrorKind


class RequestValidationError(BaseError):
    """Request inputs are invalid; never retried, no partial response."""

    default_code = "request_validation_error"


class EmptyMethodError(RequestValidationError):
    default_code = "empty_method"
    kind = ErrorKind.EMPTY_METHOD

    def __init__(self, **kwargs: Any) -> None:
        super().__init__("http method is empty", **kwargs)


class UnsupportedMethodError(RequestValidationError):
    """The method is not one of the standard HTTP methods."""

    default_code = "unsupported_method"
    kind = ErrorKind.UNSUPPORTED_METHOD

    def __init__(self, method: str, **kwargs: Any) -> None:
        super().__init__(f"unsupported http method {method!r}", **kwargs)
        self.method = method


class MissingBaseURLError(RequestValidationError):
    default_code = "missing_base_url"
    kind = ErrorKind.MISSING_BASE_URL

    def __init__(self, **kwargs: Any) -> None:
        super().__init__("base URL is not set", **kwargs)


class InvalidBaseURLError(RequestValidationError):
    """The base URL does not parse as an absolute URL."""

    default_code = "invalid_base_url"
    kind = ErrorKind.INVALID_BASE_URL

    def __init__(self, base_url: str, reason: str, **kwargs: Any) -> None:
        super().__init__(f"invalid base URL {base_url!r}: {reason}", **kwargs)
        self.base_url = base_url
        self.reason = reason


class FrozenClientError(RequestValidationError):
    default_code = "frozen_client"
    kind = ErrorKind.FROZEN_CLIENT

    def __init__(self, operation: str, **kwargs: Any) -> None:
        super().__init__(f"cannot {operation} on a frozen client", **kwargs)
        self.operation = operation


__all__ = [
    "EmptyMethodError",
    "FrozenClientError",
    "InvalidBaseURLError",
    "MissingBaseURLError",
    "RequestValidationError",
    "UnsupportedMethodError",
]
