"""Kernel – framework-agnostic building blocks (errors, value types)."""

from mp_http.kernel.errors import (
    BaseError,
    ErrorKind,
    HttpClientError,
    RequestValidationError,
)
from mp_http.kernel.types import Headers

__all__ = [
    "BaseError",
    "ErrorKind",
    "Headers",
    "HttpClientError",
    "RequestValidationError",
]
