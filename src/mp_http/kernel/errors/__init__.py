"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── RequestValidationError    (request.py)
    │   ├── EmptyMethodError
    │   ├── UnsupportedMethodError
    │   ├── MissingBaseURLError
    │   ├── InvalidBaseURLError
    │   └── FrozenClientError
    ├── HttpClientError           (transport.py)
    │   ├── RequestPreparationError
    │   ├── RequestSendError
    │   ├── ResponseBodyReadError
    │   └── StatusCodeNotSuccessError
    └── ConfigError               (mp_http.config.validation)

Every error carries an :class:`ErrorKind`; use ``err.is_kind(...)`` or
:func:`find_kind` to match structurally through wrapping.
"""

from mp_http.kernel.errors.base import BaseError, ErrorKind, find_kind
from mp_http.kernel.errors.request import (
    EmptyMethodError,
    FrozenClientError,
    InvalidBaseURLError,
    MissingBaseURLError,
    RequestValidationError,
    UnsupportedMethodError,
)
from mp_http.kernel.errors.transport import (
    HttpClientError,
    RequestPreparationError,
    RequestSendError,
    ResponseBodyReadError,
    StatusCodeNotSuccessError,
)

__all__ = [
    "BaseError",
    "EmptyMethodError",
    "ErrorKind",
    "FrozenClientError",
    "HttpClientError",
    "InvalidBaseURLError",
    "MissingBaseURLError",
    "RequestPreparationError",
    "RequestSendError",
    "RequestValidationError",
    "ResponseBodyReadError",
    "StatusCodeNotSuccessError",
    "UnsupportedMethodError",
    "find_kind",
]
