"""HTTP client errors — failures of a prepared request on its way through the transport."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mp_http.kernel.errors.base import BaseError, ErrorKind

if TYPE_CHECKING:
    from mp_http.adapters.http.response import Response


class HttpClientError(BaseError):
    """A request could not be completed, or completed with a non-2xx status.

    ``response`` is populated only where response data exists: a partial
    response (status + headers) on a body read failure, a full response on a
    non-2xx status.
    """

    default_code = "http_client_error"

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        response: Response | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.method = method
        self.url = url
        self.response = response


class RequestPreparationError(HttpClientError):
    default_code = "request_preparation_failed"
    kind = ErrorKind.PREPARATION_FAILED

    def __init__(self, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(f"failed to prepare a request: {_describe(cause)}", cause=cause, **kwargs)


class RequestSendError(HttpClientError):
    """The transport failed: connection refused, timeout, deadline."""

    default_code = "request_send_failed"
    kind = ErrorKind.SEND_FAILED

    def __init__(self, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(f"failed to send a request: {_describe(cause)}", cause=cause, **kwargs)


class ResponseBodyReadError(HttpClientError):
    """Reading the response body failed; ``response`` holds status and headers only."""

    default_code = "response_body_unreadable"
    kind = ErrorKind.RESPONSE_BODY_UNREADABLE

    def __init__(self, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(f"failed to read response body: {_describe(cause)}", cause=cause, **kwargs)


class StatusCodeNotSuccessError(HttpClientError):
    """The request succeeded end-to-end but the status is outside ``[200, 299]``."""

    default_code = "status_code_not_success"
    kind = ErrorKind.STATUS_NOT_SUCCESS

    def __init__(self, status_code: int, **kwargs: Any) -> None:
        super().__init__(f"status code is not success: {status_code}", **kwargs)
        self.status_code = status_code
        self.detail.setdefault("status_code", status_code)


def _describe(cause: BaseException) -> str:
    if isinstance(cause, BaseError):
        return cause.message
    return str(cause) or type(cause).__name__


__all__ = [
    "HttpClientError",
    "RequestPreparationError",
    "RequestSendError",
    "ResponseBodyReadError",
    "StatusCodeNotSuccessError",
]
