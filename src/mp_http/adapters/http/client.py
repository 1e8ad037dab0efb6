"""HTTP adapter – HttpClient.

Concurrency: sending requests concurrently on one client is safe; each call
builds its own URL, merged headers and request. Mutating the default headers
(:meth:`HttpClient.add_header`, :meth:`HttpClient.add_headers`,
:meth:`HttpClient.replace_headers`) while requests are in flight is not, and
no lock is taken. Finish setup first, or use :meth:`HttpClient.frozen`.
"""
from __future__ import annotations

import contextlib
import time
from typing import Any, AsyncIterator

import httpx

from mp_http.adapters.http.builder import build_url, merge_headers, parse_base_url, validate_method
from mp_http.adapters.http.options import Option, apply_options, with_timeout, with_user_agent
from mp_http.adapters.http.response import Response
from mp_http.config.settings import HttpClientSettings
from mp_http.kernel.errors import (
    FrozenClientError,
    RequestPreparationError,
    RequestSendError,
    ResponseBodyReadError,
    StatusCodeNotSuccessError,
)
from mp_http.kernel.types import HeaderValues, Headers, HeadersLike, Params, iter_params
from mp_http.observability.logging import Logger
from mp_http.resilience.deadline import Deadline, deadline_aware, resolve_deadline

Body = bytes | str | AsyncIterator[bytes] | None


class HttpClient:
    """Async HTTP client bound to a base URL, with default headers merged into every request.

    Non-2xx responses raise :class:`StatusCodeNotSuccessError`; the full
    :class:`Response` is available as ``exc.response``.
    """

    def __init__(self, base_url: str, *options: Option) -> None:
        o = apply_options(*options)
        self._base = parse_base_url(base_url)
        self._headers: Headers = o.headers  # type: ignore[assignment]
        self._logger: Logger = o.logger  # type: ignore[assignment]
        self._timeout: float = o.timeout  # type: ignore[assignment]
        self._client = httpx.AsyncClient(timeout=self._timeout, transport=o.transport)

    @classmethod
    def from_settings(cls, settings: HttpClientSettings, *options: Option) -> "HttpClient":
        """Build a client from *settings*; explicit *options* are applied after and win."""
        opts: list[Option] = [with_timeout(settings.timeout_seconds)]
        if settings.user_agent:
            opts.append(with_user_agent(settings.user_agent))
        return cls(settings.base_url, *opts, *options)

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def base_url(self) -> httpx.URL:
        return self._base

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def headers(self) -> Headers:
        """A copy of the default headers."""
        return self._headers.clone()

    # ------------------------------------------------------------------
    # Default headers
    # ------------------------------------------------------------------

    def add_header(self, key: str, values: HeaderValues) -> "HttpClient":
        """Append *values* to the default values of *key*."""
        for value in [values] if isinstance(values, str) else values:
            self._headers.add(key, value)
        return self

    def add_headers(self, headers: HeadersLike) -> "HttpClient":
        for key, value in Headers(headers).multi_items():
            self._headers.add(key, value)
        return self

    def replace_headers(self, headers: HeadersLike | None) -> "HttpClient":
        """Discard every default header and use a copy of *headers* instead."""
        self._headers = Headers(headers)
        return self

    def frozen(self) -> "FrozenHttpClient":
        """Return a view of this client whose default headers can no longer change.

        The frozen client shares the underlying transport; close only one of them.
        """
        return FrozenHttpClient._from(self)

    # ------------------------------------------------------------------
    # Request pipeline
    # ------------------------------------------------------------------

    def build_request(
        self,
        method: str,
        path: str = "",
        params: Params | None = None,
        headers: HeadersLike | None = None,
        body: Body = None,
        *,
        deadline: Deadline | None = None,
    ) -> httpx.Request:
        """Assemble the outgoing request; the first failing step raises."""
        url = build_url(self._base, path, params)
        canonical = validate_method(method)
        timeout = self._timeout
        dl = resolve_deadline(deadline)
        if dl is not None:
            dl.raise_if_expired()
            timeout = min(timeout, dl.remaining_seconds)
        return httpx.Request(
            canonical,
            str(url),
            headers=merge_headers(self._headers, headers).to_httpx(),
            content=body,
            extensions={"timeout": httpx.Timeout(timeout).as_dict()},
        )

    async def send_request(
        self,
        method: str,
        path: str = "",
        params: Params | None = None,
        headers: HeadersLike | None = None,
        body: Body = None,
        *,
        deadline: Deadline | None = None,
    ) -> Response:
        """Build, send and read a request.

        Args:
            method: HTTP method, any letter case.
            path: Joined onto the base URL path (``..`` and ``//`` are normalised).
            params: Query parameters appended to the base URL query.
            headers: Request headers, appended to the client defaults.
            body: Optional request body.
            deadline: Overrides the deadline bound via ``DeadlineContext``.

        Raises:
            RequestPreparationError: the request could not be built.
            RequestSendError: the transport failed (including deadline expiry).
            ResponseBodyReadError: ``exc.response`` holds status and headers only.
            StatusCodeNotSuccessError: ``exc.response`` holds the full response.
        """
        start = time.perf_counter()
        dl = resolve_deadline(deadline)

        try:
            request = self.build_request(method, path, params, headers, body, deadline=dl)
        except Exception as exc:
            self._logger.error(
                "request_prepare_failed",
                method=method,
                path=path,
                query=str(httpx.QueryParams(list(iter_params(params)))),
                error=str(exc),
            )
            raise RequestPreparationError(exc, method=method) from exc

        url = str(request.url)
        try:
            raw = await deadline_aware(self._client.send(request, stream=True), dl)
        except Exception as exc:
            self._logger.error(
                "request_send_failed",
                method=request.method,
                url=url,
                duration=_elapsed(start),
                error=str(exc),
            )
            raise RequestSendError(exc, method=request.method, url=url) from exc

        async with self._scoped(raw, request.method, url):
            try:
                content = await deadline_aware(raw.aread(), dl)
            except Exception as exc:
                self._logger.error(
                    "response_body_read_failed",
                    method=request.method,
                    url=url,
                    status=raw.status_code,
                    duration=_elapsed(start),
                    error=str(exc),
                )
                partial = Response(status_code=raw.status_code, headers=Headers(raw.headers))
                raise ResponseBodyReadError(exc, method=request.method, url=url, response=partial) from exc

        self._logger.debug(
            "request_completed",
            method=request.method,
            url=url,
            status=raw.status_code,
            duration=_elapsed(start),
            resp_bytes=len(content),
        )

        response = Response(status_code=raw.status_code, body=content, headers=Headers(raw.headers))
        if not response.is_success:
            raise StatusCodeNotSuccessError(
                response.status_code, method=request.method, url=url, response=response
            )
        return response

    @contextlib.asynccontextmanager
    async def _scoped(self, raw: httpx.Response, method: str, url: str) -> AsyncIterator[httpx.Response]:
        try:
            yield raw
        finally:
            try:
                await raw.aclose()
            except Exception as exc:
                self._logger.warning(
                    "response_body_close_failed", method=method, url=url, error=str(exc)
                )

    # ------------------------------------------------------------------
    # Verb wrappers
    # ------------------------------------------------------------------

    async def get(self, path: str = "", params: Params | None = None,
                  headers: HeadersLike | None = None, *, deadline: Deadline | None = None) -> Response:
        return await self.send_request("GET", path, params, headers, None, deadline=deadline)

    async def head(self, path: str = "", params: Params | None = None,
                   headers: HeadersLike | None = None, *, deadline: Deadline | None = None) -> Response:
        return await self.send_request("HEAD", path, params, headers, None, deadline=deadline)

    async def options(self, path: str = "", params: Params | None = None,
                      headers: HeadersLike | None = None, *, deadline: Deadline | None = None) -> Response:
        return await self.send_request("OPTIONS", path, params, headers, None, deadline=deadline)

    async def post(self, path: str = "", params: Params | None = None, headers: HeadersLike | None = None,
                   body: Body = None, *, deadline: Deadline | None = None) -> Response:
        return await self.send_request("POST", path, params, headers, body, deadline=deadline)

    async def put(self, path: str = "", params: Params | None = None, headers: HeadersLike | None = None,
                  body: Body = None, *, deadline: Deadline | None = None) -> Response:
        return await self.send_request("PUT", path, params, headers, body, deadline=deadline)

    async def patch(self, path: str = "", params: Params | None = None, headers: HeadersLike | None = None,
                    body: Body = None, *, deadline: Deadline | None = None) -> Response:
        return await self.send_request("PATCH", path, params, headers, body, deadline=deadline)

    async def delete(self, path: str = "", params: Params | None = None, headers: HeadersLike | None = None,
                     body: Body = None, *, deadline: Deadline | None = None) -> Response:
        return await self.send_request("DELETE", path, params, headers, body, deadline=deadline)


class FrozenHttpClient(HttpClient):
    """HttpClient whose default headers are fixed at creation."""

    @classmethod
    def _from(cls, source: HttpClient) -> "FrozenHttpClient":
        frozen = cls.__new__(cls)
        frozen._base = source._base
        frozen._headers = source._headers.clone()
        frozen._logger = source._logger
        frozen._timeout = source._timeout
        frozen._client = source._client
        return frozen

    def add_header(self, key: str, values: HeaderValues) -> "HttpClient":
        raise FrozenClientError("add_header")

    def add_headers(self, headers: HeadersLike) -> "HttpClient":
        raise FrozenClientError("add_headers")

    def replace_headers(self, headers: HeadersLike | None) -> "HttpClient":
        raise FrozenClientError("replace_headers")

    def frozen(self) -> "FrozenHttpClient":
        return self


def _elapsed(start: float) -> float:
    return round(time.perf_counter() - start, 6)


__all__ = ["Body", "FrozenHttpClient", "HttpClient"]
