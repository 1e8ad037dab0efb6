"""HTTP adapter – deprecated call shapes kept for existing callers.

Everything here delegates to :class:`~mp_http.adapters.http.HttpClient`;
new code should use it directly.
"""
from __future__ import annotations

import dataclasses
import warnings
from typing import Any, Awaitable

from mp_http.adapters.http.builder import merge_headers
from mp_http.adapters.http.client import HttpClient
from mp_http.adapters.http.options import with_timeout
from mp_http.kernel.errors import StatusCodeNotSuccessError

# Deprecated header constants.
CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_TYPE_JSON = "application/json"
AUTHORIZATION_HEADER = "Authorization"


@dataclasses.dataclass(frozen=True)
class LinksResponse:
    """Deprecated: HAL-style pagination links (``_links`` block)."""

    self_href: str | None = None
    first: str | None = None
    last: str | None = None
    prev: str | None = None
    next: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LinksResponse":
        def href(name: str) -> str | None:
            entry = data.get(name) or {}
            return entry.get("href")

        return cls(
            self_href=href("self"),
            first=href("first"),
            last=href("last"),
            prev=href("prev"),
            next=href("next"),
        )


@dataclasses.dataclass(frozen=True)
class MetaResponse:
    """Deprecated: pagination metadata (``_meta`` block)."""

    total_count: int = 0
    page_count: int = 0
    current_page: int = 0
    per_page: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MetaResponse":
        return cls(
            total_count=int(data.get("totalCount", 0)),
            page_count=int(data.get("pageCount", 0)),
            current_page=int(data.get("currentPage", 0)),
            per_page=int(data.get("perPage", 0)),
        )


_Result = tuple[bytes | None, int | None]


def _deprecated(name: str) -> None:
    warnings.warn(
        f"LegacyHttpClient.{name} is deprecated; use HttpClient instead",
        DeprecationWarning,
        stacklevel=3,
    )


class LegacyHttpClient:
    """Deprecated single-valued header/param client returning ``(body, status_code)``.

    Non-2xx responses are returned, not raised, as the old API did. Every other
    failure raises the same errors as :class:`HttpClient`.

    The ``send_*`` methods warn when called and return an awaitable.
    """

    def __init__(self, base_url: str, timeout: int | None = None) -> None:
        _deprecated("__init__")
        self.headers: dict[str, str] = {}
        self._client = HttpClient(base_url, with_timeout(timeout))

    async def __aenter__(self) -> "LegacyHttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.aclose()

    def set_header(self, key: str, value: str) -> "LegacyHttpClient":
        """Replace the value of *key* (unlike :meth:`HttpClient.add_header`)."""
        _deprecated("set_header")
        self.headers[key] = value
        return self

    def send_get(self, path: str, params: dict[str, str] | None = None,
                 headers: dict[str, str] | None = None) -> Awaitable[_Result]:
        _deprecated("send_get")
        return self._send("GET", path, params, headers, None)

    def send_post(self, path: str, json_data: bytes | None = None, query_params: dict[str, str] | None = None,
                  headers: dict[str, str] | None = None) -> Awaitable[_Result]:
        _deprecated("send_post")
        return self._send("POST", path, query_params, headers, json_data)

    def send_put(self, path: str, json_data: bytes | None = None, query_params: dict[str, str] | None = None,
                 headers: dict[str, str] | None = None) -> Awaitable[_Result]:
        _deprecated("send_put")
        return self._send("PUT", path, query_params, headers, json_data)

    def send_patch(self, path: str, json_data: bytes | None = None, query_params: dict[str, str] | None = None,
                   headers: dict[str, str] | None = None) -> Awaitable[_Result]:
        _deprecated("send_patch")
        return self._send("PATCH", path, query_params, headers, json_data)

    def send_delete(self, path: str, params: dict[str, str] | None = None,
                    headers: dict[str, str] | None = None) -> Awaitable[_Result]:
        _deprecated("send_delete")
        return self._send("DELETE", path, params, headers, None)

    async def _send(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None,
        headers: dict[str, str] | None,
        body: bytes | None,
    ) -> _Result:
        request_headers = merge_headers(self.headers, headers)
        try:
            response = await self._client.send_request(method, path, params, request_headers, body)
        except StatusCodeNotSuccessError as exc:
            response = exc.response  # type: ignore[assignment]
        return response.body, response.status_code


__all__ = [
    "AUTHORIZATION_HEADER",
    "CONTENT_TYPE_HEADER",
    "CONTENT_TYPE_JSON",
    "LegacyHttpClient",
    "LinksResponse",
    "MetaResponse",
]
