"""HTTP adapter – request-construction helpers.

Pure functions used by :class:`~mp_http.adapters.http.HttpClient` to turn a
(method, path, params, headers) call into an outgoing request:

* :func:`validate_method` — canonical uppercase method or a validation error.
* :func:`build_url` — base URL + joined path + appended query.
* :func:`merge_headers` — defaults then request headers, append semantics.
"""
from __future__ import annotations

from typing import Final
from urllib.parse import quote

import httpx

from mp_http.kernel.errors import (
    EmptyMethodError,
    InvalidBaseURLError,
    MissingBaseURLError,
    UnsupportedMethodError,
)
from mp_http.kernel.types import Headers, HeadersLike, Params, iter_params

# Sub-delimiters, ":" and "@" are literal in a path; "/" separates segments.
_PATH_SAFE: Final[str] = "/:@!$&'()*+,;="

SUPPORTED_METHODS: Final[frozenset[str]] = frozenset(
    {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE", "CONNECT"}
)


def validate_method(method: str) -> str:
    """Return the canonical uppercase form of *method*.

    Raises :class:`EmptyMethodError` for ``""`` and
    :class:`UnsupportedMethodError` (naming the input as given) for anything
    that is not a standard HTTP method. Whitespace is not trimmed.
    """
    if method == "":
        raise EmptyMethodError()
    canonical = method.upper()
    if canonical not in SUPPORTED_METHODS:
        raise UnsupportedMethodError(method)
    return canonical


def parse_base_url(raw: str) -> httpx.URL:
    """Parse *raw* into an absolute URL, raising :class:`InvalidBaseURLError` otherwise."""
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidBaseURLError(raw, str(exc), cause=exc) from exc
    if not url.scheme or not url.host:
        raise InvalidBaseURLError(raw, "URL must be absolute (scheme and host required)")
    return url


def clean_path(path: str) -> str:
    """Lexically normalise *path*: collapse ``//``, resolve ``.`` and ``..``.

    A rooted path never climbs above ``/``; the trailing separator is dropped.
    """
    rooted = path.startswith("/")
    parts: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(segment)
    cleaned = "/".join(parts)
    if rooted:
        return "/" + cleaned
    return cleaned or "."


def join_path(base_path: str, extra_path: str) -> str:
    """Join *extra_path* onto *base_path* and clean the result into a rooted path.

    A leading ``/`` on *extra_path* does not discard *base_path*:
    ``join_path("/api", "/v12//items") == "/api/v12/items"``.
    """
    joined = clean_path(f"{base_path}/{extra_path}" if base_path else extra_path)
    if joined == ".":
        return "/"
    return joined if joined.startswith("/") else "/" + joined


def build_url(base: httpx.URL | None, extra_path: str = "", params: Params | None = None) -> httpx.URL:
    """Derive a request URL from *base*; *base* itself is never modified.

    The joined path is treated as decoded and percent-encoded, so ``?``, ``#``
    and ``%`` in *extra_path* become part of the path.

    *params* are appended to any query already present on *base*; every value
    of every key becomes its own ``key=value`` entry.
    """
    if base is None:
        raise MissingBaseURLError()

    url = base.copy_with()

    if extra_path:
        url = url.copy_with(path=quote(join_path(base.path, extra_path), safe=_PATH_SAFE))

    extra_params = list(iter_params(params))
    if extra_params:
        query = httpx.QueryParams(list(url.params.multi_items()) + extra_params)
        url = url.copy_with(query=str(query).encode("ascii"))

    return url


def merge_headers(defaults: HeadersLike | None, extra: HeadersLike | None) -> Headers:
    """Merge two header sets into a new :class:`Headers`.

    Values of *defaults* come first, then values of *extra*; a key present in
    both keeps every value (``K: [b1, b2] + K: [e1] -> K: [b1, b2, e1]``).
    The result shares no value list with either input.
    """
    merged = Headers()
    for source in (defaults, extra):
        if not source:
            continue
        for key, value in Headers(source).multi_items():
            merged.add(key, value)
    return merged


__all__ = [
    "SUPPORTED_METHODS",
    "build_url",
    "clean_path",
    "join_path",
    "merge_headers",
    "parse_base_url",
    "validate_method",
]
