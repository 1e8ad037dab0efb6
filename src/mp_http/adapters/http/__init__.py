"""HTTP adapter – async httpx client wrapper with base-URL and header handling."""
from mp_http.adapters.http.auth import basic_auth_header, prepare_basic_auth
from mp_http.adapters.http.builder import build_url, merge_headers, validate_method
from mp_http.adapters.http.client import FrozenHttpClient, HttpClient
from mp_http.adapters.http.legacy import LegacyHttpClient, LinksResponse, MetaResponse
from mp_http.adapters.http.options import (
    DEFAULT_TIMEOUT,
    Option,
    with_headers,
    with_logger,
    with_timeout,
    with_transport,
    with_user_agent,
)
from mp_http.adapters.http.response import Response

__all__ = [
    "DEFAULT_TIMEOUT",
    "FrozenHttpClient",
    "HttpClient",
    "LegacyHttpClient",
    "LinksResponse",
    "MetaResponse",
    "Option",
    "Response",
    "basic_auth_header",
    "build_url",
    "merge_headers",
    "prepare_basic_auth",
    "validate_method",
    "with_headers",
    "with_logger",
    "with_timeout",
    "with_transport",
    "with_user_agent",
]
