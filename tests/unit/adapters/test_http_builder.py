"""Unit tests – HTTP request construction (method, URL, headers, request assembly)."""
from __future__ import annotations

import httpx
import pytest

from mp_http.adapters.http import HttpClient, with_headers
from mp_http.adapters.http.builder import (
    build_url,
    clean_path,
    join_path,
    merge_headers,
    parse_base_url,
    validate_method,
)
from mp_http.kernel.errors import (
    EmptyMethodError,
    ErrorKind,
    InvalidBaseURLError,
    MissingBaseURLError,
    UnsupportedMethodError,
)
from mp_http.kernel.types import Headers
from mp_http.resilience.deadline import Deadline, DeadlineExceededError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _query(url: httpx.URL) -> dict[str, list[str]]:
    params = url.params
    return {key: params.get_list(key) for key in params.keys()}


# ---------------------------------------------------------------------------
# validate_method
# ---------------------------------------------------------------------------


class TestValidateMethod:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("GET", "GET"),
            ("get", "GET"),
            ("pOSt", "POST"),
            ("put", "PUT"),
            ("PATCH", "PATCH"),
            ("delete", "DELETE"),
            ("HeAd", "HEAD"),
            ("options", "OPTIONS"),
            ("TrAcE", "TRACE"),
            ("CONNECT", "CONNECT"),
        ],
    )
    def test_supported_methods_are_canonicalised(self, raw: str, expected: str) -> None:
        assert validate_method(raw) == expected

    def test_empty_method_raises(self) -> None:
        with pytest.raises(EmptyMethodError) as exc_info:
            validate_method("")
        assert exc_info.value.kind is ErrorKind.EMPTY_METHOD
        assert "http method is empty" in exc_info.value.message

    def test_unsupported_method_names_original_input(self) -> None:
        with pytest.raises(UnsupportedMethodError) as exc_info:
            validate_method("foo")
        assert exc_info.value.method == "foo"
        assert "'foo'" in exc_info.value.message
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_METHOD

    def test_whitespace_is_not_trimmed(self) -> None:
        with pytest.raises(UnsupportedMethodError):
            validate_method(" GET")


# ---------------------------------------------------------------------------
# Path cleaning
# ---------------------------------------------------------------------------


class TestCleanPath:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/a//b", "/a/b"),
            ("/a/./b/", "/a/b"),
            ("/a/b/../c", "/a/c"),
            ("/../a", "/a"),
            ("a/../../b", "../b"),
            ("", "."),
            ("/", "/"),
        ],
    )
    def test_clean(self, raw: str, expected: str) -> None:
        assert clean_path(raw) == expected

    def test_join_keeps_base_for_rooted_extra(self) -> None:
        assert join_path("/api", "/v12//items") == "/api/v12/items"

    def test_join_with_empty_base_is_rooted(self) -> None:
        assert join_path("", "v1/items") == "/v1/items"

    def test_join_that_climbs_to_root(self) -> None:
        assert join_path("/api", "../..") == "/"


# ---------------------------------------------------------------------------
# build_url
# ---------------------------------------------------------------------------


class TestBuildUrl:
    def test_none_base_raises(self) -> None:
        with pytest.raises(MissingBaseURLError):
            build_url(None, "", None)

    def test_no_path_no_params_returns_equal_copy(self) -> None:
        base = httpx.URL("https://example.com/api?x=1")
        got = build_url(base, "", None)
        assert got == base
        assert got is not base
        assert got.scheme == base.scheme
        assert got.host == base.host
        assert got.path == base.path
        assert got.query == base.query

    def test_changing_result_leaves_base_untouched(self) -> None:
        base = httpx.URL("https://example.com/api")
        got = build_url(base, "", None).copy_with(host="changed.example.com")
        assert got.host == "changed.example.com"
        assert base.host == "example.com"

    def test_absolute_extra_path_joins_and_collapses(self) -> None:
        base = httpx.URL("https://example.com/api")
        assert build_url(base, "/v12//items").path == "/api/v12/items"

    def test_relative_extra_path_joins(self) -> None:
        base = httpx.URL("https://example.com/api")
        assert build_url(base, "v2/items").path == "/api/v2/items"

    def test_relative_extra_path_resolves_traversal(self) -> None:
        base = httpx.URL("https://example.com/base")
        assert build_url(base, "v1/../v2/items").path == "/base/v2/items"

    @pytest.mark.parametrize(
        ("extra", "raw_path", "path"),
        [
            ("x?y", b"/api/x%3Fy", "/api/x?y"),
            ("a#b", b"/api/a%23b", "/api/a#b"),
            ("100%", b"/api/100%25", "/api/100%"),
            ("a b", b"/api/a%20b", "/api/a b"),
            ("v1/user:me@x", b"/api/v1/user:me@x", "/api/v1/user:me@x"),
        ],
    )
    def test_reserved_characters_in_extra_path_are_escaped(
        self, extra: str, raw_path: bytes, path: str
    ) -> None:
        got = build_url(httpx.URL("http://h/api"), extra)
        assert got.raw_path == raw_path
        assert got.path == path
        assert got.query == b""

    def test_escaped_path_keeps_params(self) -> None:
        got = build_url(httpx.URL("http://h/api"), "x?y", {"q": "1"})
        assert got.raw_path == b"/api/x%3Fy?q=1"

    def test_params_appended_to_existing_query(self) -> None:
        base = httpx.URL("https://example.com/api?foo=1")
        got = build_url(base, "", {"foo": ["2"], "bar": ["a", "b"]})
        query = _query(got)
        assert sorted(query["foo"]) == ["1", "2"]
        assert sorted(query["bar"]) == ["a", "b"]
        assert set(query) == {"foo", "bar"}

    def test_params_are_percent_encoded(self) -> None:
        base = httpx.URL("https://example.com/")
        got = build_url(base, "search", {"q": "a b&c"})
        assert got.params["q"] == "a b&c"
        assert "a+b%26c" in str(got) or "a%20b%26c" in str(got)

    def test_scalar_param_values(self) -> None:
        base = httpx.URL("https://example.com/")
        got = build_url(base, "", {"page": 2, "flag": True})
        assert got.params["page"] == "2"
        assert got.params["flag"] == "true"

    def test_empty_params_leave_query_untouched(self) -> None:
        base = httpx.URL("https://example.com/api?x=1")
        assert build_url(base, "", {}).query == b"x=1"


class TestParseBaseUrl:
    def test_valid_absolute_url(self) -> None:
        url = parse_base_url("https://api.example.com/v1")
        assert url.host == "api.example.com"
        assert url.path == "/v1"

    @pytest.mark.parametrize("raw", ["/relative/path", "example.com", ""])
    def test_non_absolute_url_rejected(self, raw: str) -> None:
        with pytest.raises(InvalidBaseURLError) as exc_info:
            parse_base_url(raw)
        assert exc_info.value.kind is ErrorKind.INVALID_BASE_URL

    def test_unparseable_url_rejected(self) -> None:
        with pytest.raises(InvalidBaseURLError):
            parse_base_url("http://[::1]:namedport")


# ---------------------------------------------------------------------------
# merge_headers
# ---------------------------------------------------------------------------


class TestMergeHeaders:
    def test_both_none_returns_new_empty(self) -> None:
        got = merge_headers(None, None)
        assert isinstance(got, Headers)
        assert len(got) == 0

    def test_defaults_only_are_copied(self) -> None:
        base = Headers({"X-A": ["1", "2"], "X-B": "b"})
        got = merge_headers(base, None)
        assert got["X-A"] == ["1", "2"]
        assert got["X-B"] == ["b"]
        got.add("X-A", "3")
        assert base["X-A"] == ["1", "2"]

    def test_extra_only_is_copied(self) -> None:
        got = merge_headers(None, {"Y": ["a"]})
        assert got["Y"] == ["a"]

    def test_values_appended_defaults_first(self) -> None:
        defaults = {"K": ["b1", "b2"], "A": ["a1"]}
        extra = {"K": ["e1"], "Z": ["z1", "z2"]}
        got = merge_headers(defaults, extra)
        assert got == {"K": ["b1", "b2", "e1"], "A": ["a1"], "Z": ["z1", "z2"]}

    def test_no_shared_storage_in_either_direction(self) -> None:
        defaults = {"K": ["b1", "b2"], "A": ["a1"]}
        extra = {"K": ["e1"], "Z": ["z1", "z2"]}
        got = merge_headers(defaults, extra)

        defaults["K"].append("late")
        extra["Z"][0] = "mutated"
        assert got["K"] == ["b1", "b2", "e1"]
        assert got["Z"] == ["z1", "z2"]

        got["A"].append("x")
        got.add("K", "y")
        assert defaults == {"K": ["b1", "b2", "late"], "A": ["a1"]}
        assert extra == {"K": ["e1"], "Z": ["mutated", "z2"]}

    def test_keys_merge_case_insensitively(self) -> None:
        got = merge_headers({"x-trace": ["a"]}, {"X-TRACE": ["b"]})
        assert got["X-Trace"] == ["a", "b"]
        assert len(got) == 1


# ---------------------------------------------------------------------------
# HttpClient.build_request
# ---------------------------------------------------------------------------


class TestBuildRequest:
    def _client(self, base: str = "https://api.example.com/base", **headers: list[str]) -> HttpClient:
        return HttpClient(base, with_headers(headers or None))

    def test_builds_method_url_query_and_merged_headers(self) -> None:
        client = self._client(**{"X-Def": ["A"], "X-Both": ["Base"]})
        req = client.build_request(
            "get", "v1/items", {"p": ["1", "2"]}, {"X-Req": ["B"], "X-Both": ["Req"]}
        )
        assert req.method == "GET"
        assert req.url.scheme == "https"
        assert req.url.host == "api.example.com"
        assert req.url.path == "/base/v1/items"
        assert req.url.params.get_list("p") == ["1", "2"]
        assert req.headers.get_list("X-Def") == ["A"]
        assert req.headers.get_list("X-Req") == ["B"]
        assert req.headers.get_list("X-Both") == ["Base", "Req"]

    def test_client_defaults_of_transport_are_not_added(self) -> None:
        req = self._client().build_request("GET")
        assert "user-agent" not in req.headers
        assert req.headers["host"] == "api.example.com"

    def test_body_is_attached(self) -> None:
        req = self._client().build_request("POST", "items", body=b'{"x":1}')
        assert req.content == b'{"x":1}'
        assert req.headers["content-length"] == "7"

    def test_invalid_method_raises_after_url(self) -> None:
        with pytest.raises(UnsupportedMethodError):
            self._client().build_request("INVALID")

    def test_missing_base_wins_over_invalid_method(self) -> None:
        client = self._client()
        client._base = None  # type: ignore[assignment]
        with pytest.raises(MissingBaseURLError):
            client.build_request("INVALID")

    def test_transport_timeout_bound_to_request(self) -> None:
        req = self._client().build_request("GET")
        assert req.extensions["timeout"]["read"] == 10.0

    def test_deadline_shortens_timeout(self) -> None:
        req = self._client().build_request("GET", deadline=Deadline.after(seconds=2))
        assert 0 < req.extensions["timeout"]["read"] <= 2

    def test_expired_deadline_fails_preparation(self) -> None:
        with pytest.raises(DeadlineExceededError):
            self._client().build_request("GET", deadline=Deadline.after(seconds=-1))

    def test_base_is_never_mutated(self) -> None:
        client = self._client()
        before = client.base_url
        client.build_request("GET", "/other", {"q": "1"})
        assert client.base_url == before
        assert str(client.base_url) == "https://api.example.com/base"
