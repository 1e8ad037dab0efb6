"""HTTP header multimap value type."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping, Sequence
from typing import Union

import httpx

HeaderValues = Union[str, Sequence[str]]
HeadersLike = Union["Headers", httpx.Headers, Mapping[str, HeaderValues]]


def canonical_header_key(key: str) -> str:
    """Return the canonical MIME form of *key* (``x-request-id`` -> ``X-Request-Id``).

    Keys containing characters outside the token alphabet (spaces, colons)
    are returned unchanged.
    """
    if not key or any(c in key for c in " :\t\r\n"):
        return key
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


class Headers(MutableMapping[str, list[str]]):
    """Case-insensitive mapping of header name to an ordered list of values.

    Keys are stored in canonical form, so ``headers["content-type"]`` and
    ``headers["Content-Type"]`` address the same entry. Item assignment
    replaces; :meth:`add` appends.

    Instances are not thread-safe.
    """

    __slots__ = ("_data",)

    def __init__(self, initial: HeadersLike | Iterable[tuple[str, str]] | None = None) -> None:
        self._data: dict[str, list[str]] = {}
        if initial is None:
            return
        for key, value in _iter_pairs(initial):
            self.add(key, value)

    def __getitem__(self, key: str) -> list[str]:
        return self._data[canonical_header_key(key)]

    def __setitem__(self, key: str, values: HeaderValues) -> None:
        self._data[canonical_header_key(key)] = _as_list(values)

    def __delitem__(self, key: str) -> None:
        del self._data[canonical_header_key(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and canonical_header_key(key) in self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == Headers(other)._data
        return NotImplemented

    def __repr__(self) -> str:
        return f"Headers({self._data!r})"

    def add(self, key: str, value: str) -> None:
        """Append *value* to the values of *key*."""
        self._data.setdefault(canonical_header_key(key), []).append(value)

    def set(self, key: str, value: str) -> None:
        """Replace all values of *key* with the single *value*."""
        self._data[canonical_header_key(key)] = [value]

    def get_first(self, key: str, default: str | None = None) -> str | None:
        values = self._data.get(canonical_header_key(key))
        return values[0] if values else default

    def values_of(self, key: str) -> list[str]:
        """Return a copy of every value of *key* (empty list if absent)."""
        return list(self._data.get(canonical_header_key(key), ()))

    def multi_items(self) -> list[tuple[str, str]]:
        return [(key, value) for key, values in self._data.items() for value in values]

    def clone(self) -> Headers:
        """Deep copy: the clone shares no value list with ``self``."""
        copy = Headers()
        copy._data = {key: list(values) for key, values in self._data.items()}
        return copy

    def to_httpx(self) -> httpx.Headers:
        return httpx.Headers(self.multi_items())


def _as_list(values: HeaderValues) -> list[str]:
    if isinstance(values, str):
        return [values]
    return list(values)


def _iter_pairs(source: HeadersLike | Iterable[tuple[str, str]]) -> Iterator[tuple[str, str]]:
    if isinstance(source, Headers):
        yield from source.multi_items()
    elif isinstance(source, httpx.Headers):
        yield from source.multi_items()
    elif isinstance(source, Mapping):
        for key, values in source.items():
            for value in _as_list(values):
                yield key, value
    else:
        yield from source


__all__ = ["HeaderValues", "Headers", "HeadersLike", "canonical_header_key"]
