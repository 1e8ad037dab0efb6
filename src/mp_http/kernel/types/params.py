"""Query parameter value type."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Union

ParamValues = Union[str, int, float, bool, Sequence[Union[str, int, float, bool]]]
Params = Mapping[str, ParamValues]


def iter_params(params: Params | None) -> Iterator[tuple[str, str]]:
    """Yield ``(key, value)`` pairs with "repeat key" semantics for multi-valued params."""
    if not params:
        return
    for key, values in params.items():
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            values = [values]  # type: ignore[list-item]
        for value in values:
            yield key, _stringify(value)


def _stringify(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = ["ParamValues", "Params", "iter_params"]
