"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from mp_http.config.settings.base import Settings
from mp_http.config.validation import InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})


class EnvSettingsLoader:
    """Build a :class:`Settings` dataclass from ``<PREFIX>_<FIELD>`` variables.

    ``HttpClientSettings.timeout_seconds`` is read from
    ``HTTP_CLIENT_TIMEOUT_SECONDS``. Fields typed ``bool``, ``int`` or
    ``float`` are coerced; every other field receives the raw string.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    @staticmethod
    def env_key(settings_class: type[Settings], field_name: str) -> str:
        prefix = settings_class._prefix
        return f"{prefix}_{field_name}".upper() if prefix else field_name.upper()

    def load(self, settings_class: type[T]) -> T:
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = self.env_key(settings_class, field.name)
            raw = self._environ.get(key)
            if raw is None:
                if _is_required(field):
                    raise MissingRequiredSettingError(key)
                continue
            try:
                values[field.name] = _coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc
        return settings_class(**values)


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


def _coerce(raw: str, type_hint: Any) -> Any:
    # Annotations are strings under postponed evaluation.
    name = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
    if name == "bool":
        return raw.strip().lower() in _TRUE
    if name == "int":
        return int(raw)
    if name == "float":
        return float(raw)
    return raw


__all__ = ["EnvSettingsLoader"]
