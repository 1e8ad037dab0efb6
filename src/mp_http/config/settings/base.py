"""Config settings – Settings base class and HttpClientSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_http.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class HttpClientSettings(Settings):
    """Environment-driven configuration for :class:`~mp_http.adapters.http.HttpClient`.

    Read from ``HTTP_CLIENT_BASE_URL``, ``HTTP_CLIENT_TIMEOUT_SECONDS`` and
    ``HTTP_CLIENT_USER_AGENT`` by :class:`EnvSettingsLoader`.
    A zero timeout means "use the client default".
    """

    _prefix: ClassVar[str] = "HTTP_CLIENT"

    base_url: str
    timeout_seconds: float = 0.0
    user_agent: str = ""

    def _validate(self) -> None:
        if not self.base_url:
            raise InvalidSettingValueError("base_url", self.base_url, "must not be empty")
        if self.timeout_seconds < 0:
            raise InvalidSettingValueError("timeout_seconds", self.timeout_seconds, "must not be negative")


__all__ = ["HttpClientSettings", "Settings"]
