"""Config – 12-factor settings, loaders, and validation errors."""

from mp_http.config.settings import EnvSettingsLoader, HttpClientSettings, Settings
from mp_http.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "HttpClientSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
]
