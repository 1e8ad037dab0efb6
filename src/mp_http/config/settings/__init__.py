"""Config settings – 12-factor env-based configuration."""
from mp_http.config.settings.base import HttpClientSettings, Settings
from mp_http.config.settings.loaders import EnvSettingsLoader

__all__ = ["EnvSettingsLoader", "HttpClientSettings", "Settings"]
