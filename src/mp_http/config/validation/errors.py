"""Config validation errors."""
from mp_http.kernel.errors import BaseError, ErrorKind


class ConfigError(BaseError):
    """Client configuration is invalid or could not be read."""
    default_code = "config_error"
    kind = ErrorKind.CONFIG


class MissingRequiredSettingError(ConfigError):
    """A setting without a default has no value."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} is required but not set", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used (unparseable, negative timeout, empty URL)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} is invalid: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
