"""Config errors – raised while reading ``LOG_*`` settings."""
from __future__ import annotations

from svclog.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Logger settings could not be loaded; no logger was built."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Environment variable {env_key} is required")
        self.setting_name = env_key


class InvalidSettingValueError(ConfigError):
    """A field was supplied but cannot configure a logger."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"{setting_name}={value!r} {reason}", detail={"setting": setting_name})
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
