"""Config – env-based logger settings and their errors."""
from svclog.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from svclog.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggerSettings,
    SettingsLoader,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggerSettings",
    "MissingRequiredSettingError",
    "SettingsLoader",
]
