"""Config settings – 12-factor env-based configuration."""
from svclog.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from svclog.config.settings.logger import LoggerSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "LoggerSettings", "SettingsLoader"]
