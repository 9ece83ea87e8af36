"""Config – env settings, loaders, and validation errors."""

from optionkit.config.settings import EnvSettingsLoader, LoggingSettings, Settings, SettingsLoader
from optionkit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
