"""Config settings – env-based configuration."""
from optionkit.config.settings.base import Settings
from optionkit.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from optionkit.config.settings.logging import LoggingSettings

__all__ = ["EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
