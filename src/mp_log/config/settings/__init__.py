"""Config settings – env-based configuration."""
from mp_log.config.settings.base import LoggerSettings, Settings
from mp_log.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "LoggerSettings", "Settings", "SettingsLoader"]
