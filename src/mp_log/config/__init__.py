"""Config – 12-factor settings for the logging facade."""

from mp_log.config.settings import EnvSettingsLoader, LoggerSettings, Settings, SettingsLoader
from mp_log.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggerSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
