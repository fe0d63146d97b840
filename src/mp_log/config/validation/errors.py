"""Configuration errors raised while loading ``MP_LOG_*`` settings."""
from __future__ import annotations

from typing import Any

from mp_log.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} is not set")
        self.setting_name = setting_name

    def context(self) -> dict[str, Any]:
        return {"setting": self.setting_name}


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value is rejected; *reason* says why."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"{setting_name}={value!r} rejected: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason

    def context(self) -> dict[str, Any]:
        return {"setting": self.setting_name, "value": repr(self.value), "reason": self.reason}


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
