"""Config settings – Settings base class and LoggerSettings."""
from __future__ import annotations

import dataclasses

from mp_log.config.validation.errors import InvalidSettingValueError
from mp_log.core.event import Mode
from mp_log.core.level import Level


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LoggerSettings(Settings):
    """Process-wide logger configuration (``MP_LOG_LEVEL``, ``MP_LOG_MODE``)."""

    _prefix: dataclasses.ClassVar[str] = "MP_LOG"

    level: str = Level.ERROR.value
    mode: str = Mode.PRODUCTION.value

    def _validate(self) -> None:
        self.level = self.level.strip().lower()
        self.mode = self.mode.strip().lower()
        if self.level not in {lvl.value for lvl in Level}:
            raise InvalidSettingValueError("level", self.level, "expected error, warn, info or debug")
        if self.mode not in {m.value for m in Mode}:
            raise InvalidSettingValueError("mode", self.mode, "expected development or production")


__all__ = ["LoggerSettings", "Settings"]
