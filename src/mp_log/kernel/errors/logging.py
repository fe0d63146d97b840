"""Logging errors: invalid levels and rendering modes."""

from __future__ import annotations

from typing import Any

from mp_log.kernel.errors.base import BaseError


class LoggingError(BaseError):
    """Raised when the logging facade is used with invalid input."""

    default_code = "logging_error"


class _InvalidValueError(LoggingError, ValueError):
    _template = "{value!r} is invalid"

    def __init__(self, value: Any) -> None:
        super().__init__(self._template.format(value=value))
        self.value = value

    def context(self) -> dict[str, Any]:
        return {"value": repr(self.value)}


class InvalidLevelError(_InvalidValueError):
    """A severity tag does not name one of the supported levels."""

    default_code = "invalid_level"
    _template = "{value!r} is not a supported log level"


class InvalidModeError(_InvalidValueError):
    """A logger mode other than development/production was requested."""

    default_code = "invalid_mode"
    _template = "{value!r} is not a valid mode"


__all__ = ["InvalidLevelError", "InvalidModeError", "LoggingError"]
