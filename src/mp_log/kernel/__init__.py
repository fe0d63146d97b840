"""Kernel – framework-agnostic building blocks shared by every layer."""

from mp_log.kernel.errors import (
    BaseError,
    InvalidLevelError,
    InvalidModeError,
    LoggingError,
)

__all__ = [
    "BaseError",
    "InvalidLevelError",
    "InvalidModeError",
    "LoggingError",
]
