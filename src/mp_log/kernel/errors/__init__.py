"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── LoggingError         (logging.py)
    │   ├── InvalidLevelError
    │   └── InvalidModeError
    └── ConfigError          (mp_log.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from mp_log.kernel.errors.base import BaseError
from mp_log.kernel.errors.logging import (
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
