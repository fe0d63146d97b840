"""
mp_log – structured logging facade.

Typical use::

    import mp_log

    logger = mp_log.get_logger()
    logger.level = mp_log.Level.INFO

    log = logger.client({"component": "billing"}, ["payments"])
    log.info("invoice sent", {"invoice_id": 42})

Import path convention::

    from mp_log.core import Client, Level, LogEvent, Logger, Mode
    from mp_log.handlers import RedactingHandler, StructlogHandler
    from mp_log.config import LoggerSettings, EnvSettingsLoader
"""
from __future__ import annotations

import threading

from mp_log.config import EnvSettingsLoader, LoggerSettings, SettingsLoader
from mp_log.core import (
    Client,
    Level,
    LogEvent,
    LogHandler,
    Logger,
    Mode,
    debug_level,
    development_mode,
    error_level,
    info_level,
    production_mode,
    warn_level,
)
from mp_log.kernel.errors import InvalidLevelError, InvalidModeError

__version__ = "0.1.0"

_default_logger: Logger | None = None
_default_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the process-wide :class:`Logger`, creating it on first use."""
    global _default_logger
    with _default_lock:
        if _default_logger is None:
            _default_logger = Logger()
        return _default_logger


def configure(level: Level | str | None = None, mode: Mode | str | None = None) -> Logger:
    """Set the level and/or mode of the process-wide logger."""
    logger = get_logger()
    if level is not None:
        logger.level = Level.create(level)
    if mode is not None:
        logger.mode = mode
    return logger


def configure_from_env(loader: SettingsLoader | None = None) -> Logger:
    """Apply :class:`LoggerSettings` read from the environment (``MP_LOG_*``)."""
    settings = (loader or EnvSettingsLoader()).load(LoggerSettings)
    logger = get_logger()
    logger.apply_settings(settings)
    return logger


def reset_default_logger() -> None:
    """Forget the process-wide logger; the next :func:`get_logger` builds a new one."""
    global _default_logger
    with _default_lock:
        if _default_logger is not None:
            if _default_logger.console_hijacked:
                _default_logger.release_console()
            _default_logger.release_stdlib_logging()
        _default_logger = None


__all__ = [
    "Client",
    "InvalidLevelError",
    "InvalidModeError",
    "Level",
    "LogEvent",
    "LogHandler",
    "Logger",
    "Mode",
    "__version__",
    "configure",
    "configure_from_env",
    "debug_level",
    "development_mode",
    "error_level",
    "get_logger",
    "info_level",
    "production_mode",
    "reset_default_logger",
    "warn_level",
]
