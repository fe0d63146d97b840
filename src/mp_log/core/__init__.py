"""Core – levels, events, clients and the logger."""
from mp_log.core.client import Client, is_error
from mp_log.core.event import LogEvent, Mode, development_mode, production_mode
from mp_log.core.level import Level, debug_level, error_level, info_level, warn_level
from mp_log.core.logger import LogHandler, Logger

__all__ = [
    "Client",
    "Level",
    "LogEvent",
    "LogHandler",
    "Logger",
    "Mode",
    "debug_level",
    "development_mode",
    "error_level",
    "info_level",
    "is_error",
    "production_mode",
    "warn_level",
]
