"""Core – Level, the closed severity hierarchy.

Severities are ordered by verbosity::

    error < warn < info < debug

A level used as the active threshold *includes* itself and every more severe
level, so ``debug`` includes all four while ``error`` includes only itself.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from mp_log.kernel.errors import InvalidLevelError


class Level(str, Enum):
    """One of the four supported severities.

    Members are the canonical singletons, so identity comparison is safe::

        Level.create("info") is Level.INFO
    """

    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"

    @classmethod
    def create(cls, severity: Level | str) -> Level:
        """Return the canonical member for *severity*.

        Raises
        ------
        InvalidLevelError
            When *severity* is neither a :class:`Level` nor the name of one.
        """
        if isinstance(severity, cls):
            return severity
        if isinstance(severity, str):
            try:
                return cls(severity.strip().lower())
            except ValueError:
                pass
        raise InvalidLevelError(severity)

    @classmethod
    def from_stdlib(cls, levelno: int) -> Level:
        """Map a :mod:`logging` level number onto the closest severity."""
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG

    @property
    def included_levels(self) -> frozenset[Level]:
        """Levels surfaced when this level is the active threshold."""
        included = _INCLUDED.get(self)
        if included is None:
            included = frozenset({self}) | _parent_levels(self)
            _INCLUDED[self] = included
        return included

    def includes(self, other: Any) -> bool:
        return other in self.included_levels

    def __str__(self) -> str:
        return self.value


_INCLUDED: dict[Level, frozenset[Level]] = {}


def _parent_levels(level: Level) -> frozenset[Level]:
    if level is Level.DEBUG:
        return Level.INFO.included_levels
    if level is Level.INFO:
        return Level.WARN.included_levels
    if level is Level.WARN:
        return Level.ERROR.included_levels
    return frozenset()


error_level = Level.ERROR
warn_level = Level.WARN
info_level = Level.INFO
debug_level = Level.DEBUG


__all__ = [
    "Level",
    "debug_level",
    "error_level",
    "info_level",
    "warn_level",
]
