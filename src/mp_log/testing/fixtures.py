"""Testing fixtures – log_collector, mp_logger.

Enable with ``pytest_plugins = ["mp_log.testing.fixtures"]`` in a conftest.
"""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from mp_log.console import Console, ConsoleChannels
from mp_log.core.level import Level
from mp_log.core.logger import Logger
from mp_log.testing.fakes import InMemoryLogHandler


@pytest.fixture
def log_collector() -> InMemoryLogHandler:
    """Pytest fixture: an empty :class:`InMemoryLogHandler`."""
    return InMemoryLogHandler()


@pytest.fixture
def mp_logger(log_collector: InMemoryLogHandler) -> Iterator[Logger]:
    """Pytest fixture: a debug-level Logger on a private console, wired to ``log_collector``."""
    logger = Logger(console=Console(ConsoleChannels.standard()))
    logger.level = Level.DEBUG
    logger.set_log_handlers(log_collector)
    yield logger
    logger.release_console()
    logger.release_stdlib_logging()


__all__ = ["log_collector", "mp_logger"]
