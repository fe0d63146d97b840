"""Shared pytest configuration for the mp-log test-suite."""
from __future__ import annotations

from collections.abc import Iterator

import pytest

import mp_log
from mp_log.testing.fixtures import log_collector, mp_logger  # noqa: F401


@pytest.fixture(autouse=True)
def _fresh_default_logger() -> Iterator[None]:
    mp_log.reset_default_logger()
    yield
    mp_log.reset_default_logger()
