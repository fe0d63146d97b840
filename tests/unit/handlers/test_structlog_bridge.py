"""Unit tests for the structlog bridge."""

from __future__ import annotations

import io
import json
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
import structlog
from structlog.testing import capture_logs

from mp_log.core import Level, LogEvent, Logger, Mode
from mp_log.handlers import StructlogHandler, configure_structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


class TestStructlogHandler:
    @pytest.mark.parametrize(
        ("level", "method"),
        [("debug", "debug"), ("info", "info"), ("warn", "warning"), ("error", "error")],
    )
    def test_calls_matching_method(self, level: str, method: str) -> None:
        target = MagicMock()
        StructlogHandler(target)(LogEvent(level, "msg", {"k": 1}, ("log", level)))
        getattr(target, method).assert_called_once_with(
            "msg", tags=["log", level], mode="production", k=1
        )

    def test_reserved_meta_keys_prefixed(self) -> None:
        target = MagicMock()
        StructlogHandler(target)(LogEvent("info", "m", {"event": "e", "mode": "x", "tags": []}))
        _, kwargs = target.info.call_args
        assert kwargs["meta_event"] == "e"
        assert kwargs["meta_mode"] == "x"
        assert kwargs["meta_tags"] == []
        assert kwargs["mode"] == "production"

    def test_end_to_end_with_capture_logs(self, mp_logger: Logger) -> None:
        mp_logger.set_log_handlers(StructlogHandler())
        with capture_logs() as logs:
            mp_logger.client({"svc": "billing"}, ["pay"]).warn("slow")
        assert logs == [
            {
                "event": "slow",
                "log_level": "warning",
                "tags": ["log", "warn", "pay"],
                "mode": "production",
                "svc": "billing",
            }
        ]


class TestConfigureStructlog:
    def test_production_renders_json(self) -> None:
        out = io.StringIO()
        configure_structlog(Mode.PRODUCTION, Level.INFO, file=out)
        StructlogHandler()(LogEvent("info", "hello", {"a": 1}))
        data = json.loads(out.getvalue().strip())
        assert data["event"] == "hello"
        assert data["level"] == "info"
        assert data["a"] == 1
        assert "timestamp" in data

    def test_level_filters(self) -> None:
        out = io.StringIO()
        configure_structlog("production", "warn", file=out)
        handler = StructlogHandler()
        handler(LogEvent("info", "dropped"))
        handler(LogEvent("error", "kept"))
        assert "dropped" not in out.getvalue()
        assert "kept" in out.getvalue()

    def test_development_renders_console(self) -> None:
        out = io.StringIO()
        configure_structlog(Mode.DEVELOPMENT, file=out)
        StructlogHandler()(LogEvent("info", "pretty"))
        assert "pretty" in out.getvalue()
        with pytest.raises(json.JSONDecodeError):
            json.loads(out.getvalue())
