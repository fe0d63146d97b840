"""Unit tests for the console sink."""

from __future__ import annotations

from unittest.mock import MagicMock, call

import pytest

from mp_log.console import CHANNEL_NAMES, Console, ConsoleChannels, console


def _channels(sink: MagicMock) -> ConsoleChannels:
    return ConsoleChannels(log=sink.log, debug=sink.debug, info=sink.info, warn=sink.warn, error=sink.error)


class TestConsole:
    def test_dispatches_to_installed_channels(self) -> None:
        sink = MagicMock()
        c = Console(_channels(sink))
        for name in CHANNEL_NAMES:
            getattr(c, name)(name)
        assert sink.mock_calls == [call.log("log"), call.debug("debug"), call.info("info"), call.warn("warn"), call.error("error")]

    def test_install_returns_previous(self) -> None:
        first, second = _channels(MagicMock()), _channels(MagicMock())
        c = Console(first)
        assert c.install(second) is first
        assert c.snapshot() is second

    def test_install_affects_later_calls(self) -> None:
        old, new = MagicMock(), MagicMock()
        c = Console(_channels(old))
        c.install(_channels(new))
        c.warn("x")
        old.warn.assert_not_called()
        new.warn.assert_called_once_with("x")

    def test_standard_channels(self, capsys: pytest.CaptureFixture[str]) -> None:
        c = Console()
        c.log("L")
        c.debug("D")
        c.info("I")
        c.warn("W")
        c.error("E")
        out, err = capsys.readouterr()
        assert out == "L\nD\nI\n"
        assert err == "W\nE\n"

    def test_global_console_exists(self) -> None:
        assert isinstance(console, Console)


class TestConsoleChannels:
    def test_is_frozen(self) -> None:
        channels = ConsoleChannels.standard()
        with pytest.raises(AttributeError):
            channels.log = print  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("level", "name"),
        [("debug", "log"), ("info", "info"), ("warn", "warn"), ("error", "error"), ("unknown", "log")],
    )
    def test_channel_for(self, level: str, name: str) -> None:
        sink = MagicMock()
        channels = _channels(sink)
        assert channels.channel_for(level) is getattr(sink, name)
