"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import pytest

from mp_log.config import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from mp_log.kernel.errors import BaseError, InvalidLevelError, InvalidModeError, LoggingError


class TestBaseError:
    def test_message_is_stored(self) -> None:
        assert BaseError("something went wrong").message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        assert BaseError("m", code="my_code").to_dict() == {"code": "my_code", "message": "m"}

    def test_str_is_message(self) -> None:
        assert str(BaseError("plain text")) == "plain text"

    def test_to_dict_includes_chained_cause(self) -> None:
        try:
            try:
                raise ValueError("original")
            except ValueError as exc:
                raise BaseError("wrapper") from exc
        except BaseError as err:
            payload = err.to_dict()
        assert "original" in payload["cause"]

    def test_to_dict_without_cause(self) -> None:
        assert "cause" not in BaseError("m").to_dict()

    def test_repr(self) -> None:
        assert repr(BaseError("hello", code="hi")) == "BaseError(code='hi', message='hello')"


class TestLoggingErrors:
    def test_invalid_level(self) -> None:
        err = InvalidLevelError("loud")
        assert isinstance(err, LoggingError)
        assert isinstance(err, ValueError)
        assert err.code == "invalid_level"
        assert err.value == "loud"
        assert err.message == "'loud' is not a supported log level"
        assert err.to_dict() == {
            "code": "invalid_level",
            "message": "'loud' is not a supported log level",
            "value": "'loud'",
        }

    def test_invalid_mode(self) -> None:
        err = InvalidModeError(None)
        assert isinstance(err, LoggingError)
        assert isinstance(err, ValueError)
        assert err.code == "invalid_mode"
        assert err.value is None
        assert err.message == "None is not a valid mode"

    def test_catchable_as_base_error(self) -> None:
        with pytest.raises(BaseError):
            raise InvalidModeError("x")


class TestConfigErrors:
    def test_missing_required(self) -> None:
        err = MissingRequiredSettingError("MP_LOG_LEVEL")
        assert isinstance(err, ConfigError)
        assert err.code == "missing_required_setting"
        assert "MP_LOG_LEVEL" in err.message
        assert err.to_dict()["setting"] == "MP_LOG_LEVEL"

    def test_invalid_value(self) -> None:
        err = InvalidSettingValueError("mode", "x", "nope")
        assert err.code == "invalid_setting_value"
        assert (err.setting_name, err.value, err.reason) == ("mode", "x", "nope")
        assert err.to_dict() == {
            "code": "invalid_setting_value",
            "message": "mode='x' rejected: nope",
            "setting": "mode",
            "value": "'x'",
            "reason": "nope",
        }
