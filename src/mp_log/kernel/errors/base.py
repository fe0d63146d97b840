"""Root error class for the mp-log error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the mp-log error hierarchy.

    Every error carries a human-readable ``message`` and a machine-readable
    ``code`` slug.  Subclasses describe their own arguments by overriding
    :meth:`context`; :meth:`to_dict` merges that into a loggable payload.
    """

    default_code: str = "base_error"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def context(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form, suitable as log event meta."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, **self.context()}
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
