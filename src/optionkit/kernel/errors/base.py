"""Root error class for the optionkit error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    ``str(error)`` is the plain message; :meth:`to_dict` adds the
    machine-readable ``code`` and any ``detail`` for structured logs.
    """

    default_code: str = "base_error"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "detail": self.detail}


__all__ = ["BaseError"]
