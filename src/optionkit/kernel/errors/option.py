"""Option errors — misuse of an ``Option`` by its caller."""

from __future__ import annotations

from typing import Any

from optionkit.kernel.errors.base import BaseError

ILLEGAL_UNWRAP_MESSAGE = "Cannot unwrap an Option of None"


class OptionError(BaseError):
    """Raised when an ``Option`` is used in a way its variant does not allow."""

    default_code = "option_error"


class IllegalUnwrapError(OptionError, ValueError):
    """``unwrap()`` was called on ``Nothing``.

    Signals a logic error in the caller: presence was assumed where none
    existed. Use ``match``, ``unwrap_or`` or ``unwrap_or_do`` instead when
    absence is an expected outcome.
    """

    default_code = "illegal_unwrap"

    def __init__(self, message: str = ILLEGAL_UNWRAP_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = ["ILLEGAL_UNWRAP_MESSAGE", "IllegalUnwrapError", "OptionError"]
