"""Small function combinators used by the kernel types."""

from __future__ import annotations

import logging
from typing import Any, Callable, NoReturn, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


def identity(value: T) -> T:
    """Return *value* unchanged."""
    return value


def throws(factory: Callable[[], BaseException]) -> Callable[..., NoReturn]:
    """Return a callable that raises the error built by *factory* on every call.

    *factory* may be an exception class or any zero-argument callable that
    returns an exception instance. Arguments given to the returned callable
    are ignored, so it can stand in for a handler of any arity::

        handler = throws(lambda: KeyError("missing"))
        handler()  # raises KeyError('missing')
    """

    def _raise(*args: Any, **kwargs: Any) -> NoReturn:  # noqa: ARG001
        error = factory()
        logger.debug("throws.raising error=%s", type(error).__name__)
        raise error

    return _raise


__all__ = ["identity", "throws"]
