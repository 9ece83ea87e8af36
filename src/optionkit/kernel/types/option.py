"""Option[T] monad — Some and Nothing variants.

``Some`` and ``Nothing`` are two distinct classes behind the shared
:class:`BaseOption`. Each variant implements only :meth:`BaseOption.match`
and :meth:`BaseOption.is_some`; every other combinator is written once, on
the base class, in terms of ``match``.

Examples::

    some(5).map(lambda x: x + 1).unwrap_or(0)          # 6
    none().map(lambda x: x + 1).unwrap_or(0)           # 0
    from_nullable(config.get("port")).chain(parse_port)

    match opt:
        case Some(value):
            ...
        case Nothing():
            ...
"""

from __future__ import annotations

import abc
import dataclasses
from typing import Any, Callable, Generic, Iterator, Self, TypeVar

from optionkit.kernel.errors.option import IllegalUnwrapError
from optionkit.kernel.functions import identity, throws
from optionkit.kernel.types.nullable import Nullable

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class BaseOption(abc.ABC, Generic[T]):
    """Operations shared by both Option variants."""

    __slots__ = ()

    @abc.abstractmethod
    def match(self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:
        """Run the handler matching this variant and return its result.

        Exactly one handler is called: *some* with the inner value, or
        *none* with no arguments.
        """

    @abc.abstractmethod
    def is_some(self) -> bool:
        """Whether this Option holds a value."""

    def is_none(self) -> bool:
        """Whether this Option is empty."""
        return not self.is_some()

    def map(self, func: Callable[[T], U]) -> Option[U]:
        """Apply *func* to the inner value, keeping the variant.

        *func* must not signal absence itself; use :meth:`chain` with a
        function returning an ``Option`` for that.
        """
        return self.match(some=lambda t: Some(func(t)), none=none)

    def chain(self, func: Callable[[T], Option[U]]) -> Option[U]:
        """Apply *func* to the inner value and return its Option as-is."""
        return self.match(some=func, none=none)

    flat_map = chain

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only when *predicate* holds for it."""
        return self.match(
            some=lambda t: self if predicate(t) else none(),  # type: ignore[return-value]
            none=none,
        )

    def for_each(self, func: Callable[[T], object]) -> Self:
        """Call *func* with the inner value, if any, and return ``self``."""

        def _visit(t: T) -> Self:
            func(t)
            return self

        return self.match(some=_visit, none=lambda: self)

    def unwrap(self) -> T:
        """Return the inner value or raise :class:`IllegalUnwrapError`.

        The error's ``message`` (and ``str()``) is
        ``"Cannot unwrap an Option of None"``. Prefer :meth:`match`,
        :meth:`unwrap_or` or :meth:`unwrap_or_do`, which have no failure path.
        """
        return self.match(some=identity, none=throws(IllegalUnwrapError))

    def unwrap_or(self, default: T) -> T:
        """Return the inner value, or *default* when empty."""
        return self.match(some=identity, none=lambda: default)

    def unwrap_or_do(self, fallback: Callable[[], T]) -> T:
        """Return the inner value, or the result of *fallback* when empty.

        *fallback* is never called for a ``Some``.
        """
        return self.match(some=identity, none=fallback)

    def __iter__(self) -> Iterator[T]:
        yield from self.match(some=lambda t: (t,), none=tuple)


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Some(BaseOption[T]):
    """Option with a value."""

    value: T

    def match(self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:  # noqa: ARG002
        return some(self.value)

    def is_some(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


class Nothing(BaseOption[T]):
    """Empty option."""

    __slots__ = ()

    def match(self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:  # noqa: ARG002
        return none()

    def is_some(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing"


type Option[T] = Some[T] | Nothing[T]

_NOTHING: Nothing[Any] = Nothing()


def some(value: T) -> Option[T]:
    """Create an Option holding *value* (which may itself be ``None``)."""
    return Some(value)


def none() -> Option[Any]:
    """Return the empty Option."""
    return _NOTHING


def from_nullable(value: Nullable[T]) -> Option[T]:
    """Lift a nullable value: ``None`` becomes ``Nothing``, anything else ``Some``."""
    return none() if value is None else some(value)


__all__ = [
    "BaseOption",
    "Nothing",
    "Option",
    "Some",
    "from_nullable",
    "none",
    "some",
]
