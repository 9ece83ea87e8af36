"""Kernel – the Option type, its errors, and the helpers it is built from."""

from optionkit.kernel.errors import BaseError, IllegalUnwrapError, OptionError
from optionkit.kernel.functions import identity, throws
from optionkit.kernel.types import (
    BaseOption,
    Nothing,
    Nullable,
    Option,
    Some,
    from_nullable,
    none,
    some,
)

__all__ = [
    "BaseError",
    "BaseOption",
    "IllegalUnwrapError",
    "Nothing",
    "Nullable",
    "Option",
    "OptionError",
    "Some",
    "from_nullable",
    "identity",
    "none",
    "some",
    "throws",
]
