"""Kernel value types — public re-export surface.

Modules:
  option.py   — BaseOption, Some, Nothing, Option, some, none, from_nullable
  nullable.py — Nullable
"""

from optionkit.kernel.types.nullable import Nullable
from optionkit.kernel.types.option import (
    BaseOption,
    Nothing,
    Option,
    Some,
    from_nullable,
    none,
    some,
)

__all__ = [
    "BaseOption",
    "Nothing",
    "Nullable",
    "Option",
    "Some",
    "from_nullable",
    "none",
    "some",
]
