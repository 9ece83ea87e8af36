"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── OptionError          (option.py)
        └── IllegalUnwrapError
"""

from optionkit.kernel.errors.base import BaseError
from optionkit.kernel.errors.option import (
    ILLEGAL_UNWRAP_MESSAGE,
    IllegalUnwrapError,
    OptionError,
)

__all__ = [
    "BaseError",
    "ILLEGAL_UNWRAP_MESSAGE",
    "IllegalUnwrapError",
    "OptionError",
]
