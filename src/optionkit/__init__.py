"""
optionkit – an Option type for values that may be absent.

Import path convention::

    from optionkit import some, none, from_nullable, Option
    from optionkit.kernel.errors import IllegalUnwrapError
    from optionkit.observability.logging import JsonLoggerFactory
"""

from optionkit.kernel import (
    BaseOption,
    IllegalUnwrapError,
    Nothing,
    Option,
    OptionError,
    Some,
    from_nullable,
    identity,
    none,
    some,
    throws,
)

__version__ = "0.1.0"
__all__ = [
    "BaseOption",
    "IllegalUnwrapError",
    "Nothing",
    "Option",
    "OptionError",
    "Some",
    "__version__",
    "from_nullable",
    "identity",
    "none",
    "some",
    "throws",
]
