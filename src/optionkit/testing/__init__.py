"""Testing support – Hypothesis strategies for client test suites.

Usage::

    from optionkit.testing import option_strategy
"""

from optionkit.testing.strategies import (
    nothing_strategy,
    option_strategy,
    some_strategy,
)

__all__ = [
    "nothing_strategy",
    "option_strategy",
    "some_strategy",
]
