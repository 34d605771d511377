"""
Quickcheck-Kit - Property-based testing with composable generators.

Sample values from an ``Arbitrary`` generator, assert a predicate holds for
each, and report the first counter-example verbatim.
"""

__version__ = "1.0.0"

from .arbitraries import (
    arbitrary_array,
    arbitrary_boolean,
    arbitrary_number,
    arbitrary_object,
    arbitrary_string,
)
from .config import RunnerConfig
from .core import (
    Arbitrary,
    CheckResult,
    CheckStatus,
    Counterexample,
    PropertyFailure,
    QuickCheckRunner,
    quickcheck,
    quickcheck_async,
)
from .utilities.constants import ALPHANUMERIC, DEFAULT_CHARACTERS

__all__ = [
    "ALPHANUMERIC",
    "DEFAULT_CHARACTERS",
    "Arbitrary",
    "CheckResult",
    "CheckStatus",
    "Counterexample",
    "PropertyFailure",
    "QuickCheckRunner",
    "RunnerConfig",
    "arbitrary_array",
    "arbitrary_boolean",
    "arbitrary_number",
    "arbitrary_object",
    "arbitrary_string",
    "quickcheck",
    "quickcheck_async",
]
