"""
Core runner layer.

Provides the iteration loop, result types and the module-level
``quickcheck`` / ``quickcheck_async`` entry points.
"""

from .result import CheckResult, CheckStatus, Counterexample, PropertyFailure
from .runner import QuickCheckRunner, get_runner, quickcheck, quickcheck_async
from .types import Arbitrary, AsyncProperty, Property, TraceSink

__all__ = [
    "Arbitrary",
    "AsyncProperty",
    "CheckResult",
    "CheckStatus",
    "Counterexample",
    "Property",
    "PropertyFailure",
    "QuickCheckRunner",
    "TraceSink",
    "get_runner",
    "quickcheck",
    "quickcheck_async",
]
