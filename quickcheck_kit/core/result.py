"""
Result types for property runs.

A run either passes silently or stops at its first counter-example.
``CheckResult`` carries the outcome as a value; ``PropertyFailure`` is the
exception form raised by ``quickcheck`` and ``quickcheck_async``.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from ..utilities.constants import FAILURE_PREFIX


class CheckStatus(Enum):
    """Outcome of a property run."""

    PASSED = "passed"
    FALSIFIED = "falsified"
    ERRORED = "errored"

    def is_success(self) -> bool:
        """Check if status indicates success."""
        return self == CheckStatus.PASSED

    def is_failure(self) -> bool:
        """Check if status indicates a counter-example was found."""
        return self in [CheckStatus.FALSIFIED, CheckStatus.ERRORED]


@dataclass(frozen=True)
class Counterexample:
    """The value that broke a property, and how it broke it."""

    value: Any
    serialized: str
    trial: int
    diagnostic: str | None = None
    error: BaseException | None = field(default=None, compare=False, repr=False)

    @property
    def raised(self) -> bool:
        """True when the predicate raised instead of returning False."""
        return self.error is not None

    def describe(self) -> str:
        """Human-readable failure message that reproduces the input."""
        message = f"{FAILURE_PREFIX}{self.serialized}"
        if self.diagnostic:
            message = f"{message}\n{self.diagnostic}"
        return message


class PropertyFailure(AssertionError):
    """
    Raised when a property does not hold for a sampled value.

    The message always contains the serialized counter-example; when the
    predicate raised, the formatted traceback follows it and the original
    exception is chained as ``__cause__``.
    """

    def __init__(self, counterexample: Counterexample, iterations: int):
        super().__init__(counterexample.describe())
        self.counterexample = counterexample
        self.iterations = iterations

    def __reduce__(self):
        # The captured predicate error may not pickle; its text survives in diagnostic
        return (PropertyFailure, (replace(self.counterexample, error=None), self.iterations))

    @property
    def value(self) -> Any:
        return self.counterexample.value

    @property
    def serialized_value(self) -> str:
        return self.counterexample.serialized

    @property
    def trial(self) -> int:
        return self.counterexample.trial

    @property
    def diagnostic(self) -> str | None:
        return self.counterexample.diagnostic


@dataclass(frozen=True)
class CheckResult:
    """Result of running a property against a generator."""

    status: CheckStatus
    iterations: int
    trials_run: int
    counterexample: Counterexample | None = None

    def is_success(self) -> bool:
        """Check if every trial passed."""
        return self.status.is_success()

    def to_exception(self) -> PropertyFailure | None:
        """Build the failure exception for this result, if any."""
        if not self.status.is_failure():
            return None
        return PropertyFailure(self.counterexample, self.iterations)

    def raise_for_failure(self) -> None:
        """Raise PropertyFailure if a counter-example was found."""
        failure = self.to_exception()
        if failure is None:
            return
        if self.counterexample.error is not None:
            raise failure from self.counterexample.error
        raise failure

    @classmethod
    def passed(cls, iterations: int) -> "CheckResult":
        """Create a result for a run where every trial passed."""
        return cls(status=CheckStatus.PASSED, iterations=iterations, trials_run=iterations)

    @classmethod
    def falsified(cls, counterexample: Counterexample, iterations: int) -> "CheckResult":
        """Create a result for a predicate that returned False."""
        return cls(
            status=CheckStatus.FALSIFIED,
            iterations=iterations,
            trials_run=counterexample.trial,
            counterexample=counterexample,
        )

    @classmethod
    def errored(cls, counterexample: Counterexample, iterations: int) -> "CheckResult":
        """Create a result for a predicate that raised."""
        return cls(
            status=CheckStatus.ERRORED,
            iterations=iterations,
            trials_run=counterexample.trial,
            counterexample=counterexample,
        )
