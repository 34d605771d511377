"""
Property runner for Quickcheck-Kit.

Drives trials strictly in order: sample a value, optionally trace it, test
it, and stop at the first value that falsifies the property or makes it
raise. Success is silent.
"""

import inspect
import logging
import traceback
from typing import Any

from ..config.runner_config import RunnerConfig
from ..utilities.formatters import format_trace_line, serialize_value
from ..utilities.validators import validate_callable, validate_non_negative_int
from .result import CheckResult, Counterexample
from .types import Arbitrary, AsyncProperty, Property

logger = logging.getLogger(__name__)


def _describe(prop: Any) -> str:
    return getattr(prop, "__qualname__", None) or repr(prop)


def _format_diagnostic(error: BaseException) -> str:
    return "".join(traceback.format_exception(error)).rstrip()


class QuickCheckRunner:
    """
    Runs properties against generators.

    Trace settings come from the ``RunnerConfig`` passed at construction,
    so a runner can be tested without touching the process environment.
    """

    def __init__(self, config: RunnerConfig | None = None):
        """
        Initialize runner.

        Args:
            config: Runner settings (tracing off, 100 iterations when None)
        """
        self.config = config or RunnerConfig()

    def _prepare(self, prop: Any, arbitrary: Arbitrary[Any], iterations: int | None) -> int:
        """Validate run arguments before any trial runs."""
        validate_callable(prop, "prop")
        validate_callable(arbitrary, "arbitrary")
        if iterations is None:
            iterations = self.config.default_iterations
        validate_non_negative_int(iterations, "iterations")
        logger.debug("Checking %s over %d iterations", _describe(prop), iterations)
        return iterations

    def _sample(self, arbitrary: Arbitrary[Any], trial: int, iterations: int) -> Any:
        """Draw one value and echo it when tracing."""
        value = arbitrary()
        if self.config.trace_enabled:
            self.config.trace_sink(
                format_trace_line(trial, iterations, value, self.config.preview_length)
            )
        return value

    def _falsified(self, value: Any, trial: int, iterations: int) -> CheckResult:
        counterexample = Counterexample(value=value, serialized=serialize_value(value), trial=trial)
        logger.debug("Falsified on trial %d/%d", trial, iterations)
        return CheckResult.falsified(counterexample, iterations)

    def _errored(self, value: Any, trial: int, iterations: int, error: Exception) -> CheckResult:
        counterexample = Counterexample(
            value=value,
            serialized=serialize_value(value),
            trial=trial,
            diagnostic=_format_diagnostic(error),
            error=error,
        )
        logger.debug("Predicate raised %s on trial %d/%d", type(error).__name__, trial, iterations)
        return CheckResult.errored(counterexample, iterations)

    def check(
        self, prop: Property, arbitrary: Arbitrary[Any], iterations: int | None = None
    ) -> CheckResult:
        """
        Run a synchronous property and return the outcome.

        Only a return value that is ``False`` falsifies a trial; ``None``
        and every other value count as a pass.

        Raises:
            ValueError: If iterations is negative or not an integer
            TypeError: If the property returns an awaitable
        """
        iterations = self._prepare(prop, arbitrary, iterations)

        for index in range(iterations):
            trial = index + 1
            value = self._sample(arbitrary, trial, iterations)
            try:
                outcome = prop(value)
            except Exception as e:
                return self._errored(value, trial, iterations, e)

            if inspect.isawaitable(outcome):
                if inspect.iscoroutine(outcome):
                    outcome.close()
                raise TypeError(
                    f"{_describe(prop)} returned an awaitable; use quickcheck_async instead"
                )
            if outcome is False:
                return self._falsified(value, trial, iterations)

        logger.debug("Property %s passed %d trials", _describe(prop), iterations)
        return CheckResult.passed(iterations)

    async def check_async(
        self, prop: AsyncProperty, arbitrary: Arbitrary[Any], iterations: int | None = None
    ) -> CheckResult:
        """
        Run a property whose result may be awaitable and return the outcome.

        Each trial is awaited to completion before the next value is sampled;
        trials never overlap.
        """
        iterations = self._prepare(prop, arbitrary, iterations)

        for index in range(iterations):
            trial = index + 1
            value = self._sample(arbitrary, trial, iterations)
            try:
                outcome = prop(value)
                if inspect.isawaitable(outcome):
                    outcome = await outcome
            except Exception as e:
                return self._errored(value, trial, iterations, e)

            if outcome is False:
                return self._falsified(value, trial, iterations)

        logger.debug("Property %s passed %d trials", _describe(prop), iterations)
        return CheckResult.passed(iterations)

    def run(self, prop: Property, arbitrary: Arbitrary[Any], iterations: int | None = None) -> None:
        """Run a property, raising PropertyFailure on the first counter-example."""
        self.check(prop, arbitrary, iterations).raise_for_failure()

    async def run_async(
        self, prop: AsyncProperty, arbitrary: Arbitrary[Any], iterations: int | None = None
    ) -> None:
        """Async variant of ``run``."""
        result = await self.check_async(prop, arbitrary, iterations)
        result.raise_for_failure()


# Global runner instance
_runner: QuickCheckRunner | None = None


def get_runner() -> QuickCheckRunner:
    """Get the process-wide runner configured from the environment."""
    global _runner
    if _runner is None:
        _runner = QuickCheckRunner(RunnerConfig.from_environment())
    return _runner


def quickcheck(prop: Property, arbitrary: Arbitrary[Any], iterations: int | None = None) -> None:
    """
    Assert that ``prop`` holds for ``iterations`` sampled values (default 100).

    Args:
        prop: Predicate returning False (or raising) on a counter-example
        arbitrary: Generator producing the values to test
        iterations: Number of trials; zero is a no-op

    Raises:
        PropertyFailure: On the first counter-example, with the value serialized
            in the message
    """
    get_runner().run(prop, arbitrary, iterations)


async def quickcheck_async(
    prop: AsyncProperty, arbitrary: Arbitrary[Any], iterations: int | None = None
) -> None:
    """
    Assert a property whose predicate may be a coroutine function.

    Same contract as ``quickcheck``; each trial finishes before the next
    value is drawn.
    """
    await get_runner().run_async(prop, arbitrary, iterations)
