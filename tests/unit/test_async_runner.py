"""
Unit tests for the asynchronous property runner.

Tests that trials run strictly one after another and that the first
failing value is reported without evaluating later values.
"""

import asyncio
from unittest.mock import patch

import pytest

from quickcheck_kit import quickcheck_async
from quickcheck_kit.arbitraries import arbitrary_number, arbitrary_object, arbitrary_string
from quickcheck_kit.config import RunnerConfig
from quickcheck_kit.core import CheckStatus, PropertyFailure, QuickCheckRunner


class TestAsyncRunner:
    """Test cases for check_async / run_async."""

    @pytest.mark.asyncio
    async def test_always_true_completes(self, runner):
        """Test an always-true coroutine predicate passes."""

        async def prop(_):
            await asyncio.sleep(0)
            return True

        assert await runner.run_async(prop, arbitrary_number(), 50) is None

    @pytest.mark.asyncio
    async def test_zero_iterations(self, runner):
        """Test zero iterations is a no-op."""
        result = await runner.check_async(lambda _: False, arbitrary_number(), 0)
        assert result.is_success()
        assert result.trials_run == 0

    @pytest.mark.asyncio
    async def test_reports_fifth_value_and_stops(self, runner, forced_values):
        """Test only values 1-5 are evaluated when the 5th fails."""
        evaluated = []

        async def prop(value):
            await asyncio.sleep(0)
            evaluated.append(value)
            return value != 5

        with pytest.raises(PropertyFailure) as exc_info:
            await runner.run_async(prop, forced_values(range(1, 11)), 10)

        assert exc_info.value.value == 5
        assert exc_info.value.trial == 5
        assert str(exc_info.value) == "Property failed for value: 5"
        assert evaluated == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_trials_never_overlap(self, runner):
        """Test each trial finishes before the next value is sampled."""
        active = 0
        peak = 0
        events = []

        def generate():
            events.append("sample")
            return 1

        async def prop(_):
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.001)
            events.append("done")
            active -= 1
            return True

        await runner.run_async(prop, generate, 5)

        assert peak == 1
        assert events == ["sample", "done"] * 5

    @pytest.mark.asyncio
    async def test_async_exception_wrapped(self, runner, forced_values):
        """Test exceptions raised after an await carry value and traceback."""

        async def prop(value):
            await asyncio.sleep(0)
            raise RuntimeError(f"bad {value}")

        result = await runner.check_async(prop, forced_values(["a", "b"]), 2)

        assert result.status == CheckStatus.ERRORED
        assert result.trials_run == 1
        assert result.counterexample.serialized == '"a"'
        assert "RuntimeError: bad a" in result.counterexample.diagnostic

    @pytest.mark.asyncio
    async def test_sync_predicate_accepted(self, runner, forced_values):
        """Test plain functions work with the async runner."""
        result = await runner.check_async(lambda v: v < 3, forced_values([1, 2, 3]), 3)
        assert result.status == CheckStatus.FALSIFIED
        assert result.counterexample.value == 3

    @pytest.mark.asyncio
    async def test_none_result_passes(self, runner):
        """Test a coroutine returning None counts as success."""

        async def prop(_):
            return None

        await runner.run_async(prop, arbitrary_string(), 10)

    @pytest.mark.asyncio
    async def test_trace_order_matches_trials(self, tracing_runner, trace_sink, forced_values):
        """Test trace lines follow trial order across awaits."""

        async def prop(value):
            await asyncio.sleep(0.001 * (3 - value))
            return True

        await tracing_runner.run_async(prop, forced_values([0, 1, 2]), 3)
        assert trace_sink.lines == [
            "Iteration 1/3: 0",
            "Iteration 2/3: 1",
            "Iteration 3/3: 2",
        ]

    @pytest.mark.asyncio
    async def test_invalid_iterations(self, runner):
        """Test negative iteration counts are rejected."""
        with pytest.raises(ValueError):
            await runner.run_async(lambda _: True, arbitrary_number(), -5)


class TestModuleLevelQuickcheckAsync:
    """Test cases for the module-level async entry point."""

    @pytest.mark.asyncio
    async def test_records_round_trip(self):
        """Test quickcheck_async over records with the shared runner."""

        async def prop(record):
            await asyncio.sleep(0)
            return record["path"].startswith("/")

        generator = arbitrary_object(
            {"path": arbitrary_string(prefix="/", characters="abc"), "size": arbitrary_number(0, 10)}
        )
        with patch(
            "quickcheck_kit.core.runner.get_runner",
            return_value=QuickCheckRunner(RunnerConfig()),
        ):
            await quickcheck_async(prop, generator, 25)
