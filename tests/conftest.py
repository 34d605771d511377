"""
Pytest configuration and shared fixtures for Quickcheck-Kit tests.

Provides marker registration, runners with captured trace output, and
helpers for feeding fixed value sequences into the runner.
"""

import inspect
import logging
from collections.abc import Callable, Iterable
from io import StringIO
from typing import Any

import pytest

from quickcheck_kit.config import RunnerConfig
from quickcheck_kit.config.environment import get_environment_config
from quickcheck_kit.core import QuickCheckRunner


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (standard library round trips)"
    )
    config.addinivalue_line("markers", "property: mark test as property-based test")
    config.addinivalue_line("markers", "async_test: mark test as async test")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        # Add markers based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)

        # Add async marker for async tests
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.async_test)


class RecordingSink:
    """Trace sink that keeps every line it receives."""

    def __init__(self):
        self.lines: list[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)


@pytest.fixture
def trace_sink() -> RecordingSink:
    """Create a sink capturing trace lines."""
    return RecordingSink()


@pytest.fixture
def tracing_runner(trace_sink) -> QuickCheckRunner:
    """Runner with tracing enabled into the recording sink."""
    return QuickCheckRunner(RunnerConfig(trace_enabled=True, trace_sink=trace_sink))


@pytest.fixture
def runner() -> QuickCheckRunner:
    """Runner with tracing disabled."""
    return QuickCheckRunner(RunnerConfig())


@pytest.fixture
def forced_values() -> Callable[[Iterable[Any]], Callable[[], Any]]:
    """Build a generator that yields the given values in order."""

    def _forced_values(values: Iterable[Any]) -> Callable[[], Any]:
        return iter(list(values)).__next__

    return _forced_values


@pytest.fixture
def fresh_environment_config():
    """Clear the cached environment config before and after a test."""
    get_environment_config.cache_clear()
    yield get_environment_config
    get_environment_config.cache_clear()


@pytest.fixture
def capture_logs():
    """Log capture utility."""

    def _capture_logs(logger_name: str | None = None):
        """Capture logs for testing."""
        log_capture = StringIO()
        handler = logging.StreamHandler(log_capture)

        logger = logging.getLogger(logger_name) if logger_name else logging.getLogger()

        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)

        return log_capture, handler, logger

    return _capture_logs
