"""
Test package for Quickcheck-Kit.

Unit tests for generators, runners and configuration, property-based
tests driven by Hypothesis, and integration scenarios against the
standard library.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "integration",  # Standard library round-trip scenarios
    "property",  # Hypothesis-driven generator properties
    "unit",  # Unit test suite
]
