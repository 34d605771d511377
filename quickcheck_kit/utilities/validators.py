"""
Input validation utilities.

This module provides validation functions for generator options and
runner parameters. Every check raises at construction time so that
generators themselves never fail while sampling.
"""

from typing import Any


def validate_non_negative_int(value: Any, name: str) -> None:
    """Validate that a value is an integer >= 0 (bools rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_positive_int(value: Any, name: str) -> None:
    """Validate that a value is an integer > 0."""
    validate_non_negative_int(value, name)
    if value == 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_finite_number(value: Any, name: str) -> float:
    """Validate a real, finite bound and return it as float."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError:
        raise ValueError(f"{name} must be finite, got {value}") from None
    if number != number or number in (float("inf"), float("-inf")):
        raise ValueError(f"{name} must be finite, got {value}")
    return number


def validate_callable(value: Any, name: str) -> None:
    """Validate that a value can be invoked as a generator."""
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")
