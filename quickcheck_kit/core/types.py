"""
Shared protocol types for generators, properties and trace sinks.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Arbitrary(Protocol[T_co]):
    """A reusable generator: each call returns one freshly sampled value.

    Calls are independent of each other and need not produce distinct
    values. Any zero-argument callable satisfies this contract, including
    plain functions and ``iterator.__next__``.
    """

    def __call__(self) -> T_co: ...


@runtime_checkable
class TraceSink(Protocol):
    """Destination for trace lines."""

    def __call__(self, line: str) -> None: ...


# A property returns False to falsify, anything else (including None) to pass,
# or raises to signal an error.
Property = Callable[[Any], Any]
AsyncProperty = Callable[[Any], Awaitable[Any] | Any]
