"""
Composite generators built from other generators.
"""

import random
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from ..core.types import Arbitrary
from ..domain.options import ArrayOptions
from ..utilities.constants import DEFAULT_ARRAY_MAX_LENGTH
from ..utilities.validators import validate_callable

T = TypeVar("T")


def arbitrary_array(
    element: Arbitrary[T], max_length: int = DEFAULT_ARRAY_MAX_LENGTH
) -> Arbitrary[list[T]]:
    """
    Generate lists whose length is uniform in ``[0, max_length)``.

    The element generator is called once per slot, in order. Elements are
    not deduplicated. With ``max_length=0`` every sample is empty.

    Args:
        element: Generator for each list element
        max_length: Exclusive upper bound on the length (default 10)
    """
    validate_callable(element, "element")
    options = ArrayOptions(max_length)

    def sample() -> list[T]:
        length = random.randrange(options.max_length) if options.max_length else 0
        return [element() for _ in range(length)]

    return sample


def arbitrary_object(
    shape: Mapping[str, Arbitrary[Any]],
    factory: Callable[..., T] | None = None,
) -> Arbitrary[Any]:
    """
    Generate records with one independently sampled value per field.

    The shape is copied when the generator is built, so later changes to the
    mapping do not affect it. Each sample calls every field generator exactly
    once; predicates must not depend on the order fields are drawn in.

    Args:
        shape: Mapping of field name to that field's generator
        factory: Optional callable receiving the fields as keyword arguments
            (e.g. a dataclass); when omitted the record is a plain dict

    Returns:
        Generator of dicts, or of whatever ``factory`` builds
    """
    if not isinstance(shape, Mapping):
        raise TypeError(f"shape must be a mapping, got {type(shape).__name__}")
    fields = dict(shape)
    for name, generator in fields.items():
        validate_callable(generator, f"shape[{name!r}]")
    if factory is not None:
        validate_callable(factory, "factory")

    def sample() -> Any:
        record = {name: generator() for name, generator in fields.items()}
        if factory is None:
            return record
        return factory(**record)

    return sample
