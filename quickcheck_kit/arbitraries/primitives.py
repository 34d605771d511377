"""
Primitive generators: numbers, booleans and strings.

Each constructor validates its options once and returns a zero-argument
callable. Calling that callable is the only operation that draws random
values.
"""

import math
import random

from ..core.types import Arbitrary
from ..domain.options import NumberOptions, StringOptions
from ..utilities.constants import (
    DEFAULT_CHARACTERS,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DEFAULT_NUMBER_MAX,
    DEFAULT_NUMBER_MIN,
)


def arbitrary_number(
    min_value: float = DEFAULT_NUMBER_MIN, max_value: float = DEFAULT_NUMBER_MAX
) -> Arbitrary[float]:
    """
    Generate floats uniformly distributed in ``[min_value, max_value)``.

    Args:
        min_value: Inclusive lower bound (default -50)
        max_value: Exclusive upper bound (default 50)

    Raises:
        ValueError: If a bound is not finite or ``max_value <= min_value``
    """
    options = NumberOptions(min_value, max_value)
    low, high = options.min_value, options.max_value

    def sample() -> float:
        fraction = random.random()
        # Interpolate rather than scale the width, which can overflow
        value = (1.0 - fraction) * low + fraction * high
        if value >= high:
            return math.nextafter(high, low)
        return max(value, low)

    return sample


def arbitrary_boolean() -> Arbitrary[bool]:
    """Generate True or False with equal probability."""

    def sample() -> bool:
        return random.random() < 0.5

    return sample


def arbitrary_string(
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
    characters: str = DEFAULT_CHARACTERS,
    prefix: str = "",
) -> Arbitrary[str]:
    """
    Generate strings drawn character by character from an alphabet.

    The length of the random part is uniform in ``[min_length, max_length]``
    and every character is drawn independently from ``characters``. The
    prefix is prepended as-is and does not count towards the length.

    Args:
        min_length: Inclusive minimum length (default 7)
        max_length: Inclusive maximum length (default 100)
        characters: Alphabet to draw from (default alphanumerics plus symbols and space)
        prefix: Fixed text prepended to every sample

    Raises:
        ValueError: On negative or inverted lengths, or an empty alphabet
    """
    options = StringOptions(min_length, max_length, characters, prefix)

    def sample() -> str:
        length = random.randint(options.min_length, options.max_length)
        return options.prefix + "".join(random.choices(options.characters, k=length))

    return sample
