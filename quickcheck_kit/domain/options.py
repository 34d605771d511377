"""
Generator option value objects.

Immutable parameter bags captured by each generator at construction time.
Invalid combinations are rejected here, so sampling never fails.
"""

from dataclasses import dataclass

from ..utilities.constants import (
    DEFAULT_ARRAY_MAX_LENGTH,
    DEFAULT_CHARACTERS,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DEFAULT_NUMBER_MAX,
    DEFAULT_NUMBER_MIN,
)
from ..utilities.validators import validate_finite_number, validate_non_negative_int


@dataclass(frozen=True)
class NumberOptions:
    """
    Half-open range ``[min_value, max_value)`` for the number generator.

    Both bounds must be finite and ``max_value`` strictly greater than
    ``min_value``; an empty or inverted range is rejected rather than sampled.
    """

    min_value: float = DEFAULT_NUMBER_MIN
    max_value: float = DEFAULT_NUMBER_MAX

    def __post_init__(self):
        """Validate bounds after initialization."""
        minimum = validate_finite_number(self.min_value, "min_value")
        maximum = validate_finite_number(self.max_value, "max_value")
        if maximum <= minimum:
            raise ValueError(
                f"max_value must be greater than min_value, "
                f"got min_value={self.min_value}, max_value={self.max_value}"
            )
        object.__setattr__(self, "min_value", minimum)
        object.__setattr__(self, "max_value", maximum)


@dataclass(frozen=True)
class StringOptions:
    """
    Options for the string generator.

    Lengths are inclusive on both ends and count only the random part;
    ``prefix`` is prepended unchanged to every sample.
    """

    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH
    characters: str = DEFAULT_CHARACTERS
    prefix: str = ""

    def __post_init__(self):
        """Validate length bounds and alphabet after initialization."""
        validate_non_negative_int(self.min_length, "min_length")
        validate_non_negative_int(self.max_length, "max_length")
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length must not exceed max_length, "
                f"got min_length={self.min_length}, max_length={self.max_length}"
            )
        if not isinstance(self.characters, str):
            raise ValueError(f"characters must be a string, got {type(self.characters).__name__}")
        if not isinstance(self.prefix, str):
            raise ValueError(f"prefix must be a string, got {type(self.prefix).__name__}")
        if not self.characters and self.max_length > 0:
            raise ValueError("characters cannot be empty when max_length is positive")


@dataclass(frozen=True)
class ArrayOptions:
    """Options for the array generator: length drawn from ``[0, max_length)``."""

    max_length: int = DEFAULT_ARRAY_MAX_LENGTH

    def __post_init__(self):
        validate_non_negative_int(self.max_length, "max_length")
