"""
Generator constructors.

Every constructor returns an ``Arbitrary``: a zero-argument callable that
yields a freshly sampled value on each call.
"""

from .composites import arbitrary_array, arbitrary_object
from .primitives import arbitrary_boolean, arbitrary_number, arbitrary_string

__all__ = [
    "arbitrary_array",
    "arbitrary_boolean",
    "arbitrary_number",
    "arbitrary_object",
    "arbitrary_string",
]
