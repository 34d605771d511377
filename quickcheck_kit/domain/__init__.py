"""
Domain value objects for Quickcheck-Kit.
"""

from .options import ArrayOptions, NumberOptions, StringOptions

__all__ = ["ArrayOptions", "NumberOptions", "StringOptions"]
