"""
Utility modules for Quickcheck-Kit.

Constants, validation helpers, value serialization and console output
shared by the generator and runner layers.
"""

from .console import ConsoleTraceSink, create_stderr_sink
from .formatters import format_trace_line, preview_value, serialize_value

__all__ = [
    "ConsoleTraceSink",
    "create_stderr_sink",
    "format_trace_line",
    "preview_value",
    "serialize_value",
]
