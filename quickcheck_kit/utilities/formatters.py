"""
Formatting utilities for counter-examples and trace output.

This module provides the serialization used in failure messages and the
truncated previews written by trace mode.
"""

import dataclasses
import json
import reprlib
from typing import Any

from .constants import PREVIEW_ELLIPSIS, PREVIEW_LENGTH


def _json_fallback(value: Any) -> Any:
    """Convert values the json module cannot encode on its own."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, set | frozenset):
        return sorted(value, key=repr)
    if isinstance(value, bytes | bytearray):
        return bytes(value).decode("latin-1")
    return repr(value)


def serialize_value(value: Any) -> str:
    """
    Serialize a sampled value for failure messages.

    Produces JSON where possible so the failing input can be pasted back
    into a test; falls back to ``repr`` for anything else, and to a
    depth-limited ``reprlib`` rendering for structures too deep to encode.
    """
    try:
        return json.dumps(value, ensure_ascii=False, default=_json_fallback)
    except RecursionError:
        return reprlib.repr(value)
    except (TypeError, ValueError):
        # Circular references and unorderable keys
        try:
            return repr(value)
        except RecursionError:
            return reprlib.repr(value)


def preview_value(value: Any, limit: int = PREVIEW_LENGTH) -> str:
    """Serialize and cut to ``limit`` characters, marking the cut."""
    text = serialize_value(value)
    if len(text) > limit:
        return text[:limit] + PREVIEW_ELLIPSIS
    return text


def format_trace_line(trial: int, iterations: int, value: Any, limit: int = PREVIEW_LENGTH) -> str:
    """Format one trace line (trial is 1-based)."""
    return f"Iteration {trial}/{iterations}: {preview_value(value, limit)}"
