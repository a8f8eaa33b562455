"""Scalar coercion helpers shared by the reader and the location filters."""

from __future__ import annotations

from typing import Any


def to_int(value: Any, what: str = "value") -> int:
    """Convert a year / state number given as int, float or string to ``int``.

    Numeric strings with a fractional part (``"2013.0"``) are truncated,
    the same way an integral float is.

    Raises:
        ValueError: If *value* is not numeric.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid {what}: {value!r}")
    if isinstance(value, int):
        return value
    try:
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                return int(float(text))
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"invalid {what}: {value!r}") from None
