from __future__ import annotations

import math
import numbers

from .errors import InvalidArgument


def is_positive_number(value) -> bool:
    """True for finite real numbers strictly greater than zero (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        v = float(value)
    except (OverflowError, ValueError):
        return False
    return math.isfinite(v) and v > 0.0


def coerce_lambda(value, *, context: str = "invalid argument") -> float:
    if not is_positive_number(value):
        raise InvalidArgument(
            f"{context}. Mean parameter must be a positive number (got {value!r})",
            value,
        )
    return float(value)
