"""
Missing-value marker for namode.

A missing entry holds a real value whose identity is not known. It is not
the absence of a slot: a sequence of length n with k missing entries still
has n observations, k of them unresolved.

Recognised markers:
    - NA (the namode singleton)
    - None
    - floating-point NaN (float and its subclasses)
"""

import math
from typing import Any, Iterable, List


class _NAType:
    """Type of the `NA` singleton."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NA"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_NAType, ())


NA = _NAType()


def is_missing(value: Any) -> bool:
    """Return True if `value` is a missing marker."""
    if value is NA or value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def drop_missing(values: Iterable[Any]) -> List[Any]:
    """Return the known values of `values`, order preserved."""
    return [v for v in values if not is_missing(v)]
