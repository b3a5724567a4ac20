"""
Frequency table: distinct known values and how often each occurs.

The table is the shared input of every estimator. It is built fresh per
call and never mutated afterwards.

Tie-break convention (used everywhere in namode):
    Among values sharing the maximum count, the one that appears first
    in the input wins.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from namode.errors import ContractViolation
from namode.missing import is_missing


def _element_kind(value: Any) -> Any:
    """Group values that may be compared with each other."""
    # bool before Number: True == 1 must not merge two kinds of data
    if isinstance(value, bool):
        return bool
    if isinstance(value, numbers.Number):
        return numbers.Number
    if isinstance(value, str):
        return str
    if isinstance(value, bytes):
        return bytes
    return type(value)


def as_sequence(values: Iterable[Any]) -> List[Any]:
    """
    Materialise `values` into a list.

    Raises:
        ContractViolation: if `values` is a bare string/bytes or not iterable
    """
    if isinstance(values, (str, bytes)):
        raise ContractViolation(
            f"Expected a sequence of values, got a single {type(values).__name__}: {values!r}"
        )
    try:
        return list(values)
    except TypeError as e:
        raise ContractViolation(f"Expected a sequence of values, got {type(values).__name__}") from e


@dataclass(frozen=True)
class FrequencyTable:
    """
    Distinct-value counts of one input sequence.

    Properties:
        values:
            Distinct known values in order of first appearance
        counts:
            Occurrences of each value (parallel to `values`)
        first_index:
            Position of each value's first occurrence (parallel to `values`)
        missing_count:
            Number of missing entries
        first_missing_index:
            Position of the first missing entry, None if nothing is missing
        length:
            Length of the input sequence

    INVARIANT:
        missing_count + sum(counts) == length
    """

    values: Tuple[Any, ...]
    counts: Tuple[int, ...]
    first_index: Tuple[int, ...]
    missing_count: int
    first_missing_index: Optional[int]
    length: int

    @property
    def distinct(self) -> int:
        return len(self.values)

    @property
    def has_missing(self) -> bool:
        return self.missing_count > 0

    @property
    def max_count(self) -> int:
        return max(self.counts, default=0)

    def _position(self, value: Any) -> Optional[int]:
        for i, v in enumerate(self.values):
            if v == value and _element_kind(v) is _element_kind(value):
                return i
        return None

    def __contains__(self, value: Any) -> bool:
        return self._position(value) is not None

    def count(self, value: Any) -> int:
        """Occurrences of `value`; 0 if it never occurs."""
        i = self._position(value)
        return 0 if i is None else self.counts[i]

    def index_of(self, value: Any) -> Optional[int]:
        """Position of the first occurrence of `value` in the input."""
        i = self._position(value)
        return None if i is None else self.first_index[i]

    def top(self) -> Optional[Any]:
        """Most frequent value, first appearance breaking ties."""
        return self.runner_up(exclude=None) if self.values else None

    def runner_up(self, exclude: Any) -> Optional[Any]:
        """
        Most frequent value other than `exclude`.

        With `exclude=None` no value is skipped (None is never a known value).
        Returns None if there is no other value.
        """
        best = None
        best_count = -1
        for v, c in zip(self.values, self.counts):
            if exclude is not None and v == exclude:
                continue
            # strict > keeps the earliest value on ties
            if c > best_count:
                best, best_count = v, c
        return best

    def modes(self) -> Tuple[Any, ...]:
        """All values with the maximum count, in order of first appearance."""
        top = self.max_count
        return tuple(v for v, c in zip(self.values, self.counts) if c == top)


def build_frequency_table(values: Iterable[Any]) -> FrequencyTable:
    """
    Count the distinct known values of `values` in one pass.

    Missing entries (see `namode.missing.is_missing`) never increase a
    value's count; they are tallied in `missing_count`.

    Args:
        values: Sequence of elements and missing markers

    Returns:
        FrequencyTable

    Raises:
        ContractViolation: if elements are unhashable or of mixed kinds
    """
    sequence = as_sequence(values)

    slot: Dict[Any, int] = {}
    distinct: List[Any] = []
    counts: List[int] = []
    first_index: List[int] = []
    missing_count = 0
    first_missing_index = None
    kind = None
    kind_example = None

    for pos, value in enumerate(sequence):
        if is_missing(value):
            missing_count += 1
            if first_missing_index is None:
                first_missing_index = pos
            continue

        value_kind = _element_kind(value)
        if kind is None:
            kind, kind_example = value_kind, value
        elif value_kind is not kind:
            raise ContractViolation(
                f"Elements are not mutually comparable: {kind_example!r} and {value!r}"
            )

        try:
            i = slot.get(value)
        except TypeError as e:
            raise ContractViolation(f"Unhashable element at position {pos}: {value!r}") from e

        if i is None:
            slot[value] = len(distinct)
            distinct.append(value)
            counts.append(1)
            first_index.append(pos)
        else:
            counts[i] += 1

    return FrequencyTable(
        values=tuple(distinct),
        counts=tuple(counts),
        first_index=tuple(first_index),
        missing_count=missing_count,
        first_missing_index=first_missing_index,
        length=len(sequence),
    )
