"""
Result types for mode estimation.

Every estimator returns one of three shapes:

    Known(value)        one value is provably the answer
    KnownSet(values)    the complete set of modes (mode_all only)
    Unknown()           the observed data cannot determine the answer

ARCHITECTURAL RULE:
    Unknown is a legitimate outcome, not an error.
    Callers branch on it; nothing here raises for undetermined data.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Any, Iterator, Tuple


class ModeResult(ABC):
    """
    Base class for estimator results.

    Structure only: results know nothing about formatting or
    serialization (see `namode.serialization`).
    """

    @property
    def is_known(self) -> bool:
        return not isinstance(self, Unknown)


@dataclass(frozen=True)
class Known(ModeResult):
    """
    A single value known to be the requested mode.

    Example:
        mode_first([7, 7, 7, 7, 8, 8, NA]) == Known(7)
    """

    value: Any


@dataclass(frozen=True)
class KnownSet(ModeResult):
    """
    All values tied for the maximum frequency, in order of first appearance.

    Example:
        mode_all(["a", "a", "b", "b", "c"]) == KnownSet(("a", "b"))

    A set holding one value is how `mode_all` reports a unique mode.
    """

    values: Tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __contains__(self, item: Any) -> bool:
        return item in self.values


@dataclass(frozen=True)
class Unknown(ModeResult):
    """The mode cannot be determined from the observed data."""
    pass


UNKNOWN = Unknown()
