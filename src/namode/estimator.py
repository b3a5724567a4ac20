"""
Mode estimation under missing data.

Three public estimators share one decision rule, `decide_under_missing`:

    mode_first   earliest value guaranteed to be a mode
    mode_all     complete set of modes
    mode_single  the mode, only if there is exactly one

Each assumes the worst case: every missing entry might secretly equal
whichever value hurts the candidate most. When that worst case could
overturn the answer, the estimator returns UNKNOWN instead of guessing.

Example:
    >>> mode_first([7, 7, 7, 7, 8, 8, NA])
    Known(value=7)
    >>> mode_all([1, 1, 2, 2, NA])
    Unknown()
"""

from __future__ import annotations

from typing import Any, Iterable

from namode.errors import ContractViolation
from namode.frequency import FrequencyTable, as_sequence, build_frequency_table
from namode.logging import get_logger
from namode.missing import drop_missing
from namode.result import UNKNOWN, Known, KnownSet, ModeResult

logger = get_logger("estimator")


def _check_flag(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise ContractViolation(f"{name} must be a bool, got {value!r}")


def _prepare(values: Iterable[Any], remove_missing: bool) -> FrequencyTable:
    _check_flag("remove_missing", remove_missing)
    sequence = as_sequence(values)
    if remove_missing:
        sequence = drop_missing(sequence)
    return build_frequency_table(sequence)


def decide_under_missing(table: FrequencyTable, candidate: Any, *, allow_tie: bool) -> ModeResult:
    """
    Decide whether `candidate` survives the worst case of the missing entries.

    The strongest competitor is the runner-up value plus every missing
    entry. With a single distinct known value there is no runner-up, and
    the candidate is safe only while fewer than half the entries are
    missing.

    Args:
        table: Frequency table of the data
        candidate: Leading value; must be a known value of `table`
        allow_tie: Accept the candidate when it only matches its worst-case
            competitor (True), or require strict dominance (False)

    Returns:
        Known(candidate) or UNKNOWN

    Raises:
        ContractViolation: if `candidate` does not occur in `table`
    """
    _check_flag("allow_tie", allow_tie)
    if candidate not in table:
        raise ContractViolation(f"Candidate {candidate!r} is not a known value of the data")

    if table.distinct == 1:
        if 2 * table.missing_count < table.length:
            return Known(candidate)
        logger.debug(
            "%r undetermined: %d of %d values missing",
            candidate, table.missing_count, table.length,
        )
        return UNKNOWN

    mode2 = table.runner_up(candidate)
    count_mode1 = table.count(candidate)
    count_mode2_na = table.count(mode2) + table.missing_count

    if allow_tie:
        frequent_enough = count_mode1 >= count_mode2_na
    else:
        frequent_enough = count_mode1 > count_mode2_na

    if frequent_enough:
        return Known(candidate)

    logger.debug(
        "%r undetermined: count %d vs %r with missing values %d",
        candidate, count_mode1, mode2, count_mode2_na,
    )
    return UNKNOWN


def mode_first(values: Iterable[Any], remove_missing: bool = False, first_known: bool = True) -> ModeResult:
    """
    Earliest-appearing value that is guaranteed to be a mode.

    Args:
        values: Sequence of elements and missing markers
        remove_missing: Drop missing entries before counting
        first_known: Accept the first value *known* to be a mode even if a
            missing entry could create an equally frequent value that
            appears earlier. With False, the result is the first mode of
            every possible completion of the data.

    Returns:
        Known(value) or UNKNOWN

    Example:
        mode_first([1, 1, 2, 2, 2, 2, NA, NA, NA, NA]) is UNKNOWN:
        the four missing values could all be 1.
    """
    _check_flag("first_known", first_known)
    table = _prepare(values, remove_missing)

    mode1 = table.top()
    if mode1 is None:
        return UNKNOWN
    if not table.has_missing:
        return Known(mode1)

    mode2 = table.runner_up(mode1)
    count_mode1 = table.count(mode1)
    count_mode2_na = (table.count(mode2) if mode2 is not None else 0) + table.missing_count
    if first_known:
        count_mode2_na -= 1

    if count_mode1 > count_mode2_na:
        return Known(mode1)

    # a competitor can first show up at mode2 or at any missing position
    competitor_index = table.first_missing_index
    if mode2 is not None:
        competitor_index = min(competitor_index, table.index_of(mode2))
    mode1_appears_first = table.index_of(mode1) < competitor_index
    mode1_is_half_or_more = 2 * count_mode1 >= table.length

    if mode1_is_half_or_more and (mode1_appears_first or first_known):
        return Known(mode1)

    if not decide_under_missing(table, mode1, allow_tie=True).is_known:
        return UNKNOWN

    if table.distinct == 1 and mode1_is_half_or_more:
        return Known(mode1)

    logger.debug("first mode undetermined: %r may be tied by an earlier value", mode1)
    return UNKNOWN


def mode_all(values: Iterable[Any], remove_missing: bool = False) -> ModeResult:
    """
    All values tied for the maximum frequency.

    Returns:
        KnownSet of the modes in order of first appearance, or UNKNOWN if
        missing entries could break the tie or create a new contender.
    """
    table = _prepare(values, remove_missing)

    modes = table.modes()
    if not modes:
        return UNKNOWN

    if len(modes) == 1:
        decided = decide_under_missing(table, modes[0], allow_tie=False)
        return KnownSet(modes) if decided.is_known else UNKNOWN

    if table.has_missing:
        logger.debug("%d-way tie %r undetermined with %d missing", len(modes), modes, table.missing_count)
        return UNKNOWN

    return KnownSet(modes)


def mode_single(values: Iterable[Any], remove_missing: bool = False) -> ModeResult:
    """
    The mode, if there is exactly one; UNKNOWN otherwise.

    Stricter than `mode_first`: a tie between known values is UNKNOWN
    rather than resolved by order of appearance.
    """
    _check_flag("remove_missing", remove_missing)
    sequence = as_sequence(values)
    if remove_missing:
        sequence = drop_missing(sequence)

    candidate = mode_all(sequence, remove_missing=False)
    if not isinstance(candidate, KnownSet) or len(candidate) != 1:
        return UNKNOWN

    table = build_frequency_table(sequence)
    return decide_under_missing(table, candidate.values[0], allow_tie=False)
