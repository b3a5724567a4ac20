"""
Mode Report: one read-only summary of a sequence's modes.

Runs every estimator over the same input and records:
    - Size and missingness
    - Frequencies of the known values
    - The first, all, and single mode results
    - Warning flags explaining undetermined results

IMPORTANT: This is a reporting layer. It does not change any decision
made by `namode.estimator`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple

from namode.estimator import mode_all, mode_first, mode_single
from namode.frequency import as_sequence, build_frequency_table
from namode.missing import drop_missing
from namode.result import UNKNOWN, ModeResult


@dataclass
class ModeReport:
    """Summary of a mode analysis."""

    length: int = 0
    missing_count: int = 0
    distinct_values: int = 0
    remove_missing: bool = False
    first_known: bool = True

    # (value, count) in order of first appearance
    frequencies: List[Tuple[Any, int]] = field(default_factory=list)
    max_count: int = 0

    first_mode: ModeResult = UNKNOWN
    all_modes: ModeResult = UNKNOWN
    single_mode: ModeResult = UNKNOWN

    warnings: List[str] = field(default_factory=list)

    @property
    def missing_percent(self) -> float:
        if self.length == 0:
            return 0.0
        return (self.missing_count / self.length) * 100

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_modes(values: Iterable[Any], remove_missing: bool = False, first_known: bool = True) -> ModeReport:
    """
    Analyze the modes of `values`.

    Flags are passed through to the estimators unchanged. Counts in the
    report describe the data the estimators saw, i.e. after missing
    entries are dropped when `remove_missing` is set.

    Returns a ModeReport with results and warnings.
    """
    sequence = as_sequence(values)

    report = ModeReport(remove_missing=remove_missing, first_known=first_known)
    report.first_mode = mode_first(sequence, remove_missing=remove_missing, first_known=first_known)
    report.all_modes = mode_all(sequence, remove_missing=remove_missing)
    report.single_mode = mode_single(sequence, remove_missing=remove_missing)

    table = build_frequency_table(drop_missing(sequence) if remove_missing else sequence)
    report.length = table.length
    report.missing_count = table.missing_count
    report.distinct_values = table.distinct
    report.frequencies = list(zip(table.values, table.counts))
    report.max_count = table.max_count

    # =========================================================================
    # WARNING FLAGS
    # =========================================================================

    if table.length == 0:
        report.add_warning("Empty input: mode is undefined")
        return report

    if table.distinct == 0:
        report.add_warning(f"All {table.length} values are missing: mode is undefined")
        return report

    modes = table.modes()
    if len(modes) > 1:
        report.add_warning(
            f"Multiple modes among known values: {', '.join(repr(m) for m in modes)}"
        )

    if table.has_missing:
        undetermined = [
            name for name, result in (
                ("first", report.first_mode),
                ("all", report.all_modes),
                ("single", report.single_mode),
            )
            if not result.is_known
        ]
        if undetermined:
            report.add_warning(
                f"{table.missing_count} of {table.length} values missing "
                f"({report.missing_percent:.1f}%): {', '.join(undetermined)} mode undetermined"
            )

    return report
