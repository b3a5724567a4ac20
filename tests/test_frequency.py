"""
Tests for the frequency table.

These tests verify:
    - Distinct values are kept in order of first appearance
    - Missing entries are tallied separately, never counted as values
    - Ties resolve to the earliest value
    - Contract violations fail loudly
"""

import pytest

from namode.errors import ContractViolation
from namode.frequency import FrequencyTable, as_sequence, build_frequency_table
from namode.missing import NA


class TestBuild:
    """Test construction from raw sequences."""

    def test_counts_in_first_appearance_order(self):
        """Values should appear in the order they were first seen."""
        table = build_frequency_table([3, 1, 3, 2, 1, 3])
        assert table.values == (3, 1, 2)
        assert table.counts == (3, 2, 1)
        assert table.first_index == (0, 1, 3)

    def test_missing_tallied_separately(self):
        """NA, None and NaN count as missing, not as values."""
        table = build_frequency_table([1, NA, 2, 1, None, float("nan")])
        assert table.values == (1, 2)
        assert table.counts == (2, 1)
        assert table.missing_count == 3
        assert table.first_missing_index == 1
        assert table.length == 6

    def test_invariant_holds(self):
        """missing_count + sum(counts) == length."""
        data = ["a", NA, "b", "a", NA, "c", "a"]
        table = build_frequency_table(data)
        assert table.missing_count + sum(table.counts) == len(data)

    def test_empty_sequence(self):
        """An empty sequence gives an empty table."""
        table = build_frequency_table([])
        assert table.values == ()
        assert table.length == 0
        assert table.first_missing_index is None
        assert not table.has_missing

    def test_all_missing(self):
        """All-missing input has no values but a full missing count."""
        table = build_frequency_table([NA, NA, None])
        assert table.distinct == 0
        assert table.missing_count == 3
        assert table.top() is None
        assert table.max_count == 0
        assert table.modes() == ()

    def test_accepts_generator(self):
        """Any iterable is accepted and read once."""
        table = build_frequency_table(x for x in [1, 1, 2])
        assert table.counts == (2, 1)

    def test_int_and_float_share_a_value(self):
        """1 and 1.0 are equal numbers and count together."""
        table = build_frequency_table([1, 1.0, 2])
        assert table.counts == (2, 1)

    def test_table_is_immutable(self):
        """Tables should be frozen."""
        table = build_frequency_table([1])
        with pytest.raises(AttributeError):
            table.missing_count = 5


class TestQueries:
    """Test lookups and the first-appearance tie-break."""

    def test_top_breaks_ties_by_first_appearance(self):
        """With equal counts the earliest value wins."""
        table = build_frequency_table(["b", "a", "a", "b"])
        assert table.top() == "b"

    def test_runner_up_excludes_candidate(self):
        """runner_up should skip the excluded value."""
        table = build_frequency_table([1, 2, 2, 3, 3, 3])
        assert table.runner_up(3) == 2

    def test_runner_up_tie_break(self):
        """Runner-up ties also resolve to the earliest value."""
        table = build_frequency_table([5, 9, 7, 7, 7, 9, 5])
        assert table.runner_up(7) == 5

    def test_runner_up_with_single_value(self):
        """No runner-up exists when only one value is known."""
        table = build_frequency_table([4, 4, NA])
        assert table.runner_up(4) is None

    def test_modes_returns_all_tied_values(self):
        """modes() returns every value at the maximum count."""
        table = build_frequency_table(["a", "a", "b", "b", "c", "d", "e"])
        assert table.modes() == ("a", "b")
        assert table.max_count == 2

    def test_count_and_index_of(self):
        """count/index_of report occurrences and first position."""
        table = build_frequency_table([NA, 8, 9, 8])
        assert table.count(8) == 2
        assert table.index_of(9) == 2
        assert table.count(42) == 0
        assert table.index_of(42) is None

    def test_bool_is_not_looked_up_as_number(self):
        """True must not match the number 1."""
        table = build_frequency_table([1, 1, 2])
        assert table.count(True) == 0
        assert True not in table
        assert 1 in table


class TestContract:
    """Test contract violations."""

    def test_mixed_kinds_rejected(self):
        """Strings and numbers cannot share a sequence."""
        with pytest.raises(ContractViolation, match="not mutually comparable"):
            build_frequency_table([1, "1"])

    def test_bool_and_number_rejected(self):
        """Booleans do not silently merge with 0/1."""
        with pytest.raises(ContractViolation):
            build_frequency_table([True, 1, 1])

    def test_unhashable_rejected(self):
        """Unhashable elements are a contract violation."""
        with pytest.raises(ContractViolation, match="Unhashable"):
            build_frequency_table([[1], [1]])

    def test_bare_string_rejected(self):
        """A string is a single value, not a sequence."""
        with pytest.raises(ContractViolation):
            build_frequency_table("aab")

    def test_non_iterable_rejected(self):
        """Non-iterables are rejected."""
        with pytest.raises(ContractViolation):
            as_sequence(5)

    def test_contract_violation_is_type_error(self):
        """ContractViolation is catchable as TypeError."""
        with pytest.raises(TypeError):
            build_frequency_table(["x", 2.5])

    def test_missing_does_not_fix_kind(self):
        """Missing entries are compatible with any element kind."""
        table = build_frequency_table([NA, "x", None, "y"])
        assert isinstance(table, FrequencyTable)
        assert table.values == ("x", "y")
