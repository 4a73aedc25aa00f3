from __future__ import annotations

import copy

import pytest

from screening.coerce import to_number
from screening.errors import EmptySheetError
from screening.models import ColumnLayout, FilterMode
from screening.normalizer import dedupe_by_key, normalize_raw_table, prune_columns


class TestToNumber:
    """Test numeric coercion of key cells."""

    def test_numbers_pass_through(self):
        """Verify ints and integral floats become ints."""
        assert to_number(5) == 5
        assert to_number(5.0) == 5
        assert isinstance(to_number(5.0), int)
        assert to_number(2.5) == 2.5

    def test_numeric_strings(self):
        """Verify numeric strings are stripped and parsed."""
        assert to_number(" 7 ") == 7
        assert to_number("7.50") == 7.5
        assert to_number("1e3") == 1000
        assert to_number("-4") == -4

    def test_non_numeric(self):
        """Verify junk, blanks, bools and NaN are not numbers."""
        for value in ["abc", "", "   ", None, True, float("nan"), "1_000", "5 apples"]:
            assert to_number(value) is None, value

    def test_infinity_spelling(self):
        """Verify only 'Infinity' reads as infinite; inf/nan variants are text."""
        assert to_number("Infinity") == float("inf")
        assert to_number("-Infinity") == float("-inf")
        for value in ["inf", "-inf", "infinity", "INFINITY", "nan", "NaN"]:
            assert to_number(value) is None, value


class TestDedupeByKey:
    """Test key coercion and first-occurrence dedup."""

    def test_scenario_keeps_first_and_drops_non_numeric(self):
        """Verify [5],[5],[abc],[7] keeps the first 5 and 7."""
        table = [["ID", "Name"], [5, "first"], [5, "second"], ["abc", "x"], [7, "y"]]
        result = dedupe_by_key(table)
        assert result == [["ID", "Name"], [5, "first"], [7, "y"]]

    def test_blank_key_is_dropped_not_zero(self):
        """Verify a blank key cell is skipped rather than read as key 0."""
        table = [["ID", "Name"], ["", "blank"], [None, "empty"], [5, "kept"], [0, "zero"]]
        assert dedupe_by_key(table) == [["ID", "Name"], [5, "kept"], [0, "zero"]]

    def test_string_and_float_keys_collapse(self):
        """Verify '5', 5.0 and 5 are one key and the coerced value is written back."""
        table = [["ID"], ["5"], [5.0], [5], [" 8 "]]
        assert dedupe_by_key(table) == [["ID"], [5], [8]]

    def test_idempotent(self):
        """Verify deduping a deduplicated table is a no-op."""
        table = [["ID", "v"], [3, "a"], ["3", "b"], [1, "c"], ["x", "d"]]
        once = dedupe_by_key(table)
        assert dedupe_by_key(once) == once

    def test_header_never_deduplicated(self):
        """Verify a numeric header is carried through untouched."""
        table = [[1, "h"], [1, "a"]]
        assert dedupe_by_key(table) == [[1, "h"], [1, "a"]]

    def test_does_not_mutate_input(self):
        """Verify the input rows are left as they were."""
        table = [["ID"], ["5"], ["5"]]
        before = copy.deepcopy(table)
        dedupe_by_key(table)
        assert table == before


class TestNormalizeRawTable:
    """Test the full normalizer."""

    def test_prunes_b_through_g_and_renames_ctr(self, raw_table):
        """Verify columns 1..6 are removed and old column H is labelled CTR."""
        result = normalize_raw_table(raw_table)
        header = result[0]
        assert header[0] == "ID"
        assert header[1] == "CTR"
        assert header[2] == "col8"
        assert header[-1] == "Flag"
        assert len(header) == 20
        assert all(len(row) == 20 for row in result)

    def test_keys_unique_and_numeric(self, raw_table):
        """Verify every data row starts with a unique numeric key."""
        result = normalize_raw_table(raw_table)
        keys = [row[0] for row in result[1:]]
        assert keys == [1, 2, 3, 4, 5, 7]

    def test_only_flagged_filters_before_dedup(self, raw_table):
        """Verify ONLY_FLAGGED keeps header + ZRAX rows from the raw flag column."""
        short_row = [9, "too", "short"]
        result = normalize_raw_table([*raw_table, short_row], FilterMode.ONLY_FLAGGED)
        assert [row[0] for row in result[1:]] == [5]
        assert result[0][1] == "CTR"

    def test_only_flagged_accepts_short_code(self, raw_table):
        """Verify the legacy OZ code means ONLY_FLAGGED."""
        result = normalize_raw_table(raw_table, "OZ")
        assert [row[0] for row in result[1:]] == [5]

    def test_prioritize_mode_does_not_filter(self, raw_table):
        """Verify PRIORITIZE_FLAGGED leaves all rows to the categorizer."""
        result = normalize_raw_table(raw_table, FilterMode.PRIORITIZE_FLAGGED)
        assert len(result) == 7

    def test_header_only(self):
        """Verify a header-only table survives with the rename applied."""
        result = normalize_raw_table([["ID", "B", "C", "D", "E", "F", "G", "H"]])
        assert result == [["ID", "CTR"]]

    def test_single_column_header_not_renamed(self):
        """Verify a header without a second cell is left alone."""
        assert normalize_raw_table([["ID"], [1]]) == [["ID"], [1]]

    def test_empty_table_raises(self):
        """Verify an empty sheet is an error."""
        with pytest.raises(EmptySheetError):
            normalize_raw_table([])

    def test_custom_layout(self):
        """Verify pruning and flag positions follow the layout."""
        layout = ColumnLayout(prune_start=1, prune_end=2, raw_flag_column=4)
        table = [["ID", "a", "b", "ctr", "flag"], [1, "x", "y", "c", "ZRAX"], [2, "x", "y", "c", ""]]
        result = normalize_raw_table(table, FilterMode.ONLY_FLAGGED, layout)
        assert result == [["ID", "CTR", "flag"], [1, "c", "ZRAX"]]
        assert layout.flag_column == 2


def test_prune_columns_handles_short_rows():
    """Verify rows shorter than the pruned block keep only their first cell."""
    assert prune_columns([[1, "a", "b"]], 1, 6) == [[1]]
