from __future__ import annotations

from screening.column_a import extract_column_a, format_column_a


def test_scenario_unique_sorted():
    """Verify [3],[3],[x],[1] → [1, 3]."""
    assert extract_column_a([[3], [3], ["x"], [1]]) == [1, 3]


def test_row_zero_is_data():
    """Verify the first row is not treated as a header."""
    assert extract_column_a([[10, "h"], [2, "a"]]) == [2, 10]


def test_skips_empty_cells_and_rows():
    """Verify None, blank strings and empty rows are ignored."""
    table = [[None], [], [""], ["  "], ["4"], [4.0], [0]]
    assert extract_column_a(table) == [0, 4]


def test_format_column_a():
    """Verify one number per line."""
    assert format_column_a([1, 2.5, 30]) == "1\n2.5\n30"
    assert format_column_a([]) == ""
