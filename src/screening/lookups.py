"""Lookup indexes and VLOOKUP-style enrichment.

Reproduces two exact-match spreadsheet formulas over the normalized table:

    Info_VLOOKUP = VLOOKUP(A2, <info>!$B:$H, 6, FALSE)
    Dup_VLOOKUP  = VLOOKUP(A2, <master hold report>!$G:$G, 1, FALSE)

A missing key yields the literal string "#N/A", never None.
"""

from __future__ import annotations

from typing import Any

from .coerce import Number, to_number
from .errors import MissingWorksheetError
from .models import DUP_LOOKUP_HEADER, INFO_LOOKUP_HEADER, NOT_AVAILABLE, Table

InfoIndex = dict[Number, Any]
DuplicateIndex = set[Number]

INFO_KEY_COLUMN = 1  # B
INFO_VALUE_COLUMN = 6  # G (6th column of B:H)
DUPLICATE_KEY_COLUMN = 6  # G


def _cell(row: list[Any], index: int, default: Any = "") -> Any:
    return row[index] if index < len(row) else default


def build_info_index(
    table: Table,
    key_column: int = INFO_KEY_COLUMN,
    value_column: int = INFO_VALUE_COLUMN,
) -> InfoIndex:
    """Map coerced `key_column` to `value_column`; the first row for a key wins."""
    index: InfoIndex = {}
    for row in table[1:]:
        key = to_number(_cell(row, key_column, None))
        if key is not None and key not in index:
            index[key] = _cell(row, value_column)
    return index


def build_duplicate_index(table: Table, key_column: int = DUPLICATE_KEY_COLUMN) -> DuplicateIndex:
    """Collect every numeric value of `key_column` (membership only)."""
    index: DuplicateIndex = set()
    for row in table[1:]:
        key = to_number(_cell(row, key_column, None))
        if key is not None:
            index.add(key)
    return index


def build_lookups(info: Table | None, duplicate: Table | None) -> tuple[InfoIndex, DuplicateIndex]:
    """Build both indexes from the secondary tables.

    Args:
        info: Table from the info workbook, or None when the reader found no usable sheet
        duplicate: Table from the duplicate workbook, or None likewise

    Returns:
        (InfoIndex, DuplicateIndex)

    Raises:
        MissingWorksheetError: If either table is None

    """
    if info is None:
        raise MissingWorksheetError("Information")
    if duplicate is None:
        raise MissingWorksheetError("Duplicate")
    return build_info_index(info), build_duplicate_index(duplicate)


def enrich(table: Table, info_index: InfoIndex, duplicate_index: DuplicateIndex) -> Table:
    """Append Info_VLOOKUP and Dup_VLOOKUP to every row of a normalized table."""
    if not table:
        return []

    enriched: Table = [[*table[0], INFO_LOOKUP_HEADER, DUP_LOOKUP_HEADER]]
    for row in table[1:]:
        key = row[0]
        info_value = info_index.get(key)
        if info_value is None:
            info_value = NOT_AVAILABLE
        dup_value = key if key in duplicate_index else NOT_AVAILABLE
        enriched.append([*row, info_value, dup_value])
    return enriched
