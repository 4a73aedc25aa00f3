"""Unique sorted numbers from column A of a single table.

Unlike the raw normalizer, row 0 is treated as data and only the scalar
value survives; non-numeric and empty cells are skipped.
"""

from __future__ import annotations

from collections.abc import Sequence

from .coerce import Number, is_blank, to_number
from .models import Table


def extract_column_a(table: Table) -> list[Number]:
    seen: set[Number] = set()
    for row in table:
        if not row or is_blank(row[0]):
            continue
        value = to_number(row[0])
        if value is not None:
            seen.add(value)
    return sorted(seen)


def format_column_a(numbers: Sequence[Number]) -> str:
    """One number per line, ready to paste into a spreadsheet column."""
    return "\n".join(str(n) for n in numbers)
