"""Raw table normalization (pure, no I/O).

Steps, in order:
  1. ONLY_FLAGGED pre-filter on the raw flag column (header always kept)
  2. Key coercion + dedup on column A (first occurrence wins)
  3. Prune the fixed column block (B..G by default), header included
  4. Relabel the header cell that now holds old column H as "CTR"

After normalization every data row has a unique numeric first cell.
"""

from __future__ import annotations

import logging

from .coerce import to_number
from .errors import EmptySheetError
from .models import DEFAULT_LAYOUT, ColumnLayout, FilterMode, Row, Table

logger = logging.getLogger(__name__)


def is_flagged(row: Row, column: int, flag_value: str) -> bool:
    """Return True when `row[column]` equals the flag sentinel.

    Rows too short to hold the column are not flagged.
    """
    return len(row) > column and row[column] == flag_value


def keep_flagged_rows(table: Table, layout: ColumnLayout = DEFAULT_LAYOUT) -> Table:
    """Keep the header plus data rows flagged on the raw flag column."""
    header = list(table[0]) if table else []
    flagged = [
        list(row)
        for row in table[1:]
        if is_flagged(row, layout.raw_flag_column, layout.flag_value)
    ]
    return [header, *flagged]


def dedupe_by_key(table: Table) -> Table:
    """Drop data rows whose first cell is non-numeric or repeats an earlier key.

    Surviving rows keep their original order and get the coerced key written
    back to cell 0. Running this on its own output is a no-op.
    """
    if not table:
        return []

    seen: set[int | float] = set()
    result: Table = [list(table[0])]
    for row in table[1:]:
        key = to_number(row[0]) if row else None
        if key is None or key in seen:
            continue
        seen.add(key)
        result.append([key, *row[1:]])
    return result


def prune_columns(table: Table, start: int, end: int) -> Table:
    """Delete columns `start..end` (inclusive) from every row."""
    return [[*row[:start], *row[end + 1 :]] for row in table]


def normalize_raw_table(
    table: Table,
    filter_mode: FilterMode | str = FilterMode.NONE,
    layout: ColumnLayout = DEFAULT_LAYOUT,
) -> Table:
    """Normalize the raw export into a keyed table.

    Args:
        table: Raw table as decoded by the reader (row 0 is the header)
        filter_mode: ONLY_FLAGGED drops unflagged rows before dedup; other modes
            are applied later by the categorizer
        layout: Column positions of the raw export

    Returns:
        New table; the input is not modified

    Raises:
        EmptySheetError: If the table has no rows at all

    """
    if not table:
        raise EmptySheetError("Raw Data file is empty or corrupted.")

    mode = FilterMode.parse(filter_mode)
    rows = keep_flagged_rows(table, layout) if mode is FilterMode.ONLY_FLAGGED else table

    keyed = dedupe_by_key(rows)
    pruned = prune_columns(keyed, layout.prune_start, layout.prune_end)

    header = pruned[0]
    if len(header) > layout.renamed_column:
        header[layout.renamed_column] = layout.renamed_label

    logger.debug(
        "Normalized raw table: %d data rows in, %d kept (mode=%s)",
        len(table) - 1,
        len(pruned) - 1,
        mode.value,
    )
    return pruned
