"""Resolved-row filtering and bucket categorization (pure, no I/O).

Categorization is a first-match-wins rule list over the upper-cased
Info_VLOOKUP value:

    CN  →  JP  →  any special code  →  GENERAL (fallback)

A value such as "CN/JP" therefore lands in CN. The special code set is a
parameter because it differs between deployments.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from .errors import MissingColumnError
from .models import (
    BUCKET_ORDER,
    DEFAULT_LAYOUT,
    DEFAULT_SPECIAL_CODES,
    DUP_LOOKUP_HEADER,
    INFO_LOOKUP_HEADER,
    NOT_AVAILABLE,
    Bucket,
    ColumnLayout,
    FilterMode,
    Row,
    Table,
)
from .normalizer import is_flagged

Rule = tuple[Callable[[str], bool], Bucket]
Buckets = dict[Bucket, list[Row]]


def header_index(header: Row, label: str) -> int:
    """Return the position of `label` in the header.

    Raises:
        MissingColumnError: If the label is absent

    """
    for i, cell in enumerate(header):
        if cell == label:
            return i
    raise MissingColumnError(label)


def filter_unresolved(table: Table) -> list[Row]:
    """Return data rows whose Dup_VLOOKUP cell is "#N/A" (not resolved elsewhere)."""
    dup_index = header_index(table[0], DUP_LOOKUP_HEADER)
    return [row for row in table[1:] if len(row) > dup_index and row[dup_index] == NOT_AVAILABLE]


def category_rules(special_codes: Iterable[str] = DEFAULT_SPECIAL_CODES) -> list[Rule]:
    """Ordered (predicate, bucket) pairs; GENERAL is the fallback, not a rule."""
    codes = tuple(code.strip().upper() for code in special_codes if code and code.strip())
    return [
        (lambda value: "CN" in value, Bucket.CN),
        (lambda value: "JP" in value, Bucket.JP),
        (lambda value: any(code in value for code in codes), Bucket.SPECIAL),
    ]


def _lookup_text(value: Any) -> str:
    return str(value).upper() if value else ""


def classify(value: Any, rules: Sequence[Rule]) -> Bucket:
    """Return the first bucket whose predicate matches `value`."""
    text = _lookup_text(value)
    for predicate, bucket in rules:
        if predicate(text):
            return bucket
    return Bucket.GENERAL


def categorize(rows: Iterable[Row], info_index: int, rules: Sequence[Rule]) -> Buckets:
    """Split rows into the four buckets, preserving relative order.

    Rows are copied so later stages can prepend owners without touching the input.
    """
    buckets: Buckets = {bucket: [] for bucket in BUCKET_ORDER}
    for row in rows:
        value = row[info_index] if info_index < len(row) else ""
        buckets[classify(value, rules)].append(list(row))
    return buckets


def split_flagged(rows: Iterable[Row], layout: ColumnLayout = DEFAULT_LAYOUT) -> tuple[list[Row], list[Row]]:
    """Split rows on the post-pruning flag column into (flagged, other)."""
    flagged: list[Row] = []
    other: list[Row] = []
    for row in rows:
        if is_flagged(row, layout.flag_column, layout.flag_value):
            flagged.append(row)
        else:
            other.append(row)
    return flagged, other


def partition_rows(
    table: Table,
    filter_mode: FilterMode | str = FilterMode.NONE,
    layout: ColumnLayout = DEFAULT_LAYOUT,
    special_codes: Iterable[str] = DEFAULT_SPECIAL_CODES,
) -> list[Buckets]:
    """Filter resolved rows and categorize the rest.

    Args:
        table: Enriched table (must carry Dup_VLOOKUP and Info_VLOOKUP headers)
        filter_mode: PRIORITIZE_FLAGGED yields two partitions (flagged first);
            NONE and ONLY_FLAGGED yield one
        layout: Column positions (flag column is taken post-pruning)
        special_codes: Codes that route a row to the SPECIAL bucket

    Returns:
        One bucket mapping per partition, in output order

    Raises:
        MissingColumnError: If a lookup column is missing

    """
    unresolved = filter_unresolved(table)
    info_index = header_index(table[0], INFO_LOOKUP_HEADER)
    rules = category_rules(special_codes)

    if FilterMode.parse(filter_mode) is FilterMode.PRIORITIZE_FLAGGED:
        partitions = split_flagged(unresolved, layout)
    else:
        partitions = (unresolved,)

    return [categorize(rows, info_index, rules) for rows in partitions]
