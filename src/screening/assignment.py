"""Round-robin screener assignment and final table assembly.

Owner selection is a pure function of (position in bucket, name list):
row i gets names[i % len(names)], so each of m names receives either
floor(n/m) or ceil(n/m) of n rows and the first n % m names get the extra one.
An empty name list assigns the bucket's UNASSIGNED_<BUCKET> sentinel.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from .models import BUCKET_ORDER, SCREENER_HEADER, Bucket, Row, Table

_NAME_SEPARATORS = re.compile(r"[\s,]+")


def parse_names(text: str | None) -> list[str]:
    """Split free-text assignee input on commas and whitespace.

    Example:
        >>> parse_names("Alice, Bob\\nCarol")
        ['Alice', 'Bob', 'Carol']

    """
    if not text:
        return []
    return [name for name in _NAME_SEPARATORS.split(text) if name]


def owner_for_position(position: int, names: Sequence[str], sentinel: str) -> str:
    if not names:
        return sentinel
    return names[position % len(names)]


def assign_bucket(rows: Sequence[Row], names: Sequence[str], bucket: Bucket) -> list[Row]:
    """Prepend an owner cell to each row of one bucket (rows are copied)."""
    return [
        [owner_for_position(i, names, bucket.sentinel), *row] for i, row in enumerate(rows)
    ]


def assign_partition(
    buckets: Mapping[Bucket, Sequence[Row]], assignees: Mapping[Bucket, Sequence[str]]
) -> list[Row]:
    """Assign every bucket of a partition and concatenate in CN, JP, SPECIAL, GENERAL order.

    Round-robin restarts at position 0 for each bucket of each partition.
    """
    assigned: list[Row] = []
    for bucket in BUCKET_ORDER:
        assigned.extend(assign_bucket(buckets.get(bucket, []), assignees.get(bucket, []), bucket))
    return assigned


def drop_header_column(header: Row, label: str) -> tuple[Row, int | None]:
    """Return (header without `label`, removed index) or (copy, None) when absent."""
    header = list(header)
    if label in header:
        index = header.index(label)
        del header[index]
        return header, index
    return header, None


def build_output_table(header: Row, assigned_rows: Sequence[Row], drop_label: str) -> Table:
    """Assemble the final sheet: drop the `drop_label` column and prepend "Screener".

    Assigned rows are shifted by one because of the owner cell, so the column
    removed from them sits at header index + 1.
    """
    out_header, dropped = drop_header_column(header, drop_label)
    rows: Table = []
    for row in assigned_rows:
        row = list(row)
        if dropped is not None and dropped + 1 < len(row):
            del row[dropped + 1]
        rows.append(row)
    return [[SCREENER_HEADER, *out_header], *rows]
