"""Screening pipeline entry points (pure functions, no file I/O).

Functions:
  - process(raw, info, duplicate, filter_mode) → enriched Table
  - assign(enriched, cn, jp, special, general, filter_mode) → AssignmentResult
  - extract_column_a(table) → sorted unique numbers

Decoding and encoding workbooks is handled by `ingest.workbooks`.
For orchestration, see `flows/assign_screeners_flow.py`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .assignment import assign_partition, build_output_table
from .categorizer import partition_rows
from .column_a import extract_column_a
from .lookups import build_lookups, enrich
from .models import (
    BUCKET_ORDER,
    DEFAULT_LAYOUT,
    DEFAULT_SPECIAL_CODES,
    AssignmentResult,
    Bucket,
    ColumnLayout,
    FilterMode,
    Table,
)
from .normalizer import normalize_raw_table
from .pivot import tally_owners

logger = logging.getLogger(__name__)

__all__ = ["assign", "extract_column_a", "process"]


def process(
    raw: Table,
    info: Table | None,
    duplicate: Table | None,
    filter_mode: FilterMode | str = FilterMode.NONE,
    layout: ColumnLayout = DEFAULT_LAYOUT,
) -> Table:
    """Normalize the raw table and enrich it with both lookups.

    Args:
        raw: Raw export table (first worksheet of the raw workbook)
        info: Info table, or None if the reader found no usable sheet
        duplicate: Duplicate (Master Hold Report) table, or None likewise
        filter_mode: ONLY_FLAGGED is applied here; PRIORITIZE_FLAGGED in `assign`
        layout: Column positions of the raw export

    Returns:
        Enriched table with Info_VLOOKUP and Dup_VLOOKUP appended

    Raises:
        EmptySheetError: If the raw table has no rows
        MissingWorksheetError: If info or duplicate is None

    """
    normalized = normalize_raw_table(raw, filter_mode, layout)
    info_index, duplicate_index = build_lookups(info, duplicate)
    enriched = enrich(normalized, info_index, duplicate_index)
    logger.debug(
        "Enriched %d rows (info keys=%d, duplicate keys=%d)",
        len(enriched) - 1,
        len(info_index),
        len(duplicate_index),
    )
    return enriched


def assign(
    enriched: Table,
    cn_names: Sequence[str] = (),
    jp_names: Sequence[str] = (),
    special_names: Sequence[str] = (),
    general_names: Sequence[str] = (),
    filter_mode: FilterMode | str = FilterMode.NONE,
    layout: ColumnLayout = DEFAULT_LAYOUT,
    special_codes: Iterable[str] = DEFAULT_SPECIAL_CODES,
) -> AssignmentResult:
    """Filter, categorize and assign screeners to the enriched table.

    A table holding only a header (or nothing) is returned as-is with an empty pivot.

    Raises:
        MissingColumnError: If Dup_VLOOKUP or Info_VLOOKUP is missing

    """
    header = list(enriched[0]) if enriched else []
    if len(enriched) < 2:
        return AssignmentResult(table=[header], pivot=[], bucket_counts={})

    assignees = {
        Bucket.CN: list(cn_names),
        Bucket.JP: list(jp_names),
        Bucket.SPECIAL: list(special_names),
        Bucket.GENERAL: list(general_names),
    }

    partitions = partition_rows(enriched, filter_mode, layout, special_codes)

    assigned = []
    bucket_counts = {bucket: 0 for bucket in BUCKET_ORDER}
    for buckets in partitions:
        assigned.extend(assign_partition(buckets, assignees))
        for bucket, rows in buckets.items():
            bucket_counts[bucket] += len(rows)

    pivot = tally_owners(assigned)
    table = build_output_table(header, assigned, layout.renamed_label)
    logger.debug("Assigned %d rows across %d partition(s)", len(assigned), len(partitions))
    return AssignmentResult(table=table, pivot=pivot, bucket_counts=bucket_counts)
