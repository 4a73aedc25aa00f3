"""Per-screener assignment counts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import polars as pl

from .models import PivotEntry, Row

PIVOT_SCHEMA = {"screener": pl.Utf8, "count": pl.Int64}


def pivot_frame(owners: Iterable[str]) -> pl.DataFrame:
    """Count rows per owner name, sorted by name (plain string order)."""
    frame = pl.DataFrame({"screener": [str(owner) for owner in owners]}, schema={"screener": pl.Utf8})
    if frame.is_empty():
        return pl.DataFrame(schema=PIVOT_SCHEMA)
    return (
        frame.group_by("screener")
        .agg(pl.len().cast(pl.Int64).alias("count"))
        .sort("screener")
    )


def tally_owners(rows: Iterable[Row]) -> list[PivotEntry]:
    """Tally the owner cell (position 0) of assigned rows.

    Sentinel names such as UNASSIGNED_CN are counted like any other name.
    """
    frame = pivot_frame(row[0] for row in rows)
    return [PivotEntry(screener=name, count=count) for name, count in frame.iter_rows()]


def format_pivot_tsv(entries: Sequence[PivotEntry]) -> str:
    """Render the summary as tab-separated text with a grand total line."""
    total = sum(entry.count for entry in entries)
    lines = ["Row Label\tCount of Screener"]
    lines.extend(f"{entry.screener}\t{entry.count}" for entry in entries)
    lines.append(f"Grand Total\t{total}")
    return "\n".join(lines)
