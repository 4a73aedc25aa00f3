"""Shared types for the screening pipeline.

Tables are positional: a Table is a list of rows, row 0 is the header and
columns are addressed by index. Positional constants live in `ColumnLayout`
so the pipeline can be exercised against synthetic tables of any shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Row = list[Any]
Table = list[Row]

NOT_AVAILABLE = "#N/A"
INFO_LOOKUP_HEADER = "Info_VLOOKUP"
DUP_LOOKUP_HEADER = "Dup_VLOOKUP"
SCREENER_HEADER = "Screener"

DEFAULT_SPECIAL_CODES: tuple[str, ...] = ("RU", "UA", "NI", "VE", "BY", "CU", "IR", "KP", "SY")


class FilterMode(str, Enum):
    """How rows carrying the flag sentinel are treated."""

    NONE = "none"
    PRIORITIZE_FLAGGED = "prioritize_flagged"
    ONLY_FLAGGED = "only_flagged"

    @classmethod
    def parse(cls, value: FilterMode | str | None) -> FilterMode:
        """Parse a mode name, also accepting the short codes ZOP and OZ."""
        if value is None:
            return cls.NONE
        if isinstance(value, FilterMode):
            return value
        key = value.strip().lower().replace("-", "_")
        aliases = {
            "": cls.NONE,
            "zop": cls.PRIORITIZE_FLAGGED,
            "prioritize": cls.PRIORITIZE_FLAGGED,
            "oz": cls.ONLY_FLAGGED,
            "only": cls.ONLY_FLAGGED,
        }
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError as err:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown filter mode '{value}' (expected one of: {valid})") from err


class Bucket(str, Enum):
    """Work categories, declared in priority order."""

    CN = "CN"
    JP = "JP"
    SPECIAL = "SPECIAL"
    GENERAL = "GENERAL"

    @property
    def sentinel(self) -> str:
        return f"UNASSIGNED_{self.value}"


BUCKET_ORDER: tuple[Bucket, ...] = (Bucket.CN, Bucket.JP, Bucket.SPECIAL, Bucket.GENERAL)


@dataclass(frozen=True)
class ColumnLayout:
    """Positional constants of the raw export.

    - prune_start/prune_end: inclusive block of columns deleted by the normalizer (B..G)
    - renamed_column/renamed_label: header cell relabelled after pruning (old H → "CTR")
    - raw_flag_column: flag column in the raw export (Z)
    - flag_value: sentinel marking a flagged row
    """

    prune_start: int = 1
    prune_end: int = 6
    renamed_column: int = 1
    renamed_label: str = "CTR"
    raw_flag_column: int = 25
    flag_value: str = "ZRAX"

    @property
    def pruned_width(self) -> int:
        return self.prune_end - self.prune_start + 1

    @property
    def flag_column(self) -> int:
        """Flag column index after the pruned block has been removed."""
        if self.raw_flag_column > self.prune_end:
            return self.raw_flag_column - self.pruned_width
        return self.raw_flag_column


DEFAULT_LAYOUT = ColumnLayout()


@dataclass(frozen=True)
class PivotEntry:
    """One row of the per-screener summary."""

    screener: str
    count: int


@dataclass
class AssignmentResult:
    """Output of the assignment step.

    - table: final table (header + assigned rows)
    - pivot: per-screener counts sorted by name
    - bucket_counts: rows per bucket across all partitions
    """

    table: Table
    pivot: list[PivotEntry]
    bucket_counts: dict[Bucket, int] = field(default_factory=dict)

    @property
    def assigned_rows(self) -> int:
        return max(len(self.table) - 1, 0)
