"""Screener work-assignment pipeline.

Pure table transforms: normalize → enrich → filter/categorize → assign → tally.
"""

from .errors import EmptySheetError, MissingColumnError, MissingWorksheetError, ScreeningError
from .models import (
    DEFAULT_LAYOUT,
    DEFAULT_SPECIAL_CODES,
    AssignmentResult,
    Bucket,
    ColumnLayout,
    FilterMode,
    PivotEntry,
    Row,
    Table,
)
from .pipeline import assign, extract_column_a, process

__all__: list[str] = [
    "process",
    "assign",
    "extract_column_a",
    "AssignmentResult",
    "Bucket",
    "ColumnLayout",
    "DEFAULT_LAYOUT",
    "DEFAULT_SPECIAL_CODES",
    "FilterMode",
    "PivotEntry",
    "Row",
    "Table",
    "ScreeningError",
    "EmptySheetError",
    "MissingWorksheetError",
    "MissingColumnError",
]
