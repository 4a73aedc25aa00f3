"""Spreadsheet workbook I/O for the screening pipeline (openpyxl)."""

from .reader import (
    WorkbookReadError,
    WorkbookTables,
    find_worksheet,
    load_workbook_tables,
    read_table,
)
from .writer import build_workbook, write_workbook, write_workbook_bytes

__all__ = [
    "WorkbookReadError",
    "WorkbookTables",
    "build_workbook",
    "find_worksheet",
    "load_workbook_tables",
    "read_table",
    "write_workbook",
    "write_workbook_bytes",
]
