"""Workbook writer - serializes the assigned table to .xlsx (openpyxl).

The output holds one worksheet (`Assigned_Data` by default) whose header row is
rendered bold white-on-blue. Returns bytes for in-memory callers or writes to
a local path, creating parent directories as needed.
"""

from __future__ import annotations

import io
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill

from screening.models import Table

DEFAULT_SHEET_NAME = "Assigned_Data"
HEADER_FONT_COLOR = "FFFFFFFF"
HEADER_FILL_COLOR = "FF4F46E5"


def build_workbook(
    table: Table,
    sheet_name: str = DEFAULT_SHEET_NAME,
    header_font_color: str = HEADER_FONT_COLOR,
    header_fill_color: str = HEADER_FILL_COLOR,
) -> Workbook:
    """Build an in-memory workbook for `table` with a styled header row."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    for row in table:
        ws.append(list(row))

    if table:
        font = Font(bold=True, color=header_font_color)
        fill = PatternFill(fill_type="solid", fgColor=header_fill_color)
        for cell in ws[1]:
            cell.font = font
            cell.fill = fill

    return wb


def write_workbook_bytes(
    table: Table,
    sheet_name: str = DEFAULT_SHEET_NAME,
    header_font_color: str = HEADER_FONT_COLOR,
    header_fill_color: str = HEADER_FILL_COLOR,
) -> bytes:
    buffer = io.BytesIO()
    build_workbook(table, sheet_name, header_font_color, header_fill_color).save(buffer)
    return buffer.getvalue()


def write_workbook(
    table: Table,
    path: str | Path,
    sheet_name: str = DEFAULT_SHEET_NAME,
    header_font_color: str = HEADER_FONT_COLOR,
    header_fill_color: str = HEADER_FILL_COLOR,
) -> Path:
    """Write `table` to `path` and return the resolved path."""
    out = Path(path).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    build_workbook(table, sheet_name, header_font_color, header_fill_color).save(out)
    return out
