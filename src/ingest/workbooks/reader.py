"""Workbook reader → positional tables (openpyxl, no transformation).

Decodes an .xlsx payload (path or raw bytes) into ordered worksheet names and
one Table per worksheet. Rows are padded to the worksheet width so columns can
be addressed by index; empty cells take a caller-chosen default (`""` for the
assignment pipeline, `None` for the column A extractor).

Worksheet selection:
  - `find_worksheet(names, target)`: first name containing `target`
    (case-insensitive), else the first sheet, else None
  - `read_table(source, target)`: convenience wrapper returning the selected Table

For transformation, see `screening.pipeline`.
"""

from __future__ import annotations

import io
import zipfile
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from screening.models import Table

WorkbookSource = str | Path | bytes


class WorkbookReadError(RuntimeError):
    """Raised when a payload cannot be decoded as a workbook."""

    pass


@dataclass
class WorkbookTables:
    """Decoded workbook: sheet names in workbook order and their tables."""

    sheet_names: list[str]
    tables: dict[str, Table] = field(default_factory=dict)

    def get(self, target: str | None = None) -> Table | None:
        """Return the table selected by `find_worksheet`, or None if there is no sheet."""
        name = find_worksheet(self.sheet_names, target)
        if name is None:
            return None
        return self.tables.get(name)


def find_worksheet(sheet_names: Sequence[str], target: str | None = None) -> str | None:
    """Pick a worksheet by case-insensitive substring, falling back to the first sheet."""
    if target:
        needle = target.lower()
        for name in sheet_names:
            if needle in name.lower():
                return name
    return sheet_names[0] if sheet_names else None


def _open(source: WorkbookSource):
    handle = io.BytesIO(source) if isinstance(source, bytes | bytearray) else str(source)
    try:
        return load_workbook(handle, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, OSError, KeyError, ValueError) as err:
        label = "<bytes>" if isinstance(source, bytes | bytearray) else str(source)
        raise WorkbookReadError(f"Could not read workbook {label}: {err}") from err


def _sheet_rows(worksheet, defval: Any) -> Table:
    rows = [list(values) for values in worksheet.iter_rows(values_only=True)]
    width = max((len(row) for row in rows), default=0)
    return [
        [defval if cell is None else cell for cell in row] + [defval] * (width - len(row))
        for row in rows
    ]


def load_workbook_tables(
    source: WorkbookSource,
    defval: Any = "",
    sheet_names: Sequence[str] | None = None,
) -> WorkbookTables:
    """Decode a workbook into tables.

    Args:
        source: Path to an .xlsx file or its raw bytes
        defval: Value used for empty cells and row padding
        sheet_names: Optional subset of sheets to decode (all by default)

    Returns:
        WorkbookTables with every sheet name and the decoded tables

    Raises:
        WorkbookReadError: If the payload is not a readable workbook

    """
    wb = _open(source)
    try:
        names = list(wb.sheetnames)
        wanted = set(sheet_names) if sheet_names is not None else set(names)
        tables = {name: _sheet_rows(wb[name], defval) for name in names if name in wanted}
    finally:
        wb.close()
    return WorkbookTables(sheet_names=names, tables=tables)


def read_table(source: WorkbookSource, target: str | None = None, defval: Any = "") -> Table | None:
    """Decode only the worksheet selected by `target` (first sheet when None).

    Returns None when the workbook has no worksheets.
    """
    wb = _open(source)
    try:
        name = find_worksheet(list(wb.sheetnames), target)
        if name is None:
            return None
        return _sheet_rows(wb[name], defval)
    finally:
        wb.close()
