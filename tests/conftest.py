"""Shared fixtures for screening tests.

Synthetic tables follow the raw export layout:
- raw: 26 columns (A..Z); A = key, H = CTR source, Z = flag
- info: key in B, lookup value in G
- duplicate: key in G
"""

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import Workbook

RAW_HEADER = ["ID", "B", "C", "D", "E", "F", "G", "H"] + [f"col{i}" for i in range(8, 25)] + ["Flag"]
INFO_HEADER = ["A", "Key", "C", "D", "E", "F", "Country"]
DUP_HEADER = ["A", "B", "C", "D", "E", "F", "Hold ID"]


def make_raw_row(key, ctr="ctr", flag=""):
    return [key, *[f"x{i}" for i in range(1, 7)], ctr, *[f"v{i}" for i in range(8, 25)], flag]


def make_info_row(key, value):
    return ["", key, "", "", "", "", value]


def make_dup_row(key):
    return ["", "", "", "", "", "", key]


@pytest.fixture
def raw_row():
    return make_raw_row


@pytest.fixture
def info_row():
    return make_info_row


@pytest.fixture
def dup_row():
    return make_dup_row


@pytest.fixture
def raw_table():
    """Raw export with duplicate, non-numeric and flagged keys."""
    return [
        list(RAW_HEADER),
        make_raw_row(1),
        make_raw_row(2),
        make_raw_row("1"),  # duplicate of 1 once coerced
        make_raw_row("abc"),
        make_raw_row(3),
        make_raw_row(4),
        make_raw_row(5, flag="ZRAX"),
        make_raw_row(7),
    ]


@pytest.fixture
def info_table():
    return [
        list(INFO_HEADER),
        make_info_row(1, "CN"),
        make_info_row(2, "jp"),
        make_info_row(3, "RU-Moscow"),
        make_info_row(5, "cn"),
        make_info_row(7, "US"),
        make_info_row(1, "JP"),  # later duplicate key, ignored
        make_info_row("n/a", "CN"),
    ]


@pytest.fixture
def duplicate_table():
    return [list(DUP_HEADER), make_dup_row(7), make_dup_row("junk"), make_dup_row("")]


def write_xlsx(path: Path, sheets: dict[str, list[list]]) -> Path:
    """Write a workbook with one worksheet per entry, in insertion order."""
    wb = Workbook()
    wb.remove(wb.active)
    for name, rows in sheets.items():
        ws = wb.create_sheet(title=name)
        for row in rows:
            ws.append(row)
    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    return path


@pytest.fixture
def xlsx_writer():
    return write_xlsx


@pytest.fixture
def workbook_files(tmp_path, raw_table, info_table, duplicate_table):
    """Raw, info and duplicate workbooks laid out like the real uploads."""
    raw = write_xlsx(tmp_path / "raw.xlsx", {"Export": raw_table})
    info = write_xlsx(
        tmp_path / "info.xlsx",
        {"Sheet1": [["ignored"]], "Sheet3": info_table},
    )
    duplicate = write_xlsx(
        tmp_path / "hold.xlsx",
        {"Notes": [["ignored"]], "Master Hold Report": duplicate_table},
    )
    return {"raw": raw, "info": info, "duplicate": duplicate}
