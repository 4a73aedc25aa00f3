"""Configuration for the screener assignment flows.

This module centralizes the workbook conventions and defaults used by the
flows and CLI scripts, making it easy to adjust behavior without code changes.
The screening core never reads this module or the environment; values are
passed in explicitly.

Environment overrides (loaded by the CLI scripts via python-dotenv):
- SCREENING_OUTPUT_PATH: where the assigned workbook is written
- SCREENING_SPECIAL_CODES: comma-separated codes routed to the SPECIAL bucket
- SCREENING_FILTER_MODE: none | prioritize_flagged | only_flagged (or ZOP / OZ)
"""

import os
from typing import TypedDict

from screening.models import DEFAULT_SPECIAL_CODES


class WorksheetTargetsConfig(TypedDict):
    """Case-insensitive substrings used to pick a worksheet per input workbook."""

    raw: str | None
    info: str
    duplicate: str


class OutputSheetConfig(TypedDict):
    """Output workbook naming and header styling (ARGB colors)."""

    sheet_name: str
    file_name: str
    header_font_color: str
    header_fill_color: str


# Worksheet selection (falls back to the first sheet when no name matches)
WORKSHEET_TARGETS: WorksheetTargetsConfig = {
    "raw": None,  # Raw data is always the first sheet
    "info": "sheet3",  # VLOOKUP source '[Excel 2.xlsx]Sheet3'!$B:$H
    "duplicate": "master hold report",  # '[Master Hold Report .xlsx]Master Hold Report'!$G:$G
}

# Output workbook
OUTPUT_SHEET: OutputSheetConfig = {
    "sheet_name": "Assigned_Data",
    "file_name": "Assigned_Report.xlsx",
    "header_font_color": "FFFFFFFF",  # White, bold
    "header_fill_color": "FF4F46E5",  # Blue
}

DEFAULT_OUTPUT_DIR = "data/output"

# Deployments disagree on the SPECIAL code list; confirm with the data owner
# before narrowing it.
SPECIAL_CODES: tuple[str, ...] = DEFAULT_SPECIAL_CODES


def get_output_path() -> str:
    """Get the output workbook path (SCREENING_OUTPUT_PATH or the default)."""
    return os.getenv(
        "SCREENING_OUTPUT_PATH", f"{DEFAULT_OUTPUT_DIR}/{OUTPUT_SHEET['file_name']}"
    )


def get_special_codes() -> tuple[str, ...]:
    """Get SPECIAL bucket codes from SCREENING_SPECIAL_CODES, else the defaults.

    Returns:
        Upper-cased codes in configured order

    """
    raw = os.getenv("SCREENING_SPECIAL_CODES", "")
    codes = tuple(code.strip().upper() for code in raw.split(",") if code.strip())
    return codes or SPECIAL_CODES


def get_filter_mode() -> str:
    """Get the default filter mode name from SCREENING_FILTER_MODE."""
    return os.getenv("SCREENING_FILTER_MODE", "none")
