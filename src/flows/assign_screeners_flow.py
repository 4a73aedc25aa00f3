"""Prefect flow for assigning screeners from three uploaded workbooks.

Architecture:
    1. Read the raw, info and duplicate workbooks concurrently (submitted tasks)
    2. Validate the decoded tables (worksheet present, row counts)
    3. Normalize + enrich with both VLOOKUPs (screening.process)
    4. Filter, categorize and assign round-robin (screening.assign)
    5. Validate totals, write the styled Assigned_Data workbook

Dependencies:
    - Uses src/ingest/workbooks/reader for decoding (openpyxl)
    - Uses src/screening for all transformation (pure functions)
    - Uses src/ingest/workbooks/writer for the output workbook

Production Hardening:
    - read_workbook_table: 2 retries with 5s delay (handles transient file locks)
"""

from pathlib import Path

from prefect import flow, task

from flows.config import OUTPUT_SHEET, WORKSHEET_TARGETS, get_output_path, get_special_codes
from flows.utils.notifications import log_error, log_info, log_warning
from flows.utils.validation import validate_assignment_totals, validate_input_tables
from ingest.workbooks import read_table, write_workbook
from screening import FilterMode, ScreeningError, assign, process
from screening.assignment import parse_names
from screening.models import AssignmentResult, Table
from screening.pivot import format_pivot_tsv


@task(
    name="read_workbook_table",
    retries=2,
    retry_delay_seconds=5,
    tags=["io"],
)
def read_workbook_table(path: str, target: str | None = None) -> Table | None:
    """Decode the worksheet selected by `target` from a workbook on disk.

    Args:
        path: Path to the .xlsx file
        target: Case-insensitive worksheet name substring (None → first sheet)

    Returns:
        Decoded table, or None when the workbook has no worksheets

    """
    table = read_table(path, target=target, defval="")
    log_info(
        f"Read {Path(path).name}",
        context={"target": target, "rows": len(table) if table is not None else None},
    )
    return table


@task(name="process_tables")
def process_tables(
    raw: Table, info: Table | None, duplicate: Table | None, filter_mode: str
) -> Table:
    """Normalize the raw table and append Info_VLOOKUP / Dup_VLOOKUP."""
    enriched = process(raw, info, duplicate, filter_mode)
    log_info("Enriched raw data", context={"rows": len(enriched) - 1, "filter_mode": filter_mode})
    return enriched


@task(name="assign_screeners")
def assign_screeners(
    enriched: Table,
    assignees: dict[str, list[str]],
    filter_mode: str,
    special_codes: list[str],
) -> AssignmentResult:
    """Filter, categorize and assign screeners to the enriched rows."""
    result = assign(
        enriched,
        cn_names=assignees.get("cn", []),
        jp_names=assignees.get("jp", []),
        special_names=assignees.get("special", []),
        general_names=assignees.get("general", []),
        filter_mode=filter_mode,
        special_codes=special_codes,
    )
    log_info(
        "Assigned screeners",
        context={
            "assigned_rows": result.assigned_rows,
            "buckets": {bucket.value: count for bucket, count in result.bucket_counts.items()},
        },
    )
    return result


@task(name="write_assigned_workbook", tags=["io"])
def write_assigned_workbook(table: Table, output_path: str) -> str:
    """Write the final table to the styled output workbook."""
    out = write_workbook(
        table,
        output_path,
        sheet_name=OUTPUT_SHEET["sheet_name"],
        header_font_color=OUTPUT_SHEET["header_font_color"],
        header_fill_color=OUTPUT_SHEET["header_fill_color"],
    )
    log_info("Wrote assigned workbook", context={"path": str(out), "rows": len(table)})
    return str(out)


def _names(value: list[str] | str | None) -> list[str]:
    if isinstance(value, str) or value is None:
        return parse_names(value)
    return [name for name in value if name]


@flow(name="assign_screeners_flow")
def assign_screeners_flow(
    raw_path: str,
    info_path: str,
    duplicate_path: str,
    cn_names: list[str] | str | None = None,
    jp_names: list[str] | str | None = None,
    special_names: list[str] | str | None = None,
    general_names: list[str] | str | None = None,
    filter_mode: str = "none",
    output_path: str | None = None,
    special_codes: list[str] | None = None,
) -> dict:
    """Prefect flow for the full read → process → assign → write run.

    Args:
        raw_path: Raw data workbook (first sheet)
        info_path: Information workbook (sheet named like 'Sheet3')
        duplicate_path: Duplicate workbook (sheet named like 'Master Hold Report')
        cn_names: CN assignees (list or free text split on commas/whitespace)
        jp_names: JP assignees
        special_names: SPECIAL assignees
        general_names: GENERAL assignees
        filter_mode: none | prioritize_flagged | only_flagged (ZOP / OZ accepted)
        output_path: Output workbook path (defaults to SCREENING_OUTPUT_PATH)
        special_codes: SPECIAL bucket codes (defaults to SCREENING_SPECIAL_CODES)

    Returns:
        Flow result with the output path, pivot and validation status

    """
    try:
        mode = FilterMode.parse(filter_mode).value
    except ValueError as err:
        log_error("Invalid filter mode", context={"filter_mode": filter_mode, "error": str(err)})

    output_path = output_path or get_output_path()
    codes = list(special_codes) if special_codes else list(get_special_codes())
    assignees = {
        "cn": _names(cn_names),
        "jp": _names(jp_names),
        "special": _names(special_names),
        "general": _names(general_names),
    }

    log_info(
        "Starting assign screeners flow",
        context={
            "raw": raw_path,
            "info": info_path,
            "duplicate": duplicate_path,
            "filter_mode": mode,
            "assignees": {bucket: len(names) for bucket, names in assignees.items()},
        },
    )
    for bucket, names in assignees.items():
        if not names:
            log_warning(
                f"No assignees for {bucket.upper()} bucket",
                context={"fallback": f"UNASSIGNED_{bucket.upper()}"},
            )

    # Inputs are independent: decode concurrently
    raw_future = read_workbook_table.submit(raw_path, WORKSHEET_TARGETS["raw"])
    info_future = read_workbook_table.submit(info_path, WORKSHEET_TARGETS["info"])
    dup_future = read_workbook_table.submit(duplicate_path, WORKSHEET_TARGETS["duplicate"])
    raw, info, duplicate = raw_future.result(), info_future.result(), dup_future.result()

    input_validation = validate_input_tables(
        {"raw": raw, "info": info, "duplicate": duplicate},
        expected_min_rows={"raw": 2, "info": 2, "duplicate": 1},
    )

    try:
        enriched = process_tables(raw or [], info, duplicate, mode)
        result = assign_screeners(enriched, assignees, mode, codes)
    except ScreeningError as err:
        log_error(str(err), context={"error_type": type(err).__name__})

    totals = validate_assignment_totals(result)
    written = write_assigned_workbook(result.table, output_path)

    log_info(
        "Assign screeners flow complete",
        context={"output_path": written, "assigned_rows": result.assigned_rows},
    )

    return {
        "output_path": written,
        "assigned_rows": result.assigned_rows,
        "pivot": [(entry.screener, entry.count) for entry in result.pivot],
        "pivot_tsv": format_pivot_tsv(result.pivot),
        "bucket_counts": {bucket.value: count for bucket, count in result.bucket_counts.items()},
        "input_validation": input_validation,
        "totals_validation": totals,
    }


if __name__ == "__main__":
    # For local testing with files in data/input
    result = assign_screeners_flow(
        raw_path="data/input/raw.xlsx",
        info_path="data/input/info.xlsx",
        duplicate_path="data/input/master_hold_report.xlsx",
    )
    print(f"Assign flow result: {result}")
