"""Prefect flow extracting unique numbers from column A of one workbook.

Reads the first worksheet with empty cells as None, collects every numeric
column A value (row 1 included, no header assumed) and returns them sorted.
"""

from pathlib import Path

from prefect import flow, task

from flows.utils.notifications import log_error, log_info
from ingest.workbooks import read_table
from screening import extract_column_a
from screening.column_a import format_column_a


@task(name="read_column_a_source", retries=2, retry_delay_seconds=5, tags=["io"])
def read_column_a_source(path: str) -> list | None:
    return read_table(path, target=None, defval=None)


@flow(name="column_a_flow")
def column_a_flow(path: str) -> dict:
    """Extract sorted unique numbers from column A.

    Args:
        path: Workbook to read (first worksheet)

    Returns:
        Dict with the numbers, their count and newline-joined text

    """
    table = read_column_a_source(path)
    if table is None:
        log_error("File is empty or corrupted.", context={"path": path})

    numbers = extract_column_a(table)
    log_info(
        f"Extracted column A from {Path(path).name}",
        context={"rows": len(table), "unique_numbers": len(numbers)},
    )
    return {"numbers": numbers, "count": len(numbers), "text": format_column_a(numbers)}


if __name__ == "__main__":
    result = column_a_flow("data/input/column_a.xlsx")
    print(result["text"])
    print(f"Total Unique Numbers Found: {result['count']}")
