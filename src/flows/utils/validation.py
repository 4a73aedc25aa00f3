"""Shared validation utilities for Prefect flows."""

from prefect import task

from flows.utils.notifications import log_info, log_warning
from screening.models import AssignmentResult, Table


@task(name="validate_input_tables")
def validate_input_tables(tables: dict[str, Table | None], expected_min_rows: dict) -> dict:
    """Validate decoded input tables against expected minimum row counts.

    Args:
        tables: Decoded tables keyed by input name (None when no usable sheet)
        expected_min_rows: Minimum total rows (header included) per input

    Returns:
        Validation results with any issues

    """
    issues = []

    for name, expected_min in expected_min_rows.items():
        table = tables.get(name)
        if table is None:
            issues.append({"table": name, "issue": "worksheet_missing"})
            continue

        if len(table) < expected_min:
            issues.append(
                {
                    "table": name,
                    "row_count": len(table),
                    "expected_min": expected_min,
                    "issue": "below_minimum",
                }
            )

    if issues:
        log_warning("Input table validation warnings", context={"issues": issues})
    else:
        log_info("Input table validation passed")

    return {"valid": len(issues) == 0, "issues": issues}


@task(name="validate_assignment_totals")
def validate_assignment_totals(result: AssignmentResult) -> dict:
    """Check the pivot and bucket counts agree with the assigned rows.

    Args:
        result: Output of `screening.assign`

    Returns:
        Dictionary with totals and any mismatches

    """
    assigned = result.assigned_rows
    pivot_total = sum(entry.count for entry in result.pivot)
    bucket_total = sum(result.bucket_counts.values())

    issues = []
    if pivot_total != assigned:
        issues.append({"check": "pivot_total", "expected": assigned, "actual": pivot_total})
    if result.bucket_counts and bucket_total != assigned:
        issues.append({"check": "bucket_total", "expected": assigned, "actual": bucket_total})

    context = {"assigned_rows": assigned, "pivot_total": pivot_total, "bucket_total": bucket_total}
    if issues:
        log_warning("Assignment totals mismatch", context={**context, "issues": issues})
    else:
        log_info("Assignment totals validated", context=context)

    return {"valid": len(issues) == 0, "issues": issues, **context}
