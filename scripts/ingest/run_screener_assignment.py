#!/usr/bin/env python3
"""Assign screeners from three workbooks and write Assigned_Report.xlsx.

Architecture:
    1. Reads raw data, info (Sheet3) and duplicate (Master Hold Report) workbooks
    2. Normalizes, enriches, filters and categorizes (screening package)
    3. Assigns screeners round-robin per bucket and writes the styled workbook

Environment Variables:
    SCREENING_OUTPUT_PATH: Output workbook (default data/output/Assigned_Report.xlsx)
    SCREENING_SPECIAL_CODES: Comma-separated SPECIAL bucket codes
    SCREENING_FILTER_MODE: none | prioritize_flagged | only_flagged

Usage:
    python scripts/ingest/run_screener_assignment.py \\
        --raw raw.xlsx --info info.xlsx --duplicate hold.xlsx \\
        --cn "Alice, Bob" --general "Carol Dan" --filter-mode prioritize_flagged
"""

import argparse
import sys

from dotenv import load_dotenv

from flows.assign_screeners_flow import assign_screeners_flow
from flows.config import get_filter_mode

# Load environment variables
load_dotenv()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument("--raw", required=True, help="Raw data workbook (.xlsx)")
    p.add_argument("--info", required=True, help="Information workbook (.xlsx)")
    p.add_argument("--duplicate", required=True, help="Duplicate / Master Hold Report workbook")
    p.add_argument("--cn", default="", help="Assignees for CN rows (comma/space separated)")
    p.add_argument("--jp", default="", help="Assignees for JP rows")
    p.add_argument("--special", default="", help="Assignees for special-code rows")
    p.add_argument("--general", default="", help="Assignees for all other rows")
    p.add_argument(
        "--filter-mode",
        default=None,
        help="none | prioritize_flagged (ZOP) | only_flagged (OZ); env SCREENING_FILTER_MODE",
    )
    p.add_argument("--out", default=None, help="Output workbook path; env SCREENING_OUTPUT_PATH")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    filter_mode = args.filter_mode or get_filter_mode()

    print("\n📥 Assigning screeners")
    print(f"  Raw:       {args.raw}")
    print(f"  Info:      {args.info}")
    print(f"  Duplicate: {args.duplicate}")
    print(f"  Mode:      {filter_mode}")

    try:
        result = assign_screeners_flow(
            raw_path=args.raw,
            info_path=args.info,
            duplicate_path=args.duplicate,
            cn_names=args.cn,
            jp_names=args.jp,
            special_names=args.special,
            general_names=args.general,
            filter_mode=filter_mode,
            output_path=args.out,
        )
    except RuntimeError as err:
        print(f"\n❌ An error occurred: {err}", file=sys.stderr)
        return 1

    print(f"\n✅ {result['assigned_rows']} rows → {result['output_path']}")
    print("\nAssignment Summary")
    print(result["pivot_tsv"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
