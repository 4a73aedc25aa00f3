#!/usr/bin/env python3
"""Extract, clean and deduplicate numbers from column A of a workbook.

Usage:
    python scripts/ingest/extract_column_a.py data.xlsx
    python scripts/ingest/extract_column_a.py data.xlsx --out numbers.txt
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from flows.column_a_flow import column_a_flow

load_dotenv()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Unique sorted numbers from column A")
    p.add_argument("path", help="Workbook (.xlsx); the first sheet is read")
    p.add_argument("--out", default=None, help="Write numbers to this file instead of stdout")
    args = p.parse_args(argv)

    try:
        result = column_a_flow(args.path)
    except RuntimeError as err:
        print(f"❌ An error occurred: {err}", file=sys.stderr)
        return 1

    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(result["text"] + "\n", encoding="utf-8")
        print(f"✅ {result['count']} numbers → {out}")
    else:
        print(result["text"])
        print(f"\nTotal Unique Numbers Found: {result['count']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
