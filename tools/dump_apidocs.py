#!/usr/bin/env python3
"""Print a quick summary of a scraped API documentation table (msgpack)."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from scrape_docs.io import read_api_table
from scrape_docs.models import ApiDetails

DEFAULT_TABLE_PATH = Path("bin") / "apidocs.msgpack"
DEFAULT_SAMPLE = "ImportFile"
PREVIEW_WIDTH = 60


def _preview(details: ApiDetails) -> str:
    return (details.description or "")[:PREVIEW_WIDTH]


def format_summary(records: dict[str, ApiDetails], *, limit: int = 20, sample: str = DEFAULT_SAMPLE) -> str:
    lines = [f"Total APIs: {len(records)}", "", f"First {limit} keys:"]
    for name in list(records)[:limit]:
        lines.append(f"  {name}: {_preview(records[name])}...")

    lines.extend(["", f"Sample - {sample}:"])
    details = records.get(sample)
    if details is None:
        lines.append("  (not found)")
    else:
        lines.append(f"  Description: {details.description or ''}")
        lines.append(f"  Parameters: {', '.join(details.parameters)}")
        lines.append(f"  ReturnValue: {details.return_value or ''}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("table", type=Path, nargs="?", default=DEFAULT_TABLE_PATH)
    parser.add_argument("--sample", default=DEFAULT_SAMPLE, help="Entry to print in full")
    parser.add_argument("--limit", type=int, default=20, help="Number of keys to preview")
    args = parser.parse_args(argv)

    records = read_api_table(args.table)
    print(format_summary(records, limit=args.limit, sample=args.sample))


if __name__ == "__main__":
    main()
