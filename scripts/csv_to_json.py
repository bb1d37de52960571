#!/usr/bin/env python3
"""Parse a CSV file and emit its rows as JSON.

Quoted cells may contain commas and line breaks; ``""`` inside a quoted cell
is a literal quote. Blank lines between records are collapsed.

Usage:
    python3 scripts/csv_to_json.py --input data.csv
    python3 scripts/csv_to_json.py --input data.csv --out rows.json --verbose
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from strutils.csv_cells import read_csv_rows
from strutils.io_utils import dump_json, read_text, save_json

log = logging.getLogger("csv_to_json")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert a CSV file to JSON rows.")
    parser.add_argument(
        "--input", required=True, type=Path, help="Path to the input CSV file"
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output JSON path (default: stdout).",
    )
    parser.add_argument(
        "--encoding", default="utf-8", help="Input file encoding (default: utf-8)."
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    return parser


def build_payload(text: str) -> dict[str, Any]:
    rows = [row for row in read_csv_rows(text) if row]
    return {
        "row_count": len(rows),
        "max_cells": max((len(row) for row in rows), default=0),
        "rows": rows,
    }


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if not args.input.exists():
        log.error("Input file not found: %s", args.input)
        raise SystemExit(f"input not found: {args.input}")

    text = read_text(args.input, encoding=args.encoding)
    log.info("Parsing %d characters from %s", len(text), args.input)
    payload = build_payload(text)
    log.info("Parsed %d rows", payload["row_count"])

    if args.out is not None:
        save_json(payload, args.out)
        log.info("Wrote %s", args.out)
    else:
        dump_json(payload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
