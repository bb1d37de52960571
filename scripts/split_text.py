#!/usr/bin/env python3
"""Split every line of a text file into escape-aware tokens.

Writes one JSON object per input line (``line``, ``tokens``) as JSONL.

Usage:
    # Pipe-separated records, backslash escapes, output to stdout
    python3 scripts/split_text.py --input records.txt --delimiters "|"

    # Split on commas and semicolons, keep empty tokens, trim each token
    python3 scripts/split_text.py --input records.txt --delimiters ",;" \
      --include-empty --trim " " --out tokens.jsonl
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from strutils.io_utils import read_text, save_jsonl, write_jsonl
from strutils.tokenizer import DEFAULT_ESCAPE, iter_split, trimm

log = logging.getLogger("split_text")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split each line of a text file into delimiter-separated tokens."
    )
    parser.add_argument(
        "--input", required=True, type=Path, help="Path to the input text file"
    )
    parser.add_argument(
        "--delimiters",
        required=True,
        help="Characters that separate tokens (each character is a delimiter).",
    )
    parser.add_argument(
        "--include-empty",
        action="store_true",
        help="Keep empty tokens between adjacent delimiters.",
    )
    parser.add_argument(
        "--escape",
        default=DEFAULT_ESCAPE,
        help="Escape marker that protects the next character (default: backslash).",
    )
    parser.add_argument(
        "--trim",
        default=None,
        help="Characters to strip from both ends of every token.",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output JSONL path (default: stdout).",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    return parser


def split_lines(
    text: str,
    delimiters: str,
    *,
    include_empty: bool = False,
    escape: str = DEFAULT_ESCAPE,
    trim: str | None = None,
) -> list[dict[str, Any]]:
    """Tokenize each line of ``text``; blank lines produce no record.

    Lines end at ``\\n`` (an ``\\r`` before it is dropped); other line
    separators such as form feeds stay inside the line.
    """
    records: list[dict[str, Any]] = []
    for line_no, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        tokens: list[str] = []
        for _, part in iter_split(
            line, delimiters, include_empty=include_empty, escape=escape,
        ):
            tokens.append(str(trimm(part, trim) if trim else part))
        records.append({"line": line_no, "tokens": tokens})
    return records


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    if not args.input.exists():
        log.error("Input file not found: %s", args.input)
        raise SystemExit(f"input not found: {args.input}")
    if len(args.escape) != 1:
        raise SystemExit(f"--escape must be a single character, got {args.escape!r}")

    text = read_text(args.input)
    log.info("Read %d characters from %s", len(text), args.input)
    records = split_lines(
        text,
        args.delimiters,
        include_empty=args.include_empty,
        escape=args.escape,
        trim=args.trim,
    )
    log.debug("Delimiters=%r escape=%r trim=%r", args.delimiters, args.escape, args.trim)

    if args.out is not None:
        save_jsonl(records, args.out)
        log.info("Wrote %d records to %s", len(records), args.out)
    else:
        write_jsonl(records, sys.stdout.buffer)
        sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
