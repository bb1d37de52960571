"""File I/O helpers for the command-line tools: text in, JSON / JSONL out.

JSON encoding goes through orjson. Views are serialized as their text.
"""
from __future__ import annotations

import sys
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, BinaryIO

import orjson

from strutils.types import StrView


def _default(obj: Any) -> Any:
    if isinstance(obj, StrView):
        return obj.text
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def read_text(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a text file without newline translation.

    ``\\r`` and ``\\r\\n`` are kept as-is so the CSV parser sees the original
    row terminators.
    """
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


def dumps(obj: Any, *, pretty: bool = False) -> bytes:
    opts = orjson.OPT_PASSTHROUGH_DATACLASS
    if pretty:
        opts |= orjson.OPT_INDENT_2
    return orjson.dumps(obj, default=_default, option=opts)


def load_json(path: Path) -> Any:
    """Load JSON from a file."""
    return orjson.loads(path.read_bytes())


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(dumps(obj, pretty=pretty) + b"\n")


def load_jsonl(path: Path) -> list[dict[str, Any]]:
    """Load a JSON Lines file (one JSON object per line). Blank lines skipped."""
    records: list[dict[str, Any]] = []
    for line in path.read_bytes().split(b"\n"):
        line = line.strip()
        if line:
            records.append(orjson.loads(line))
    return records


def write_jsonl(records: list[dict[str, Any]], stream: BinaryIO) -> None:
    for record in records:
        stream.write(dumps(record))
        stream.write(b"\n")


def save_jsonl(records: list[dict[str, Any]], path: Path) -> None:
    """Save a list of dicts as a JSON Lines file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as handle:
        write_jsonl(records, handle)


def dump_json(obj: object) -> None:
    """Pretty-print ``obj`` as JSON to stdout."""
    sys.stdout.buffer.write(dumps(obj, pretty=True))
    sys.stdout.buffer.write(b"\n")
    sys.stdout.buffer.flush()
