"""Character-level CSV cell parser.

Dialect: comma separated, double-quote quoting, ``""`` as an escaped quote.
``\\n``, ``\\r`` and the ``\\0`` sentinel all terminate a row, and a run of
consecutive terminators (``\\r\\n``, blank lines) produces one row-end event.

The parser is a best-effort scanner, not a validator: an unterminated quote
simply runs to the end of the input and whatever was buffered is flushed.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Literal

from strutils.types import StrView, TextLike

ROW_TERMINATORS = frozenset({"\n", "\r", "\0"})
QUOTE = '"'
SEPARATOR = ","

type CellHandler = Callable[[str, int], object]
type RowEndHandler = Callable[[], object]
type ParserMode = Literal["unquoted", "quoted"]


@dataclass(frozen=True, slots=True)
class CsvCell:
    """One parsed cell and its position within the current row."""

    value: str
    index: int


@dataclass(frozen=True, slots=True)
class RowEnd:
    """Marks the end of a CSV record."""


type CsvEvent = CsvCell | RowEnd


def iter_csv_events(sequence: TextLike) -> Iterator[CsvEvent]:
    """Yield cell and row-end events for ``sequence`` in input order.

    Rules in unquoted mode:
    1. ``"`` enters quoted mode. When the previous character closed a quoted
       run, a literal ``"`` is appended first (``"a""b"`` -> ``a"b``).
    2. ``,`` emits the current cell, even when empty.
    3. A row terminator emits the current cell only if non-empty, then one
       ``RowEnd`` per run of terminators, and restarts cell indexing at 0.

    In quoted mode every character except ``"`` is taken literally.
    """
    view = StrView.of(sequence)
    cell: list[str] = []
    mode: ParserMode = "unquoted"
    prev_quote = False
    prev_row_end = False
    idx = 0
    for ch in view:
        if mode == "quoted":
            if ch == QUOTE:
                mode = "unquoted"
                prev_quote = True
            else:
                cell.append(ch)
            continue

        if ch == QUOTE:
            if prev_quote:
                cell.append(QUOTE)
            mode = "quoted"
        elif ch == SEPARATOR:
            yield CsvCell("".join(cell), idx)
            cell.clear()
            idx += 1
        elif ch in ROW_TERMINATORS:
            if cell:
                yield CsvCell("".join(cell), idx)
                cell.clear()
            if not prev_row_end:
                prev_row_end = True
                yield RowEnd()
            idx = 0
        else:
            cell.append(ch)

        prev_quote = False
        if ch not in ROW_TERMINATORS:
            prev_row_end = False

    if cell:
        yield CsvCell("".join(cell), idx)
    if not prev_row_end:
        yield RowEnd()


def parse_csv(
    sequence: TextLike,
    on_cell: CellHandler | None,
    on_row_end: RowEndHandler | None = None,
) -> None:
    """Drive ``on_cell(value, index)`` and ``on_row_end()`` over ``sequence``.

    Does nothing when ``on_cell`` is None; ``on_row_end`` is optional.
    """
    if on_cell is None:
        return
    for event in iter_csv_events(sequence):
        if isinstance(event, CsvCell):
            on_cell(event.value, event.index)
        elif on_row_end is not None:
            on_row_end()


def read_csv_rows(sequence: TextLike) -> list[list[str]]:
    """Collect parsed cells into one list per row-end event."""
    rows: list[list[str]] = []
    current: list[str] = []
    for event in iter_csv_events(sequence):
        if isinstance(event, CsvCell):
            current.append(event.value)
        else:
            rows.append(current)
            current = []
    return rows
