"""String slicing, tokenizing, CSV cell parsing and numeric text conversion."""

from strutils.csv_cells import (
    CsvCell,
    CsvEvent,
    RowEnd,
    iter_csv_events,
    parse_csv,
    read_csv_rows,
)
from strutils.numeric import NumberKind, from_string, to_string
from strutils.tokenizer import (
    DEFAULT_ESCAPE,
    DEFAULT_TRIM_CHARS,
    iter_split,
    split,
    substr,
    trimm,
)
from strutils.types import Cursor, StrView, TextLike

__all__ = [
    "Cursor",
    "CsvCell",
    "CsvEvent",
    "DEFAULT_ESCAPE",
    "DEFAULT_TRIM_CHARS",
    "NumberKind",
    "RowEnd",
    "StrView",
    "TextLike",
    "from_string",
    "iter_csv_events",
    "iter_split",
    "parse_csv",
    "read_csv_rows",
    "split",
    "substr",
    "to_string",
    "trimm",
]
