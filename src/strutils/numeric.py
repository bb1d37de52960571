"""Locale-independent number <-> text conversion into caller-owned buffers.

Integers are written in base 10 or lowercase base 16 without a prefix.
Floating-point values are written in fixed notation with insignificant
trailing zeros (and a bare decimal point) removed, so ``12.34`` rather than
``12.340000`` and ``5`` rather than ``5.000000``.

Failures never raise: ``to_string`` returns an empty view when the buffer is
too small or the value does not fit the requested kind, and ``from_string``
returns None for malformed or out-of-range text.
"""
from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from typing import Literal

from strutils.types import StrView

type NumberKind = Literal[
    "int8", "uint8", "int16", "uint16", "int32", "uint32", "int64", "uint64",
    "float", "double",
]
type NumericText = str | StrView | bytes | bytearray | memoryview


@dataclass(frozen=True, slots=True)
class _IntRange:
    low: int
    high: int

    @property
    def signed(self) -> bool:
        return self.low < 0


def _int_range(bits: int, *, signed: bool) -> _IntRange:
    if signed:
        return _IntRange(-(1 << (bits - 1)), (1 << (bits - 1)) - 1)
    return _IntRange(0, (1 << bits) - 1)


INT_RANGES: dict[str, _IntRange] = {
    f"{'' if signed else 'u'}int{bits}": _int_range(bits, signed=signed)
    for bits in (8, 16, 32, 64)
    for signed in (True, False)
}

# Fractional digits written for non-integral values.
FLOAT_PRECISION: dict[str, int] = {"float": 6, "double": 8}

_DEC_INT_RE = re.compile(r"-?[0-9]+")
_HEX_INT_RE = re.compile(r"-?[0-9a-fA-F]+")
_FLOAT_RE = re.compile(
    r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|-?(?:inf|infinity|nan)",
    re.IGNORECASE,
)


def _check_kind(kind: str) -> None:
    if kind not in INT_RANGES and kind not in FLOAT_PRECISION:
        raise ValueError(f"unknown number kind {kind!r}")


def _to_float32(value: float) -> float | None:
    """Round ``value`` through single-precision storage; None on overflow."""
    try:
        packed = struct.pack("<f", value)
    except OverflowError:
        return None
    return struct.unpack("<f", packed)[0]


def _has_nonzero_mantissa(raw: str) -> bool:
    """True when the digits before any exponent are not all zero."""
    mantissa = re.split(r"[eE]", raw, maxsplit=1)[0]
    return any(ch in "123456789" for ch in mantissa)


def _trim_fraction(text: str) -> str:
    if "." not in text:
        return text
    text = text.rstrip("0")
    if text.endswith("."):
        text = text[:-1]
    return text


def _format_float(value: float, kind: str) -> str | None:
    if kind == "float":
        rounded = _to_float32(value)
        if rounded is None:
            return None
        value = rounded
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    if math.trunc(value) == value:
        return _trim_fraction(f"{value:.0f}")
    return _trim_fraction(f"{value:.{FLOAT_PRECISION[kind]}f}")


def _format_int(value: int, kind: str | None, hex: bool) -> str | None:
    if kind is not None:
        bounds = INT_RANGES.get(kind)
        if bounds is None:
            try:
                as_float = float(value)
            except OverflowError:
                return None
            return _format_float(as_float, kind)
        if not bounds.low <= value <= bounds.high:
            return None
    return format(value, "x" if hex else "d")


def to_string(
    number: int | float,
    buffer: bytearray,
    *,
    hex: bool = False,
    kind: NumberKind | None = None,
) -> memoryview:
    """Write ``number`` as ASCII text into ``buffer``.

    Args:
        number: Integer or float to format. ``bool`` is rejected.
        buffer: Caller-owned output buffer; only its prefix is written.
        hex: Write integers in lowercase base 16. Ignored for floats.
        kind: Fixed-width kind the value must fit in. Floats default to
            ``"double"``; integers are unbounded unless a kind is given.

    Returns:
        A memoryview over the written prefix of ``buffer``, or an empty
        memoryview when the text does not fit (the buffer is left untouched)
        or the value is out of range for ``kind``.
    """
    if kind is not None:
        _check_kind(kind)
    if isinstance(number, bool) or not isinstance(number, int | float):
        raise TypeError(f"expected int or float, got {type(number).__name__}")
    if isinstance(number, int):
        text = _format_int(number, kind, hex)
    else:
        text = _format_float(number, kind if kind in FLOAT_PRECISION else "double")
    view = memoryview(buffer)
    if text is None or len(text) > len(buffer):
        return view[:0]
    encoded = text.encode("ascii")
    buffer[: len(encoded)] = encoded
    return view[: len(encoded)]


def _as_text(text: NumericText) -> str | None:
    if isinstance(text, StrView):
        return text.text
    if isinstance(text, str):
        return text
    try:
        return bytes(text).decode("ascii")
    except UnicodeDecodeError:
        return None


def from_string(
    text: NumericText,
    kind: NumberKind = "int64",
    *,
    hex: bool = False,
) -> int | float | None:
    """Parse the whole of ``text`` as a number of the given kind.

    Args:
        text: Text to parse. No surrounding whitespace, ``+`` sign,
            underscores or ``0x`` prefix are accepted.
        kind: Target kind; decides the accepted range and, for ``"float"``,
            rounds the result to single precision.
        hex: Parse integers as base 16 (either letter case).

    Returns:
        The parsed value, or None if the text is malformed, has leftover
        characters or does not fit ``kind``.

    Raises:
        ValueError: If ``kind`` is not a known number kind.
    """
    _check_kind(kind)
    raw = _as_text(text)
    if not raw:
        return None
    bounds = INT_RANGES.get(kind)
    if bounds is not None:
        pattern = _HEX_INT_RE if hex else _DEC_INT_RE
        if pattern.fullmatch(raw) is None:
            return None
        if raw.startswith("-") and not bounds.signed:
            return None
        value = int(raw, 16 if hex else 10)
        if not bounds.low <= value <= bounds.high:
            return None
        return value
    if _FLOAT_RE.fullmatch(raw) is None:
        return None
    parsed = float(raw)
    if math.isinf(parsed) and "inf" not in raw.lower():
        return None
    if kind == "float":
        rounded = _to_float32(parsed)
        if rounded is None:
            return None
        parsed = rounded
    if parsed == 0.0 and _has_nonzero_mantissa(raw):
        return None
    return parsed
