"""Tests for strutils.numeric module."""
import math
import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from strutils.numeric import INT_RANGES, from_string, to_string
from strutils.types import StrView


def _fmt(number: int | float, size: int = 64, **kwargs: object) -> str:
    return bytes(to_string(number, bytearray(size), **kwargs)).decode("ascii")  # type: ignore[arg-type]


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class TestToStringIntegers:
    def test_decimal(self) -> None:
        assert _fmt(42) == "42"
        assert _fmt(-42) == "-42"
        assert _fmt(0) == "0"

    def test_hex_lowercase_no_prefix(self) -> None:
        assert _fmt(255, hex=True) == "ff"
        assert _fmt(-255, hex=True) == "-ff"
        assert _fmt(0xDEADBEEF, hex=True) == "deadbeef"

    def test_writes_into_caller_buffer(self) -> None:
        buffer = bytearray(b"..........")
        view = to_string(1234, buffer)
        assert bytes(view) == b"1234"
        assert buffer == bytearray(b"1234......")
        assert view.obj is buffer

    def test_exact_fit(self) -> None:
        assert bytes(to_string(123, bytearray(3))) == b"123"

    def test_buffer_too_small(self) -> None:
        buffer = bytearray(b"xx")
        view = to_string(12345, buffer)
        assert len(view) == 0
        assert buffer == bytearray(b"xx")

    def test_kind_range(self) -> None:
        assert _fmt(255, kind="uint8") == "255"
        assert _fmt(256, kind="uint8") == ""
        assert _fmt(-1, kind="uint32") == ""
        assert _fmt(-128, kind="int8") == "-128"

    def test_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            to_string(True, bytearray(8))

    def test_rejects_text(self) -> None:
        with pytest.raises(TypeError):
            to_string("12", bytearray(8))  # type: ignore[arg-type]

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            to_string(1, bytearray(8), kind="int128")  # type: ignore[arg-type]

    def test_huge_integer_as_floating_kind(self) -> None:
        buffer = bytearray(b"........")
        assert len(to_string(10**400, buffer, kind="double")) == 0
        assert len(to_string(-(10**400), buffer, kind="double")) == 0
        assert len(to_string(10**40, buffer, kind="float")) == 0
        assert buffer == bytearray(b"........")

    def test_integer_as_floating_kind(self) -> None:
        assert _fmt(7, kind="double") == "7"
        assert _fmt(-7, kind="float") == "-7"


class TestToStringFloats:
    def test_trailing_zeros_trimmed(self) -> None:
        assert _fmt(12.34) == "12.34"
        assert _fmt(-2.25) == "-2.25"
        assert _fmt(0.5) == "0.5"

    def test_integral_values_drop_point(self) -> None:
        assert _fmt(5.0) == "5"
        assert _fmt(100.0) == "100"
        assert _fmt(-3.0) == "-3"

    def test_double_precision(self) -> None:
        assert _fmt(1 / 3) == "0.33333333"

    def test_float_precision(self) -> None:
        assert _fmt(1 / 3, kind="float") == "0.333333"
        assert _fmt(0.1, kind="float") == "0.1"

    def test_non_finite(self) -> None:
        assert _fmt(math.inf) == "inf"
        assert _fmt(-math.inf) == "-inf"
        assert _fmt(math.nan) == "nan"

    def test_float_overflow(self) -> None:
        assert _fmt(1e39, kind="float") == ""

    def test_buffer_too_small(self) -> None:
        buffer = bytearray(4)
        assert len(to_string(12.345, buffer)) == 0
        assert buffer == bytearray(4)


class TestFromStringIntegers:
    def test_decimal(self) -> None:
        assert from_string("42") == 42
        assert from_string("-42") == -42

    def test_hex(self) -> None:
        assert from_string("ff", "uint8", hex=True) == 255
        assert from_string("FF", "uint8", hex=True) == 255
        assert from_string("-1a", "int32", hex=True) == -26

    def test_rejects_decorations(self) -> None:
        for text in ("0x10", " 42", "42 ", "+4", "1_000", "", "12a", "-"):
            assert from_string(text, hex=text == "0x10") is None, text

    def test_unsigned_rejects_minus(self) -> None:
        assert from_string("-1", "uint8") is None
        assert from_string("-0", "uint8") is None

    def test_range(self) -> None:
        assert from_string("255", "uint8") == 255
        assert from_string("256", "uint8") is None
        assert from_string("-129", "int8") is None
        assert from_string(str(2**63 - 1)) == 2**63 - 1
        assert from_string(str(2**63)) is None
        assert from_string(str(2**64 - 1), "uint64") == 2**64 - 1

    def test_hex_digits_rejected_in_decimal(self) -> None:
        assert from_string("ff") is None

    def test_accepts_views_and_bytes(self) -> None:
        assert from_string(StrView("id=17;", 3, 5)) == 17
        assert from_string(b"17") == 17
        assert from_string(to_string(99, bytearray(8))) == 99

    def test_non_ascii_bytes(self) -> None:
        assert from_string(b"\xff1") is None

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            from_string("1", "big")  # type: ignore[arg-type]


class TestFromStringFloats:
    def test_decimal_notation(self) -> None:
        assert from_string("12.5", "double") == 12.5
        assert from_string("-0.25", "double") == -0.25
        assert from_string(".5", "double") == 0.5
        assert from_string("3.", "double") == 3.0

    def test_scientific(self) -> None:
        assert from_string("1e3", "double") == 1000.0
        assert from_string("2.5E-1", "double") == 0.25

    def test_special_values(self) -> None:
        assert from_string("inf", "double") == math.inf
        assert from_string("-Infinity", "double") == -math.inf
        value = from_string("nan", "double")
        assert isinstance(value, float) and math.isnan(value)

    def test_malformed(self) -> None:
        for text in ("", "1e", "1.2.3", "+1.5", " 1.5", "0x1p3", "1,5", "e5"):
            assert from_string(text, "double") is None, text

    def test_overflow(self) -> None:
        assert from_string("1e400", "double") is None
        assert from_string("1e39", "float") is None

    def test_float_max_spelling_accepted(self) -> None:
        assert from_string("3.4028235e38", "float") == _f32(3.4028235e38)
        assert from_string("-3.4028235e38", "float") == -_f32(3.4028235e38)
        assert from_string("3.5e38", "float") is None

    def test_underflow(self) -> None:
        assert from_string("1e-400", "double") is None
        assert from_string("-1e-400", "double") is None
        assert from_string("1e-50", "float") is None

    def test_zero_and_subnormal_are_not_underflow(self) -> None:
        assert from_string("0", "double") == 0.0
        assert from_string("0.000e-400", "double") == 0.0
        assert from_string("-0.0", "float") == 0.0
        assert from_string("5e-324", "double") == 5e-324

    def test_float_rounds_to_single_precision(self) -> None:
        assert from_string("0.1", "float") == _f32(0.1)


@pytest.mark.property
class TestRoundTrip:
    @pytest.mark.parametrize("kind", sorted(INT_RANGES))
    @pytest.mark.parametrize("hex", [False, True])
    @given(data=st.data())
    def test_integers(self, kind: str, hex: bool, data: st.DataObject) -> None:
        bounds = INT_RANGES[kind]
        number = data.draw(st.integers(bounds.low, bounds.high))
        text = to_string(number, bytearray(32), hex=hex, kind=kind)  # type: ignore[arg-type]
        assert from_string(text, kind, hex=hex) == number  # type: ignore[arg-type]

    @given(
        numerator=st.integers(-(10**12), 10**12),
        digits=st.integers(0, 8),
    )
    def test_doubles(self, numerator: int, digits: int) -> None:
        number = numerator / 10**digits
        text = to_string(number, bytearray(64))
        assert from_string(text, "double") == number

    @given(
        numerator=st.integers(-999_999, 999_999),
        digits=st.integers(0, 6),
    )
    def test_floats(self, numerator: int, digits: int) -> None:
        number = _f32(numerator / 10**digits)
        text = to_string(number, bytearray(64), kind="float")
        assert from_string(text, "float") == number
