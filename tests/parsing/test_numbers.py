import numpy as np
import pytest

from vibrant.errors import VibrantError
from vibrant.parsing.cursor import Cursor
from vibrant.parsing.numbers import scan_number
from vibrant.types.precision import Precision


def scan(text: bytes, precision=Precision.DOUBLE):
    cursor = Cursor(text)
    value = scan_number(cursor, precision)
    return value, cursor.pos


@pytest.mark.parametrize("text,expected,consumed", [
    (b"0", 0.0, 1),
    (b"42", 42.0, 2),
    (b"+42", 42.0, 3),
    (b"-42", -42.0, 3),
    (b"12.5", 12.5, 4),
    (b"12.", 12.0, 3),
    (b".5", 0.5, 2),
    (b"-.25", -0.25, 4),
    (b"7%", 7.0, 1),
    (b"3 4", 3.0, 1),
    (b"16777216", 16777216.0, 8),
    (b"119.999999999", 119.999999999, 13),
])
def test_scan_number(text, expected, consumed):
    value, pos = scan(text)
    assert float(value) == pytest.approx(expected)
    assert pos == consumed


@pytest.mark.parametrize("text", [b"", b"x", b".", b"-", b"+", b"-.", b"+x", b"%"])
def test_no_digits_is_no_match(text):
    value, pos = scan(text)
    assert value is None
    assert pos == 0


@pytest.mark.parametrize("text", [b"16777217", b"99999999", b"-16777217"])
def test_integer_overflow_fails(text):
    cursor = Cursor(text)
    with pytest.raises(VibrantError):
        scan_number(cursor)
    assert cursor.pos == 0


@pytest.mark.parametrize("text", [b"119.9999999999", b"0.0000000001", b"1.1234567890"])
def test_too_many_fractional_digits_fails(text):
    with pytest.raises(VibrantError):
        scan(text)


def test_fraction_saturates_at_ceiling():
    # fractional digits past the ceiling are read but not added
    value, pos = scan(b"16777216.999999999")
    assert float(value) == 16777216.0
    assert pos == 18


def test_fraction_limit_applies_at_ceiling():
    with pytest.raises(VibrantError):
        scan(b"16777216.9999999999")


def test_fraction_added_below_ceiling():
    value, _ = scan(b"16777215.5")
    assert float(value) == 16777215.5


@pytest.mark.parametrize("precision,dtype", [(Precision.SINGLE, np.float32), (Precision.DOUBLE, np.float64)])
def test_result_dtype(precision, dtype):
    value, _ = scan(b"1.25", precision)
    assert isinstance(value, dtype)
    assert value == dtype(1.25)


def test_scan_respects_cursor_end():
    cursor = Cursor(b"12345", end=3)
    assert float(scan_number(cursor)) == 123.0
    assert cursor.pos == 3
