"""Signed decimal literal scanner used for every function argument."""
from typing import Optional
import numpy as np

from ..errors import VibrantError
from ..types.constants import NUMBER_MAX, NUMBER_DECIMAL_LIMIT
from ..types.precision import Precision, DEFAULT_PRECISION, precision_dtype
from .cursor import Cursor

_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_DOT = ord(".")
_PLUS = ord("+")
_MINUS = ord("-")


def _is_digit(c: int) -> bool:
    return _DIGIT_0 <= c <= _DIGIT_9


def scan_number(cursor: Cursor, precision: Precision | str = DEFAULT_PRECISION) -> Optional[np.floating]:
    """
    Scan ``[+|-] digits [. digits]`` at the cursor.

    Arithmetic runs in the precision's float type. The integer part may not
    exceed 16777216 (2**24). At most 9 fractional digits are allowed; once the
    running value reaches the ceiling, further fractional digits are read but
    no longer added.

    Args:
        cursor: input position; advanced past the literal on success only
        precision: numeric width for the accumulation

    Returns:
        The signed value, or ``None`` when no digit is present at the cursor.

    Raises:
        VibrantError: on integer overflow or too many fractional digits.
    """
    dtype = precision_dtype(precision)
    data, pos, end = cursor.data, cursor.pos, cursor.end
    limit = dtype(NUMBER_MAX)
    ten = dtype(10)
    tenth = dtype(0.1)

    sign = dtype(1)
    if pos < end and data[pos] == _MINUS:
        sign = dtype(-1)
        pos += 1
    elif pos < end and data[pos] == _PLUS:
        pos += 1

    res = dtype(0)
    digits = 0

    while pos < end and _is_digit(data[pos]):
        d = dtype(data[pos] - _DIGIT_0)
        if res > (limit - d) / ten:
            raise VibrantError(f"number exceeds {NUMBER_MAX}: {data[cursor.pos:pos + 1]!r}")
        res = res * ten + d
        pos += 1
        digits += 1

    if pos < end and data[pos] == _DOT:
        pos += 1
        weight = tenth
        n = 0
        while pos < end and _is_digit(data[pos]):
            n += 1
            if n > NUMBER_DECIMAL_LIMIT:
                raise VibrantError(f"more than {NUMBER_DECIMAL_LIMIT} fractional digits")
            # fractional tail saturates at the ceiling instead of failing
            if res < limit and weight > 0:
                val = dtype(data[pos] - _DIGIT_0) * weight
                if res > limit - val:
                    raise VibrantError(f"number exceeds {NUMBER_MAX}")
                res = res + val
                weight = weight * tenth
            pos += 1
            digits += 1

    if digits == 0:
        return None

    cursor.advance_to(pos)
    return res * sign
