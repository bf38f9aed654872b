"""
Vibrant Color String Parsing
============================

Routes a color string to the right parser and writes the result to a
receiver:

    "#..."            hex notation (``parse_hex``)
    "rgb(...)" etc.   functional notation (``parse_css_function``)
    anything else     CSS color keyword (``vibrant.named_colors.lookup``)

Entry Points
------------
    parse(value, receiver, length=None, precision=DOUBLE)
        Parse the first ``length`` bytes (all of them by default).
    parse_z(value, receiver, precision=DOUBLE)
        Parse up to the first NUL, at most 128 bytes.
    try_parse(value, receiver, length=None, precision=DOUBLE) -> bool
        Same as ``parse``, reporting failure as ``False``.
    parse_rgba(value) -> (r, g, b, a) bytes
    parse_unit_rgba(value, precision=DOUBLE) -> (r, g, b, a) floats in [0, 1]

Every failure raises ``VibrantError`` and leaves the receiver untouched.
"""
from __future__ import annotations
import logging
from typing import Optional

from ..errors import VibrantError, ensure_receiver
from ..named_colors import lookup
from ..receiver import Receiver, RecvTag, recv_init
from ..types.color_types import RGBA8, UnitRGBA
from ..types.constants import MAX_STR_LEN
from ..types.precision import Precision, DEFAULT_PRECISION, resolve_precision
from .function import parse_css_function
from .hex import parse_hex

logger = logging.getLogger(__name__)

_NUL = b"\0"


def _as_bytes(value: str | bytes) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if value is None:
        raise VibrantError("no input given")
    raise VibrantError(f"color must be str or bytes, got {type(value).__name__}")


def _parse_bytes(data: bytes, receiver: Receiver, precision: Precision) -> Receiver:
    if not data:
        raise VibrantError("empty input")
    if len(data) > MAX_STR_LEN:
        raise VibrantError(f"input longer than {MAX_STR_LEN} bytes")

    if data[0] == ord("#"):
        receiver.write_u8(*parse_hex(data))
        return receiver

    result = parse_css_function(data, receiver, precision)
    if result is not None:
        return result

    color = lookup(data)
    if color is None:
        raise VibrantError(f"unknown color {data!r}")
    receiver.write_u8(*color)
    return receiver


def parse(
    value: str | bytes,
    receiver: Receiver,
    length: Optional[int] = None,
    precision: Precision | str = DEFAULT_PRECISION,
) -> Receiver:
    """
    Parse a color string into ``receiver``.

    Args:
        value: color text; ``str`` is UTF-8 encoded first
        receiver: output receiver, written only on success
        length: number of leading bytes to parse; all of ``value`` if ``None``
        precision: numeric width for scanning and conversion

    Returns:
        ``receiver``

    Raises:
        VibrantError: if the text is empty, longer than 128 bytes, or not a
            valid hex color, color function or keyword.
    """
    try:
        ensure_receiver(receiver)
        precision = resolve_precision(precision)
        data = _as_bytes(value)
        if length is not None:
            if not 0 <= length <= len(data):
                raise VibrantError(f"length {length} outside input of {len(data)} bytes")
            data = data[:length]
        return _parse_bytes(data, receiver, precision)
    except VibrantError as exc:
        logger.debug("Rejected color %r: %s", value, exc)
        raise


def parse_z(
    value: str | bytes,
    receiver: Receiver,
    precision: Precision | str = DEFAULT_PRECISION,
) -> Receiver:
    """
    Parse NUL-terminated color text.

    Text runs up to the first NUL byte or the end of ``value``. More than
    128 bytes before the terminator is rejected as too long.
    """
    data = _as_bytes(value)
    end = data.find(_NUL)
    if end >= 0:
        data = data[:end]
    return parse(data, receiver, precision=precision)


def try_parse(
    value: str | bytes,
    receiver: Receiver,
    length: Optional[int] = None,
    precision: Precision | str = DEFAULT_PRECISION,
) -> bool:
    """Like ``parse``, but return ``False`` instead of raising ``VibrantError``."""
    try:
        parse(value, receiver, length, precision)
    except VibrantError:
        return False
    return True


def parse_rgba(value: str | bytes) -> RGBA8:
    """Parse ``value`` and return (r, g, b, a) as ints in [0, 255]."""
    receiver = parse(value, recv_init(RecvTag.VAL_U8))
    return tuple(int(c) for c in receiver.value)


def parse_unit_rgba(value: str | bytes, precision: Precision | str = DEFAULT_PRECISION) -> UnitRGBA:
    """Parse ``value`` and return (r, g, b, a) as floats in [0, 1]."""
    precision = resolve_precision(precision)
    tag = RecvTag.VAL_F32 if precision is Precision.SINGLE else RecvTag.VAL_F64
    receiver = parse(value, recv_init(tag), precision=precision)
    return tuple(float(c) for c in receiver.value)


__all__ = [
    'parse', 'parse_z', 'try_parse', 'parse_rgba', 'parse_unit_rgba',
    'parse_hex', 'parse_css_function', 'lookup',
]
