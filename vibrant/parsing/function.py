"""
CSS functional notation: ``name[a]( v1 sep v2 sep v3 [alpha] )``.

The separator is comma or whitespace, fixed by the first one used. Plain
functions take an optional ``/ alpha``; the ``a``-suffixed variants require
a fourth argument after the ordinary separator. Function names are matched
case-sensitively.
"""
from __future__ import annotations
from enum import Enum
from typing import Callable, List, Optional

from .. import conversions
from ..errors import VibrantError
from ..receiver import Receiver
from ..types.precision import Precision, DEFAULT_PRECISION
from .cursor import Cursor
from .delimiter import DelimiterTracker
from .values import (
    CssValue,
    Unit,
    consume_css_value,
    to_hue,
    to_lab_ab,
    to_lch_chroma,
    to_ok_lightness,
    to_oklab_ab,
    to_percent,
    to_u8,
    to_unit,
)

# shortest possible call, e.g. "xxx(0,0,0)"
MIN_FUNCTION_LEN = len("xxx(0,0,0)")


class FunctionKind(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HWB = "hwb"
    LCH = "lch"
    LAB = "lab"
    OKLCH = "oklch"
    OKLAB = "oklab"

    @property
    def keyword(self) -> bytes:
        return self.value.encode("ascii")


def match_function_name(cursor: Cursor) -> Optional[FunctionKind]:
    """Consume a function keyword; ``None`` leaves the cursor untouched."""
    for kind in FunctionKind:
        if cursor.consume_if(kind.keyword):
            return kind
    return None


def _expect_value(cursor: Cursor, precision, position: str) -> CssValue:
    value = consume_css_value(cursor, precision)
    if value is None:
        raise VibrantError(f"expected a number for {position} at offset {cursor.pos}")
    return value


def parse_arguments(cursor: Cursor, alpha_variant: bool, precision=DEFAULT_PRECISION) -> List[CssValue]:
    """
    Parse ``( v1 sep v2 sep v3 [alpha] )`` through the end of input.

    Returns:
        Exactly four values; a missing alpha is ``CssValue(1, NUMBER)``.
    """
    cursor.consume_whitespace()
    if not cursor.consume_if(b"("):
        raise VibrantError("expected '('")

    tracker = DelimiterTracker()
    args = []
    for i in range(3):
        if i:
            if not tracker.consume(cursor):
                raise VibrantError(f"expected separator before argument {i + 1}")
        cursor.consume_whitespace()
        args.append(_expect_value(cursor, precision, f"argument {i + 1}"))

    if alpha_variant:
        if not tracker.consume(cursor):
            raise VibrantError("expected separator before alpha")
        cursor.consume_whitespace()
        args.append(_expect_value(cursor, precision, "alpha"))
    else:
        cursor.consume_whitespace()
        if cursor.consume_if(b"/"):
            cursor.consume_whitespace()
            args.append(_expect_value(cursor, precision, "alpha"))
        else:
            args.append(CssValue(1.0, Unit.NUMBER))

    cursor.consume_whitespace()
    if not cursor.consume_if(b")"):
        raise VibrantError("expected ')'")
    cursor.consume_whitespace()
    if not cursor.at_end():
        raise VibrantError(f"unexpected trailing input {cursor.data[cursor.pos:cursor.end]!r}")

    if any(arg.unit is Unit.UNSET for arg in args):
        raise VibrantError("argument without unit")
    return args


def _rgb(args, receiver, precision):
    return conversions.rgb(to_u8(args[0]), to_u8(args[1]), to_u8(args[2]), to_unit(args[3]), receiver, precision)


def _hsl(args, receiver, precision):
    return conversions.hsl(to_hue(args[0]), to_percent(args[1]), to_percent(args[2]), to_unit(args[3]), receiver, precision)


def _hwb(args, receiver, precision):
    return conversions.hwb(to_hue(args[0]), to_percent(args[1]), to_percent(args[2]), to_unit(args[3]), receiver, precision)


def _lch(args, receiver, precision):
    return conversions.lch(to_percent(args[0]), to_lch_chroma(args[1]), to_hue(args[2]), to_unit(args[3]), receiver, precision)


def _lab(args, receiver, precision):
    return conversions.lab(to_percent(args[0]), to_lab_ab(args[1]), to_lab_ab(args[2]), to_unit(args[3]), receiver, precision)


def _oklch(args, receiver, precision):
    # chroma shares the oklab a/b percent scale
    return conversions.oklch(to_ok_lightness(args[0]), to_oklab_ab(args[1]), to_hue(args[2]), to_unit(args[3]), receiver, precision)


def _oklab(args, receiver, precision):
    return conversions.oklab(to_ok_lightness(args[0]), to_oklab_ab(args[1]), to_oklab_ab(args[2]), to_unit(args[3]), receiver, precision)


function_handlers: dict[FunctionKind, Callable[[List[CssValue], Receiver, Precision | str], Receiver]] = {
    FunctionKind.RGB: _rgb,
    FunctionKind.HSL: _hsl,
    FunctionKind.HWB: _hwb,
    FunctionKind.LCH: _lch,
    FunctionKind.LAB: _lab,
    FunctionKind.OKLCH: _oklch,
    FunctionKind.OKLAB: _oklab,
}


def parse_css_function(
    data: bytes,
    receiver: Receiver,
    precision: Precision | str = DEFAULT_PRECISION,
) -> Optional[Receiver]:
    """
    Parse a complete functional-notation color and write it to ``receiver``.

    Args:
        data: the whole input
        receiver: output receiver
        precision: numeric width for scanning and conversion

    Returns:
        ``receiver`` on success, or ``None`` if ``data`` does not start with a
        known function keyword (the caller then tries the named colors).

    Raises:
        VibrantError: on any grammar error after the keyword matched.
    """
    if len(data) < MIN_FUNCTION_LEN:
        return None

    cursor = Cursor(data)
    kind = match_function_name(cursor)
    if kind is None:
        return None

    alpha_variant = cursor.consume_if(b"a")
    args = parse_arguments(cursor, alpha_variant, precision)
    return function_handlers[kind](args, receiver, precision)
