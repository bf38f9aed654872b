"""
CSS argument values and their per-function unit interpretation.

A ``CssValue`` is a scanned number plus the unit marker that followed it
(``%`` or nothing). The ``to_*`` helpers translate a value into the domain a
conversion entry point expects.
"""
from __future__ import annotations
from enum import Enum
from typing import Optional
import numpy as np

from ..errors import VibrantError
from ..receiver import unit_to_u8
from ..types.constants import (
    LAB_AB_PERCENT_SCALE,
    LCH_CHROMA_PERCENT_SCALE,
    OKLAB_AB_PERCENT_SCALE,
    PERCENT_MAX,
    U8_MAX,
)
from ..types.precision import Precision, DEFAULT_PRECISION
from .cursor import Cursor
from .numbers import scan_number


class Unit(Enum):
    UNSET = 0
    PERCENT = 1
    NUMBER = 2


class CssValue:
    __slots__ = ('value', 'unit')

    def __init__(self, value=0.0, unit: Unit = Unit.UNSET) -> None:
        self.value = value
        self.unit = unit

    @property
    def is_percent(self) -> bool:
        return self.unit is Unit.PERCENT

    def __eq__(self, other) -> bool:
        if not isinstance(other, CssValue):
            return NotImplemented
        return self.unit is other.unit and self.value == other.value

    def __repr__(self) -> str:
        suffix = "%" if self.is_percent else ""
        return f"CssValue({self.value}{suffix}, {self.unit.name})"


def consume_css_value(cursor: Cursor, precision: Precision | str = DEFAULT_PRECISION) -> Optional[CssValue]:
    """Scan a number and an optional ``%``; ``None`` if no number is present."""
    value = scan_number(cursor, precision)
    if value is None:
        return None
    unit = Unit.PERCENT if cursor.consume_if(b"%") else Unit.NUMBER
    return CssValue(value, unit)


def _clamp_percent(value):
    return np.clip(value, 0, PERCENT_MAX)


def _clamp_signed_percent(value):
    return np.clip(value, -PERCENT_MAX, PERCENT_MAX)


def to_u8(css_value: CssValue) -> int:
    """rgb channel: number rounded and clamped to [0, 255], percent of 255."""
    if css_value.is_percent:
        return unit_to_u8(_clamp_percent(css_value.value) / PERCENT_MAX)
    return int(np.clip(css_value.value + 0.5, 0, U8_MAX))


def to_unit(css_value: CssValue):
    """alpha: number clamped to [0, 1], percent divided by 100."""
    if css_value.is_percent:
        return _clamp_percent(css_value.value) / PERCENT_MAX
    return np.clip(css_value.value, 0, 1)


# oklab/oklch lightness follows the alpha rules
to_ok_lightness = to_unit


def to_percent(css_value: CssValue):
    """hsl/hwb/lab/lch 0-100 fields; the % sign is optional."""
    return _clamp_percent(css_value.value)


def to_lab_ab(css_value: CssValue):
    if css_value.is_percent:
        return _clamp_signed_percent(css_value.value) * LAB_AB_PERCENT_SCALE
    return css_value.value


def to_lch_chroma(css_value: CssValue):
    if css_value.is_percent:
        return _clamp_percent(css_value.value) * LCH_CHROMA_PERCENT_SCALE
    return css_value.value


def to_oklab_ab(css_value: CssValue):
    """oklab a/b and oklch chroma."""
    if css_value.is_percent:
        return _clamp_signed_percent(css_value.value) * OKLAB_AB_PERCENT_SCALE
    return css_value.value


def to_hue(css_value: CssValue):
    """Hue in degrees; hue has no percent form."""
    if css_value.is_percent:
        raise VibrantError("hue does not accept a percentage")
    return css_value.value
