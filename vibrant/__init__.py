"""
Vibrant - CSS Color Parsing and Conversion
==========================================

Parses CSS color strings (hex, named colors and the ``rgb``, ``hsl``,
``hwb``, ``lab``, ``lch``, ``oklab`` and ``oklch`` functions, each with an
``a``-suffixed alpha variant) into sRGB, and exposes the colorspace
conversions directly.

Results are delivered to a receiver: by value as bytes, float32 or float64,
or written into caller-owned numpy buffers.

Quick Start
-----------
>>> from vibrant import parse, parse_rgba, recv_init, RecvTag
>>> parse_rgba("hsl(180.0, 50%, 50%)")
(64, 191, 191, 255)
>>> parse("#2ae", recv_init(RecvTag.VAL_F64)).value[1]
np.float64(0.6666666666666666)

Direct conversion skips the parser:

>>> from vibrant import oklch
>>> oklch(0.627955, 0.25766, 29.233, 1, recv_init()).value
(np.uint8(255), np.uint8(0), np.uint8(0), np.uint8(255))

Errors
------
Every rejected input raises ``VibrantError`` (a ``ValueError``); the
receiver is never partially written.

Numeric Width
-------------
All arithmetic runs at ``Precision.DOUBLE`` (float64) by default; pass
``precision=Precision.SINGLE`` (or ``"single"``) for float32.
"""
import logging

from .errors import VibrantError
from .types.precision import Precision, DEFAULT_PRECISION
from .receiver import (
    RecvTag,
    Receiver,
    ValReceiverU8,
    ValReceiverF32,
    ValReceiverF64,
    RefReceiverU8,
    RefReceiverF32,
    RefReceiverF64,
    recv_init,
    recv_init_ref_u8,
    recv_init_ref_f32,
    recv_init_ref_f64,
)
from .conversions import rgb, hsl, hwb, lab, lch, oklab, oklch
from .parsing import parse, parse_z, try_parse, parse_rgba, parse_unit_rgba
from .named_colors import CSS_NAMED_COLORS, lookup

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # errors
    "VibrantError",
    # numeric width
    "Precision",
    "DEFAULT_PRECISION",
    # receivers
    "RecvTag",
    "Receiver",
    "ValReceiverU8",
    "ValReceiverF32",
    "ValReceiverF64",
    "RefReceiverU8",
    "RefReceiverF32",
    "RefReceiverF64",
    "recv_init",
    "recv_init_ref_u8",
    "recv_init_ref_f32",
    "recv_init_ref_f64",
    # conversions
    "rgb",
    "hsl",
    "hwb",
    "lab",
    "lch",
    "oklab",
    "oklch",
    # parsing
    "parse",
    "parse_z",
    "try_parse",
    "parse_rgba",
    "parse_unit_rgba",
    # named colors
    "CSS_NAMED_COLORS",
    "lookup",
]
