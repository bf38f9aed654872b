"""
Vibrant Color Space Conversions
===============================

Closed-form transforms from HSL, HWB, CIE LAB/LCH and Oklab/OKLCH into
gamma-encoded sRGB, written once against numpy and run at either numeric
width (``Precision.SINGLE`` → float32, ``Precision.DOUBLE`` → float64).

Entry Points
------------
Each validates its arguments, clamps bounded channels, and writes the result
to a receiver:

    rgb(red, green, blue, alpha, receiver, precision=DOUBLE)
    hsl(hue, saturation, lightness, alpha, receiver, precision=DOUBLE)
    hwb(hue, whiteness, blackness, alpha, receiver, precision=DOUBLE)
    lab(lightness, a, b, alpha, receiver, precision=DOUBLE)
    lch(lightness, chroma, hue, alpha, receiver, precision=DOUBLE)
    oklab(lightness, a, b, alpha, receiver, precision=DOUBLE)
    oklch(lightness, chroma, hue, alpha, receiver, precision=DOUBLE)

Non-finite arguments (NaN, ±inf) raise ``VibrantError``; the receiver is
left untouched.

Vectorized Helpers
------------------
The array functions behind the entry points accept scalars or arrays and
return arrays of shape (..., 3):

    hsl_to_unit_rgb(h, s, l)          s, l in [0, 1]
    hwb_to_unit_rgb(h, w, b)          w, b in [0, 1]
    lab_to_unit_rgb(l, a, b)
    lch_to_unit_rgb(l, c, h)
    oklab_to_unit_rgb(l, a, b)
    oklch_to_unit_rgb(l, c, h)
    linear_to_srgb(c)                 sRGB transfer function
    normalize_hue(h)                  reduce into [0, 360)

Examples
--------
>>> from vibrant.conversions import hsl
>>> from vibrant.receiver import recv_init
>>> hsl(180, 50, 50, 1, recv_init()).value
(np.uint8(64), np.uint8(191), np.uint8(191), np.uint8(255))
"""

from .engine import rgb, hsl, hwb, lab, lch, oklab, oklch
from .gamma import linear_to_srgb, encode_unit_rgb
from .hue import normalize_hue, polar_to_cartesian
from .lab import lab_to_xyz, lab_to_linear_srgb, lab_to_unit_rgb, lch_to_lab, lch_to_unit_rgb
from .oklab import oklab_to_linear_srgb, oklab_to_unit_rgb, oklch_to_oklab, oklch_to_unit_rgb
from .to_rgb import hsl_to_unit_rgb, hwb_to_unit_rgb

__all__ = [
    # Entry points
    'rgb', 'hsl', 'hwb', 'lab', 'lch', 'oklab', 'oklch',
    # Vectorized helpers
    'hsl_to_unit_rgb', 'hwb_to_unit_rgb',
    'lab_to_xyz', 'lab_to_linear_srgb', 'lab_to_unit_rgb', 'lch_to_lab', 'lch_to_unit_rgb',
    'oklab_to_linear_srgb', 'oklab_to_unit_rgb', 'oklch_to_oklab', 'oklch_to_unit_rgb',
    'linear_to_srgb', 'encode_unit_rgb',
    'normalize_hue', 'polar_to_cartesian',
]
