"""
Direct conversion entry points.

Each function validates its arguments, clamps the bounded ones, converts to
sRGB and delivers the result to ``receiver``. The receiver is returned for
convenience. Any rejected argument raises ``VibrantError`` before the
receiver is touched.
"""
import numpy as np

from ..errors import VibrantError, ensure_finite, ensure_receiver, ensure_u8
from ..receiver import Receiver, unit_to_u8
from ..types.color_types import Number
from ..types.constants import PERCENT_MAX
from ..types.precision import Precision, DEFAULT_PRECISION, precision_dtype
from .lab import lab_to_unit_rgb, lch_to_unit_rgb
from .oklab import oklab_to_unit_rgb, oklch_to_unit_rgb
from .to_rgb import hsl_to_unit_rgb, hwb_to_unit_rgb


def _clamp01(x):
    return np.clip(x, 0, 1)


def _clamp_percent(x):
    return np.clip(x, 0, PERCENT_MAX)


def _convert(convert, *args):
    # huge finite a/b or chroma overflow in the cube steps and come out NaN
    with np.errstate(over="ignore", invalid="ignore"):
        rgb = convert(*args)
    if not np.isfinite(rgb).all():
        raise VibrantError("color components too large to convert")
    return rgb


def _write(receiver: Receiver, rgb, alpha) -> Receiver:
    receiver.write_unit(rgb[0], rgb[1], rgb[2], _clamp01(alpha))
    return receiver


def rgb(
    red: int,
    green: int,
    blue: int,
    alpha: Number,
    receiver: Receiver,
    precision: Precision | str = DEFAULT_PRECISION,
) -> Receiver:
    """
    Build a color from byte channels and a unit-interval alpha.

    Args:
        red, green, blue: integers in [0, 255]
        alpha: opacity, clamped to [0, 1] and quantized to a byte
        receiver: output receiver
        precision: numeric width used for the alpha arithmetic

    Returns:
        ``receiver``, written.
    """
    ensure_receiver(receiver)
    red, green, blue = ensure_u8(red=red, green=green, blue=blue)
    (alpha,) = ensure_finite(precision_dtype(precision), alpha=alpha)
    receiver.write_u8(red, green, blue, unit_to_u8(_clamp01(alpha)))
    return receiver


def hsl(
    hue: Number,
    saturation: Number,
    lightness: Number,
    alpha: Number,
    receiver: Receiver,
    precision: Precision | str = DEFAULT_PRECISION,
) -> Receiver:
    """
    Convert HSL to sRGB.

    Args:
        hue: degrees, any finite value (reduced into [0, 360))
        saturation: 0-100, clamped
        lightness: 0-100, clamped
        alpha: 0-1, clamped
    """
    ensure_receiver(receiver)
    hue, saturation, lightness, alpha = ensure_finite(
        precision_dtype(precision),
        hue=hue, saturation=saturation, lightness=lightness, alpha=alpha,
    )
    s = _clamp_percent(saturation) / PERCENT_MAX
    l = _clamp_percent(lightness) / PERCENT_MAX
    return _write(receiver, _convert(hsl_to_unit_rgb, hue, s, l, precision), alpha)


def hwb(
    hue: Number,
    whiteness: Number,
    blackness: Number,
    alpha: Number,
    receiver: Receiver,
    precision: Precision | str = DEFAULT_PRECISION,
) -> Receiver:
    """
    Convert HWB to sRGB.

    Args:
        hue: degrees, any finite value
        whiteness: 0-100, clamped
        blackness: 0-100, clamped
        alpha: 0-1, clamped
    """
    ensure_receiver(receiver)
    hue, whiteness, blackness, alpha = ensure_finite(
        precision_dtype(precision),
        hue=hue, whiteness=whiteness, blackness=blackness, alpha=alpha,
    )
    w = _clamp_percent(whiteness) / PERCENT_MAX
    b = _clamp_percent(blackness) / PERCENT_MAX
    return _write(receiver, _convert(hwb_to_unit_rgb, hue, w, b, precision), alpha)


def lab(
    lightness: Number,
    a: Number,
    b: Number,
    alpha: Number,
    receiver: Receiver,
    precision: Precision | str = DEFAULT_PRECISION,
) -> Receiver:
    """
    Convert CIE L*a*b* (D65) to sRGB.

    Args:
        lightness: 0-100, clamped
        a, b: unbounded
        alpha: 0-1, clamped
    """
    ensure_receiver(receiver)
    lightness, a, b, alpha = ensure_finite(
        precision_dtype(precision), lightness=lightness, a=a, b=b, alpha=alpha,
    )
    rgb_ = _convert(lab_to_unit_rgb, _clamp_percent(lightness), a, b, precision)
    return _write(receiver, rgb_, alpha)


def lch(
    lightness: Number,
    chroma: Number,
    hue: Number,
    alpha: Number,
    receiver: Receiver,
    precision: Precision | str = DEFAULT_PRECISION,
) -> Receiver:
    """
    Convert CIE LCH to sRGB.

    Args:
        lightness: 0-100, clamped
        chroma: unbounded
        hue: degrees, any finite value
        alpha: 0-1, clamped
    """
    ensure_receiver(receiver)
    lightness, chroma, hue, alpha = ensure_finite(
        precision_dtype(precision), lightness=lightness, chroma=chroma, hue=hue, alpha=alpha,
    )
    rgb_ = _convert(lch_to_unit_rgb, _clamp_percent(lightness), chroma, hue, precision)
    return _write(receiver, rgb_, alpha)


def oklab(
    lightness: Number,
    a: Number,
    b: Number,
    alpha: Number,
    receiver: Receiver,
    precision: Precision | str = DEFAULT_PRECISION,
) -> Receiver:
    """
    Convert Oklab to sRGB.

    Args:
        lightness: 0-1, clamped (CSS Oklab lightness scale, not 0-100)
        a, b: unbounded
        alpha: 0-1, clamped
    """
    ensure_receiver(receiver)
    lightness, a, b, alpha = ensure_finite(
        precision_dtype(precision), lightness=lightness, a=a, b=b, alpha=alpha,
    )
    rgb_ = _convert(oklab_to_unit_rgb, _clamp01(lightness), a, b, precision)
    return _write(receiver, rgb_, alpha)


def oklch(
    lightness: Number,
    chroma: Number,
    hue: Number,
    alpha: Number,
    receiver: Receiver,
    precision: Precision | str = DEFAULT_PRECISION,
) -> Receiver:
    """
    Convert OKLCH to sRGB.

    Args:
        lightness: 0-1, clamped (CSS Oklab lightness scale, not 0-100)
        chroma: unbounded
        hue: degrees, any finite value
        alpha: 0-1, clamped
    """
    ensure_receiver(receiver)
    lightness, chroma, hue, alpha = ensure_finite(
        precision_dtype(precision), lightness=lightness, chroma=chroma, hue=hue, alpha=alpha,
    )
    rgb_ = _convert(oklch_to_unit_rgb, _clamp01(lightness), chroma, hue, precision)
    return _write(receiver, rgb_, alpha)
