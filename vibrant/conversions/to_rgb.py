import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ScalarOrArray, as_channel_array
from ..types.precision import Precision, DEFAULT_PRECISION, precision_dtype
from .hue import normalize_hue

# f(n) offsets for the red, green and blue channels
_HSL_CHANNEL_OFFSETS = (0, 8, 4)


## HSL to RGB conversions

def hsl_to_unit_rgb(
    h: ScalarOrArray,
    s: ScalarOrArray,
    l: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> NDArray:
    """
    Vectorized: Convert HSL to RGB using the CSS Color 4 closed form.
    Based on: https://www.w3.org/TR/css-color-4/#hsl-to-rgb

    Each channel is ``l - a * max(-1, min(k - 3, 9 - k, 1))`` with
    ``k = (n + h / 30) mod 12`` and ``a = s * min(l, 1 - l)``.

    Args:
        h: array-like or scalar, hue in degrees (normalized here)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]
        precision: numeric width of the result

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    dtype = precision_dtype(precision)
    h = normalize_hue(h, precision)
    s = as_channel_array(s, dtype)
    l = as_channel_array(l, dtype)

    a = s * np.minimum(l, 1 - l)
    channels = []
    for n in _HSL_CHANNEL_OFFSETS:
        k = np.fmod(n + h / 30, 12)
        channels.append(l - a * np.maximum(-1, np.minimum(np.minimum(k - 3, 9 - k), 1)))

    return np.stack(np.broadcast_arrays(*channels), axis=-1)


## HWB to RGB conversions

def hwb_to_unit_rgb(
    h: ScalarOrArray,
    w: ScalarOrArray,
    b: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> NDArray:
    """
    Vectorized: Convert HWB to RGB.
    Based on: https://www.w3.org/TR/css-color-4/#hwb-to-rgb

    When ``w + b >= 1`` the result is the achromatic gray ``w / (w + b)``.
    Otherwise the fully saturated hue is blended as
    ``channel * (1 - w - b) + w``.

    Args:
        h: array-like or scalar, hue in degrees
        w: array-like or scalar, whiteness in [0, 1]
        b: array-like or scalar, blackness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    dtype = precision_dtype(precision)
    w = as_channel_array(w, dtype)[..., np.newaxis]
    b = as_channel_array(b, dtype)[..., np.newaxis]
    wb = w + b

    pure = hsl_to_unit_rgb(h, 1, 0.5, precision)
    blended = pure * (1 - w - b) + w
    with np.errstate(divide="ignore", invalid="ignore"):
        gray = np.where(wb > 0, w / wb, 0)
    return np.where(wb >= 1, gray, blended).astype(dtype, copy=False)
