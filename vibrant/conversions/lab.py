"""CIE L*a*b* and LCH to sRGB (D65)."""
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ScalarOrArray, as_channel_array
from ..types.constants import CIE_E, CIE_K, D65_WHITE, XYZ_TO_LINEAR_SRGB
from ..types.precision import Precision, DEFAULT_PRECISION, precision_dtype
from .gamma import encode_unit_rgb
from .hue import polar_to_cartesian


def lch_to_lab(
    l: ScalarOrArray,
    c: ScalarOrArray,
    h: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> tuple[NDArray, NDArray, NDArray]:
    """Convert LCH to LAB; lightness passes through unchanged."""
    a, b = polar_to_cartesian(c, h, precision)
    return as_channel_array(l, precision_dtype(precision)), a, b


def lab_to_xyz(
    l: ScalarOrArray,
    a: ScalarOrArray,
    b: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> NDArray:
    """
    Convert CIE L*a*b* to XYZ relative to the D65 white point.

    The cubic/linear split uses ``ε = 216/24389`` and ``κ = 24389/27``.

    Args:
        l: array-like or scalar lightness in [0, 100]
        a: array-like or scalar green-red axis
        b: array-like or scalar blue-yellow axis

    Returns:
        xyz: array of shape (..., 3)
    """
    dtype = precision_dtype(precision)
    l = as_channel_array(l, dtype)
    a = as_channel_array(a, dtype)
    b = as_channel_array(b, dtype)

    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    fx3 = fx * fx * fx
    fz3 = fz * fz * fz

    xr = np.where(fx3 > CIE_E, fx3, (116 * fx - 16) / CIE_K)
    yr = np.where(l > CIE_K * CIE_E, fy * fy * fy, l / CIE_K)
    zr = np.where(fz3 > CIE_E, fz3, (116 * fz - 16) / CIE_K)

    xyz = np.stack(np.broadcast_arrays(xr, yr, zr), axis=-1)
    return xyz * np.asarray(D65_WHITE, dtype=dtype)


def lab_to_linear_srgb(
    l: ScalarOrArray,
    a: ScalarOrArray,
    b: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> NDArray:
    """Convert CIE L*a*b* to linear-light sRGB, shape (..., 3)."""
    dtype = precision_dtype(precision)
    xyz = lab_to_xyz(l, a, b, precision)
    return xyz @ np.asarray(XYZ_TO_LINEAR_SRGB, dtype=dtype).T


def lab_to_unit_rgb(
    l: ScalarOrArray,
    a: ScalarOrArray,
    b: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> NDArray:
    """
    Convert CIE L*a*b* to gamma-encoded sRGB.

    Args:
        l: array-like or scalar lightness in [0, 100]
        a: array-like or scalar, unbounded
        b: array-like or scalar, unbounded
        precision: numeric width of the result

    Returns:
        rgb: array of shape (..., 3): (r, g, b) clamped to [0, 1]
    """
    return encode_unit_rgb(lab_to_linear_srgb(l, a, b, precision), precision)


def lch_to_unit_rgb(
    l: ScalarOrArray,
    c: ScalarOrArray,
    h: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> NDArray:
    """Convert CIE LCH to gamma-encoded sRGB through LAB."""
    return lab_to_unit_rgb(*lch_to_lab(l, c, h, precision), precision=precision)
