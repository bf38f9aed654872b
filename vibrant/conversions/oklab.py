"""Oklab and OKLCH to sRGB.

See https://bottosson.github.io/posts/oklab/
"""
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ScalarOrArray, as_channel_array
from ..types.constants import OKLAB_TO_LMS_, LMS_TO_LINEAR_SRGB
from ..types.precision import Precision, DEFAULT_PRECISION, precision_dtype
from .gamma import encode_unit_rgb
from .hue import polar_to_cartesian


def oklch_to_oklab(
    l: ScalarOrArray,
    c: ScalarOrArray,
    h: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> tuple[NDArray, NDArray, NDArray]:
    """Convert OKLCH to Oklab; lightness passes through unchanged."""
    a, b = polar_to_cartesian(c, h, precision)
    return as_channel_array(l, precision_dtype(precision)), a, b


def oklab_to_linear_srgb(
    l: ScalarOrArray,
    a: ScalarOrArray,
    b: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> NDArray:
    """
    Convert Oklab to linear-light sRGB.

    The Oklab coordinates are mapped to the nonlinear cone responses
    ``l', m', s'``, cubed, then sent through the LMS to linear sRGB matrix.

    Args:
        l: array-like or scalar lightness in [0, 1]
        a: array-like or scalar, unbounded
        b: array-like or scalar, unbounded

    Returns:
        linear rgb: array of shape (..., 3), not clamped
    """
    dtype = precision_dtype(precision)
    lab = np.stack(
        np.broadcast_arrays(
            as_channel_array(l, dtype),
            as_channel_array(a, dtype),
            as_channel_array(b, dtype),
        ),
        axis=-1,
    )
    lms_ = lab @ np.asarray(OKLAB_TO_LMS_, dtype=dtype).T
    lms = lms_ * lms_ * lms_
    return lms @ np.asarray(LMS_TO_LINEAR_SRGB, dtype=dtype).T


def oklab_to_unit_rgb(
    l: ScalarOrArray,
    a: ScalarOrArray,
    b: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> NDArray:
    """Convert Oklab to gamma-encoded sRGB clamped to [0, 1], shape (..., 3)."""
    return encode_unit_rgb(oklab_to_linear_srgb(l, a, b, precision), precision)


def oklch_to_unit_rgb(
    l: ScalarOrArray,
    c: ScalarOrArray,
    h: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> NDArray:
    """Convert OKLCH to gamma-encoded sRGB through Oklab."""
    return oklab_to_unit_rgb(*oklch_to_oklab(l, c, h, precision), precision=precision)
