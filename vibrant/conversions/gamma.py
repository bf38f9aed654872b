import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ScalarOrArray, as_channel_array
from ..types.constants import SRGB_LINEAR_THRESHOLD, SRGB_GAMMA
from ..types.precision import Precision, DEFAULT_PRECISION, precision_dtype


def linear_to_srgb(c: ScalarOrArray, precision: Precision | str = DEFAULT_PRECISION) -> NDArray:
    """
    Apply the sRGB transfer function to linear-light channel values.

    Values above 0.0031308 follow ``1.055 * c ** (1 / 2.4) - 0.055``, the rest
    the linear segment ``12.92 * c``. The result is not clamped.

    Args:
        c: array-like or scalar linear channel values
        precision: numeric width of the result

    Returns:
        gamma-encoded channel values
    """
    c = as_channel_array(c, precision_dtype(precision))
    # power of the magnitude keeps the discarded branch free of NaNs
    encoded = 1.055 * np.power(np.abs(c), 1 / SRGB_GAMMA) - 0.055
    return np.where(c > SRGB_LINEAR_THRESHOLD, encoded, 12.92 * c)


def encode_unit_rgb(linear_rgb: NDArray, precision: Precision | str = DEFAULT_PRECISION) -> NDArray:
    """Gamma-encode a (..., 3) linear sRGB array and clamp it to [0, 1]."""
    return np.clip(linear_to_srgb(linear_rgb, precision), 0, 1)
