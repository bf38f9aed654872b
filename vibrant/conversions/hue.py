import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import ScalarOrArray, as_channel_array
from ..types.constants import HUE_360
from ..types.precision import Precision, DEFAULT_PRECISION, precision_dtype


def normalize_hue(h: ScalarOrArray, precision: Precision | str = DEFAULT_PRECISION) -> NDArray:
    """
    Normalize hue to the [0, 360) range.

    ``fmod`` keeps the sign of the dividend, so negative remainders are
    shifted up by a full turn.

    Args:
        h: array-like or scalar, hue in degrees
        precision: numeric width of the result

    Returns:
        hue array in [0, 360)
    """
    h = as_channel_array(h, precision_dtype(precision))
    a = np.fmod(h, HUE_360)
    return np.where(a < 0, a + HUE_360, a)


def polar_to_cartesian(
    chroma: ScalarOrArray,
    hue: ScalarOrArray,
    precision: Precision | str = DEFAULT_PRECISION,
) -> tuple[NDArray, NDArray]:
    """
    Convert a (chroma, hue) pair to Cartesian (a, b) chromaticity.

    Shared by LCH → LAB and OKLCH → OKLAB.

    Args:
        chroma: array-like or scalar chroma, unbounded
        hue: array-like or scalar hue in degrees

    Returns:
        (a, b) arrays
    """
    dtype = precision_dtype(precision)
    c = as_channel_array(chroma, dtype)
    h_rad = np.radians(normalize_hue(hue, precision))
    return c * np.cos(h_rad), c * np.sin(h_rad)
