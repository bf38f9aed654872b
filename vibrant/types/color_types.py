from __future__ import annotations
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
Number = Union[Scalar, np.floating]
ScalarOrArray = Union[Number, ndarray]
RGBA8 = Tuple[int, int, int, int]
UnitRGBA = Tuple[float, float, float, float]


def as_channel_array(value: ScalarOrArray, dtype: type[np.floating]) -> ndarray:
    """
    Convert a scalar or array-like channel to an array of ``dtype``.

    Args:
        value: Scalar, sequence, or already an ndarray
        dtype: numpy floating type selected by the active precision

    Returns:
        numpy array representation (0-d for scalars)
    """
    return np.asarray(value, dtype=dtype)
