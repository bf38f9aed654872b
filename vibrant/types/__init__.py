from .precision import Precision, DEFAULT_PRECISION, precision_dtype, resolve_precision
from .color_types import Scalar, Number, ScalarOrArray, RGBA8, UnitRGBA

__all__ = [
    'Precision', 'DEFAULT_PRECISION', 'precision_dtype', 'resolve_precision',
    'Scalar', 'Number', 'ScalarOrArray', 'RGBA8', 'UnitRGBA',
]
