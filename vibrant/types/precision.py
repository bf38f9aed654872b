from enum import Enum
import numpy as np
from ..errors import VibrantError


class Precision(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"


precision_dtypes = {
    Precision.SINGLE: np.float32,
    Precision.DOUBLE: np.float64,
}

precision_aliases = {
    "single": Precision.SINGLE,
    "float": Precision.SINGLE,
    "float32": Precision.SINGLE,
    "f32": Precision.SINGLE,
    "double": Precision.DOUBLE,
    "float64": Precision.DOUBLE,
    "f64": Precision.DOUBLE,
}

DEFAULT_PRECISION = Precision.DOUBLE


def resolve_precision(precision: Precision | str) -> Precision:
    """
    Resolve a precision name or enum member.

    Args:
        precision: ``Precision`` member or one of the names in ``precision_aliases``

    Returns:
        The matching ``Precision`` member.

    Raises:
        VibrantError: if the name is unknown.
    """
    if isinstance(precision, Precision):
        return precision
    resolved = precision_aliases.get(str(precision).lower())
    if resolved is None:
        raise VibrantError(f"Unknown numeric precision: {precision!r}")
    return resolved


def precision_dtype(precision: Precision | str) -> type[np.floating]:
    """Return the numpy floating type used for ``precision``."""
    return precision_dtypes[resolve_precision(precision)]
