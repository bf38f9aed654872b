"""Error type and argument validation shared by the parser and the conversion entry points."""
from __future__ import annotations
from typing import Any, Tuple
import numpy as np


class VibrantError(ValueError):
    """
    Raised when a color string cannot be parsed or a conversion is rejected.

    Every failure of the public API surfaces as this single exception type.
    The receiver passed to the failing call is never written to.
    """


def ensure_receiver(receiver: Any) -> None:
    """Reject a missing output receiver."""
    if receiver is None:
        raise VibrantError("no receiver given")


def ensure_finite(dtype: type[np.floating], **values: Any) -> Tuple[np.floating, ...]:
    """
    Cast each keyword argument to ``dtype`` and reject non-finite results.

    Values that overflow the target width (e.g. ``1e300`` in single precision)
    become infinite and are rejected like any other infinity.

    Args:
        dtype: numpy floating type of the active precision
        **values: argument name to value, in positional order

    Returns:
        The cast values, in the order given.
    """
    cast_values = []
    for name, value in values.items():
        if isinstance(value, (str, bytes)) or value is None or np.ndim(value) != 0:
            raise VibrantError(f"{name} must be a real number, got {value!r}")
        try:
            with np.errstate(over="ignore"):
                number = dtype(value)
        except (TypeError, ValueError, OverflowError) as exc:
            raise VibrantError(f"{name} must be a real number, got {value!r}") from exc
        if not np.isfinite(number):
            raise VibrantError(f"{name} must be finite, got {value!r}")
        cast_values.append(number)
    return tuple(cast_values)


def ensure_u8(**values: Any) -> Tuple[int, ...]:
    """Validate byte channels: integers in ``[0, 255]``."""
    channels = []
    for name, value in values.items():
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise VibrantError(f"{name} must be an integer in [0, 255], got {value!r}")
        if not 0 <= value <= 255:
            raise VibrantError(f"{name} must be an integer in [0, 255], got {value!r}")
        channels.append(int(value))
    return tuple(channels)
