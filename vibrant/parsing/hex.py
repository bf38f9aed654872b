from ..errors import VibrantError
from ..types.color_types import RGBA8

_HEX_VALUES = {ord(c): int(c, 16) for c in "0123456789abcdefABCDEF"}


def _hex_digit(c: int) -> int:
    try:
        return _HEX_VALUES[c]
    except KeyError:
        raise VibrantError(f"invalid hex digit {chr(c)!r}") from None


def parse_hex(data: bytes) -> RGBA8:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

    Digits are case-insensitive. Short forms repeat each nibble
    (``#2ae`` → ``#22aaee``). A missing alpha is 255.

    Args:
        data: the whole input, including the leading ``#``

    Returns:
        (r, g, b, a) bytes

    Raises:
        VibrantError: on any other length or a non-hex character.
    """
    n = len(data)
    if n in (4, 5):
        components = [_hex_digit(c) * 0x11 for c in data[1:]]
    elif n in (7, 9):
        components = [
            (_hex_digit(data[i]) << 4) | _hex_digit(data[i + 1])
            for i in range(1, n, 2)
        ]
    else:
        raise VibrantError(f"hex color must have 3, 4, 6 or 8 digits, got {n - 1}")

    if len(components) == 3:
        components.append(255)
    return tuple(components)
