"""Parsing of CSS-style hex color strings into unit RGBA channels."""
from __future__ import annotations
from typing import Tuple

from ..exceptions import UnsupportedColorFormat

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def parse_hex(text: str) -> Tuple[float, float, float, float]:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` into unit floats.

    The leading ``#`` is optional. Short forms double each digit, so ``#f80``
    equals ``#ff8800``. Missing alpha means fully opaque.

    Raises:
        UnsupportedColorFormat: for any other length or a non-hex digit.
    """
    digits = text.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise UnsupportedColorFormat(f"Not a hex color: {text!r}")

    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        raise UnsupportedColorFormat(f"Hex color must have 3, 4, 6 or 8 digits: {text!r}")

    r, g, b, a = (int(digits[i:i + 2], 16) / 255.0 for i in range(0, 8, 2))
    return r, g, b, a


def to_hex(r: float, g: float, b: float, a: float = 1.0) -> str:
    """Format unit channels as ``#rrggbbaa`` (always eight digits)."""
    return "#" + "".join(f"{round(c * 255):02x}" for c in (r, g, b, a))
