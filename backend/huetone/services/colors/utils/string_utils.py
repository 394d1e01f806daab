"""
Hex string conversion for packed ARGB colors.
"""

import re

from ..errors import ColorValidationError
from .color_utils import argb_from_rgb, blue_from_argb, green_from_argb, red_from_argb

_HEX_RE = re.compile(r"^#([0-9A-Fa-f]{3,4}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def hex_from_argb(argb: int) -> str:
    """Format as #rrggbb (lowercase, alpha dropped)."""
    r = red_from_argb(argb)
    g = green_from_argb(argb)
    b = blue_from_argb(argb)
    return f"#{r:02x}{g:02x}{b:02x}"


def argb_from_hex(hex_color: str) -> int:
    """
    Parse a CSS hex color into an opaque ARGB int.

    Accepts #rgb, #rgba, #rrggbb and #rrggbbaa; a CSS alpha component is
    ignored, the result is always opaque.

    Args:
        hex_color: Color string starting with '#'

    Returns:
        Packed ARGB color

    Raises:
        ColorValidationError: If the string is not a hex color
    """
    hex_clean = hex_color.strip() if isinstance(hex_color, str) else ""
    match = _HEX_RE.match(hex_clean)
    if not match:
        raise ColorValidationError(f"Invalid hex color format: {hex_color!r}", field="hex")

    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    return argb_from_rgb(r, g, b)
