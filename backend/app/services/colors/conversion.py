"""
SkinTone Styler - Color Space Conversion

Converts #RRGGBB hex colors to HSL triples and back. Hue is expressed in
degrees [0, 360), saturation and lightness in percent [0, 100].
"""

import math
import re
from typing import NamedTuple

from app.errors import InvalidColorFormatError


HEX_COLOR_RE = re.compile(r"^#[0-9A-F]{6}$", re.IGNORECASE)


class HSLColor(NamedTuple):
    """HSL triple: hue in degrees, saturation and lightness in percent."""
    hue: float
    saturation: float
    lightness: float


def is_valid_hex(value: str) -> bool:
    """Return True if value is a #RRGGBB color string (any case)."""
    return isinstance(value, str) and HEX_COLOR_RE.fullmatch(value) is not None


def normalize_hex(value: str) -> str:
    """
    Validate a hex color and return it in canonical lowercase form.

    Raises:
        InvalidColorFormatError: If value is not #RRGGBB
    """
    if not is_valid_hex(value):
        raise InvalidColorFormatError(value)
    return value.lower()


def hex_to_rgb(hex_color: str) -> tuple:
    """
    Convert hex color to an RGB tuple.

    Args:
        hex_color: Color in format #RRGGBB

    Returns:
        RGB tuple (r, g, b) with values 0-255
    """
    hex_clean = normalize_hex(hex_color)[1:]
    return tuple(int(hex_clean[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit channels as a lowercase #rrggbb string."""
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_hsl(hex_color: str) -> HSLColor:
    """
    Convert hex color to HSL color space.

    Args:
        hex_color: Color in format #RRGGBB

    Returns:
        HSLColor where hue ∈ [0, 360), saturation ∈ [0, 100], lightness ∈ [0, 100]

    Raises:
        InvalidColorFormatError: If hex_color is not #RRGGBB
    """
    r, g, b = (channel / 255 for channel in hex_to_rgb(hex_color))

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        # Achromatic
        return HSLColor(0.0, 0.0, l * 100)

    d = max_c - min_c
    s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)

    if max_c == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    h /= 6

    return HSLColor(h * 360, s * 100, l * 100)


def _round_half_up(value: float) -> int:
    # Halves round toward +inf, unlike round()'s banker's rounding
    return int(math.floor(value + 0.5))


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """
    Convert an HSL color to hex format.

    Saturation and lightness are used as given, callers clamp them to
    [0, 100] first. Hue may be any real number and wraps around the wheel.

    Args:
        hue: Hue in degrees
        saturation: Saturation [0, 100]
        lightness: Lightness [0, 100]

    Returns:
        Hex color string in format #rrggbb (lowercase)
    """
    s = saturation / 100
    l = lightness / 100
    a = s * min(l, 1 - l)

    def channel(n: int) -> str:
        k = (n + hue / 30) % 12
        color = l - a * max(min(k - 3, 9 - k, 1), -1)
        return f"{_round_half_up(255 * color):02x}"

    return f"#{channel(0)}{channel(8)}{channel(4)}"
