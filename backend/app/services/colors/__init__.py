"""
SkinTone Styler Colors Module

Provides hex/HSL color conversion and complementary clothing palette
generation. Pure functions with no third-party dependencies.
"""

from .conversion import (
    HEX_COLOR_RE, HSLColor, hex_to_hsl, hsl_to_hex, hex_to_rgb, rgb_to_hex,
    is_valid_hex, normalize_hex,
)
from .palette import Palette, generate_palette, harmony_hues, rotate_hue

__all__ = [
    "HEX_COLOR_RE", "HSLColor", "hex_to_hsl", "hsl_to_hex", "hex_to_rgb",
    "rgb_to_hex", "is_valid_hex", "normalize_hex",
    "Palette", "generate_palette", "harmony_hues", "rotate_hue",
]
