"""
SkinTone Styler - Palette Generation

Derives clothing color suggestions from a skin tone using fixed hue rotations
plus saturation/lightness adjustments. Tops get brighter, more saturated
variants of the complementary and triadic hues; bottoms get muted, darker
variants of hues near the base and near its complement.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .conversion import hex_to_hsl, hsl_to_hex


# Lightness bounds keep tops off pure white and bottoms off pure black
TOP_LIGHTNESS_MAX = 90.0
BOTTOM_LIGHTNESS_MIN = 10.0


@dataclass(frozen=True)
class Palette:
    """Top and bottom garment suggestions, three colors each, in rule order."""
    top: Tuple[str, ...]
    bottom: Tuple[str, ...]

    def to_dict(self) -> Dict[str, List[str]]:
        return {"top": list(self.top), "bottom": list(self.bottom)}


def rotate_hue(h: float, degrees: float) -> float:
    """
    Rotate hue by specified degrees.

    Args:
        h: Original hue in degrees
        degrees: Rotation in degrees (can be negative)

    Returns:
        Rotated hue in [0, 360)
    """
    return (h + degrees) % 360


def harmony_hues(h: float) -> Dict[str, float]:
    """Complementary (+180°) and triadic (+120°, +240°) hues for a base hue."""
    return {
        "complementary": rotate_hue(h, 180),
        "triadic1": rotate_hue(h, 120),
        "triadic2": rotate_hue(h, 240),
    }


def _brighten(hue: float, s: float, l: float, saturation_gain: float, lightness_gain: float) -> str:
    return hsl_to_hex(
        hue,
        min(s + saturation_gain, 100.0),
        min(l + lightness_gain, TOP_LIGHTNESS_MAX),
    )


def _mute(hue: float, s: float, l: float, saturation_drop: float, lightness_drop: float) -> str:
    return hsl_to_hex(
        hue,
        max(s - saturation_drop, 0.0),
        max(l - lightness_drop, BOTTOM_LIGHTNESS_MIN),
    )


def generate_palette(base_hex: str) -> Palette:
    """
    Generate top and bottom clothing colors for a base (skin tone) color.

    Args:
        base_hex: Base color in format #RRGGBB

    Returns:
        Palette with three top and three bottom colors in fixed order
    """
    h, s, l = hex_to_hsl(base_hex)
    hues = harmony_hues(h)

    top = (
        _brighten(hues["complementary"], s, l, 20, 20),
        _brighten(hues["triadic1"], s, l, 10, 30),
        _brighten(hues["triadic2"], s, l, 10, 30),
    )
    # Analogous +30°, split complement +210°, analogous -30°
    bottom = (
        _mute(rotate_hue(h, 30), s, l, 20, 20),
        _mute(rotate_hue(h, 210), s, l, 10, 30),
        _mute(rotate_hue(h, 330), s, l, 10, 30),
    )

    return Palette(top=top, bottom=bottom)
