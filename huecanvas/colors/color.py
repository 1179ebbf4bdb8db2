from __future__ import annotations
from .color_base import ColorBase
from .hsl import ColorHSL
from .rgb import ColorRGB, ColorRGBA
from ..conversions import rgb_to_hsl, hsl_to_rgb, rotate_hue

def to_hsl(self: ColorRGB | ColorRGBA) -> ColorHSL:
    """Convert an RGB(A) color to HSL; alpha is dropped."""
    r, g, b = self.value[:3]
    return ColorHSL(rgb_to_hsl(r, g, b))

def to_rgb(self: ColorHSL) -> ColorRGB:
    """Convert an HSL color back to 8-bit RGB (round half up)."""
    return ColorRGB(hsl_to_rgb(*self.value))

def hue_rotated(self: ColorRGB, degrees: float) -> ColorRGB:
    """
    Return this color rotated ``degrees`` around the HSL hue circle.

    Uses the same kernel as the color sampler, so a rotated reference
    pixel and a rotated ``ColorRGB`` always agree.
    """
    return ColorRGB(rotate_hue(*self.value[:3], degrees))

ColorRGB.to_hsl = to_hsl
ColorRGBA.to_hsl = to_hsl
ColorHSL.to_rgb = to_rgb
ColorRGB.hue_rotated = hue_rotated


def as_rgb(value: ColorBase | tuple | str) -> ColorRGB:
    """Coerce a color-like value (ColorRGB, tuple, hex or CSS name) to ColorRGB."""
    if isinstance(value, ColorRGB):
        return value
    if isinstance(value, ColorRGBA):
        return value.without_alpha()
    if isinstance(value, ColorHSL):
        return value.to_rgb()
    if isinstance(value, str):
        return ColorRGB.parse(value)
    return ColorRGB(tuple(value)[:3])
