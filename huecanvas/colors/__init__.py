"""
HueCanvas Color Classes
=======================

Immutable value classes for 8-bit RGB(A) and fractional HSL colors.

Features
--------
- Immutable color instances (frozen after initialization)
- Value clamping to valid ranges
- Hex / CSS-name parsing through Pillow's ``ImageColor``
- RGB ↔ HSL conversion and exact hue rotation

Usage
-----
>>> from huecanvas.colors import ColorRGB
>>>
>>> color = ColorRGB((255, 128, 0))
>>> color.value
(255, 128, 0)
>>> hsl = color.to_hsl()
>>> hsl.to_rgb() == color
True
>>> ColorRGB.parse("#ff0000").hue_rotated(180)
ColorRGB(0, 255, 255)
"""

from .color_base import ColorBase
from .rgb import ColorRGB, ColorRGBA, RGB, RGBA
from .hsl import ColorHSL, HSL
from .color import as_rgb

__all__ = [
    "ColorBase",
    "ColorRGB",
    "ColorRGBA",
    "ColorHSL",
    "RGB",
    "RGBA",
    "HSL",
    "as_rgb",
]
