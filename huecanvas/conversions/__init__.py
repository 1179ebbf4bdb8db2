"""
HueCanvas Color Space Conversions
=================================

RGB ↔ HSL conversion utilities with both scalar and vectorized (numpy)
implementations, plus the hue rotation kernel shared by the color sampler
and the exporter.

Conversion Functions
-------------------

RGB → HSL:
    rgb_to_hsl(r, g, b)
        Scalar conversion, r/g/b in [0, 255], result in [0, 1]
    np_rgb_to_hsl(rgb)
        Vectorized conversion over (..., 3) arrays

HSL → RGB:
    hsl_to_rgb(h, s, l)
        Scalar conversion, result as unrounded floats in [0, 255]
    np_hsl_to_rgb(hsl)
        Vectorized conversion over (..., 3) arrays

Hue rotation:
    hue_fraction(degrees)
        Unbounded degrees → hue offset in [0, 1)
    rotate_hue(r, g, b, degrees) / np_rotate_hue(rgb, degrees)
        RGB → HSL → shifted hue → RGB, quantized to 8 bits

Examples
--------
>>> from huecanvas.conversions import rgb_to_hsl, hsl_to_rgb
>>> h, s, l = rgb_to_hsl(255, 128, 0)
>>> r, g, b = hsl_to_rgb(h, s, l)
>>>
>>> import numpy as np
>>> from huecanvas.conversions import np_rotate_hue
>>> np_rotate_hue(np.array([[255, 0, 0]]), 180.0)
array([[  0, 255, 255]], dtype=uint8)
"""

from .hsl import (
    rgb_to_hsl,
    np_rgb_to_hsl,
    hsl_to_rgb,
    np_hsl_to_rgb,
    quantize,
)

from .hue import (
    hue_fraction,
    shift_hue,
    np_shift_hue,
    rotate_hue,
    np_rotate_hue,
)

from ..types.format_type import FormatType

__all__ = [
    # RGB ↔ HSL
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'hsl_to_rgb',
    'np_hsl_to_rgb',
    'quantize',

    # Hue rotation
    'hue_fraction',
    'shift_hue',
    'np_shift_hue',
    'rotate_hue',
    'np_rotate_hue',

    # Types
    'FormatType',
]
