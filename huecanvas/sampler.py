"""
Color Sampler
=============

Exact hue-rotated colors read from the reference image.

Both the click path (:func:`sample_color`) and the export path
(:func:`rotate_region`) go through :func:`huecanvas.conversions.np_rotate_hue`
on pixels read straight from the un-rotated :class:`ReferenceImage`, so a
given coordinate and rotation produce the same color on either path.
"""
from __future__ import annotations

from numbers import Real

import numpy as np
from numpy import ndarray as NDArray

from .colors.rgb import ColorRGB
from .conversions import np_rotate_hue
from .reference import ReferenceImage


def sample_color(reference: ReferenceImage, x: Real, y: Real, rotation_degrees: float) -> ColorRGB:
    """
    Return the post-rotation color at ``(x, y)``.

    Raises:
        InvalidCoordinate: if ``(x, y)`` lies outside the reference image.
    """
    ix, iy = reference.pixel_index(x, y)
    rotated = rotate_region(reference, ix, iy, 1, 1, rotation_degrees)
    return ColorRGB(tuple(int(v) for v in rotated[0, 0, :3]))


def rotate_region(
    reference: ReferenceImage,
    left: int,
    top: int,
    width: int,
    height: int,
    rotation_degrees: float,
) -> NDArray:
    """
    Hue-rotate a block of the reference image.

    Returns:
        uint8 RGBA array of shape (height, width, 4). Pixels of the box
        that fall outside the reference image are fully transparent.
    """
    out = np.zeros((height, width, 4), dtype=np.uint8)
    block = reference.block(left, top, width, height)
    if block.size == 0:
        return out

    ox, oy = max(left, 0) - left, max(top, 0) - top
    bh, bw = block.shape[:2]
    region = out[oy:oy + bh, ox:ox + bw]
    region[..., :3] = np_rotate_hue(block[..., :3], rotation_degrees)
    region[..., 3] = block[..., 3]
    return out
