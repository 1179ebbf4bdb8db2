"""Four-corner additive radial gradient used as the reference image."""
from __future__ import annotations

import logging
import math

import numpy as np

from ..samples.color_schemes import ColorScheme
from ..errors import ReferenceImageError
from .radial import radial_gradient, unpremultiply

logger = logging.getLogger(__name__)

MAX_CANVAS_DIMENSION = 32767


def validate_canvas_size(width, height) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ReferenceImageError(f"canvas {name} must be an integer, got {value!r}")
        if not 0 < value <= MAX_CANVAS_DIMENSION:
            raise ReferenceImageError(
                f"unsupported canvas {name} {value}; expected 1..{MAX_CANVAS_DIMENSION}"
            )


def corner_centers(width: int, height: int):
    """Gradient centers clockwise from the top-left, matching ``ColorScheme.corners``."""
    return ((0, 0), (width, 0), (width, height), (0, height))


def corner_gradient_pixels(width: int, height: int, scheme: ColorScheme) -> np.ndarray:
    """
    Render the four corner gradients of ``scheme`` into a straight-alpha
    ``(height, width, 4)`` uint8 array.

    Each corner is the center of a radial gradient whose radius is the
    canvas diagonal, so every gradient reaches across the whole canvas.
    """
    validate_canvas_size(width, height)
    radius = math.sqrt(width ** 2 + height ** 2)

    try:
        canvas = np.zeros((height, width, 4), dtype=float)
        for center, color in zip(corner_centers(width, height), scheme.corners()):
            canvas = radial_gradient(color, height, width, center=center, radius=radius, base=canvas)
        return unpremultiply(canvas)
    except MemoryError as exc:
        raise ReferenceImageError(f"cannot allocate a {width}x{height} reference image") from exc
