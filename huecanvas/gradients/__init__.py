"""
Gradient Generation
===================

Radial gradients and the four-corner reference background.
"""

from .radial import radial_gradient, unpremultiply
from .corners import (
    MAX_CANVAS_DIMENSION,
    corner_centers,
    corner_gradient_pixels,
    validate_canvas_size,
)

__all__ = [
    "radial_gradient",
    "unpremultiply",
    "MAX_CANVAS_DIMENSION",
    "corner_centers",
    "corner_gradient_pixels",
    "validate_canvas_size",
]
