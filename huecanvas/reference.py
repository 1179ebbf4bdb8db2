"""
Reference Image
===============

The un-rotated four-corner gradient raster. Built once per session and
never mutated; every sampled or exported color is derived from it.
"""
from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from .colors.rgb import ColorRGB, ColorRGBA
from .errors import InvalidCoordinate
from .gradients.corners import corner_gradient_pixels
from .samples.color_schemes import ColorScheme

logger = logging.getLogger(__name__)


class ReferenceImage:
    __slots__ = ("_pixels", "scheme")

    def __init__(self, pixels: NDArray, scheme: ColorScheme | None = None) -> None:
        if pixels.ndim != 3 or pixels.shape[-1] != 4:
            raise ValueError(f"reference pixels must have shape (H, W, 4), got {pixels.shape}")
        pixels = np.array(pixels, dtype=np.uint8, copy=True)
        pixels.flags.writeable = False
        self._pixels = pixels
        self.scheme = scheme

    @classmethod
    def generate(cls, width: int, height: int, scheme: ColorScheme) -> ReferenceImage:
        """Render the four-corner gradient for ``scheme``. Raises ``ReferenceImageError``."""
        pixels = corner_gradient_pixels(width, height, scheme)
        logger.info("Generated %dx%d reference image (%s)", width, height, scheme.name)
        return cls(pixels, scheme)

    @property
    def pixels(self) -> NDArray:
        """Read-only (H, W, 4) uint8 view."""
        return self._pixels

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_index(self, x: Real, y: Real) -> Tuple[int, int]:
        """
        Resolve a pointer coordinate to integer pixel indices.

        Fractional coordinates are floored, as a canvas does for a 1x1
        ``getImageData`` read. Anything outside the image is rejected,
        never clamped.
        """
        try:
            ix, iy = math.floor(x), math.floor(y)
        except (TypeError, ValueError, OverflowError):
            raise InvalidCoordinate(x, y, self.width, self.height) from None
        if not self.contains(ix, iy):
            raise InvalidCoordinate(x, y, self.width, self.height)
        return ix, iy

    def rgba_at(self, x: Real, y: Real) -> ColorRGBA:
        ix, iy = self.pixel_index(x, y)
        return ColorRGBA(tuple(int(v) for v in self._pixels[iy, ix]))

    def rgb_at(self, x: Real, y: Real) -> ColorRGB:
        return self.rgba_at(x, y).without_alpha()

    def block(self, left: int, top: int, width: int, height: int) -> NDArray:
        """Read-only view of the pixels inside the box, clipped to the image."""
        x0, y0 = max(left, 0), max(top, 0)
        x1, y1 = min(left + width, self.width), min(top + height, self.height)
        if x1 <= x0 or y1 <= y0:
            return self._pixels[0:0, 0:0]
        return self._pixels[y0:y1, x0:x1]

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self._pixels), mode="RGBA")
