"""
Viewport fitting.

The virtual canvas is scaled to cover the window and centered along the
axis that overflows. These helpers map between window pixels and canvas
pixels and find the canvas rectangle that is actually visible.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .types.color_types import PixelBox


@dataclass(frozen=True)
class ViewportBounds:
    """A rectangle in canvas coordinates (may extend past the canvas)."""
    left: float
    top: float
    width: float
    height: float

    def pixel_box(self) -> PixelBox:
        """Snap to whole pixels as ``(left, top, width, height)``; size is at least 1x1."""
        left, top = math.floor(self.left + 0.5), math.floor(self.top + 0.5)
        width = max(1, math.floor(self.width + 0.5))
        height = max(1, math.floor(self.height + 0.5))
        return left, top, width, height


@dataclass(frozen=True)
class ViewportTransform:
    scale: float
    translate_x: float
    translate_y: float

    def to_canvas(self, px: float, py: float) -> Tuple[float, float]:
        """Window pixel → canvas pixel."""
        return (px - self.translate_x) / self.scale, (py - self.translate_y) / self.scale

    def to_viewport(self, cx: float, cy: float) -> Tuple[float, float]:
        """Canvas pixel → window pixel."""
        return cx * self.scale + self.translate_x, cy * self.scale + self.translate_y

    def visible_region(self, viewport_width: int, viewport_height: int) -> ViewportBounds:
        left, top = self.to_canvas(0, 0)
        return ViewportBounds(left, top, viewport_width / self.scale, viewport_height / self.scale)


def fit_transform(viewport_width: int, viewport_height: int, virtual_width: int, virtual_height: int) -> ViewportTransform:
    if min(viewport_width, viewport_height, virtual_width, virtual_height) <= 0:
        raise ValueError("viewport and virtual sizes must be positive")

    viewport_ratio = viewport_width / viewport_height
    virtual_ratio = virtual_width / virtual_height

    if viewport_ratio > virtual_ratio:
        scale = viewport_width / virtual_width
        return ViewportTransform(scale, 0.0, (viewport_height - virtual_height * scale) / 2)

    scale = viewport_height / virtual_height
    return ViewportTransform(scale, (viewport_width - virtual_width * scale) / 2, 0.0)
