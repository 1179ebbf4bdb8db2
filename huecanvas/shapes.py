"""
Shape Layer
===========

Append-only, ordered list of rectangles drawn at click locations. List
order is paint order: later rectangles cover earlier ones where they
overlap, and no rectangle is ever removed on its own.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .colors.rgb import ColorRGB
from .surface import CanvasSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float
    height: float
    fill: ColorRGB
    border: ColorRGB
    border_width: float = 0

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def draw(self, surface: CanvasSurface, offset: Tuple[float, float] = (0, 0)) -> None:
        """Fill, then stroke the border when it has a width."""
        x, y = self.x - offset[0], self.y - offset[1]
        surface.fill_rect(x, y, self.width, self.height, self.fill)
        if self.border_width:
            surface.stroke_rect(x, y, self.width, self.height, self.border, self.border_width)


class ShapeLayer:
    __slots__ = ("_rectangles",)

    def __init__(self) -> None:
        self._rectangles: List[Rectangle] = []

    def add_rectangle(
        self,
        center_x: float,
        center_y: float,
        width: float,
        height: float,
        fill: ColorRGB,
        border: ColorRGB,
        border_width: float = 0,
    ) -> Rectangle:
        """Append a rectangle centered on ``(center_x, center_y)`` and return it."""
        rect = Rectangle(
            x=center_x - width / 2,
            y=center_y - height / 2,
            width=width,
            height=height,
            fill=fill,
            border=border,
            border_width=border_width,
        )
        self._rectangles.append(rect)
        logger.debug("Added %r (layer size %d)", rect, len(self._rectangles))
        return rect

    def render(self, surface: CanvasSurface, offset: Tuple[float, float] = (0, 0)) -> None:
        for rect in self._rectangles:
            rect.draw(surface, offset)

    def render_last(self, surface: CanvasSurface) -> None:
        if self._rectangles:
            self._rectangles[-1].draw(surface)

    def clear(self) -> None:
        self._rectangles.clear()

    def __len__(self) -> int:
        return len(self._rectangles)

    def __iter__(self) -> Iterator[Rectangle]:
        return iter(tuple(self._rectangles))

    def __getitem__(self, index: int) -> Rectangle:
        return self._rectangles[index]
