"""
Canvas Surface
==============

Pillow-backed RGBA drawing surface exposing the small set of 2D primitives
the core needs: allocate, fill/stroke rectangles, draw an image region with
optional scaling, read and write pixel blocks, and outlined text.

Coordinates are canvas pixels and may be fractional; rectangle edges snap
to the nearest pixel boundary. Everything outside the surface is clipped.
"""
from __future__ import annotations

import math
from typing import Optional, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image, ImageDraw, ImageFont

from .colors.rgb import ColorRGB, ColorRGBA
from .types.color_types import PixelBox

ColorLike = Union[ColorRGB, ColorRGBA, Tuple[int, ...]]


def _snap(v: float) -> int:
    return int(math.floor(v + 0.5))


def _fill(color: ColorLike) -> Tuple[int, ...]:
    if isinstance(color, ColorRGB):
        return color.with_alpha().value
    value = tuple(color)
    return value if len(value) == 4 else value + (255,)


class CanvasSurface:
    __slots__ = ("_image", "_draw")

    def __init__(self, image: Image.Image) -> None:
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self._image = image
        self._draw = ImageDraw.Draw(self._image)

    @classmethod
    def allocate(cls, width: int, height: int) -> CanvasSurface:
        """A fully transparent surface of ``width`` x ``height``."""
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        return cls(Image.new("RGBA", (width, height), (0, 0, 0, 0)))

    @classmethod
    def from_array(cls, pixels: NDArray) -> CanvasSurface:
        return cls(Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8), mode="RGBA"))

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def image(self) -> Image.Image:
        return self._image

    def clear(self) -> None:
        self._draw.rectangle((0, 0, self.width, self.height), fill=(0, 0, 0, 0))

    # ------------------ RECTANGLES ------------------
    def fill_rect(self, x: float, y: float, width: float, height: float, color: ColorLike) -> None:
        x0, y0 = _snap(x), _snap(y)
        x1, y1 = _snap(x + width), _snap(y + height)
        if x1 <= x0 or y1 <= y0:
            return
        self._draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=_fill(color))

    def stroke_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: ColorLike,
        line_width: float,
    ) -> None:
        """Stroke the rectangle outline centered on its edges, like canvas ``strokeRect``."""
        if line_width <= 0:
            return
        half = line_width / 2
        x0, y0 = _snap(x - half), _snap(y - half)
        x1, y1 = _snap(x + width + half), _snap(y + height + half)
        if x1 <= x0 or y1 <= y0:
            return
        self._draw.rectangle(
            (x0, y0, x1 - 1, y1 - 1),
            outline=_fill(color),
            width=max(_snap(line_width), 1),
        )

    # ------------------ IMAGES & PIXEL BLOCKS ------------------
    def draw_image(
        self,
        source: Union[Image.Image, CanvasSurface],
        src_box: Optional[PixelBox] = None,
        dest_box: Optional[PixelBox] = None,
    ) -> None:
        """
        Composite ``source`` (or its ``src_box`` region) onto this surface.

        Boxes are ``(left, top, width, height)``. When the destination size
        differs from the source region the region is resampled.
        """
        if isinstance(source, CanvasSurface):
            source = source.image
        if source.mode != "RGBA":
            source = source.convert("RGBA")
        if src_box is not None:
            sl, st, sw, sh = src_box
            source = source.crop((sl, st, sl + sw, st + sh))
        if dest_box is None:
            dest_box = (0, 0) + source.size
        dl, dt, dw, dh = dest_box
        if (dw, dh) != source.size:
            source = source.resize((dw, dh), Image.Resampling.BILINEAR)
        self._image.alpha_composite(source, dest=(dl, dt))

    def read_block(self, left: int, top: int, width: int, height: int) -> NDArray:
        """RGBA uint8 copy of the box; pixels outside the surface read as transparent."""
        return np.asarray(self._image.crop((left, top, left + width, top + height)), dtype=np.uint8).copy()

    def write_block(self, left: int, top: int, pixels: NDArray) -> None:
        """Replace the pixels of the box at ``(left, top)`` verbatim (no blending)."""
        block = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8), mode="RGBA")
        self._image.paste(block, (left, top))

    # ------------------ TEXT ------------------
    def draw_text(
        self,
        text: str,
        right: float,
        bottom: float,
        font: ImageFont.ImageFont | ImageFont.FreeTypeFont,
        fill: ColorLike,
        stroke: Optional[ColorLike] = None,
        stroke_width: int = 0,
    ) -> Tuple[int, int]:
        """
        Draw ``text`` right/bottom-aligned at ``(right, bottom)``.

        The outline is painted first and the fill on top of it, so the
        stroke reads as a border around the glyphs.

        Returns:
            The top-left anchor the text was drawn at.
        """
        width = stroke_width if stroke is not None else 0
        _, _, bx1, by1 = self._draw.textbbox((0, 0), text, font=font, stroke_width=width)
        origin = (_snap(right - bx1), _snap(bottom - by1))
        if stroke is not None and stroke_width > 0:
            self._draw.text(origin, text, font=font, fill=_fill(stroke),
                            stroke_width=stroke_width, stroke_fill=_fill(stroke))
        self._draw.text(origin, text, font=font, fill=_fill(fill))
        return origin

    def to_array(self) -> NDArray:
        return np.asarray(self._image, dtype=np.uint8).copy()
