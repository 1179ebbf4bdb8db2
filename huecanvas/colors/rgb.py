from __future__ import annotations
from typing import ClassVar, Tuple
from PIL import ImageColor
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class ColorRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "rgb"
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT

    @classmethod
    def parse(cls, spec: str) -> ColorRGB:
        """Build a color from a hex string or CSS color name (``'#a8e6cf'``, ``'white'``)."""
        return cls(ImageColor.getrgb(spec)[:3])

    @property
    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.value)

    @property
    def css(self) -> str:
        return "rgb({}, {}, {})".format(*self.value)

    def with_alpha(self, alpha: int = 255) -> ColorRGBA:
        return ColorRGBA(self.value + (alpha,))


class ColorRGBA(ColorBase):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[ColorSpace] = "rgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT

    @property
    def alpha(self) -> int:
        return self.value[-1]

    def without_alpha(self) -> ColorRGB:
        return ColorRGB(self.value[:3])


RGB = ColorRGB
RGBA = ColorRGBA
