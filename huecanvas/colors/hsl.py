from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase

class ColorHSL(ColorBase):
    """HSL color with hue, saturation and lightness all as fractions in [0, 1]."""
    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = "hsl"
    maxima:     ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    @property
    def hue(self) -> float:
        return self.value[0]

    @property
    def saturation(self) -> float:
        return self.value[1]

    @property
    def lightness(self) -> float:
        return self.value[2]

HSL = ColorHSL
