from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = int | float
IntVector = Tuple[int, ...]
ColorElement = Union[IntVector, Tuple[float, ...]]
ColorSpace = Literal["rgb", "rgba", "hsl"]
PixelBox = Tuple[int, int, int, int]
