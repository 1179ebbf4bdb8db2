from __future__ import annotations
import math
from typing import Any, ClassVar, Tuple, cast
from ..types.format_type import FormatType, format_classes
from ..types.color_types import ColorElement, ColorSpace, Scalar
from ..utils import get_dimension

class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    maxima:     ClassVar[Tuple[Scalar, ...]]
    format_type: ClassVar[FormatType]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement | ColorBase) -> None:
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                raise TypeError(f"cannot build {self.mode} color from {value.mode} color")
            value = value.value

        value_dim = get_dimension(value)
        if value_dim != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {value!r}")

        # type enforcement
        cast_fn = format_classes[self.format_type]
        if self.format_type == FormatType.INT:
            coerced = tuple(int(math.floor(v + 0.5)) for v in cast(Tuple[Any, ...], value))
        else:
            coerced = tuple(cast_fn(v) for v in cast(Tuple[Any, ...], value))

        # clamp value
        clamped = tuple(cast_fn(max(0, min(v, m))) for v, m in zip(coerced, self.maxima))

        # safe assignment; __setattr__ still allows it during init
        self._value = clamped

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    def __iter__(self):
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase):
            return self.mode == other.mode and self._value == other._value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{self._value!r}"
