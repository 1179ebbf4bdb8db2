from __future__ import annotations
import math
from .conversions import hue_fraction


class HueRotationState:
    """
    Running hue rotation in degrees.

    The total only ever grows; it is wrapped into a hue offset at the
    point of use (:meth:`hue_offset`), never in the stored value.
    """

    __slots__ = ("_degrees", "_interactions")

    def __init__(self) -> None:
        self._degrees = 0.0
        self._interactions = 0

    def advance(self, amount: float) -> float:
        if not math.isfinite(amount) or amount <= 0:
            raise ValueError(f"rotation increment must be a positive finite number, got {amount!r}")
        self._degrees += amount
        self._interactions += 1
        return self._degrees

    def current(self) -> float:
        return self._degrees

    def hue_offset(self) -> float:
        return hue_fraction(self._degrees)

    @property
    def interactions(self) -> int:
        return self._interactions

    def __repr__(self) -> str:
        return f"HueRotationState({self._degrees!r})"
