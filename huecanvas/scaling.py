"""
Power-law random scaling.

A uniform draw in [0, 1) is raised to an exponent and mapped into
``[min, max]``. Larger exponents make values near ``min`` common and
values near ``max`` rare.
"""
from __future__ import annotations
from functools import partial
from typing import Callable, Optional

import numpy as np

ScaleFunction = Callable[..., float]

_default_rng = np.random.default_rng()


def power_scale(
    min_value: float,
    max_value: float,
    exponent: float = 3,
    rng: Optional[np.random.Generator] = None,
) -> float:
    if max_value < min_value:
        raise ValueError(f"max_value ({max_value}) must be >= min_value ({min_value})")
    if exponent <= 0:
        raise ValueError(f"exponent must be > 0, got {exponent}")
    rng = rng if rng is not None else _default_rng
    factor = rng.random() ** exponent
    return min_value + factor * (max_value - min_value)


def make_scale(exponent: float) -> ScaleFunction:
    """Return a ``scale(min, max, rng=None)`` function with a fixed exponent."""
    return partial(power_scale, exponent=exponent)


linear_scale = make_scale(1)
quadratic_scale = make_scale(2)
cubic_scale = make_scale(3)
power5_scale = make_scale(5)

scale = cubic_scale
