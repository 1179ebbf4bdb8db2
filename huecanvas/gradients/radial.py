from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from typing import List, Optional, Tuple, Union

from ..colors.rgb import ColorRGB
from ..colors.color import as_rgb
from ..conversions import quantize


def radial_gradient(
    color: Union[ColorRGB, Tuple, str],
    height: int,
    width: int,
    center: Union[Tuple[float, float], List[float]] = (0, 0),
    radius: float = 1.0,
    base: Optional[NDArray] = None,
) -> NDArray:
    """
    Create a radial gradient fading from a full color at the center to
    fully transparent at ``radius``.

    Args:
        color: Center color (ColorRGB instance, tuple, hex string or CSS name)
        height: Height of the output array
        width: Width of the output array
        center: (x, y) center position of the gradient
        radius: Radius of the gradient in pixels
        base: Optional premultiplied RGBA float array to add the gradient onto

    Returns:
        Premultiplied RGBA float array with shape (height, width, 4) and
        values in [0, 1]

    Notes:
        Interpolation happens in premultiplied space, so the fade to
        transparent never darkens toward black. Pixels beyond ``radius``
        take the last stop (transparent). If ``base`` is provided the
        gradient is combined additively (``lighter`` compositing) and the
        sum is clamped to 1.
    """
    if radius <= 0:
        raise ValueError(f"radius must be > 0, got {radius}")

    c = np.array(as_rgb(color).value, dtype=float) / 255

    y, x = np.indices((height, width), dtype=float)
    cx, cy = center
    distance = np.hypot(x - cx, y - cy)

    unit_array = np.clip(distance / radius, 0.0, 1.0)
    weight = 1.0 - unit_array

    gradient = np.empty((height, width, 4), dtype=float)
    gradient[..., :3] = weight[..., None] * c
    gradient[..., 3] = weight

    if base is not None:
        if base.shape != gradient.shape:
            raise ValueError(f"`base` shape {base.shape} does not match gradient shape {gradient.shape}")
        return np.minimum(base + gradient, 1.0)
    return gradient


def unpremultiply(premultiplied: NDArray) -> NDArray:
    """
    Convert a premultiplied RGBA float image to straight 8-bit RGBA, the
    way a canvas hands pixels back from ``getImageData``.
    """
    alpha = premultiplied[..., 3]
    rgb = np.zeros(premultiplied.shape[:-1] + (3,), dtype=float)
    visible = alpha > 0
    rgb[visible] = premultiplied[..., :3][visible] / alpha[visible][:, None]

    out = np.empty(premultiplied.shape, dtype=np.uint8)
    out[..., :3] = quantize(rgb * 255)
    out[..., 3] = quantize(alpha * 255)
    return out
