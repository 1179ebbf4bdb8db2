import numpy as np
from numpy import ndarray as NDArray

## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert an 8-bit RGB color to HSL.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue, saturation, lightness), all in [0, 1]
    """
    r, g, b = r / 255, g / 255, b / 255
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        return 0.0, 0.0, lightness  # achromatic

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return hue / 6, saturation, lightness

def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB to HSL.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 255]

    Returns:
        hsl: float array of shape (..., 3), all channels in [0, 1]
    """
    rgb = np.asarray(rgb, dtype=float) / 255
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2

    chromatic = delta > 0
    hue = np.zeros_like(lightness)
    saturation = np.zeros_like(lightness)

    # Branch on lightness exactly as the scalar version does
    bright = chromatic & (lightness > 0.5)
    dark = chromatic & ~(lightness > 0.5)
    saturation[bright] = delta[bright] / (2 - max_c[bright] - min_c[bright])
    saturation[dark] = delta[dark] / (max_c[dark] + min_c[dark])

    # Same precedence as the if/elif chain: red, then green, then blue
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r] + np.where(g[mask_r] < b[mask_r], 6, 0)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    hue = hue / 6

    return np.stack([hue, saturation, lightness], axis=-1)

## HSL to RGB conversions

def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p

def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in [0, 1]
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) as unrounded floats in [0, 255]
    """
    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)
    return r * 255, g * 255, b * 255

def _np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )

def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        hsl: array of shape (..., 3), all channels in [0, 1]

    Returns:
        rgb: float array of shape (..., 3) in [0, 255], unrounded
    """
    hsl = np.asarray(hsl, dtype=float)
    h, s, l = hsl[..., 0], hsl[..., 1], hsl[..., 2]

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    r = _np_hue_to_channel(p, q, h + 1 / 3)
    g = _np_hue_to_channel(p, q, h)
    b = _np_hue_to_channel(p, q, h - 1 / 3)

    achromatic = s == 0
    r = np.where(achromatic, l, r)
    g = np.where(achromatic, l, g)
    b = np.where(achromatic, l, b)

    return np.stack([r, g, b], axis=-1) * 255

def quantize(values):
    """Round half up and clip to [0, 255]. Works on scalars and arrays."""
    rounded = np.clip(np.floor(np.asarray(values, dtype=float) + 0.5), 0, 255)
    if rounded.ndim == 0:
        return int(rounded)
    return rounded.astype(np.uint8)
