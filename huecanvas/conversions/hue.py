import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import HUE_360

from .hsl import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb, quantize

HUE_DECIMALS = 6

def hue_fraction(degrees: float) -> float:
    """
    Map an unbounded rotation in degrees to a hue offset in [0, 1).

    The wrapped angle is snapped to micro-degrees, so ``degrees`` and
    ``degrees + 360 * k`` give the same offset even when the modulo leaves
    float noise behind.
    """
    wrapped = round(degrees % HUE_360, HUE_DECIMALS) % HUE_360
    return wrapped / HUE_360

def shift_hue(h: float, degrees: float) -> float:
    """Rotate a hue fraction by ``degrees``, wrapping into [0, 1)."""
    shifted = (h + hue_fraction(degrees)) % 1.0
    # float modulo can land exactly on 1.0 for tiny negative inputs
    return shifted - 1.0 if shifted >= 1.0 else shifted

def np_shift_hue(h: NDArray, degrees: float) -> NDArray:
    """Vectorized :func:`shift_hue`."""
    shifted = np.mod(h + hue_fraction(degrees), 1.0)
    return np.where(shifted >= 1.0, shifted - 1.0, shifted)

def rotate_hue(r: float, g: float, b: float, degrees: float) -> tuple[int, int, int]:
    """
    Rotate an 8-bit RGB color around the HSL hue circle.

    Saturation and lightness pass through unchanged; the result is
    quantized back to 8-bit channels.
    """
    h, s, l = rgb_to_hsl(r, g, b)
    nr, ng, nb = hsl_to_rgb(shift_hue(h, degrees), s, l)
    return quantize(nr), quantize(ng), quantize(nb)

def np_rotate_hue(rgb: NDArray, degrees: float) -> NDArray:
    """
    Vectorized :func:`rotate_hue` over an array of shape (..., 3).

    Returns:
        uint8 array with the same shape as ``rgb``
    """
    hsl = np_rgb_to_hsl(rgb)
    hsl[..., 0] = np_shift_hue(hsl[..., 0], degrees)
    return quantize(np_hsl_to_rgb(hsl))
