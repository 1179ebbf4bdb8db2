"""
Display-only hue rotation.

Browsers and compositors apply ``hue-rotate`` with a luminance-preserving
3x3 matrix. It is fast but does not match the exact HSL rotation: use it
to show the background, never to decide the color of a shape or an
exported pixel (see :mod:`huecanvas.sampler`).
"""
import numpy as np
from numpy import ndarray as NDArray


def hue_rotate_filter(degrees: float) -> str:
    """CSS filter value for the background preview, e.g. ``'hue-rotate(12.5deg)'``."""
    return f"hue-rotate({degrees:g}deg)"


def hue_rotate_matrix(degrees: float) -> NDArray:
    """The ``feColorMatrix type="hueRotate"`` matrix for ``degrees``."""
    theta = np.radians(degrees)
    c, s = np.cos(theta), np.sin(theta)
    return np.array([
        [0.213 + c * 0.787 - s * 0.213, 0.715 - c * 0.715 - s * 0.715, 0.072 - c * 0.072 + s * 0.928],
        [0.213 - c * 0.213 + s * 0.143, 0.715 + c * 0.285 + s * 0.140, 0.072 - c * 0.072 - s * 0.283],
        [0.213 - c * 0.213 - s * 0.787, 0.715 - c * 0.715 + s * 0.715, 0.072 + c * 0.928 + s * 0.072],
    ])


def np_preview_rotate(pixels: NDArray, degrees: float) -> NDArray:
    """
    Apply the preview matrix to an (..., 3) or (..., 4) uint8 array.
    Alpha, if present, is copied through.
    """
    pixels = np.asarray(pixels)
    rgb = pixels[..., :3].astype(float) @ hue_rotate_matrix(degrees).T
    out = pixels.astype(np.uint8, copy=True)
    out[..., :3] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
    return out
