"""HueCanvas: hue-rotating gradient canvas with exact color sampling."""

from .colors.rgb import ColorRGB, ColorRGBA
from .colors.hsl import ColorHSL
from .colors.color_base import ColorBase
from .colors.color import as_rgb

from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    hue_fraction,
    rotate_hue,
    np_rotate_hue,
    quantize,
)

from .samples.color_schemes import COLOR_SCHEMES, ColorScheme, scheme_for_day
from .reference import ReferenceImage
from .rotation import HueRotationState
from .sampler import sample_color, rotate_region
from .scaling import scale, power_scale, make_scale, linear_scale, quadratic_scale, cubic_scale, power5_scale
from .shapes import Rectangle, ShapeLayer
from .surface import CanvasSurface
from .pointer import PointerEvent, clamp_to_surface
from .viewport import ViewportBounds, ViewportTransform, fit_transform
from .preview import hue_rotate_filter, np_preview_rotate
from .export import Exporter, ExportSink, FileSink, ClipboardSink, CopyController, CopyStatus, encode_png
from .config import CanvasParams, WatermarkParams, load_config
from .session import Session, ClickResult, handle_click
from .errors import (
    HueCanvasError,
    InvalidCoordinate,
    ReferenceImageError,
    ConfigError,
    ExportSinkError,
    ClipboardUnavailable,
)

__version__ = "1.0.0"

__all__ = [
    # colors
    "ColorBase",
    "ColorRGB",
    "ColorRGBA",
    "ColorHSL",
    "as_rgb",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "hue_fraction",
    "rotate_hue",
    "np_rotate_hue",
    "quantize",
    # reference image and sampling
    "COLOR_SCHEMES",
    "ColorScheme",
    "scheme_for_day",
    "ReferenceImage",
    "HueRotationState",
    "sample_color",
    "rotate_region",
    # randomness
    "scale",
    "power_scale",
    "make_scale",
    "linear_scale",
    "quadratic_scale",
    "cubic_scale",
    "power5_scale",
    # drawing
    "Rectangle",
    "ShapeLayer",
    "CanvasSurface",
    "PointerEvent",
    "clamp_to_surface",
    "ViewportBounds",
    "ViewportTransform",
    "fit_transform",
    "hue_rotate_filter",
    "np_preview_rotate",
    # export
    "Exporter",
    "ExportSink",
    "FileSink",
    "ClipboardSink",
    "CopyController",
    "CopyStatus",
    "encode_png",
    # session
    "CanvasParams",
    "WatermarkParams",
    "load_config",
    "Session",
    "ClickResult",
    "handle_click",
    # errors
    "HueCanvasError",
    "InvalidCoordinate",
    "ReferenceImageError",
    "ConfigError",
    "ExportSinkError",
    "ClipboardUnavailable",
    "__version__",
]
