"""
Load session parameters from YAML.

Every key is optional; missing keys fall back to :func:`_defaults`.
"""
from __future__ import annotations

import copy
import datetime
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .colors.rgb import ColorRGB
from .errors import ConfigError
from .samples.color_schemes import COLOR_SCHEMES, ColorScheme, scheme_by_name, scheme_for_day


def _defaults() -> dict[str, Any]:
    return {
        "canvas": {"width": 2000, "height": 2000},
        "color_scheme": "auto",
        "border": {"color": "white", "width": 10},
        "size": {"min_width": 100, "max_width": 2000, "min_height": 100, "max_height": 2000},
        "hue_rotate": {"min": 5, "max": 15},
        "scale_exponent": 3,
        "watermark": {
            "text": "#808080",
            "font_size": 16,
            "fill": "black",
            "stroke": "white",
            "stroke_width": 2,
            "x_padding": 10,
            "y_padding": 10,
        },
        "export": {"filename": "rgb128_triangle.png", "reset_delay": 3.0},
    }


@dataclass(frozen=True)
class WatermarkParams:
    text: str = "#808080"
    font_size: int = 16
    fill: ColorRGB = field(default_factory=lambda: ColorRGB((0, 0, 0)))
    stroke: ColorRGB = field(default_factory=lambda: ColorRGB((255, 255, 255)))
    stroke_width: int = 2
    x_padding: int = 10
    y_padding: int = 10


@dataclass(frozen=True)
class CanvasParams:
    width: int = 2000
    height: int = 2000
    color_scheme: Union[str, int] = "auto"
    border_color: ColorRGB = field(default_factory=lambda: ColorRGB((255, 255, 255)))
    border_width: float = 10
    min_width: float = 100
    max_width: float = 2000
    min_height: float = 100
    max_height: float = 2000
    min_hue_rotate: float = 5
    max_hue_rotate: float = 15
    scale_exponent: float = 3
    watermark: WatermarkParams = field(default_factory=WatermarkParams)
    filename: str = "rgb128_triangle.png"
    reset_delay: float = 3.0

    def __post_init__(self) -> None:
        for low, high in (
            ("min_width", "max_width"),
            ("min_height", "max_height"),
            ("min_hue_rotate", "max_hue_rotate"),
        ):
            lo, hi = getattr(self, low), getattr(self, high)
            if lo > hi:
                raise ConfigError(f"{low} ({lo}) must not exceed {high} ({hi})")
        if self.min_width < 0 or self.min_height < 0:
            raise ConfigError("rectangle sizes must be non-negative")
        if self.min_hue_rotate <= 0:
            raise ConfigError(f"min_hue_rotate must be positive, got {self.min_hue_rotate}")
        if self.scale_exponent <= 0:
            raise ConfigError(f"scale_exponent must be positive, got {self.scale_exponent}")
        if self.border_width < 0:
            raise ConfigError(f"border_width must be non-negative, got {self.border_width}")
        if self.reset_delay < 0:
            raise ConfigError(f"reset_delay must be non-negative, got {self.reset_delay}")

    def resolve_scheme(self, today: Optional[datetime.date] = None) -> ColorScheme:
        """``'auto'`` picks the scheme of the day; an int indexes the table; a string names a scheme."""
        choice = self.color_scheme
        if isinstance(choice, bool):
            raise ConfigError(f"color_scheme must be 'auto', an index or a name, got {choice!r}")
        if isinstance(choice, int):
            if not 0 <= choice < len(COLOR_SCHEMES):
                raise ConfigError(f"color_scheme index {choice} out of range 0..{len(COLOR_SCHEMES) - 1}")
            return COLOR_SCHEMES[choice]
        if choice == "auto":
            return scheme_for_day(today)
        try:
            return scheme_by_name(choice)
        except KeyError as exc:
            raise ConfigError(str(exc)) from exc


def _merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def _color(value: Any, key: str) -> ColorRGB:
    try:
        if isinstance(value, str):
            return ColorRGB.parse(value)
        return ColorRGB(tuple(value))
    except (ValueError, TypeError) as exc:
        raise ConfigError(f"invalid color for {key}: {value!r}") from exc


def params_from_mapping(data: Mapping[str, Any]) -> CanvasParams:
    """Build :class:`CanvasParams` from a (possibly partial) config mapping."""
    cfg = _merge(_defaults(), data)
    try:
        wm = cfg["watermark"]
        watermark = WatermarkParams(
            text=str(wm["text"]),
            font_size=int(wm["font_size"]),
            fill=_color(wm["fill"], "watermark.fill"),
            stroke=_color(wm["stroke"], "watermark.stroke"),
            stroke_width=int(wm["stroke_width"]),
            x_padding=int(wm["x_padding"]),
            y_padding=int(wm["y_padding"]),
        )
        return CanvasParams(
            width=int(cfg["canvas"]["width"]),
            height=int(cfg["canvas"]["height"]),
            color_scheme=cfg["color_scheme"],
            border_color=_color(cfg["border"]["color"], "border.color"),
            border_width=float(cfg["border"]["width"]),
            min_width=float(cfg["size"]["min_width"]),
            max_width=float(cfg["size"]["max_width"]),
            min_height=float(cfg["size"]["min_height"]),
            max_height=float(cfg["size"]["max_height"]),
            min_hue_rotate=float(cfg["hue_rotate"]["min"]),
            max_hue_rotate=float(cfg["hue_rotate"]["max"]),
            scale_exponent=float(cfg["scale_exponent"]),
            watermark=watermark,
            filename=str(cfg["export"]["filename"]),
            reset_delay=float(cfg["export"]["reset_delay"]),
        )
    except ConfigError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigError(f"malformed configuration: {exc}") from exc


def load_config(config_path: Path | str | None = None) -> CanvasParams:
    """Load params from YAML. With no path (or a missing file) the defaults are used."""
    if config_path is None:
        return params_from_mapping({})
    path = Path(config_path)
    if not path.exists():
        return params_from_mapping({})
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    return params_from_mapping(data)
