"""
Session
=======

One interactive drawing session: the reference image, the running hue
rotation, the shape layer and the persistent drawing surface, owned by a
single object instead of module globals.

A click outside the reference image is rejected with
:class:`~huecanvas.errors.InvalidCoordinate` before anything changes.
Otherwise it is handled in a fixed order:

1. advance the hue rotation by a random amount,
2. sample the exact rotated color under the pointer,
3. pick a random width and height,
4. append the rectangle to the shape layer,
5. paint it on the drawing surface.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from .colors.rgb import ColorRGB
from .config import CanvasParams
from .export import ClipboardSink, CopyController, Exporter, ExportSink
from .preview import hue_rotate_filter, np_preview_rotate
from .pointer import PointerEvent
from .reference import ReferenceImage
from .rotation import HueRotationState
from .sampler import sample_color
from .samples.color_schemes import ColorScheme
from .scaling import make_scale
from .shapes import Rectangle, ShapeLayer
from .surface import CanvasSurface
from .utils import value_or_default
from .viewport import ViewportBounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClickResult:
    rotation: float
    color: ColorRGB
    rectangle: Rectangle


class Session:
    def __init__(
        self,
        params: Optional[CanvasParams] = None,
        scheme: Optional[ColorScheme] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.params = value_or_default(params, CanvasParams())
        self.scheme = scheme if scheme is not None else self.params.resolve_scheme()
        self.rng = value_or_default(rng, np.random.default_rng())
        self.scale = make_scale(self.params.scale_exponent)

        # Fails fast with ReferenceImageError; nothing else is set up without it.
        self.reference = ReferenceImage.generate(self.params.width, self.params.height, self.scheme)
        self.rotation = HueRotationState()
        self.shapes = ShapeLayer()
        self.drawing = CanvasSurface.allocate(self.params.width, self.params.height)
        self.exporter = Exporter(self.reference, self.shapes, self.params.watermark)
        logger.info(
            "Session started: %dx%d canvas, scheme %r",
            self.params.width, self.params.height, self.scheme.name,
        )

    @property
    def size(self) -> Tuple[int, int]:
        return self.reference.size

    def click(self, event: PointerEvent) -> ClickResult:
        p = self.params
        # reject off-canvas clicks before any state changes
        self.reference.pixel_index(event.x, event.y)

        rotation = self.rotation.advance(self.scale(p.min_hue_rotate, p.max_hue_rotate, rng=self.rng))
        color = sample_color(self.reference, event.x, event.y, rotation)

        width = self.scale(p.min_width, p.max_width, rng=self.rng)
        height = self.scale(p.min_height, p.max_height, rng=self.rng)
        rect = self.shapes.add_rectangle(event.x, event.y, width, height, color, p.border_color, p.border_width)
        self.shapes.render_last(self.drawing)

        logger.debug("Click at (%s, %s): rotation %.3f, color %s", event.x, event.y, rotation, color.hex)
        return ClickResult(rotation, color, rect)

    def clear(self) -> None:
        """Wipe the drawing surface and the shape layer. The rotation keeps running."""
        self.shapes.clear()
        self.drawing.clear()

    def preview_filter(self) -> str:
        return hue_rotate_filter(self.rotation.current())

    def preview_background(self) -> Image.Image:
        """Background as a display filter would show it. Display only."""
        pixels = np_preview_rotate(self.reference.pixels, self.rotation.current())
        return Image.fromarray(pixels, mode="RGBA")

    def export(self, bounds: Optional[ViewportBounds] = None, output_size: Optional[Tuple[int, int]] = None) -> Image.Image:
        """Snapshot ``bounds`` (the whole canvas by default) at the current rotation."""
        if bounds is None:
            bounds = ViewportBounds(0, 0, self.params.width, self.params.height)
        return self.exporter.export_visible_region(bounds, self.rotation.current(), output_size)

    def copy_controller(
        self,
        clipboard: Optional[ExportSink] = None,
        downloads: Optional[ExportSink] = None,
    ) -> CopyController:
        """Copy/download buttons for this session, using the configured filename and reset delay."""
        return CopyController(
            self.exporter,
            clipboard if clipboard is not None else ClipboardSink(),
            downloads,
            filename=self.params.filename,
            reset_delay=self.params.reset_delay,
        )


def handle_click(session: Session, event: PointerEvent) -> ClickResult:
    """Command handler for a pointer click."""
    return session.click(event)
