"""
Export
======

Flattened snapshots of the visible viewport, plus the sinks that deliver
them (file download, clipboard) and the copy-button state machine.

The exporter never reads the live drawing surfaces. It re-derives the
rotated background from the reference image with the same kernel the
color sampler uses, replays the shape layer on top, then stamps the
watermark at the bottom-right corner of the output.
"""
from __future__ import annotations

import io
import logging
import time
from abc import ABC, abstractmethod
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Callable, Optional, Tuple

from PIL import Image, ImageFont

from .config import WatermarkParams
from .errors import ClipboardUnavailable, ExportSinkError
from .reference import ReferenceImage
from .sampler import rotate_region
from .shapes import ShapeLayer
from .surface import CanvasSurface
from .utils import value_or_default
from .viewport import ViewportBounds

logger = logging.getLogger(__name__)

PNG_MIME = "image/png"

PngPayload = Callable[[], bytes]


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def load_watermark_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    return ImageFont.load_default(size=size)


def stamp_watermark(surface: CanvasSurface, watermark: WatermarkParams) -> Tuple[int, int]:
    """Outlined watermark text anchored at the surface's own bottom-right corner."""
    return surface.draw_text(
        watermark.text,
        right=surface.width - watermark.x_padding,
        bottom=surface.height - watermark.y_padding,
        font=load_watermark_font(watermark.font_size),
        fill=watermark.fill,
        stroke=watermark.stroke,
        stroke_width=watermark.stroke_width,
    )


class Exporter:
    def __init__(self, reference: ReferenceImage, shapes: ShapeLayer, watermark: Optional[WatermarkParams] = None) -> None:
        self.reference = reference
        self.shapes = shapes
        self.watermark = value_or_default(watermark, WatermarkParams())

    def render_region(self, bounds: ViewportBounds, rotation_degrees: float) -> CanvasSurface:
        """Background and shapes for ``bounds`` at canvas resolution, no watermark."""
        left, top, width, height = bounds.pixel_box()
        surface = CanvasSurface.from_array(
            rotate_region(self.reference, left, top, width, height, rotation_degrees)
        )
        self.shapes.render(surface, offset=(left, top))
        return surface

    def export_visible_region(
        self,
        bounds: ViewportBounds,
        rotation_degrees: float,
        output_size: Optional[Tuple[int, int]] = None,
    ) -> Image.Image:
        """
        Flatten the visible part of the canvas into one RGBA image.

        Args:
            bounds: Visible rectangle in canvas coordinates
            rotation_degrees: Current running hue rotation
            output_size: (width, height) of the viewport in window pixels.
                Defaults to the region's own pixel size.

        Returns:
            PIL image whose size is exactly ``output_size``
        """
        region = self.render_region(bounds, rotation_degrees)
        if output_size is None or tuple(output_size) == region.size:
            output = region
        else:
            out_w, out_h = output_size
            output = CanvasSurface.allocate(out_w, out_h)
            output.draw_image(region, dest_box=(0, 0, out_w, out_h))

        stamp_watermark(output, self.watermark)
        logger.debug(
            "Exported region %s at %.3f deg -> %dx%d",
            bounds.pixel_box(), rotation_degrees, output.width, output.height,
        )
        return output.image


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class ExportSink(ABC):
    """
    Destination for a finished PNG.

    The payload is a deferred value: the sink is handed a callable and
    resolves it when it is ready to write, which lets a platform start the
    write before the image has been encoded.
    """

    @abstractmethod
    def deliver(self, payload: PngPayload, filename: str) -> None:
        """Write the PNG once. Raise :class:`ExportSinkError` on failure."""


class FileSink(ExportSink):
    def __init__(self, directory: Path | str = ".") -> None:
        self.directory = Path(directory)
        self.last_path: Optional[Path] = None

    def deliver(self, payload: PngPayload, filename: str) -> None:
        path = self.directory / filename
        try:
            path.write_bytes(payload())
        except OSError as exc:
            raise ExportSinkError(f"could not save {path}: {exc}") from exc
        self.last_path = path


class ClipboardSink(ExportSink):
    """
    Hands ``image/png`` bytes to a platform clipboard writer ``writer(mime, data)``.

    A writer reports a failed write by raising :class:`OSError` or
    :class:`RuntimeError` (``PermissionError`` means the platform refused
    access). Any other exception is a bug and propagates unchanged.
    """

    def __init__(self, writer: Optional[Callable[[str, bytes], None]] = None) -> None:
        self.writer = writer

    def deliver(self, payload: PngPayload, filename: str) -> None:
        if self.writer is None:
            raise ClipboardUnavailable("no clipboard writer available on this platform")
        try:
            self.writer(PNG_MIME, payload())
        except PermissionError as exc:
            raise ClipboardUnavailable(f"clipboard permission denied: {exc}") from exc
        except ExportSinkError:
            raise
        except (OSError, RuntimeError) as exc:
            raise ExportSinkError(f"clipboard write failed: {exc}") from exc


# ---------------------------------------------------------------------------
# Copy button state
# ---------------------------------------------------------------------------

class CopyStatus(str, Enum):
    DEFAULT = "copy"
    COPYING = "copying..."
    COPIED = "copied!"
    ERROR = "error!"


FALLBACK_MESSAGE = (
    "Copying images is not available here. Use download instead, "
    "or right-click the canvas and choose 'Copy image'."
)


class CopyController:
    """
    Copy/download front end for an :class:`Exporter`.

    A copy is dispatched at most once per press. While a copy is in flight
    or its result is on display, further presses are ignored; the status
    returns to :attr:`CopyStatus.DEFAULT` ``reset_delay`` seconds after the
    outcome, success or not.
    """

    def __init__(
        self,
        exporter: Exporter,
        clipboard: ExportSink,
        downloads: Optional[ExportSink] = None,
        filename: str = "rgb128_triangle.png",
        reset_delay: float = 3.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.exporter = exporter
        self.clipboard = clipboard
        self.downloads = value_or_default(downloads, FileSink())
        self.filename = filename
        self.reset_delay = reset_delay
        self.clock = clock
        self.status = CopyStatus.DEFAULT
        self.fallback_message: Optional[str] = None
        self._reset_at: Optional[float] = None

    @property
    def label(self) -> str:
        return self.status.value

    @property
    def disabled(self) -> bool:
        return self.status is not CopyStatus.DEFAULT

    def copy(self, bounds: ViewportBounds, rotation_degrees: float, output_size: Optional[Tuple[int, int]] = None) -> bool:
        """
        Copy the visible region to the clipboard.

        Returns:
            True on success, False on failure or when the press was ignored.
        """
        self.poll()
        if self.disabled:
            logger.debug("Copy ignored while status is %r", self.status.value)
            return False

        self.status = CopyStatus.COPYING
        self.fallback_message = None
        payload = partial(self._render_png, bounds, rotation_degrees, output_size)
        try:
            self.clipboard.deliver(payload, self.filename)
        except ClipboardUnavailable as exc:
            logger.warning("Failed to copy image: %s", exc)
            self.status = CopyStatus.ERROR
            self.fallback_message = FALLBACK_MESSAGE
        except ExportSinkError as exc:
            logger.warning("Failed to copy image: %s", exc)
            self.status = CopyStatus.ERROR
        except Exception:
            # status still resets after the delay
            self.status = CopyStatus.ERROR
            self._reset_at = self.clock() + self.reset_delay
            raise
        else:
            self.status = CopyStatus.COPIED
        self._reset_at = self.clock() + self.reset_delay
        return self.status is CopyStatus.COPIED

    def download(self, bounds: ViewportBounds, rotation_degrees: float, output_size: Optional[Tuple[int, int]] = None) -> bool:
        """Save the visible region through the download sink."""
        payload = partial(self._render_png, bounds, rotation_degrees, output_size)
        try:
            self.downloads.deliver(payload, self.filename)
        except ExportSinkError as exc:
            logger.warning("Failed to save image: %s", exc)
            return False
        return True

    def poll(self, now: Optional[float] = None) -> CopyStatus:
        """Reset the status once the display delay has elapsed."""
        if self._reset_at is not None:
            now = self.clock() if now is None else now
            if now >= self._reset_at:
                self.status = CopyStatus.DEFAULT
                self.fallback_message = None
                self._reset_at = None
        return self.status

    def _render_png(self, bounds: ViewportBounds, rotation_degrees: float, output_size: Optional[Tuple[int, int]]) -> bytes:
        return encode_png(self.exporter.export_visible_region(bounds, rotation_degrees, output_size))
