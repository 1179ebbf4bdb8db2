"""Exception hierarchy for huecanvas."""


class HueCanvasError(Exception):
    """Base class for all huecanvas errors."""


class InvalidCoordinate(HueCanvasError, IndexError):
    """A pixel coordinate outside the reference image was requested."""

    def __init__(self, x, y, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"coordinate ({x}, {y}) outside {width}x{height} image")


class ReferenceImageError(HueCanvasError, ValueError):
    """The reference image could not be generated; the session cannot start."""


class ConfigError(HueCanvasError, ValueError):
    """Invalid configuration value."""


class ExportSinkError(HueCanvasError):
    """An export sink failed to deliver an image."""


class ClipboardUnavailable(ExportSinkError):
    """No clipboard writer is available, or permission was denied."""
