from __future__ import annotations
from dataclasses import dataclass

from boundednumbers.functions import clamp


@dataclass(frozen=True)
class PointerEvent:
    """A click or tap in drawing-surface coordinates."""
    x: float
    y: float


def clamp_to_surface(event: PointerEvent, width: int, height: int) -> PointerEvent:
    """
    Pull an event back inside a ``width`` x ``height`` surface.

    This belongs to the event source: the sampler itself rejects
    out-of-bounds coordinates instead of clamping them.
    """
    return PointerEvent(clamp(event.x, 0, width - 1), clamp(event.y, 0, height - 1))
