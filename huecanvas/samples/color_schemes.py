"""Fixed palette table, one scheme per day of the week (0 = Sunday)."""
from __future__ import annotations
import datetime
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple
from ..colors.rgb import ColorRGB


@dataclass(frozen=True)
class ColorScheme:
    name: str
    top_left: ColorRGB
    top_right: ColorRGB
    bottom_right: ColorRGB
    bottom_left: ColorRGB

    @classmethod
    def from_hex(cls, name: str, top_left: str, top_right: str, bottom_right: str, bottom_left: str) -> ColorScheme:
        return cls(
            name,
            ColorRGB.parse(top_left),
            ColorRGB.parse(top_right),
            ColorRGB.parse(bottom_right),
            ColorRGB.parse(bottom_left),
        )

    def corners(self) -> Tuple[ColorRGB, ColorRGB, ColorRGB, ColorRGB]:
        """Corner colors clockwise from the top-left."""
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    def __iter__(self) -> Iterator[ColorRGB]:
        return iter(self.corners())


COLOR_SCHEMES: Tuple[ColorScheme, ...] = (
    ColorScheme.from_hex("Mint & Coral", "#a8e6cf", "#ffb3ba", "#f9f871", "#bde0fe"),
    ColorScheme.from_hex("Twilight Lavender", "#845ec2", "#ffc7c7", "#00c9a7", "#f3d29c"),
    ColorScheme.from_hex("Deep Sea Jewels", "#008080", "#d43790", "#ffc947", "#4b0082"),
    ColorScheme.from_hex("Earthy Forest", "#2c5d3d", "#ffb833", "#a52a2a", "#87ceeb"),
    ColorScheme.from_hex("Vibrant Citrus", "#ff8b2d", "#ffef96", "#c1fba4", "#4a8cff"),
    ColorScheme.from_hex("Cotton Candy Sky", "#ff7b9c", "#a2d2ff", "#fff3b0", "#c7bfff"),
    ColorScheme.from_hex("Sunset Peach", "#ff6f61", "#ffdab9", "#c56cf0", "#ffda79"),
)

PRIMARY_CORNERS = ColorScheme.from_hex("Primaries", "#ff0000", "#0000ff", "#ffff00", "#00ff00")


def day_index(day: Optional[datetime.date] = None) -> int:
    """Day of week with Sunday as 0, like JavaScript's ``Date.getDay``."""
    day = day or datetime.date.today()
    return (day.weekday() + 1) % 7


def scheme_for_day(day: Optional[datetime.date] = None) -> ColorScheme:
    return COLOR_SCHEMES[day_index(day)]


def scheme_by_name(name: str) -> ColorScheme:
    for scheme in COLOR_SCHEMES + (PRIMARY_CORNERS,):
        if scheme.name.lower() == name.lower():
            return scheme
    raise KeyError(f"Unknown color scheme: {name!r}")
