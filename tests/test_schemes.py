import datetime
import pytest
from huecanvas.colors import ColorRGB
from huecanvas.samples.color_schemes import COLOR_SCHEMES, day_index, scheme_for_day, scheme_by_name


def test_one_scheme_per_weekday():
    assert len(COLOR_SCHEMES) == 7
    assert len({scheme.name for scheme in COLOR_SCHEMES}) == 7


def test_sunday_is_zero():
    monday = datetime.date(2026, 10, 19)
    assert day_index(monday) == 1
    assert day_index(monday - datetime.timedelta(days=1)) == 0
    assert day_index(monday + datetime.timedelta(days=5)) == 6


def test_scheme_for_day():
    assert scheme_for_day(datetime.date(2026, 10, 21)) is COLOR_SCHEMES[3]


def test_corners_run_clockwise():
    scheme = COLOR_SCHEMES[0]
    assert scheme.corners() == (
        ColorRGB.parse("#a8e6cf"),
        ColorRGB.parse("#ffb3ba"),
        ColorRGB.parse("#f9f871"),
        ColorRGB.parse("#bde0fe"),
    )
    assert list(scheme) == list(scheme.corners())


def test_unknown_scheme_name():
    with pytest.raises(KeyError):
        scheme_by_name("Plaid")
