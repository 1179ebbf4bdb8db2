import numpy as np
import pytest
from huecanvas.reference import ReferenceImage
from huecanvas.sampler import sample_color, rotate_region
from huecanvas.errors import InvalidCoordinate
from huecanvas.conversions import rgb_to_hsl
from huecanvas.samples.color_schemes import COLOR_SCHEMES, PRIMARY_CORNERS


@pytest.fixture(scope="module")
def reference():
    return ReferenceImage.generate(24, 16, COLOR_SCHEMES[1])


@pytest.fixture(scope="module")
def primaries():
    return ReferenceImage.generate(200, 200, PRIMARY_CORNERS)


def test_zero_rotation_returns_raw_pixels(reference):
    for y in range(reference.height):
        for x in range(reference.width):
            assert sample_color(reference, x, y, 0) == reference.rgb_at(x, y)


@pytest.mark.parametrize("rotation", [37.5, 90.25, 200.0, 200.7, 90.1, 12.345678])
@pytest.mark.parametrize("turns", [1, 2, 5, 1000, 100000])
def test_rotation_is_periodic(reference, rotation, turns):
    for x, y in [(0, 0), (11, 7), (23, 15)]:
        assert sample_color(reference, x, y, rotation) == sample_color(reference, x, y, rotation + 360 * turns)
    width, height = reference.size
    np.testing.assert_array_equal(
        rotate_region(reference, 0, 0, width, height, rotation),
        rotate_region(reference, 0, 0, width, height, rotation + 360 * turns),
    )


def test_full_turn_is_identity(reference):
    assert sample_color(reference, 5, 5, 360) == reference.rgb_at(5, 5)


def test_top_left_of_primaries_is_red_hue(primaries):
    color = sample_color(primaries, 0, 0, 0)
    r, g, b = color.value
    assert r == 255 and g == b
    h, s, _ = rgb_to_hsl(*color)
    assert h == 0.0
    assert s > 0.99


def test_half_turn_gives_cyan_hue(primaries):
    r, g, b = sample_color(primaries, 0, 0, 180).value
    assert g == b == 255
    assert r < 100


def test_rotation_keeps_saturation_and_lightness(reference):
    base = rgb_to_hsl(*reference.rgb_at(10, 10))
    rotated = rgb_to_hsl(*sample_color(reference, 10, 10, 123.0))
    assert rotated[1] == pytest.approx(base[1], abs=0.02)
    assert rotated[2] == pytest.approx(base[2], abs=0.02)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -3), (24, 0), (0, 16), (1000, 1000)])
def test_out_of_bounds_is_rejected(reference, x, y):
    with pytest.raises(InvalidCoordinate):
        sample_color(reference, x, y, 10)


def test_invalid_coordinate_is_an_index_error(reference):
    with pytest.raises(IndexError):
        sample_color(reference, -1, -1, 10)


def test_region_matches_point_samples(reference):
    rotation = 47.0
    region = rotate_region(reference, 2, 3, 10, 6, rotation)
    assert region.shape == (6, 10, 4)
    for row in range(6):
        for col in range(10):
            expected = sample_color(reference, 2 + col, 3 + row, rotation)
            assert tuple(int(v) for v in region[row, col, :3]) == expected.value


def test_region_outside_canvas_is_transparent(reference):
    region = rotate_region(reference, -4, -2, 8, 6, 90)
    assert np.all(region[:2] == 0)
    assert np.all(region[:, :4] == 0)
    np.testing.assert_array_equal(region[2:, 4:, 3], reference.pixels[:4, :4, 3])


def test_region_fully_outside_is_empty(reference):
    region = rotate_region(reference, 100, 100, 3, 2, 90)
    assert region.shape == (2, 3, 4)
    assert not region.any()
