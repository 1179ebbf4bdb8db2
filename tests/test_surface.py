import numpy as np
import pytest
from PIL import Image, ImageFont
from huecanvas.colors import ColorRGB, ColorRGBA
from huecanvas.surface import CanvasSurface


def test_allocate_is_transparent():
    surface = CanvasSurface.allocate(8, 6)
    assert surface.size == (8, 6)
    assert not surface.to_array().any()


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 3)])
def test_allocate_rejects_empty(size):
    with pytest.raises(ValueError):
        CanvasSurface.allocate(*size)


def test_non_rgba_images_are_converted():
    surface = CanvasSurface(Image.new("RGB", (3, 3), (10, 20, 30)))
    assert surface.image.mode == "RGBA"
    assert surface.image.getpixel((1, 1)) == (10, 20, 30, 255)


def test_fill_rect_snaps_and_clips():
    surface = CanvasSurface.allocate(10, 10)
    surface.fill_rect(-3, 2.4, 5.2, 3, ColorRGB((1, 2, 3)))
    pixels = surface.to_array()
    assert pixels[2:5, 0:2, 3].all()
    assert not pixels[2:5, 2:, 3].any()
    assert not pixels[5:, :, 3].any()


def test_fill_rect_accepts_rgba_tuples():
    surface = CanvasSurface.allocate(4, 4)
    surface.fill_rect(0, 0, 4, 4, ColorRGBA((9, 9, 9, 128)))
    assert surface.image.getpixel((0, 0)) == (9, 9, 9, 128)


def test_zero_sized_rect_draws_nothing():
    surface = CanvasSurface.allocate(4, 4)
    surface.fill_rect(1, 1, 0, 3, (255, 0, 0))
    surface.stroke_rect(1, 1, 2, 2, (255, 0, 0), 0)
    assert not surface.to_array().any()


def test_write_then_read_block():
    surface = CanvasSurface.allocate(6, 6)
    block = np.arange(2 * 3 * 4, dtype=np.uint8).reshape(2, 3, 4)
    surface.write_block(1, 2, block)
    np.testing.assert_array_equal(surface.read_block(1, 2, 3, 2), block)


def test_read_block_outside_is_transparent():
    surface = CanvasSurface.from_array(np.full((4, 4, 4), 200, dtype=np.uint8))
    block = surface.read_block(2, 2, 4, 4)
    assert block.shape == (4, 4, 4)
    assert (block[:2, :2] == 200).all()
    assert not block[2:].any()


def test_draw_image_scales_to_destination():
    source = CanvasSurface.from_array(np.tile(np.array([255, 0, 0, 255], dtype=np.uint8), (2, 2, 1)))
    target = CanvasSurface.allocate(6, 6)
    target.draw_image(source, dest_box=(1, 1, 4, 4))
    pixels = target.to_array()
    assert (pixels[1:5, 1:5] == [255, 0, 0, 255]).all()
    assert not pixels[0].any()


def test_draw_image_source_box():
    source = np.zeros((4, 4, 4), dtype=np.uint8)
    source[2:, 2:] = [0, 255, 0, 255]
    target = CanvasSurface.allocate(2, 2)
    target.draw_image(CanvasSurface.from_array(source), src_box=(2, 2, 2, 2))
    assert (target.to_array() == [0, 255, 0, 255]).all()


def test_clear():
    surface = CanvasSurface.allocate(3, 3)
    surface.fill_rect(0, 0, 3, 3, (1, 1, 1))
    surface.clear()
    assert not surface.to_array().any()


def test_draw_text_is_anchored_bottom_right():
    surface = CanvasSurface.allocate(120, 60)
    font = ImageFont.load_default(size=16)
    origin = surface.draw_text("#808080", right=110, bottom=50, font=font,
                               fill=(0, 0, 0), stroke=(255, 255, 255), stroke_width=2)
    alpha = surface.to_array()[..., 3]
    ys, xs = np.nonzero(alpha)
    assert xs.size
    assert xs.max() <= 110 and ys.max() <= 50
    assert xs.min() >= origin[0] - 1
    # both the outline and the glyph fill are visible
    pixels = surface.to_array()[alpha > 0][:, :3]
    assert (pixels == [255, 255, 255]).all(axis=1).any()
    assert (pixels < 80).all(axis=1).any()
