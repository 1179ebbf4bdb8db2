from huecanvas.pointer import PointerEvent, clamp_to_surface


def test_clamp_keeps_inside_points():
    assert clamp_to_surface(PointerEvent(5, 7), 10, 10) == PointerEvent(5, 7)


def test_clamp_pulls_points_inside():
    assert clamp_to_surface(PointerEvent(-4, 12), 10, 10) == PointerEvent(0, 9)
    assert clamp_to_surface(PointerEvent(25.5, -0.5), 20, 10) == PointerEvent(19, 0)
