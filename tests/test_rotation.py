import math
import pytest
from huecanvas.rotation import HueRotationState


def test_starts_at_zero():
    state = HueRotationState()
    assert state.current() == 0.0
    assert state.hue_offset() == 0.0
    assert state.interactions == 0


def test_advance_accumulates_without_wrapping():
    state = HueRotationState()
    total = 0.0
    for amount in [15, 15, 300, 45.5]:
        total = state.advance(amount)
    assert total == 375.5
    assert state.current() == 375.5
    assert state.interactions == 4


def test_hue_offset_wraps():
    state = HueRotationState()
    state.advance(450)
    assert state.hue_offset() == 0.25


def test_advance_is_strictly_increasing():
    state = HueRotationState()
    previous = state.current()
    for amount in [5, 5.001, 14.999, 1e-6]:
        assert state.advance(amount) > previous
        previous = state.current()


@pytest.mark.parametrize("amount", [0, -1, math.inf, math.nan])
def test_advance_rejects_bad_amounts(amount):
    state = HueRotationState()
    with pytest.raises(ValueError):
        state.advance(amount)
    assert state.current() == 0.0
    assert state.interactions == 0
