import numpy as np
import pytest
from huecanvas.scaling import (
    power_scale,
    make_scale,
    scale,
    cubic_scale,
    linear_scale,
    quadratic_scale,
    power5_scale,
)


def test_values_stay_in_range():
    rng = np.random.default_rng(1)
    for _ in range(500):
        value = scale(100, 2000, rng=rng)
        assert 100 <= value <= 2000


def test_degenerate_range():
    assert power_scale(5, 5) == 5


def test_default_is_cubic():
    a = scale(0, 1, rng=np.random.default_rng(3))
    b = cubic_scale(0, 1, rng=np.random.default_rng(3))
    c = power_scale(0, 1, 3, rng=np.random.default_rng(3))
    assert a == b == c


def test_matches_power_law():
    u = np.random.default_rng(11).random()
    assert power_scale(10, 20, 2, rng=np.random.default_rng(11)) == pytest.approx(10 + u ** 2 * 10)


def test_higher_exponent_biases_toward_min():
    samples = {}
    for name, fn in [("linear", linear_scale), ("quadratic", quadratic_scale),
                     ("cubic", cubic_scale), ("power5", power5_scale)]:
        rng = np.random.default_rng(2024)
        samples[name] = np.mean([fn(0, 1, rng=rng) for _ in range(4000)])
    assert samples["linear"] > samples["quadratic"] > samples["cubic"] > samples["power5"]
    assert samples["linear"] == pytest.approx(0.5, abs=0.03)
    assert samples["cubic"] == pytest.approx(0.25, abs=0.03)


def test_make_scale():
    fn = make_scale(4)
    assert fn(0, 1, rng=np.random.default_rng(0)) == power_scale(0, 1, 4, rng=np.random.default_rng(0))


def test_invalid_arguments():
    with pytest.raises(ValueError):
        power_scale(10, 1)
    with pytest.raises(ValueError):
        power_scale(0, 1, exponent=0)
