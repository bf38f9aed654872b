import numpy as np
import pytest

from vibrant.conversions.gamma import encode_unit_rgb, linear_to_srgb
from vibrant.conversions.hue import normalize_hue, polar_to_cartesian


@pytest.mark.parametrize("h,expected", [
    (0, 0),
    (359.5, 359.5),
    (360, 0),
    (720, 0),
    (-90, 270),
    (-360, 0),
    (-725, 355),
    (16777216, 136),
])
def test_normalize_hue(h, expected):
    assert float(normalize_hue(h)) == pytest.approx(expected)


def test_normalize_hue_range():
    hues = np.linspace(-5000, 5000, 1001)
    result = normalize_hue(hues)
    assert np.all(result >= 0)
    assert np.all(result < 360)


def test_polar_to_cartesian():
    a, b = polar_to_cartesian(2.0, 90)
    assert float(a) == pytest.approx(0.0, abs=1e-12)
    assert float(b) == pytest.approx(2.0)

    a, b = polar_to_cartesian(1.0, -180)
    assert float(a) == pytest.approx(-1.0)
    assert float(b) == pytest.approx(0.0, abs=1e-12)


def test_linear_to_srgb_segments():
    # linear segment below the threshold
    assert float(linear_to_srgb(0.001)) == pytest.approx(0.01292)
    assert float(linear_to_srgb(0.0)) == 0.0
    assert float(linear_to_srgb(1.0)) == pytest.approx(1.0)
    assert float(linear_to_srgb(0.214041)) == pytest.approx(0.5, abs=1e-4)


def test_linear_to_srgb_negative_stays_finite():
    result = linear_to_srgb(np.array([-0.5, -1e-6]))
    assert np.all(np.isfinite(result))
    assert np.allclose(result, [-6.46, -1.292e-5])


def test_encode_unit_rgb_clamps():
    result = encode_unit_rgb(np.array([-0.2, 0.5, 1.7]))
    assert result[0] == 0.0
    assert 0.0 < result[1] < 1.0
    assert result[2] == 1.0
