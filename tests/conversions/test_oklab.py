import numpy as np

from vibrant.conversions.oklab import (
    oklab_to_linear_srgb,
    oklab_to_unit_rgb,
    oklch_to_oklab,
    oklch_to_unit_rgb,
)
from vibrant.types.precision import Precision

samples_oklab_rgb = {
    (0, 0, 0): (0.0, 0.0, 0.0),
    (1, 0, 0): (1.0, 1.0, 1.0),
    (0.627955, 0.224863, 0.125846): (1.0, 0.0, 0.0),
    (0.866440, -0.233887, 0.179498): (0.0, 1.0, 0.0),
    (0.452014, -0.032457, -0.311528): (0.0, 0.0, 1.0),
}

samples_oklch_rgb = {
    (0.627955, 0.25766, 29.233): (1.0, 0.0, 0.0),
    (0.866440, 0.2948, 142.5): (0.0, 1.0, 0.0),
    (0.452014, 0.3132, 264.05): (0.0, 0.0, 1.0),
}


def test_oklab_to_linear_srgb_white():
    assert np.allclose(oklab_to_linear_srgb(1, 0, 0), 1.0, atol=1e-6)


def test_oklab_to_linear_srgb_gray_is_cubed():
    assert np.allclose(oklab_to_linear_srgb(0.5, 0, 0), 0.125, atol=1e-6)


def test_oklab_to_unit_rgb():
    for lab, expected in samples_oklab_rgb.items():
        assert np.allclose(oklab_to_unit_rgb(*lab), expected, atol=2 / 255)


def test_oklab_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_oklab_rgb.keys()), dtype=float)
    expected = np.array(list(samples_oklab_rgb.values()))
    result = oklab_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=2 / 255)


def test_oklch_to_oklab():
    l, a, b = oklch_to_oklab(0.7, 0.1, 90)
    assert float(l) == 0.7
    assert abs(float(a)) < 1e-12
    assert np.isclose(float(b), 0.1)


def test_oklch_to_unit_rgb():
    for lch, expected in samples_oklch_rgb.items():
        assert np.allclose(oklch_to_unit_rgb(*lch), expected, atol=2 / 255)


def test_oklch_to_unit_rgb_single_precision():
    result = oklch_to_unit_rgb(0.627955, 0.25766, 29.233, Precision.SINGLE)
    assert result.dtype == np.float32
    assert np.allclose(result, (1.0, 0.0, 0.0), atol=2 / 255)
