import numpy as np
import pytest

from tilemap.scale_math import scale_down, scale_up


def test_integer_zoom_delta():
    assert scale_down(1000, 2) == 250
    assert scale_up(250, 2) == 1000


def test_zero_delta_is_identity():
    assert scale_down(123.5, 0) == 123.5
    assert scale_up(123.5, 0) == 123.5


def test_fractional_delta():
    assert scale_down(1000.0, 0.5) == pytest.approx(1000.0 / 2**0.5)
    assert scale_up(scale_down(7.3, 1.75), 1.75) == pytest.approx(7.3)


def test_negative_delta_scales_the_other_way():
    assert scale_down(10.0, -1) == 20.0
    assert scale_up(10.0, -1) == 5.0


def test_arrays():
    values = np.array([4.0, 8.0, -16.0])
    np.testing.assert_allclose(scale_down(values, 2), [1.0, 2.0, -4.0])
    np.testing.assert_allclose(scale_up(scale_down(values, 3.3), 3.3), values)
