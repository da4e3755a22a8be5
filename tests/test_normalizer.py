import numpy as np
import pytest

from sparkchart.config import ReferenceMode
from sparkchart.engine.normalizer import normalize, reference_value


def test_empty_series_gives_midline():
    poly, level_y = normalize([], 100.0, 40.0)
    assert poly.shape == (0, 2)
    assert level_y == 20.0


def test_single_sample_sits_at_x_zero():
    poly, level_y = normalize([7.0], 100.0, 50.0)
    assert poly.shape == (1, 2)
    assert poly[0, 0] == 0.0
    assert poly[0, 1] == pytest.approx(25.0, rel=1e-4)
    assert level_y == poly[0, 1]


def test_flat_series_is_mid_height_line():
    poly, level_y = normalize([5.0] * 5, 100.0, 50.0)
    assert np.all(np.isfinite(poly))
    assert np.allclose(poly[:, 1], 25.0, rtol=1e-4)
    assert np.all(poly[:, 1] == level_y)


def test_index_based_x_and_inverted_y():
    poly, level_y = normalize([1, 2, 3, 4, 5], 100.0, 50.0)
    np.testing.assert_allclose(poly[:, 0], [0.0, 25.0, 50.0, 75.0, 100.0])
    # Higher values map to smaller y
    assert np.all(np.diff(poly[:, 1]) < 0)
    # pad = 0.2, lo = 0.8, padded span = 4.4
    assert poly[0, 1] == pytest.approx(50.0 * (1 - 0.2 / 4.4))
    assert poly[-1, 1] == pytest.approx(50.0 * (1 - 4.2 / 4.4))
    assert level_y == pytest.approx(25.0)
    assert level_y == poly[2, 1]


def test_zero_padding_spans_full_height():
    poly, _ = normalize([2.0, 4.0, 3.0], 10.0, 20.0, padding=0.0)
    assert poly[0, 1] == pytest.approx(20.0)
    assert poly[1, 1] == pytest.approx(0.0)


def test_reference_maps_through_same_transform():
    _, level_y = normalize([-1.0, 1.0], 10.0, 20.0, reference=0.0)
    assert level_y == pytest.approx(10.0)
    # Outside the data range the level leaves the padded box
    _, level_y = normalize([-1.0, 1.0], 10.0, 20.0, reference=5.0)
    assert level_y < 0.0


def test_explicit_x_values_are_scaled():
    poly, _ = normalize([1.0, 2.0, 3.0], 80.0, 10.0, x_values=[0.0, 10.0, 40.0])
    np.testing.assert_allclose(poly[:, 0], [0.0, 20.0, 80.0])


def test_explicit_x_values_with_zero_span():
    poly, _ = normalize([1.0, 2.0], 80.0, 10.0, x_values=[3.0, 3.0])
    np.testing.assert_allclose(poly[:, 0], [0.0, 0.0])


def test_explicit_x_values_length_mismatch():
    with pytest.raises(ValueError):
        normalize([1.0, 2.0, 3.0], 80.0, 10.0, x_values=[0.0, 1.0])


def test_zero_size_collapses_without_error():
    poly, level_y = normalize([1.0, 3.0, 2.0], 0.0, 0.0)
    assert np.all(poly == 0.0)
    assert level_y == 0.0


def test_reference_value_modes():
    assert reference_value([1, 2, 3, 4, 5]) == pytest.approx(3.0)
    assert reference_value([]) == 0.0
    assert reference_value([1, 2], ReferenceMode.THRESHOLD, threshold=-4.0) == -4.0
    with pytest.raises(ValueError):
        reference_value([1, 2], ReferenceMode.THRESHOLD)


@pytest.mark.parametrize("value", [426.12, 2e7, 3.5e9, -8.25e12])
def test_flat_series_with_large_values_stays_mid_height(value):
    poly, level_y = normalize([value] * 5, 100.0, 50.0)
    np.testing.assert_array_equal(poly[:, 1], 25.0)
    assert level_y == 25.0


def test_large_values_keep_their_order():
    poly, level_y = normalize([3.5e9, 3.5e9 + 10.0, 3.5e9 + 20.0], 10.0, 40.0)
    assert poly[0, 1] > level_y > poly[2, 1]
    assert level_y == pytest.approx(20.0)
