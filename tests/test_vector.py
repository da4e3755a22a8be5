import numpy as np
import pytest

from sparkchart.model.vector import AnimatableVector


def test_add_then_subtract_restores_vector():
    a = AnimatableVector([1.0, 2.0, 3.0])
    b = AnimatableVector([0.5, -1.0, 4.25])
    assert ((a + b) - b).isclose(a)


def test_scale_by_one_is_identity():
    a = AnimatableVector([1.5, -2.0, 7.0])
    assert a.scale(1.0) == a
    assert a * 1 == a


def test_scaling_zero_stays_zero():
    zero = AnimatableVector.zero()
    assert len(zero) == 0
    assert zero.scale(3.5) == zero
    assert zero + zero == zero


def test_mismatched_sizes_fail_fast():
    a = AnimatableVector([1.0, 2.0])
    b = AnimatableVector([1.0, 2.0, 3.0])
    with pytest.raises(ValueError, match="Mismatched vector sizes"):
        _ = a + b
    with pytest.raises(ValueError, match="Mismatched vector sizes"):
        _ = a - b
    with pytest.raises(ValueError):
        _ = AnimatableVector.zero() + a


def test_magnitude_squared_and_average():
    v = AnimatableVector([3.0, 4.0])
    assert v.magnitude_squared == pytest.approx(25.0)
    assert v.average == pytest.approx(3.5)
    assert AnimatableVector.zero().average == 0.0
    assert AnimatableVector.zero().magnitude_squared == 0.0


def test_scale_returns_new_vector():
    a = AnimatableVector([1.0, 2.0])
    b = a.scale(2.0)
    assert b.tolist() == [2.0, 4.0]
    assert a.tolist() == [1.0, 2.0]


def test_scale_in_place_mutates():
    a = AnimatableVector([1.0, 2.0])
    a.scale_in_place(0.5)
    assert a.tolist() == [0.5, 1.0]


def test_no_aliasing_with_source_array():
    source = np.array([1.0, 2.0, 3.0])
    v = AnimatableVector(source)
    source[0] = 100.0
    assert v[0] == 1.0
    out = v.to_array()
    out[1] = -5.0
    assert v[1] == 2.0


def test_lerp_moves_toward_target():
    start = AnimatableVector([0.0, 0.0])
    end = AnimatableVector([10.0, 20.0])
    assert start.lerp(end, 0.5).isclose(AnimatableVector([5.0, 10.0]))
    assert start.lerp(end, 1.0).isclose(end)


def test_equality_requires_same_length():
    assert AnimatableVector([1.0]) != AnimatableVector([1.0, 1.0])
    assert not AnimatableVector([1.0]).isclose(AnimatableVector([1.0, 1.0]))


def test_shuffled_keeps_components():
    v = AnimatableVector([1.0, 2.0, 3.0, 4.0])
    s = v.shuffled(np.random.default_rng(7))
    assert sorted(s) == [1.0, 2.0, 3.0, 4.0]
    assert v.tolist() == [1.0, 2.0, 3.0, 4.0]
