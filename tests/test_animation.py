import numpy as np
import pytest

from sparkchart import SeriesTransition, build_geometry


def test_step_moves_fraction_of_remaining_distance():
    tr = SeriesTransition([0.0, 0.0, 0.0], [10.0, 10.0, 10.0])
    assert tr.step(0.5).tolist() == [5.0, 5.0, 5.0]
    assert tr.step(0.5).tolist() == [7.5, 7.5, 7.5]
    assert not tr.is_settled()
    assert tr.remaining().magnitude_squared == pytest.approx(3 * 2.5 ** 2)


def test_full_step_reaches_target():
    tr = SeriesTransition([1.0, 2.0], [3.0, -4.0])
    tr.step(1.0)
    assert tr.is_settled()


def test_frames_settle_on_the_target():
    target = [3.0, 1.0, 4.0, 1.0, 5.0]
    tr = SeriesTransition([0.0] * 5, target)
    frames = list(tr.frames(100.0, 40.0, fraction=0.5, tolerance=1e-3))

    assert 1 < len(frames) < 120
    expected = build_geometry(target, 100.0, 40.0)
    np.testing.assert_array_equal(frames[-1].polyline, expected.polyline)
    assert frames[-1].reference == pytest.approx(2.8)


def test_frames_respect_max_frames():
    tr = SeriesTransition([0.0, 0.0], [100.0, -100.0])
    frames = list(tr.frames(10.0, 10.0, fraction=0.01, tolerance=1e-9, max_frames=5))
    assert len(frames) == 5
    assert not tr.is_settled(1e-9)


def test_retarget_and_snap():
    tr = SeriesTransition([0.0, 0.0], [1.0, 1.0])
    tr.step(0.5)
    tr.retarget([2.0, 2.0])
    assert tr.snap().tolist() == [2.0, 2.0]
    assert tr.is_settled()


def test_mismatched_lengths_are_rejected():
    with pytest.raises(ValueError):
        SeriesTransition([0.0, 1.0], [0.0, 1.0, 2.0])
    tr = SeriesTransition([0.0, 1.0])
    with pytest.raises(ValueError):
        tr.retarget([1.0])


def test_invalid_fraction():
    tr = SeriesTransition([0.0], [1.0])
    with pytest.raises(ValueError):
        tr.step(0.0)
    with pytest.raises(ValueError):
        tr.step(1.5)
