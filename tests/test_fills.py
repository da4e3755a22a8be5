import numpy as np
import pytest

from sparkchart.config import EPSILON
from sparkchart.engine.fills import build_fill, build_fills
from sparkchart.engine.normalizer import normalize
from sparkchart.engine.splitter import split_segments
from sparkchart.model.geometry_primitives import Segment, Side


def test_above_fill_closes_to_the_level():
    seg = Segment(Side.ABOVE, [[0.0, 5.0], [1.0, 0.0], [2.0, 5.0]])
    fill = build_fill(seg, 5.0)

    assert fill.side == Side.ABOVE
    np.testing.assert_array_equal(
        fill.points, [[0.0, 5.0], [1.0, 0.0], [2.0, 5.0], [2.0, 5.0], [0.0, 5.0]]
    )
    assert fill.area == pytest.approx(5.0)


def test_below_fill_starts_and_ends_on_the_level():
    seg = Segment(Side.BELOW, [[0.0, 5.0], [1.0, 10.0], [2.0, 5.0]])
    fill = build_fill(seg, 5.0)

    assert fill.side == Side.BELOW
    np.testing.assert_array_equal(fill.points[0], [0.0, 5.0])
    np.testing.assert_array_equal(fill.points[-1], [2.0, 5.0])
    assert fill.area == pytest.approx(5.0)


def test_above_fill_does_not_reach_the_floor():
    seg = Segment(Side.ABOVE, [[0.0, 2.0], [4.0, 1.0]])
    fill = build_fill(seg, 3.0)
    # Closing edge sits on the level (y=3), not the canvas bottom
    np.testing.assert_array_equal(fill.points[-2:], [[4.0, 3.0], [0.0, 3.0]])
    assert fill.area == pytest.approx(6.0)


def test_degenerate_segments_are_skipped():
    short = Segment(Side.ABOVE, [[0.0, 1.0]])
    ok = Segment(Side.BELOW, [[0.0, 1.0], [1.0, 2.0]])
    assert build_fill(short, 1.0) is None
    fills = build_fills([short, ok], 1.0)
    assert [f.side for f in fills] == [Side.BELOW]


def test_fills_stay_on_their_side_of_the_level():
    rng = np.random.default_rng(11)
    poly, level_y = normalize(rng.normal(size=40), 400.0, 60.0)
    segments = split_segments(poly, level_y)
    fills = build_fills(segments, level_y)

    assert len(fills) == len(segments)
    for fill in fills:
        ys = fill.points[:, 1]
        if fill.side == Side.ABOVE:
            assert ys.max() <= level_y + EPSILON
        else:
            assert ys.min() >= level_y - EPSILON


def test_segment_cannot_be_on_the_line():
    with pytest.raises(ValueError):
        Segment(Side.ON, [[0.0, 0.0], [1.0, 0.0]])
