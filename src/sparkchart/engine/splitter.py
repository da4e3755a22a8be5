"""
Splitting a polyline into runs above and below the reference level.

Crossings between consecutive points are replaced by exact intersection
points that are shared by the two neighbouring Segments, so the segments
join up into the original line with no gaps.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

from sparkchart.config import EPSILON
from sparkchart.model.geometry_primitives import Point, Segment, Side
from sparkchart.model.geometry_utils import classify_side, level_crossing

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# A line lying entirely on the level has nothing to be "below" of
FLAT_SIDE: Side = Side.ABOVE


def split_segments(
    polyline: npt.ArrayLike,
    level_y: float,
    eps: float = EPSILON,
) -> list[Segment]:
    """
    Partition a polyline into Segments lying on one side of the level.

    Args:
        polyline: An array of shape (N, 2) in output space.
        level_y: The y coordinate of the reference level.
        eps: Tolerance for classifying a point as on the level.

    Returns:
        Segments in left-to-right order. Each has at least 2 points and
        is tagged ABOVE or BELOW. A stretch lying exactly on the level joins
        the run that follows it (or the one before it at the end of the line);
        a polyline lying entirely on the level is one ABOVE Segment. Fewer
        than 2 input points give no Segments.
    """
    pts = [Point(float(x), float(y)) for x, y in np.asarray(polyline, dtype=float).reshape(-1, 2)]
    if len(pts) < 2:
        return []

    segments: list[Segment] = []
    current: list[Point] = [pts[0]]
    side: Optional[Side] = _resolve(classify_side(pts[0].y, level_y, eps))

    for a, b in zip(pts[:-1], pts[1:]):
        side_b = classify_side(b.y, level_y, eps)

        if side_b == Side.ON:
            current.append(b)
            if side is not None:
                # Close on the line; the touch point is shared with the next run
                segments.append(_segment(side, current))
                current = [b]
                side = None
        elif side is None:
            # Run started on the line, it now takes b's side
            side = side_b
            current.append(b)
        elif side_b == side:
            current.append(b)
        else:
            crossing = level_crossing(a, b, level_y, eps)
            if crossing is None:
                # Parallel to the level, continue without splitting
                current.append(b)
                continue
            current.append(crossing)
            segments.append(_segment(side, current))
            current = [crossing, b]
            side = side_b

    if len(current) >= 2:
        if side is not None:
            segments.append(_segment(side, current))
        elif segments:
            # Trailing stretch on the level, current[0] is the last segment's end
            segments[-1] = segments[-1].extended([(p.x, p.y) for p in current[1:]])
        else:
            segments.append(_segment(FLAT_SIDE, current))

    logger.debug(f"Split {len(pts)} points into {len(segments)} segments.")
    return segments


def pair_segments(
    polyline: npt.ArrayLike,
    level_y: float,
    eps: float = EPSILON,
) -> list[tuple[Side, Point, Point]]:
    """
    Two-point pieces of the polyline tagged with their side.

    Pairs that cross the level are cut at the crossing into one piece per
    side. Pieces touching or lying on the level take the side of their off-level
    end point, or FLAT_SIDE when both ends are on the level.
    """
    pts = [Point(float(x), float(y)) for x, y in np.asarray(polyline, dtype=float).reshape(-1, 2)]
    pieces: list[tuple[Side, Point, Point]] = []

    for a, b in zip(pts[:-1], pts[1:]):
        side_a = classify_side(a.y, level_y, eps)
        side_b = classify_side(b.y, level_y, eps)

        if side_a == side_b or Side.ON in (side_a, side_b):
            tag = side_a if side_a != Side.ON else side_b
            pieces.append((_resolve(tag) or FLAT_SIDE, a, b))
            continue

        crossing = level_crossing(a, b, level_y, eps)
        if crossing is None:
            pieces.append((side_a, a, b))
        else:
            pieces.append((side_a, a, crossing))
            pieces.append((side_b, crossing, b))
    return pieces


def _resolve(side: Side) -> Optional[Side]:
    return None if side == Side.ON else side


def _segment(side: Side, points: list[Point]) -> Segment:
    return Segment(side, np.array([(p.x, p.y) for p in points], dtype=float))
