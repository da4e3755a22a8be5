from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from sparkchart.config import EPSILON
from sparkchart.model.geometry_primitives import Point, Side


def classify_side(y: float, level_y: float, eps: float = EPSILON) -> Side:
    """
    Classify an output-space y coordinate against the level.

    Smaller y is higher on screen, so `y < level_y` is ABOVE.
    Anything within `eps` of the level is ON.
    """
    if y < level_y - eps:
        return Side.ABOVE
    if y > level_y + eps:
        return Side.BELOW
    return Side.ON


def level_crossing(a: Point, b: Point, level_y: float, eps: float = EPSILON) -> Point | None:
    """
    Intersection of the segment a->b with the horizontal line y = level_y.

    The segment is given in parametric form P(t) = a + t * (b - a), and only
    solutions with 0 <= t <= 1 are returned.

    Args:
        a: Start of the segment.
        b: End of the segment.
        level_y: The y coordinate of the horizontal line.
        eps: Tolerance for the parallel check.

    Returns:
        The crossing point with y set exactly to `level_y`, or None when the
        segment is (numerically) parallel to the level or does not reach it.
    """
    dy = b.y - a.y
    if abs(dy) < eps:
        return None

    t = (level_y - a.y) / dy
    if not (0.0 <= t <= 1.0):
        return None
    return Point(x=a.x + t * (b.x - a.x), y=level_y)


def catmull_rom(
    p0: npt.NDArray[np.float64],
    p1: npt.NDArray[np.float64],
    p2: npt.NDArray[np.float64],
    p3: npt.NDArray[np.float64],
    t: npt.NDArray[np.float64],
) -> npt.NDArray[np.float64]:
    """
    Evaluate a uniform Catmull-Rom spline between p1 and p2.

    Args:
        p0, p1, p2, p3: Control points of shape (2,). The curve passes
            through p1 (t=0) and p2 (t=1); p0 and p3 only shape the tangents.
        t: Curve parameters of shape (n,).

    Returns:
        An array of shape (n, 2) with the interpolated points.

    Notes:
        P(t) = 0.5 * (2 p1 + (-p0 + p2) t + (2 p0 - 5 p1 + 4 p2 - p3) t^2
                      + (-p0 + 3 p1 - 3 p2 + p3) t^3)
    """
    t = np.asarray(t, dtype=float)[:, None]
    t2 = t * t
    t3 = t2 * t
    return 0.5 * (
        2.0 * p1
        + (-p0 + p2) * t
        + (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3) * t2
        + (-p0 + 3.0 * p1 - 3.0 * p2 + p3) * t3
    )
