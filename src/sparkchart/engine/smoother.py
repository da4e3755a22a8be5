from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from sparkchart.config import DEFAULT_DENSITY
from sparkchart.model.geometry_utils import catmull_rom

if TYPE_CHECKING:
    import numpy.typing as npt


def smooth_polyline(
    polyline: npt.ArrayLike,
    density: int = DEFAULT_DENSITY,
) -> npt.NDArray[np.float64]:
    """
    Densify a polyline with a uniform Catmull-Rom spline.

    Every original point is kept unchanged and `density` interpolated points
    are inserted between each consecutive pair. The end points are used as
    their own virtual neighbours, so the curve does not drift at the ends.

    Args:
        polyline: An array of shape (N, 2).
        density: Interpolated points per original segment.

    Raises:
        ValueError: If `density` is negative.

    Returns:
        An array of shape (N + density * (N - 1), 2). Polylines with fewer
        than 2 points, or density 0, are returned as a copy.
    """
    if density < 0:
        raise ValueError(f"Smoothing density must be non-negative, got {density}.")

    pts = np.array(polyline, dtype=float).reshape(-1, 2)
    n = len(pts)
    if n < 2 or density == 0:
        return pts

    # Duplicate the boundary points as virtual neighbours
    padded = np.vstack((pts[:1], pts, pts[-1:]))
    t = np.arange(1, density + 1, dtype=float) / (density + 1)

    out = np.empty((n + density * (n - 1), 2))
    stride = density + 1
    for i in range(n - 1):
        out[i * stride] = pts[i]
        out[i * stride + 1:(i + 1) * stride] = catmull_rom(
            padded[i], padded[i + 1], padded[i + 2], padded[i + 3], t
        )
    out[-1] = pts[-1]
    return out
