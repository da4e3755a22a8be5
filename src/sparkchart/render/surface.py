from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt
    from sparkchart.model.geometry_primitives import Point, Side
    from sparkchart.render.style import SparklineStyle


class DrawingSurface(Protocol):  # pragma: no cover - structural only
    """Capabilities a host canvas must provide to draw a sparkline."""

    def stroke_segment(
        self,
        points: npt.NDArray[np.float64],
        side: Side,
        style: SparklineStyle,
    ) -> None:
        """Stroke an open polyline in the colour of `side`."""
        ...

    def fill_polygon(
        self,
        points: npt.NDArray[np.float64],
        side: Side,
        style: SparklineStyle,
        level_y: float,
    ) -> None:
        """Fill a closed polygon; opacity may fade toward `level_y`."""
        ...

    def stroke_dashed_line(
        self,
        start: Point,
        end: Point,
        style: SparklineStyle,
    ) -> None:
        """Stroke the dashed reference line."""
        ...
