from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

from sparkchart.engine.splitter import pair_segments
from sparkchart.model.geometry_primitives import Point
from sparkchart.render.style import SparklineStyle

if TYPE_CHECKING:
    from sparkchart.engine.pipeline import SparklineGeometry
    from sparkchart.render.surface import DrawingSurface

logger = logging.getLogger(__name__)


def draw_sparkline(
    geometry: SparklineGeometry,
    surface: DrawingSurface,
    style: Optional[SparklineStyle] = None,
) -> None:
    """
    Draw a sparkline onto any DrawingSurface.

    Order: dashed reference line, fills, then strokes on top. A geometry
    with fewer than 2 points draws nothing.
    """
    if geometry.is_empty:
        logger.debug("Nothing to draw: fewer than 2 points.")
        return

    style = style or SparklineStyle()
    width, _ = geometry.size

    if style.show_reference_line:
        surface.stroke_dashed_line(
            Point(0.0, geometry.level_y),
            Point(width, geometry.level_y),
            style,
        )

    for fill in geometry.fills:
        surface.fill_polygon(fill.points, fill.side, style, geometry.level_y)

    if style.stroke_pieces:
        _stroke_pieces(geometry, surface, style)
        return

    for segment in geometry.segments:
        surface.stroke_segment(segment.points, segment.side, style)


def _stroke_pieces(
    geometry: SparklineGeometry,
    surface: DrawingSurface,
    style: SparklineStyle,
) -> None:
    pieces = pair_segments(geometry.polyline, geometry.level_y)
    for side, a, b in pieces:
        surface.stroke_segment(np.array([[a.x, a.y], [b.x, b.y]]), side, style)
    logger.debug(f"Stroked {len(pieces)} pieces.")
