"""
Sparkline geometry pipeline.

raw series -> normalize -> (smooth) -> split -> fills

Every call is a pure function of its arguments: nothing is cached and no
array in the result is shared with another call.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from sparkchart.config import SparklineOptions
from sparkchart.engine.fills import build_fills
from sparkchart.engine.normalizer import normalize, reference_value
from sparkchart.engine.smoother import smooth_polyline
from sparkchart.engine.splitter import split_segments
from sparkchart.model.geometry_primitives import FillPolygon, Segment, Side

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SparklineGeometry:
    """
    Everything a drawing layer needs for one sparkline.

    Attributes:
        polyline: The (optionally smoothed) line, shape (N, 2).
        segments: Above/below runs in left-to-right order.
        fills: One polygon per segment, closed against the level.
        level_y: The reference level in output coordinates.
        reference: The reference level in value units.
        size: The (width, height) of the output space.
    """
    polyline: npt.NDArray[np.float64] = field(repr=False)
    segments: list[Segment]
    fills: list[FillPolygon]
    level_y: float
    reference: float
    size: tuple[float, float]

    @property
    def is_empty(self) -> bool:
        return len(self.polyline) < 2

    def segments_on(self, side: Side) -> list[Segment]:
        return [s for s in self.segments if s.side == side]

    def fills_on(self, side: Side) -> list[FillPolygon]:
        return [f for f in self.fills if f.side == side]


def build_geometry(
    values: Sequence[float] | npt.ArrayLike,
    width: float,
    height: float,
    options: Optional[SparklineOptions] = None,
) -> SparklineGeometry:
    """
    Run the full pipeline for one series.

    Args:
        values: The raw series.
        width: Output width.
        height: Output height.
        options: Reference mode, padding and smoothing. Defaults to a
                 mean-referenced, unsmoothed chart.

    Returns:
        The SparklineGeometry for this series and size.
    """
    options = options or SparklineOptions()

    reference = reference_value(values, options.reference_mode, options.threshold)
    polyline, level_y = normalize(
        values,
        width,
        height,
        padding=options.padding,
        reference=reference,
        x_values=options.x_values,
    )

    if options.smooth:
        polyline = smooth_polyline(polyline, options.density)

    segments = split_segments(polyline, level_y)
    fills = build_fills(segments, level_y)

    logger.debug(
        f"Geometry: {len(polyline)} points, {len(segments)} segments, "
        f"reference={reference:.4g} at y={level_y:.4g}"
    )
    return SparklineGeometry(
        polyline=polyline,
        segments=segments,
        fills=fills,
        level_y=level_y,
        reference=reference,
        size=(float(width), float(height)),
    )
