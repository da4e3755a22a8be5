"""
sparkchart: geometry for level-coloured sparklines.

Converts a numeric series plus a reference level (mean or threshold) into
stroke segments and fill polygons split exactly at every crossing, with
optional Catmull-Rom smoothing and host-driven animated transitions.
"""
from sparkchart.config import ReferenceMode, SparklineOptions  # noqa: F401
from sparkchart.model.geometry_primitives import FillPolygon, Point, Segment, Side  # noqa: F401
from sparkchart.model.vector import AnimatableVector  # noqa: F401
from sparkchart.engine import (  # noqa: F401
    SparklineGeometry,
    build_fills,
    build_geometry,
    normalize,
    reference_value,
    smooth_polyline,
    split_segments,
)
from sparkchart.animation import SeriesTransition  # noqa: F401

__version__ = "0.1.0"
