"""
The ENGINE layer turns a raw series into drawable geometry.
Pure functions only: no state, no I/O, no drawing.
"""
from .normalizer import normalize, reference_value  # noqa: F401
from .smoother import smooth_polyline  # noqa: F401
from .splitter import split_segments, pair_segments  # noqa: F401
from .fills import build_fill, build_fills  # noqa: F401
from .pipeline import SparklineGeometry, build_geometry  # noqa: F401
