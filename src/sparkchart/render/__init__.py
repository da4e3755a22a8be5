"""
The RENDER layer draws SparklineGeometry onto a host surface.

Backends are imported lazily by the caller (matplotlib or PySide6) so the
geometry engine never depends on a concrete canvas type.
"""
from .painter import draw_sparkline  # noqa: F401
from .style import SparklineStyle  # noqa: F401
from .surface import DrawingSurface  # noqa: F401
