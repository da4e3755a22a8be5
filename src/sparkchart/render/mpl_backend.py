"""
Matplotlib drawing surface.

Draws onto an existing Axes in output-space coordinates (the y axis is
inverted so that y grows downward, as in the geometry). Also provides a
headless PNG export used by the command line.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from sparkchart.config import DEFAULT_SIZE, SparklineOptions
from sparkchart.engine.pipeline import SparklineGeometry, build_geometry
from sparkchart.render.painter import draw_sparkline
from sparkchart.render.style import SparklineStyle

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.axes import Axes
    from sparkchart.model.geometry_primitives import Point, Side

logger = logging.getLogger(__name__)


class MatplotlibSurface:
    """DrawingSurface backed by a matplotlib Axes."""

    def __init__(self, ax: Axes) -> None:
        self.ax = ax

    def prepare(self, width: float, height: float) -> None:
        """Match the axes to the output space and hide decorations."""
        self.ax.set_xlim(0.0, width)
        self.ax.set_ylim(height, 0.0)
        self.ax.set_axis_off()

    def stroke_segment(
        self,
        points: npt.NDArray[np.float64],
        side: Side,
        style: SparklineStyle,
    ) -> None:
        self.ax.plot(
            points[:, 0],
            points[:, 1],
            color=style.color_for(side),
            lw=style.line_width,
            solid_capstyle="round",
            solid_joinstyle="round",
        )

    def fill_polygon(
        self,
        points: npt.NDArray[np.float64],
        side: Side,
        style: SparklineStyle,
        level_y: float,
    ) -> None:
        patch = Polygon(
            points,
            closed=True,
            facecolor=style.color_for(side),
            edgecolor="none",
            alpha=style.flat_fill_opacity,
        )
        self.ax.add_patch(patch)

    def stroke_dashed_line(
        self,
        start: Point,
        end: Point,
        style: SparklineStyle,
    ) -> None:
        self.ax.plot(
            [start.x, end.x],
            [start.y, end.y],
            color=style.reference_color,
            lw=style.reference_width,
            linestyle=(0, style.dash_pattern),
        )


def render_figure(
    geometry: SparklineGeometry,
    style: Optional[SparklineStyle] = None,
    dpi: int = 100,
) -> Figure:
    """Draw a geometry onto a new borderless Figure sized to its output space."""
    width, height = geometry.size
    fig = Figure(figsize=(max(width, 1.0) / dpi, max(height, 1.0) / dpi), dpi=dpi)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))

    surface = MatplotlibSurface(ax)
    surface.prepare(width, height)
    draw_sparkline(geometry, surface, style)
    return fig


def render_png(
    values: Sequence[float],
    path: str,
    width: float = DEFAULT_SIZE[0],
    height: float = DEFAULT_SIZE[1],
    options: Optional[SparklineOptions] = None,
    style: Optional[SparklineStyle] = None,
    dpi: int = 100,
) -> SparklineGeometry:
    """
    Build the geometry of a series and save it as a PNG.

    Returns:
        The geometry that was drawn.
    """
    geometry = build_geometry(values, width, height, options)
    fig = render_figure(geometry, style=style, dpi=dpi)
    fig.savefig(path, format="png", dpi=dpi, transparent=True)
    logger.info(f"Saved sparkline with {len(geometry.segments)} segments to {path}")
    return geometry
