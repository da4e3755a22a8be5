"""QPainter drawing surface (PySide6)."""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QLinearGradient, QPainter, QPainterPath, QPen, QPolygonF

if TYPE_CHECKING:
    import numpy.typing as npt
    from sparkchart.model.geometry_primitives import Point, Side
    from sparkchart.render.style import SparklineStyle


def _to_path(points: npt.NDArray[np.float64], close: bool = False) -> QPainterPath:
    path = QPainterPath()
    path.addPolygon(QPolygonF([QPointF(float(x), float(y)) for x, y in points]))
    if close:
        path.closeSubpath()
    return path


def _color(hex_color: str, opacity: float = 1.0) -> QColor:
    color = QColor(hex_color)
    color.setAlphaF(max(0.0, min(1.0, opacity)))
    return color


class QtPainterSurface:
    """
    DrawingSurface backed by an active QPainter.
    The painter's coordinate system is used as-is (y grows downward).
    """

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    def stroke_segment(
        self,
        points: npt.NDArray[np.float64],
        side: Side,
        style: SparklineStyle,
    ) -> None:
        pen = QPen(_color(style.color_for(side)), style.line_width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        self.painter.setPen(pen)
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawPath(_to_path(points))

    def fill_polygon(
        self,
        points: npt.NDArray[np.float64],
        side: Side,
        style: SparklineStyle,
        level_y: float,
    ) -> None:
        # The point farthest from the level gets the strongest colour
        ys = points[:, 1]
        far_y = float(ys[np.argmax(np.abs(ys - level_y))])

        gradient = QLinearGradient(QPointF(0.0, far_y), QPointF(0.0, level_y))
        color = style.color_for(side)
        gradient.setColorAt(0.0, _color(color, style.fill_opacity_far))
        gradient.setColorAt(1.0, _color(color, style.fill_opacity_near))

        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QBrush(gradient))
        self.painter.drawPath(_to_path(points, close=True))

    def stroke_dashed_line(
        self,
        start: Point,
        end: Point,
        style: SparklineStyle,
    ) -> None:
        pen = QPen(_color(style.reference_color), style.reference_width)
        width = max(style.reference_width, 1e-6)
        # Qt dash lengths are in units of the pen width
        pen.setDashPattern([d / width for d in style.dash_pattern])
        self.painter.setPen(pen)
        self.painter.drawLine(QPointF(start.x, start.y), QPointF(end.x, end.y))
