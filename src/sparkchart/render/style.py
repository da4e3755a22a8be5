from __future__ import annotations

from dataclasses import dataclass

from sparkchart.model.geometry_primitives import Side


@dataclass
class SparklineStyle:
    """Colours and stroke settings of a sparkline (colours as '#rrggbb')."""
    above_color: str = "#34c759"
    below_color: str = "#ff3b30"
    line_width: float = 2.0

    # Fill opacity at the curve and where the fill meets the level
    fill_opacity_far: float = 0.8
    fill_opacity_near: float = 0.1
    # Used by surfaces that cannot draw gradients
    flat_fill_opacity: float = 0.2

    show_reference_line: bool = True
    reference_color: str = "#8e8e93"
    reference_width: float = 1.0
    dash_pattern: tuple[float, float] = (6.0, 4.0)

    # Stroke each two-point piece on its own instead of whole segments
    stroke_pieces: bool = False

    def color_for(self, side: Side) -> str:
        return self.above_color if side == Side.ABOVE else self.below_color
