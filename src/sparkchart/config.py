"""
Configuration & Engine Constants
================================
This module serves as the central registry for numeric tolerances and the
default rendering options of a sparkline.

Why is this file needed?
------------------------
1. Consistency: The same epsilon is used for span flooring, crossing
   detection and "on the line" classification, so segment counts at the
   margin do not depend on which module asks.
2. Defaults: Hosts that only pass a series get sensible padding, size and
   smoothing density without repeating them.

Exports:
    EPSILON (float): Absolute tolerance in output coordinates / value units.
    DEFAULT_PADDING_FRACTION (float): Vertical padding as a fraction of the value span.
    DEFAULT_DENSITY (int): Interpolated points per original segment when smoothing.
    DEFAULT_SIZE (tuple): Default (width, height) of the output space.
    SparklineOptions: Per-chart options passed to the pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Sequence


# Global Constants
EPSILON: float = 1e-9
DEFAULT_PADDING_FRACTION: float = 0.05
DEFAULT_DENSITY: int = 10
DEFAULT_SIZE: tuple[float, float] = (120.0, 40.0)


class ReferenceMode(StrEnum):
    """Where the split level of the chart comes from."""
    MEAN = "mean"
    THRESHOLD = "threshold"


@dataclass(frozen=True)
class SparklineOptions:
    """
    Options of a single sparkline.

    Attributes:
        reference_mode: MEAN of the current series or a fixed THRESHOLD.
        threshold: The fixed level, required when reference_mode is THRESHOLD.
        padding: Vertical padding fraction applied to the value span.
        smooth: Densify the polyline with a Catmull-Rom spline before splitting.
        density: Interpolated points inserted between each pair of samples.
        x_values: Optional explicit abscissae (same length as the series).
    """
    reference_mode: ReferenceMode = ReferenceMode.MEAN
    threshold: Optional[float] = None
    padding: float = DEFAULT_PADDING_FRACTION
    smooth: bool = False
    density: int = DEFAULT_DENSITY
    x_values: Optional[Sequence[float]] = None

    def __post_init__(self) -> None:
        if self.reference_mode == ReferenceMode.THRESHOLD and self.threshold is None:
            raise ValueError("A threshold value is required when reference_mode is 'threshold'.")
        if self.density < 0:
            raise ValueError(f"Smoothing density must be non-negative, got {self.density}.")
        if self.padding < 0.0:
            raise ValueError(f"Padding fraction must be non-negative, got {self.padding}.")

    @classmethod
    def with_threshold(cls, threshold: float, **kwargs) -> SparklineOptions:
        """Shortcut for a chart split at a fixed level."""
        return cls(reference_mode=ReferenceMode.THRESHOLD, threshold=threshold, **kwargs)
