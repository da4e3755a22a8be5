"""
Normalization of a raw series into output space.

The x axis is index based (evenly spaced) unless explicit x values are
given. The y axis is inverted: the padded maximum maps near y = 0 and the
padded minimum near y = height.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from sparkchart.config import EPSILON, DEFAULT_PADDING_FRACTION, ReferenceMode

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def as_series(values: Sequence[float] | npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Convert any sequence of numbers into a 1-D float array."""
    return np.asarray(values, dtype=float).reshape(-1)


def reference_value(
    values: Sequence[float] | npt.ArrayLike,
    mode: ReferenceMode = ReferenceMode.MEAN,
    threshold: Optional[float] = None,
) -> float:
    """
    Resolve the reference level of a series.

    Args:
        values: The raw series.
        mode: MEAN of the series or a fixed THRESHOLD.
        threshold: The fixed level for THRESHOLD mode.

    Raises:
        ValueError: If THRESHOLD mode is requested without a threshold.

    Returns:
        The level in value units. The mean of an empty series is 0.0.
    """
    if mode == ReferenceMode.THRESHOLD:
        if threshold is None:
            raise ValueError("Threshold mode requires a threshold value.")
        return float(threshold)

    series = as_series(values)
    if series.size == 0:
        return 0.0
    return _mean(series)


def _mean(series: npt.NDArray[np.float64]) -> float:
    # Rounding in the sum can push the mean of a flat series off its value
    return float(np.clip(series.mean(), series.min(), series.max()))


def _scale_x(
    count: int,
    width: float,
    x_values: Optional[Sequence[float]],
) -> npt.NDArray[np.float64]:
    if x_values is None:
        return width * np.arange(count, dtype=float) / max(count - 1, 1)

    xs = as_series(x_values)
    if xs.size != count:
        raise ValueError(f"Expected {count} x values, got {xs.size}.")
    x_span = float(xs.max() - xs.min())
    if x_span == 0.0:
        return np.zeros(count)
    return width * (xs - xs.min()) / x_span


def normalize(
    values: Sequence[float] | npt.ArrayLike,
    width: float,
    height: float,
    padding: float = DEFAULT_PADDING_FRACTION,
    reference: Optional[float] = None,
    x_values: Optional[Sequence[float]] = None,
) -> tuple[npt.NDArray[np.float64], float]:
    """
    Map a series into a width x height output space.

    Args:
        values: The raw series.
        width: Output width. Zero or negative collapses the x axis.
        height: Output height. Zero or negative collapses the y axis.
        padding: Fraction of the value span added above the max and below the min.
        reference: Level in value units to map alongside the series. Defaults
                   to the series mean.
        x_values: Optional explicit abscissae, scaled linearly onto [0, width].

    Returns:
        A tuple of the (N, 2) polyline and the level's y coordinate. An empty
        series gives an empty polyline and a level at height / 2.
    """
    series = as_series(values)
    if series.size == 0:
        return np.zeros((0, 2)), height / 2.0

    if reference is None:
        reference = _mean(series)

    v_min = float(series.min())
    v_max = float(series.max())
    span = max(v_max - v_min, EPSILON)
    pad = span * padding
    # Measured from the data midpoint: a flat series maps to t = 0.5 exactly,
    # whatever the magnitude of its values
    mid = 0.5 * (v_min + v_max)
    padded_span = max(span + 2.0 * pad, EPSILON)

    xs = _scale_x(series.size, width, x_values)
    ys = height * (0.5 - (series - mid) / padded_span)
    level_y = height * (0.5 - (reference - mid) / padded_span)

    return np.column_stack((xs, ys)), float(level_y)
