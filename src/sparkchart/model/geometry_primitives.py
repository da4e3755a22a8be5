"""
Geometric Primitives for sparkline segmentation and fills.

All coordinates live in output space: x grows to the right, y grows
downward, so a larger value has a smaller y.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class Side(StrEnum):
    """Position of a point relative to the reference level."""
    ABOVE = "above"
    BELOW = "below"
    ON = "on"  # transient, never the side of an emitted Segment

    @property
    def opposite(self) -> Side:
        match self:
            case Side.ABOVE:
                return Side.BELOW
            case Side.BELOW:
                return Side.ABOVE
            case _:
                return Side.ON


@dataclass(frozen=True)
class Point:
    """A point in output space."""
    x: float
    y: float

    @classmethod
    def from_array(cls, arr: npt.ArrayLike) -> Point:
        x, y = np.asarray(arr, dtype=float)[:2]
        return cls(float(x), float(y))


def _as_points(points: npt.ArrayLike) -> npt.NDArray[np.float64]:
    arr = np.array(points, dtype=float)
    if arr.size == 0:
        return np.zeros((0, 2))
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Segment:
    """
    A maximal run of the polyline on one side of the reference level.

    The first and last points may lie exactly on the level (crossings or
    touch points); every other point is strictly on `side`.
    """
    side: Side
    points: npt.NDArray[np.float64] = field(repr=False)

    def __post_init__(self) -> None:
        if self.side == Side.ON:
            raise ValueError("A Segment must be tagged ABOVE or BELOW.")
        object.__setattr__(self, "points", _as_points(self.points))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def first(self) -> Point:
        return Point.from_array(self.points[0])

    @property
    def last(self) -> Point:
        return Point.from_array(self.points[-1])

    @property
    def is_above(self) -> bool:
        return self.side == Side.ABOVE

    def extended(self, points: npt.ArrayLike) -> Segment:
        """Returns a copy with `points` appended."""
        extra = _as_points(points)
        if len(extra) == 0:
            return self
        return Segment(self.side, np.vstack((self.points, extra)))


@dataclass(frozen=True, eq=False)
class FillPolygon:
    """
    A closed area between a Segment and the reference level.
    The closing edge back to the first point is implicit.
    """
    side: Side
    points: npt.NDArray[np.float64] = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _as_points(self.points))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def area(self) -> float:
        """Unsigned area (shoelace formula)."""
        if len(self.points) < 3:
            return 0.0
        x, y = self.points[:, 0], self.points[:, 1]
        return 0.5 * abs(float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))
