"""
Host-side animated transitions between two series.

The driver has no clock: the host calls `step()` (or iterates `frames()`)
once per tick from whatever timer it owns, and may abandon the transition
at any point.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from sparkchart.config import SparklineOptions
from sparkchart.engine.pipeline import SparklineGeometry, build_geometry
from sparkchart.model.vector import AnimatableVector

logger = logging.getLogger(__name__)


class SeriesTransition:
    """
    Interpolates `current` toward `target` with
    current = current + (target - current) * fraction.
    """

    def __init__(self, current: Sequence[float], target: Optional[Sequence[float]] = None) -> None:
        self.current = AnimatableVector(current)
        self.target = AnimatableVector(target) if target is not None else AnimatableVector(current)
        # Fail now rather than on the first tick
        _ = self.target - self.current

    def retarget(self, target: Sequence[float]) -> None:
        """Animate toward a new series from wherever the transition is now."""
        new_target = AnimatableVector(target)
        _ = new_target - self.current
        self.target = new_target

    def remaining(self) -> AnimatableVector:
        return self.target - self.current

    def is_settled(self, tolerance: float = 1e-6) -> bool:
        """True once the squared distance to the target is within tolerance**2."""
        return self.remaining().magnitude_squared <= tolerance * tolerance

    def step(self, fraction: float) -> AnimatableVector:
        """
        Advance one tick.

        Args:
            fraction: Share of the remaining distance covered this tick, in (0, 1].

        Raises:
            ValueError: If `fraction` is outside (0, 1].

        Returns:
            The new current vector.
        """
        if not 0.0 < fraction <= 1.0:
            raise ValueError(f"Step fraction must be in (0, 1], got {fraction}.")
        self.current = self.current + self.remaining() * fraction
        return self.current

    def snap(self) -> AnimatableVector:
        """Jump straight to the target."""
        self.current = AnimatableVector(self.target.to_array())
        return self.current

    def frames(
        self,
        width: float,
        height: float,
        fraction: float = 0.25,
        tolerance: float = 1e-3,
        max_frames: int = 120,
        options: Optional[SparklineOptions] = None,
    ) -> Iterator[SparklineGeometry]:
        """
        Yield the geometry of each tick until the series settles.

        Once settled, the final frame is drawn from the exact target.
        At most `max_frames` frames are produced.
        """
        for frame in range(max_frames):
            if self.is_settled(tolerance):
                self.snap()
                logger.debug(f"Transition settled after {frame} frames.")
                yield build_geometry(self.current.to_array(), width, height, options)
                return
            self.step(fraction)
            yield build_geometry(self.current.to_array(), width, height, options)
        logger.debug(f"Transition stopped at max_frames={max_frames}.")
