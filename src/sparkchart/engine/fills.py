from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from sparkchart.model.geometry_primitives import FillPolygon, Segment, Side

logger = logging.getLogger(__name__)


def build_fill(segment: Segment, level_y: float) -> FillPolygon | None:
    """
    Close a Segment against the reference level.

    ABOVE: the segment points, then down to the level at the last x and
    across to the level at the first x.
    BELOW: from the level at the first x, through the segment points, back
    to the level at the last x.

    Returns:
        The polygon, or None for a segment with fewer than 2 points.
    """
    pts = segment.points
    if len(pts) < 2:
        return None

    first_x = pts[0, 0]
    last_x = pts[-1, 0]

    if segment.side == Side.ABOVE:
        closing = np.array([[last_x, level_y], [first_x, level_y]])
        return FillPolygon(Side.ABOVE, np.vstack((pts, closing)))

    return FillPolygon(
        Side.BELOW,
        np.vstack(([[first_x, level_y]], pts, [[last_x, level_y]])),
    )


def build_fills(segments: Sequence[Segment], level_y: float) -> list[FillPolygon]:
    """One fill per Segment, bounded by the reference level (never the canvas floor)."""
    fills = [f for f in (build_fill(s, level_y) for s in segments) if f is not None]
    if len(fills) != len(segments):
        logger.debug(f"Skipped {len(segments) - len(fills)} degenerate segments.")
    return fills
