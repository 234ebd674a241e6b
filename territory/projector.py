"""Locate the nearest point on a closed boundary."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .geometry import project_onto_segment
from .types import BorderHit, Point


def locate(point: Point, boundary: Sequence[Point]) -> BorderHit:
    """Project ``point`` onto the closest edge of ``boundary``.

    Edge ``i`` runs from ``boundary[i]`` to ``boundary[i + 1]``. Only a
    strictly smaller distance replaces the current best, so ties go to the
    lowest segment index.
    """
    if len(boundary) < 2:
        raise ValueError("boundary needs at least one edge")

    def hit(i: int) -> BorderHit:
        proj, t = project_onto_segment(point, boundary[i], boundary[i + 1])
        dist = math.hypot(point[0] - proj[0], point[1] - proj[1])
        return BorderHit(segment_index=i, point=proj, distance=dist, t=t)

    best = hit(0)
    for i in range(1, len(boundary) - 1):
        candidate = hit(i)
        if candidate.distance < best.distance:
            best = candidate
    return best
