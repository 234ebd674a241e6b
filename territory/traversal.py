"""Index of the lines the player may move along.

Three edge sets are kept apart and tagged with their ``Provenance`` when
inserted:

  * ``OUTER``: the arena border, fixed at construction.
  * ``CLAIMED``: every edge of every claimed region, append-only.
  * ``PLAYABLE``: the current playable boundary, replaced on each claim.

Edges are stored as ``(E, 4)`` float arrays of ``(x1, y1, x2, y2)`` rows so
distance queries run vectorized over a whole set.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .types import Point, Provenance, TraversableHit


def _ring_edges(ring: Sequence[Point]) -> np.ndarray:
    pts = np.asarray(ring, dtype=np.float64).reshape(-1, 2)
    if len(pts) < 2:
        return np.empty((0, 4), dtype=np.float64)
    return np.hstack([pts[:-1], pts[1:]])


def _nearest_on_edges(
    edges: np.ndarray, point: Point
) -> tuple[float, Point] | None:
    """Distance to and location of the closest point over all edges."""
    if len(edges) == 0:
        return None
    px, py = point
    x1 = edges[:, 0]
    y1 = edges[:, 1]
    dx = edges[:, 2] - x1
    dy = edges[:, 3] - y1
    len_sq = dx * dx + dy * dy
    # Zero-length edges project onto their start point
    safe_len = np.where(len_sq > 0, len_sq, 1.0)
    t = np.where(len_sq > 0, ((px - x1) * dx + (py - y1) * dy) / safe_len, 0.0)
    t = np.clip(t, 0.0, 1.0)
    qx = x1 + t * dx
    qy = y1 + t * dy
    dist = np.hypot(px - qx, py - qy)
    i = int(np.argmin(dist))
    return float(dist[i]), (float(qx[i]), float(qy[i]))


class TraversableBorderIndex:
    def __init__(self, outer: Sequence[Point]) -> None:
        self._edges: dict[Provenance, np.ndarray] = {
            Provenance.OUTER: _ring_edges(outer),
            Provenance.CLAIMED: np.empty((0, 4), dtype=np.float64),
            Provenance.PLAYABLE: _ring_edges(outer),
        }

    def add_claimed(self, ring: Sequence[Point]) -> None:
        self._edges[Provenance.CLAIMED] = np.vstack(
            [self._edges[Provenance.CLAIMED], _ring_edges(ring)]
        )

    def replace_playable(self, ring: Sequence[Point]) -> None:
        self._edges[Provenance.PLAYABLE] = _ring_edges(ring)

    def edge_count(self, provenance: Provenance) -> int:
        return len(self._edges[provenance])

    def _within(
        self, point: Point, tolerance: float, sets: Sequence[Provenance]
    ) -> bool:
        for prov in sets:
            hit = _nearest_on_edges(self._edges[prov], point)
            if hit is not None and hit[0] <= tolerance:
                return True
        return False

    def is_traversable(self, point: Point, tolerance: float) -> bool:
        """True if ``point`` is within ``tolerance`` of any movable line."""
        return self._within(point, tolerance, list(Provenance))

    def is_on_permanent_line(self, point: Point, tolerance: float) -> bool:
        """Like ``is_traversable`` but ignoring the current playable boundary."""
        return self._within(
            point, tolerance, (Provenance.OUTER, Provenance.CLAIMED)
        )

    def is_on_playable_line(self, point: Point, tolerance: float) -> bool:
        return self._within(point, tolerance, (Provenance.PLAYABLE,))

    def nearest(self, point: Point) -> TraversableHit:
        """Closest traversable point over all sets.

        Sets are scanned OUTER, CLAIMED, PLAYABLE and a later set only wins
        with a strictly smaller distance, so permanent lines win exact ties.
        """
        best: TraversableHit | None = None
        for prov in Provenance:
            hit = _nearest_on_edges(self._edges[prov], point)
            if hit is None:
                continue
            dist, pt = hit
            if best is None or dist < best.distance:
                best = TraversableHit(provenance=prov, point=pt, distance=dist)
        if best is None:
            raise ValueError("index holds no edges")
        return best

    def nearest_traversable_point(self, point: Point) -> Point:
        return self.nearest(point).point
