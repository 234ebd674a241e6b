"""Stateless geometry helpers for closed rings and polylines.

Rings follow one convention throughout the package: a sequence of
``(x, y)`` tuples whose last point repeats the first. Screen coordinates
are assumed (y grows downward), so a clockwise ring on screen has a
positive shoelace sum.

  * ``segment_distance`` / ``project_onto_segment``: clamped projection
    onto a segment, used by every "how far from the boundary" query.
  * ``signed_area`` / ``polygon_area``: shoelace formula.
  * ``point_in_polygon``: ray-casting parity test. Points exactly on an
    edge may land on either side; callers that care handle that case
    themselves (see ``classify.py``).
  * ``close_ring``: builds a well-formed ring from an open vertex list.
  * ``is_simple_ring``: shapely validity check, used to reject regions
    whose drawn path crosses itself or the boundary.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from shapely.geometry import Polygon as ShapelyPolygon

from .types import Point, Ring


def project_onto_segment(p: Point, a: Point, b: Point) -> tuple[Point, float]:
    """Closest point to ``p`` on segment ``a -> b`` and its parameter t."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    seg_len_sq = dx * dx + dy * dy
    if seg_len_sq == 0:
        return (a[0], a[1]), 0.0

    t = ((p[0] - a[0]) * dx + (p[1] - a[1]) * dy) / seg_len_sq
    t = max(0.0, min(1.0, t))
    return (a[0] + t * dx, a[1] + t * dy), t


def segment_distance(p: Point, a: Point, b: Point) -> float:
    """Euclidean distance from ``p`` to segment ``a -> b``."""
    (qx, qy), _ = project_onto_segment(p, a, b)
    return math.hypot(p[0] - qx, p[1] - qy)


def polyline_distance(p: Point, points: Sequence[Point]) -> float:
    """Distance from ``p`` to an open polyline (inf for an empty one)."""
    if len(points) == 1:
        return math.hypot(p[0] - points[0][0], p[1] - points[0][1])
    best = math.inf
    for i in range(len(points) - 1):
        best = min(best, segment_distance(p, points[i], points[i + 1]))
    return best


def _require_closed(ring: Sequence[Point]) -> None:
    if len(ring) < 2 or ring[0] != ring[-1]:
        raise ValueError("ring must repeat its first point at the end")


def signed_area(ring: Sequence[Point]) -> float:
    """Shoelace area; positive for clockwise rings in screen coordinates."""
    _require_closed(ring)
    total = 0.0
    for i in range(len(ring) - 1):
        total += ring[i][0] * ring[i + 1][1]
        total -= ring[i + 1][0] * ring[i][1]
    return total / 2.0


def polygon_area(ring: Sequence[Point]) -> float:
    return abs(signed_area(ring))


def point_in_polygon(p: Point, ring: Sequence[Point]) -> bool:
    """Ray-casting point-in-polygon test."""
    px, py = p
    n = len(ring)
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if (yi > py) != (yj > py):
            intersect_x = (xj - xi) * (py - yi) / (yj - yi) + xi
            if px < intersect_x:
                inside = not inside
        j = i
    return inside


def dedupe_consecutive(points: Sequence[Point]) -> list[Point]:
    """Drop points equal to their predecessor."""
    result: list[Point] = []
    for x, y in points:
        pt = (float(x), float(y))
        if not result or result[-1] != pt:
            result.append(pt)
    return result


def close_ring(points: Sequence[Point]) -> Ring:
    """Turn an open vertex list into a closed ring.

    Consecutive duplicates are dropped, including trailing points that
    coincide with the start, so the only repeated point is the closure.
    """
    open_pts = dedupe_consecutive(points)
    while len(open_pts) > 1 and open_pts[-1] == open_pts[0]:
        open_pts.pop()
    if not open_pts:
        return ()
    return tuple(open_pts) + (open_pts[0],)


def distinct_vertex_count(ring: Sequence[Point]) -> int:
    return len(set(ring))


def is_finite_point(p: Point) -> bool:
    return math.isfinite(p[0]) and math.isfinite(p[1])


def is_simple_ring(ring: Sequence[Point]) -> bool:
    """True if the ring bounds a valid, non-self-intersecting polygon."""
    if distinct_vertex_count(ring) < 3:
        return False
    return bool(ShapelyPolygon(ring).is_valid)


def rect_ring(left: float, top: float, right: float, bottom: float) -> Ring:
    """Axis-aligned rectangle, clockwise on screen, starting top-left."""
    return (
        (left, top),
        (right, top),
        (right, bottom),
        (left, bottom),
        (left, top),
    )
