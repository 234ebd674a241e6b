"""Split a closed boundary into two regions along a drawn path.

Given a boundary ring ``v0 .. vN`` (``vN == v0``, edges ``i -> i+1``) and a
path whose endpoints lie on that boundary, the two regions are:

  * **region A**: the path walked forward, then the boundary from the
    vertex after the end point's edge up to the start point's edge vertex,
    closed back on the path start.
  * **region B**: the path walked backward, then the boundary from the
    vertex after the start point's edge up to the end point's edge vertex,
    closed back on the path end.

Every boundary vertex is used by exactly one of the two arcs, and the path
is shared by both regions with opposite directions. The signed areas
therefore always add up to the boundary's signed area; what can go wrong
is orientation. A path that leaves the boundary or crosses itself yields
a region wound the other way (or a non-simple one), so the winding and
shapely validity checks on each region are what guarantee the two
regions tile the boundary.

When both endpoints sit on the same edge, the one closer to the edge's
start vertex comes first along the boundary: one region gets the full
boundary loop and the other is the pocket between path and edge.

Endpoints are expected to lie exactly on the boundary. ``Field`` snaps them
before calling ``partition``; this module does not check it.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from .errors import DegeneratePartitionError
from .geometry import (
    close_ring,
    distinct_vertex_count,
    is_simple_ring,
    signed_area,
)
from .projector import locate
from .types import BorderHit, Point, Ring

logger = logging.getLogger(__name__)

def _arc_counts(start: BorderHit, end: BorderHit, n_edges: int) -> tuple[int, int]:
    """Number of boundary vertices in the A and B arcs."""
    if start.segment_index == end.segment_index:
        if start.t <= end.t:
            return n_edges, 0
        return 0, n_edges
    count_a = (start.segment_index - end.segment_index) % n_edges
    return count_a, n_edges - count_a


def _arc(boundary: Sequence[Point], first: int, count: int) -> list[Point]:
    n_edges = len(boundary) - 1
    return [boundary[(first + k) % n_edges] for k in range(count)]


def _check_region(name: str, region: Ring, boundary_sign: float) -> float:
    if distinct_vertex_count(region) < 3:
        raise DegeneratePartitionError(
            f"region {name} has fewer than 3 distinct vertices"
        )
    area = signed_area(region)
    if not math.isfinite(area) or area == 0.0:
        raise DegeneratePartitionError(f"region {name} has zero area")
    if (area > 0) != (boundary_sign > 0):
        raise DegeneratePartitionError(
            f"region {name} is wound against the boundary; "
            "the path leaves the playable area"
        )
    if not is_simple_ring(region):
        raise DegeneratePartitionError(f"region {name} is self-intersecting")
    return abs(area)


def partition(
    boundary: Sequence[Point], path: Sequence[Point]
) -> tuple[Ring, Ring]:
    """Build the two regions the path cuts ``boundary`` into.

    Raises DegeneratePartitionError if either region is not a proper
    simple polygon wound the same way as the boundary.
    """
    if len(path) < 2:
        raise ValueError("path needs at least two points")
    if len(boundary) < 4:
        raise ValueError("boundary needs at least three edges")

    n_edges = len(boundary) - 1
    start = locate(path[0], boundary)
    end = locate(path[-1], boundary)
    count_a, count_b = _arc_counts(start, end, n_edges)
    logger.debug(
        "path spans segments %d -> %d (arcs %d/%d vertices)",
        start.segment_index,
        end.segment_index,
        count_a,
        count_b,
    )

    region_a = close_ring(
        list(path) + _arc(boundary, end.segment_index + 1, count_a)
    )
    region_b = close_ring(
        list(reversed(path)) + _arc(boundary, start.segment_index + 1, count_b)
    )

    boundary_area = signed_area(boundary)
    area_a = _check_region("A", region_a, boundary_area)
    area_b = _check_region("B", region_b, boundary_area)
    logger.debug("region areas %.3f / %.3f", area_a, area_b)
    return region_a, region_b
