"""Decide which of the two partition regions the player claims.

The hazard stays in the region it occupies; the other region is claimed.
A hazard sitting on a permanent line (outer border or an already claimed
edge) that is also part of the current playable boundary does not occupy
any region: the claim goes through and the player gets the smaller region.
Permanent lines elsewhere lie in claimed land and get no such treatment. A hazard on the freshly drawn path, or one that
no region (or both regions) contains, is reported as ambiguous rather than
resolved by a default.
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import AmbiguousPartitionError
from .geometry import point_in_polygon, polygon_area, polyline_distance
from .traversal import TraversableBorderIndex
from .types import Point, Ring


def _smaller_first(region_a: Ring, region_b: Ring) -> tuple[Ring, Ring]:
    if polygon_area(region_a) < polygon_area(region_b):
        return region_a, region_b
    return region_b, region_a


def classify(
    region_a: Ring,
    region_b: Ring,
    hazard: Point,
    traversable_index: TraversableBorderIndex,
    *,
    tolerance: float,
    path: Sequence[Point] | None = None,
) -> tuple[Ring, Ring]:
    """Return ``(claimed, remaining)``."""
    if path is not None and polyline_distance(hazard, path) <= tolerance:
        raise AmbiguousPartitionError(
            f"hazard at {hazard} lies on the drawn path"
        )

    # A permanent line away from the playable boundary is claimed land.
    if traversable_index.is_on_permanent_line(
        hazard, tolerance
    ) and traversable_index.is_on_playable_line(hazard, tolerance):
        return _smaller_first(region_a, region_b)

    in_a = point_in_polygon(hazard, region_a)
    in_b = point_in_polygon(hazard, region_b)
    if in_a == in_b:
        where = "both regions" if in_a else "neither region"
        raise AmbiguousPartitionError(f"hazard at {hazard} is in {where}")
    if in_a:
        return region_b, region_a
    return region_a, region_b
