"""The playfield aggregate: owns every polygon and runs claims.

``Field`` is the only stateful object in the package. One instance lives
for one stage; a stage reset builds a new one. Each call to
``process_claim`` runs the whole pipeline:

  1. clean the path (drop repeated points) and check both endpoints are
     within ``snap_tolerance`` of the playable boundary (``projector.py``);
  2. snap the endpoints onto the boundary;
  3. cut the playable area in two (``partition.py``);
  4. pick the claimed half from the hazard position (``classify.py``);
  5. commit: update the ledger, the claimed list, the traversable index and
     the playable boundary.

Steps 1-4 only read state, so a rejected claim leaves the field exactly as
it was. Queries hand out copies; callers never see internal tuples
change underneath them.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from .classify import classify
from .errors import InvalidPathError, PartitionError
from .geometry import dedupe_consecutive, is_finite_point, polygon_area, rect_ring
from .ledger import AreaLedger
from .partition import partition
from .projector import locate
from .traversal import TraversableBorderIndex
from .types import ClaimOutcome, FieldParams, Point, Ring, TraversableHit

logger = logging.getLogger(__name__)


class Field:
    def __init__(
        self,
        width: float,
        height: float,
        line_thickness: float = 20.0,
        *,
        border_correction: float = 0.0,
        snap_tolerance: float = 5.0,
        hazard_tolerance: float = 1.0,
        traverse_tolerance: float = 5.0,
    ) -> None:
        self.params = FieldParams(
            width=width,
            height=height,
            line_thickness=line_thickness,
            border_correction=border_correction,
            snap_tolerance=snap_tolerance,
            hazard_tolerance=hazard_tolerance,
            traverse_tolerance=traverse_tolerance,
        )
        margin = self.params.margin
        if not all(
            math.isfinite(v) for v in (width, height, line_thickness)
        ):
            raise ValueError("field dimensions must be finite")
        if margin < 0 or width - 2 * margin <= 0 or height - 2 * margin <= 0:
            raise ValueError(
                f"a {line_thickness} line leaves no room in a "
                f"{width}x{height} field"
            )

        self._outer: Ring = rect_ring(
            margin, margin, width - margin, height - margin
        )
        self._playable: Ring = self._outer
        self._claimed: list[Ring] = []
        self._ledger = AreaLedger(polygon_area(self._outer), border_correction)
        self._index = TraversableBorderIndex(self._outer)
        self.last_claim: ClaimOutcome | None = None

    @staticmethod
    def from_params(params: FieldParams) -> Field:
        return Field(
            params.width,
            params.height,
            params.line_thickness,
            border_correction=params.border_correction,
            snap_tolerance=params.snap_tolerance,
            hazard_tolerance=params.hazard_tolerance,
            traverse_tolerance=params.traverse_tolerance,
        )

    # -- claims -----------------------------------------------------------

    def _snapped_path(self, path: Sequence[Point]) -> list[Point]:
        points = dedupe_consecutive(path)
        if len(points) < 2:
            raise InvalidPathError(
                f"path needs at least 2 distinct points, got {len(points)}"
            )
        if not all(is_finite_point(p) for p in points):
            raise InvalidPathError("path has non-finite coordinates")

        tol = self.params.snap_tolerance
        start = locate(points[0], self._playable)
        end = locate(points[-1], self._playable)
        for name, hit in (("start", start), ("end", end)):
            if hit.distance > tol:
                raise InvalidPathError(
                    f"path {name} is {hit.distance:.3f} from the playable "
                    f"boundary (tolerance {tol})"
                )

        snapped = dedupe_consecutive([start.point, *points[1:-1], end.point])
        if len(snapped) < 2:
            raise InvalidPathError("path collapses to a single point")
        return snapped

    def process_claim(self, path: Sequence[Point], hazard: Point) -> float:
        """Cut the playable area along ``path`` and claim the hazard-free side.

        Returns the claimed area. Raises InvalidPathError,
        DegeneratePartitionError or AmbiguousPartitionError without
        changing any state.
        """
        hazard = (float(hazard[0]), float(hazard[1]))
        if not is_finite_point(hazard):
            raise ValueError("hazard position must be finite")

        try:
            snapped = self._snapped_path(path)
            region_a, region_b = partition(self._playable, snapped)
            claimed, remaining = classify(
                region_a,
                region_b,
                hazard,
                self._index,
                tolerance=self.params.hazard_tolerance,
                path=snapped,
            )
        except PartitionError as e:
            logger.debug("claim rejected (%s): %s", type(e).__name__, e)
            raise

        area = self._ledger.record_claim(claimed)
        self._claimed.append(claimed)
        self._playable = remaining
        self._index.add_claimed(claimed)
        self._index.replace_playable(remaining)
        self.last_claim = ClaimOutcome(
            index=len(self._claimed) - 1,
            area=area,
            claimed=claimed,
            remaining=remaining,
            claimed_percentage=self._ledger.claimed_percentage(),
        )
        logger.info(
            "claim %d: area %.1f, %.2f%% claimed",
            self.last_claim.index,
            area,
            self.last_claim.claimed_percentage,
        )
        return area

    # -- queries ----------------------------------------------------------

    def is_traversable(self, point: Point, tolerance: float | None = None) -> bool:
        if tolerance is None:
            tolerance = self.params.traverse_tolerance
        return self._index.is_traversable(point, tolerance)

    def nearest_traversable(self, point: Point) -> TraversableHit:
        return self._index.nearest(point)

    def nearest_traversable_point(self, point: Point) -> Point:
        return self._index.nearest_traversable_point(point)

    def is_on_playable_border(
        self, point: Point, tolerance: float | None = None
    ) -> bool:
        """True if ``point`` is near the current playable boundary.

        This is the check the player uses to start or finish a path.
        """
        if tolerance is None:
            tolerance = self.params.traverse_tolerance
        return locate(point, self._playable).distance <= tolerance

    def current_playable_boundary(self) -> list[Point]:
        return list(self._playable)

    def border_path(self, clockwise: bool = True) -> list[Point]:
        """Playable boundary vertices without the closing repeat.

        Border runners going the other way round get the reversed list.
        """
        verts = list(self._playable[:-1])
        if not clockwise:
            verts.reverse()
        return verts

    def outer_border(self) -> list[Point]:
        return list(self._outer)

    def claimed_areas(self) -> list[list[Point]]:
        return [list(ring) for ring in self._claimed]

    def claimed_percentage(self) -> float:
        return self._ledger.claimed_percentage()

    @property
    def claim_count(self) -> int:
        return len(self._claimed)

    @property
    def total_area(self) -> float:
        return self._ledger.total_area

    @property
    def total_claimed_area(self) -> float:
        return self._ledger.total_claimed_area

    @property
    def remaining_area(self) -> float:
        return self._ledger.remaining_area
