"""Data types shared by the territory engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass

Point = tuple[float, float]
# Closed vertex sequence, first point repeated at the end.
Ring = tuple[Point, ...]


class Provenance(enum.Enum):
    """Where a traversable edge came from.

    Assigned once when the edge is inserted, never re-derived from geometry.
    Declaration order is the nearest-point preference order on exact ties.
    """

    OUTER = "outer"
    CLAIMED = "claimed"
    PLAYABLE = "playable"


@dataclass(frozen=True)
class BorderHit:
    """Nearest point on a boundary, as found by ``projector.locate``."""

    segment_index: int
    point: Point
    distance: float
    # Position of ``point`` along its segment, 0 at the start vertex.
    t: float


@dataclass(frozen=True)
class TraversableHit:
    provenance: Provenance
    point: Point
    distance: float


@dataclass
class FieldParams:
    width: float
    height: float
    line_thickness: float = 20.0
    border_correction: float = 0.0
    snap_tolerance: float = 5.0
    hazard_tolerance: float = 1.0
    traverse_tolerance: float = 5.0

    @property
    def margin(self) -> float:
        return self.line_thickness / 2

    @staticmethod
    def from_dict(d: dict) -> FieldParams:
        return FieldParams(
            width=d["width"],
            height=d["height"],
            line_thickness=d.get("line_thickness", 20.0),
            border_correction=d.get("border_correction", 0.0),
            snap_tolerance=d.get("snap_tolerance", 5.0),
            hazard_tolerance=d.get("hazard_tolerance", 1.0),
            traverse_tolerance=d.get("traverse_tolerance", 5.0),
        )

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "line_thickness": self.line_thickness,
            "border_correction": self.border_correction,
            "snap_tolerance": self.snap_tolerance,
            "hazard_tolerance": self.hazard_tolerance,
            "traverse_tolerance": self.traverse_tolerance,
        }


@dataclass(frozen=True)
class ClaimOutcome:
    """Summary of one applied claim."""

    index: int
    area: float
    claimed: Ring
    remaining: Ring
    claimed_percentage: float
