"""Replay a sequence of claim attempts against a fresh field.

Used by ``scripts/replay_claims.py`` and by tests to drive whole stages
from plain data. Rejected attempts are recorded and skipped, the way the
game loop discards a failed drawing and keeps playing.

The JSON interface (``replay_json``) takes::

    {
      "field": {"width": 960, "height": 720, "line_thickness": 20},
      "claims": [
        {"path": [[480, 10], [480, 710]], "hazard": [200, 300]},
        ...
      ]
    }

and returns per-claim results plus the final field summary.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import PartitionError
from .field import Field
from .types import FieldParams, Point


@dataclass
class ClaimRequest:
    path: list[Point]
    hazard: Point

    @staticmethod
    def from_dict(d: dict) -> ClaimRequest:
        return ClaimRequest(
            path=[(float(p[0]), float(p[1])) for p in d["path"]],
            hazard=(float(d["hazard"][0]), float(d["hazard"][1])),
        )


@dataclass
class ClaimResult:
    area: float | None = None
    error: str | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        if self.ok:
            return {"area": self.area}
        return {"error": self.error, "message": self.message}


@dataclass
class ReplayResult:
    results: list[ClaimResult] = field(default_factory=list)
    claimed_percentage: float = 0.0
    playable_boundary: list[Point] = field(default_factory=list)
    claimed_areas: list[list[Point]] = field(default_factory=list)

    @property
    def applied(self) -> int:
        return sum(1 for r in self.results if r.ok)

    def to_dict(self) -> dict:
        return {
            "results": [r.to_dict() for r in self.results],
            "applied": self.applied,
            "claimed_percentage": self.claimed_percentage,
            "playable_boundary": [list(p) for p in self.playable_boundary],
            "claimed_areas": [
                [list(p) for p in ring] for ring in self.claimed_areas
            ],
        }


def replay(params: FieldParams, claims: list[ClaimRequest]) -> ReplayResult:
    f = Field.from_params(params)
    result = ReplayResult()
    for claim in claims:
        try:
            area = f.process_claim(claim.path, claim.hazard)
        except PartitionError as e:
            result.results.append(
                ClaimResult(error=type(e).__name__, message=str(e))
            )
            continue
        result.results.append(ClaimResult(area=area))

    result.claimed_percentage = f.claimed_percentage()
    result.playable_boundary = f.current_playable_boundary()
    result.claimed_areas = f.claimed_areas()
    return result


def replay_json(d: dict) -> dict:
    params = FieldParams.from_dict(d["field"])
    claims = [ClaimRequest.from_dict(c) for c in d.get("claims", [])]
    return replay(params, claims).to_dict()


def print_summary(result: dict) -> None:
    """One line per claim from a ``replay_json`` result, then the totals."""
    for i, r in enumerate(result["results"]):
        if "error" in r:
            print(f"claim {i}: rejected ({r['error']}: {r['message']})")
        else:
            print(f"claim {i}: area {r['area']:.1f}")
    print(
        f"{result['applied']}/{len(result['results'])} claims applied, "
        f"{result['claimed_percentage']:.2f}% claimed"
    )
