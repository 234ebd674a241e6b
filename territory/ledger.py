"""Claimed-area bookkeeping."""

from __future__ import annotations

from collections.abc import Sequence

from .geometry import polygon_area
from .types import Point


class AreaLedger:
    """Running total of claimed area against a fixed arena area.

    ``border_correction`` is subtracted from the total when computing the
    percentage, to account for the area covered by the border line itself.
    """

    def __init__(self, total_area: float, border_correction: float = 0.0) -> None:
        if total_area - border_correction <= 0:
            raise ValueError(
                f"usable area must be positive (total {total_area}, "
                f"correction {border_correction})"
            )
        self._total_area = total_area
        self._border_correction = border_correction
        self._total_claimed = 0.0

    @property
    def total_area(self) -> float:
        return self._total_area

    @property
    def usable_area(self) -> float:
        return self._total_area - self._border_correction

    @property
    def total_claimed_area(self) -> float:
        return self._total_claimed

    @property
    def remaining_area(self) -> float:
        return self._total_area - self._total_claimed

    def record_claim(self, region: Sequence[Point]) -> float:
        """Add the region's area; returns the region's (unclamped) area."""
        area = polygon_area(region)
        self._total_claimed = min(self._total_area, self._total_claimed + area)
        return area

    def claimed_percentage(self) -> float:
        return min(100.0, self._total_claimed / self.usable_area * 100.0)
