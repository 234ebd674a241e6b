"""Tests for the traversable-line index."""

import pytest

from territory.geometry import rect_ring
from territory.traversal import TraversableBorderIndex
from territory.types import Provenance

SQUARE = rect_ring(0.0, 0.0, 100.0, 100.0)
RIGHT_HALF = rect_ring(50.0, 0.0, 100.0, 100.0)
LEFT_HALF = ((50.0, 0.0), (50.0, 100.0), (0.0, 100.0), (0.0, 0.0), (50.0, 0.0))


@pytest.fixture
def index():
    return TraversableBorderIndex(SQUARE)


class TestInitialState:
    def test_edge_counts(self, index):
        assert index.edge_count(Provenance.OUTER) == 4
        assert index.edge_count(Provenance.CLAIMED) == 0
        assert index.edge_count(Provenance.PLAYABLE) == 4

    def test_outer_wins_tie_with_playable(self, index):
        hit = index.nearest((50, -3))
        assert hit.provenance is Provenance.OUTER
        assert hit.point == (50.0, 0.0)
        assert abs(hit.distance - 3.0) < 1e-9

    def test_is_traversable(self, index):
        assert index.is_traversable((50, 2), 5.0)
        assert not index.is_traversable((50, 50), 5.0)


class TestClaimedEdges:
    def test_add_claimed(self, index):
        index.add_claimed(RIGHT_HALF)
        assert index.edge_count(Provenance.CLAIMED) == 4
        hit = index.nearest((48, 50))
        assert hit.provenance is Provenance.CLAIMED
        assert hit.point == (50.0, 50.0)
        assert abs(hit.distance - 2.0) < 1e-9

    def test_claimed_wins_tie_with_playable(self, index):
        index.add_claimed(RIGHT_HALF)
        index.replace_playable(LEFT_HALF)
        hit = index.nearest((50, 50))
        assert hit.provenance is Provenance.CLAIMED
        assert hit.distance == 0.0

    def test_claimed_edges_accumulate(self, index):
        index.add_claimed(RIGHT_HALF)
        index.add_claimed(rect_ring(0.0, 0.0, 50.0, 20.0))
        assert index.edge_count(Provenance.CLAIMED) == 8

    def test_permanent_line(self, index):
        index.add_claimed(RIGHT_HALF)
        assert index.is_on_permanent_line((50, 30), 1.0)
        assert index.is_on_permanent_line((0, 30), 1.0)
        assert not index.is_on_permanent_line((25, 30), 1.0)


class TestPlayableEdges:
    def test_replace_playable(self, index):
        index.replace_playable(rect_ring(10.0, 10.0, 90.0, 90.0))
        hit = index.nearest((12, 50))
        assert hit.provenance is Provenance.PLAYABLE
        assert hit.point == (10.0, 50.0)

    def test_playable_is_traversable_but_not_permanent(self, index):
        index.replace_playable(rect_ring(10.0, 10.0, 90.0, 90.0))
        assert index.is_traversable((10, 50), 1.0)
        assert not index.is_on_permanent_line((10, 50), 1.0)
        assert index.is_on_playable_line((10, 50), 1.0)
        assert not index.is_on_playable_line((0, 50), 1.0)

    def test_nearest_traversable_point(self, index):
        index.replace_playable(rect_ring(10.0, 10.0, 90.0, 90.0))
        assert index.nearest_traversable_point((3, 50)) == (0.0, 50.0)


def test_zero_length_edge():
    index = TraversableBorderIndex(
        ((0.0, 0.0), (0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 0.0))
    )
    hit = index.nearest((-3, -4))
    assert abs(hit.distance - 5.0) < 1e-9
    assert hit.point == (0.0, 0.0)
