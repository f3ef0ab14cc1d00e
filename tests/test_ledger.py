"""Tests for the cost ledger and path reconstruction."""

import math

import pytest

from scalar_astar.core.data_models import Point, Action
from scalar_astar.search.ledger import CostLedger
from scalar_astar.search.path import reconstruct_path


class TestCostLedger:
    """Test CostLedger relaxation rules."""

    @pytest.fixture
    def ledger(self):
        ledger = CostLedger()
        ledger.seed(Point(0.5), 0.25)
        return ledger

    def test_seed(self, ledger):
        """Test the start point is seeded with g=0."""
        assert ledger.g(Point(0.5)) == 0.0
        assert ledger.f(Point(0.5)) == 0.25
        assert ledger.predecessor(Point(0.5)) is None
        assert Point(0.5) in ledger

    def test_unseen_point_is_infinite(self, ledger):
        """Test absent entries read as +inf."""
        assert ledger.g(Point(0.9)) == math.inf
        assert ledger.f(Point(0.9)) == math.inf
        assert Point(0.9) not in ledger

    def test_relax_records_all_fields(self, ledger):
        """Test g, f and came_from are updated together."""
        updated = ledger.relax(Point(0.75), 1.0, 0.0, Point(0.5), Action.HALF_RIGHT)

        assert updated is True
        assert ledger.g(Point(0.75)) == 1.0
        assert ledger.f(Point(0.75)) == 1.0
        assert ledger.predecessor(Point(0.75)) == (Point(0.5), Action.HALF_RIGHT)
        assert ledger.relaxations == 1
        assert len(ledger) == 2

    def test_relax_requires_strict_improvement(self, ledger):
        """Test equal or worse costs are rejected and g never increases."""
        target = Point(0.3)
        assert ledger.relax(target, 3.0, 0.1, Point(0.5), Action.HALF_LEFT)
        assert not ledger.relax(target, 3.0, 0.1, Point(0.4), Action.CONSTANT_LEFT)
        assert not ledger.relax(target, 4.0, 0.1, Point(0.4), Action.CONSTANT_LEFT)
        assert ledger.predecessor(target) == (Point(0.5), Action.HALF_LEFT)

        assert ledger.relax(target, 2.0, 0.1, Point(0.6), Action.HALF_LEFT)
        assert ledger.g(target) == 2.0
        assert ledger.f(target) == pytest.approx(2.1)
        assert ledger.predecessor(target) == (Point(0.6), Action.HALF_LEFT)
        assert ledger.relaxations == 2

    def test_start_cannot_be_relaxed(self, ledger):
        """Test no positive-cost path beats the start."""
        assert not ledger.relax(Point(0.5), 1.0, 0.25, Point(0.25), Action.HALF_RIGHT)
        assert ledger.predecessor(Point(0.5)) is None


class TestReconstructPath:
    """Test back-pointer path reconstruction."""

    def test_start_only(self):
        """Test a terminal point without predecessor."""
        path, actions = reconstruct_path({}, Point(0.5), None)

        assert path == [Point(0.5)]
        assert actions == [None]

    def test_chain(self):
        """Test path and action ordering along a chain."""
        came_from = {
            Point(0.25): (Point(0.5), Action.HALF_LEFT),
            Point(0.625): (Point(0.25), Action.HALF_RIGHT),
        }

        path, actions = reconstruct_path(came_from, Point(0.625), Action.CONSTANT_LEFT)

        assert path == [Point(0.5), Point(0.25), Point(0.625)]
        assert actions == [Action.HALF_LEFT, Action.HALF_RIGHT, Action.CONSTANT_LEFT]

    def test_terminal_action_is_taken_as_given(self):
        """Test the last slot is not derived from came_from."""
        came_from = {Point(0.75): (Point(0.5), Action.HALF_RIGHT)}

        _, actions = reconstruct_path(came_from, Point(0.75), Action.CONSTANT_RIGHT)

        assert actions == [Action.HALF_RIGHT, Action.CONSTANT_RIGHT]
        assert len(actions) == 2

    def test_ignores_unrelated_entries(self):
        """Test only the chain ending at the terminal is followed."""
        came_from = {
            Point(0.75): (Point(0.5), Action.HALF_RIGHT),
            Point(0.25): (Point(0.5), Action.HALF_LEFT),
        }

        path, _ = reconstruct_path(came_from, Point(0.75), None)
        assert path == [Point(0.5), Point(0.75)]
