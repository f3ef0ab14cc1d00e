"""Tests for core data models."""

import pytest

from scalar_astar.core.data_models import Point, Action, FrontierEntry, distance


class TestPoint:
    """Test Point equality, hashing and metric."""

    def test_point_creation(self):
        """Test coordinates are stored as floats."""
        point = Point(1)

        assert isinstance(point.x, float)
        assert point.x == 1.0
        assert str(point) == "P(1.0)"

    def test_exact_equality(self):
        """Test points compare on exact representation."""
        assert Point(0.5) == Point(0.5)
        assert Point(0.1 + 0.2) != Point(0.3)
        assert hash(Point(0.25)) == hash(Point(0.25))

    def test_signed_zero_is_distinct(self):
        """Test 0.0 and -0.0 are different nodes despite comparing equal as floats."""
        assert 0.0 == -0.0
        assert Point(0.0) != Point(-0.0)
        assert len({Point(0.0), Point(-0.0)}) == 2

    def test_nan_equals_itself(self):
        """Test NaN with the same bit pattern is one node."""
        nan = float('nan')
        assert Point(nan) == Point(nan)

    def test_set_deduplication(self):
        """Test points work as set and dict keys."""
        points = {Point(0.5), Point(0.5), Point(0.75)}
        assert len(points) == 2

        costs = {Point(0.5): 1.0}
        assert costs[Point(0.5)] == 1.0

    def test_comparison_with_other_types(self):
        """Test points never equal raw floats."""
        assert Point(0.5) != 0.5

    def test_distance(self):
        """Test absolute-difference metric."""
        assert distance(Point(0.25), Point(1.0)) == 0.75
        assert distance(Point(1.0), Point(0.25)) == 0.75
        assert distance(Point(-0.5), Point(0.5)) == 1.0
        assert Point(0.3).distance_to(Point(0.3)) == 0.0


class TestAction:
    """Test Action labels."""

    def test_action_values(self):
        """Test the four move labels."""
        assert [a.value for a in Action] == [
            "half_left", "half_right", "constant_left", "constant_right"
        ]
        assert str(Action.HALF_RIGHT) == "half_right"

    def test_action_immutable(self):
        """Test enum members cannot be reassigned."""
        with pytest.raises(AttributeError):
            Action.HALF_LEFT.value = "other"


class TestFrontierEntry:
    """Test heap entry ordering."""

    def test_ordering_by_f_score(self):
        """Test lower f-score sorts first."""
        low = FrontierEntry(1.0, 5, Point(0.1))
        high = FrontierEntry(2.0, 0, Point(0.2))

        assert low < high

    def test_ties_broken_by_sequence(self):
        """Test equal f-scores fall back to insertion order."""
        first = FrontierEntry(1.0, 0, Point(0.9))
        second = FrontierEntry(1.0, 1, Point(0.1))

        assert first < second
        assert sorted([second, first]) == [first, second]

    def test_entry_is_frozen(self):
        """Test entries cannot be modified once created."""
        entry = FrontierEntry(1.0, 0, Point(0.5))
        with pytest.raises(AttributeError):
            entry.f_score = 0.0
