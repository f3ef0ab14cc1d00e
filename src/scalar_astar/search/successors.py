"""Lazy successor generation for the scalar search space."""

from dataclasses import dataclass
from typing import Tuple

from scalar_astar.core.data_models import Point, Action

DEFAULT_STEP = 0.00589375
DEFAULT_ANCHORS = (0.0, 1.0)


@dataclass(frozen=True)
class MoveSet:
    """Constants that parameterize the four moves."""
    step: float = DEFAULT_STEP
    anchor_low: float = DEFAULT_ANCHORS[0]
    anchor_high: float = DEFAULT_ANCHORS[1]

    @classmethod
    def from_anchors(cls, step: float, anchors: Tuple[float, float]) -> 'MoveSet':
        low, high = anchors
        return cls(step=float(step), anchor_low=float(low), anchor_high=float(high))


def generate_successors(point: Point, moves: MoveSet) -> Tuple[Tuple[Point, Action], ...]:
    """Return the four labeled successors of ``point``.

    The result depends only on ``point`` and ``moves``; nothing is filtered
    here; bounds and visitation checks belong to the search driver.

    Args:
        point: Point to expand
        moves: Step size and interpolation anchors

    Returns:
        Tuple of (successor, action) pairs in fixed order
    """
    x = point.x
    return (
        (Point((x + moves.anchor_low) * 0.5), Action.HALF_LEFT),
        (Point((x + moves.anchor_high) * 0.5), Action.HALF_RIGHT),
        (Point(x - moves.step), Action.CONSTANT_LEFT),
        (Point(x + moves.step), Action.CONSTANT_RIGHT),
    )
