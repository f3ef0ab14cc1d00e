"""Core data models for the scalar A* search."""

from dataclasses import dataclass, field
from enum import Enum
import numpy as np


@dataclass(eq=False)
class Point:
    """A state of the search: a single real-valued coordinate.

    Two points are the same search node only if the bit patterns of their
    coordinates are identical. ``0.0`` and ``-0.0`` are different nodes, and
    closeness is never used for deduplication (the goal test is the only
    approximate comparison in the search).
    """

    x: float

    def __post_init__(self) -> None:
        """Normalize the coordinate and cache its bit pattern."""
        self.x = float(self.x)
        self.bits = int(np.float64(self.x).view(np.uint64))

    def distance_to(self, other: 'Point') -> float:
        """Absolute difference of the two coordinates."""
        return abs(self.x - other.x)

    def __eq__(self, other: object) -> bool:
        """Equality on the exact float64 representation."""
        if not isinstance(other, Point):
            return NotImplemented
        return self.bits == other.bits

    def __hash__(self) -> int:
        """Hash on the exact float64 representation."""
        return hash(self.bits)

    def __str__(self) -> str:
        return f"P({self.x})"


def distance(a: Point, b: Point) -> float:
    """Metric used both as A* heuristic and as goal-proximity test."""
    return a.distance_to(b)


class Action(Enum):
    """Move that produced a successor from its predecessor."""

    HALF_LEFT = "half_left"            # midpoint toward the lower anchor
    HALF_RIGHT = "half_right"          # midpoint toward the upper anchor
    CONSTANT_LEFT = "constant_left"    # x - step
    CONSTANT_RIGHT = "constant_right"  # x + step

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class FrontierEntry:
    """Heap entry pairing a point with its f-score at push time.

    ``sequence`` is the insertion counter, so equal f-scores pop in
    insertion order.
    """
    f_score: float
    sequence: int
    point: Point = field(compare=False)
