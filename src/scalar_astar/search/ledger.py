"""Cost/score ledger for A* bookkeeping."""

import math
import logging
from typing import Dict, Optional, Tuple

from scalar_astar.core.data_models import Point, Action

logger = logging.getLogger(__name__)


class CostLedger:
    """Best-known g-scores, f-scores and back-pointers, keyed by point.

    ``g``, ``f`` and ``came_from`` for a point are always written together by
    :meth:`relax`, and only when the new path is strictly cheaper, so the
    recorded g-score of a point never increases.
    """

    def __init__(self):
        self.g_score: Dict[Point, float] = {}
        self.f_score: Dict[Point, float] = {}
        self.came_from: Dict[Point, Tuple[Point, Action]] = {}
        self.relaxations = 0

    def seed(self, start: Point, heuristic: float) -> None:
        """Record the start point with g=0."""
        self.g_score[start] = 0.0
        self.f_score[start] = heuristic

    def g(self, point: Point) -> float:
        """Best-known cost from start; +inf when unseen."""
        return self.g_score.get(point, math.inf)

    def f(self, point: Point) -> float:
        """Best-known total estimated cost; +inf when unseen."""
        return self.f_score.get(point, math.inf)

    def predecessor(self, point: Point) -> Optional[Tuple[Point, Action]]:
        """(predecessor, action) that achieved the best g-score, if any."""
        return self.came_from.get(point)

    def relax(self, point: Point, tentative_g: float, heuristic: float,
              predecessor: Point, action: Action) -> bool:
        """Record a path to ``point`` if it is strictly better than the best known.

        Args:
            point: Successor being relaxed
            tentative_g: Cost of the candidate path to ``point``
            heuristic: Heuristic estimate from ``point`` to the goal
            predecessor: Point the candidate path comes from
            action: Move that leads from ``predecessor`` to ``point``

        Returns:
            True if the ledger was updated
        """
        if not tentative_g < self.g(point):
            return False
        self.came_from[point] = (predecessor, action)
        self.g_score[point] = tentative_g
        self.f_score[point] = tentative_g + heuristic
        self.relaxations += 1
        return True

    def __contains__(self, point: Point) -> bool:
        return point in self.g_score

    def __len__(self) -> int:
        return len(self.g_score)
