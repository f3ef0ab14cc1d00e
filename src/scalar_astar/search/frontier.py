"""Priority frontier with lazy deletion.

The heap never supports decrease-key or removal. Instead a companion
membership set is the authoritative answer to "is this point still a live
frontier candidate"; heap entries whose point is no longer a member are
discarded when they surface.
"""

import heapq
import logging
from typing import List, Optional, Set

from scalar_astar.core.data_models import Point, FrontierEntry

logger = logging.getLogger(__name__)


class PriorityFrontier:
    """Min-heap of frontier entries keyed by f-score, plus open-set membership."""

    def __init__(self):
        self._heap: List[FrontierEntry] = []
        self._members: Set[Point] = set()
        self._sequence = 0
        self.stale_discarded = 0
        self.max_size = 0

    def push(self, point: Point, f_score: float) -> bool:
        """Open ``point`` with priority ``f_score``.

        Does nothing if the point is already open; its existing entry keeps
        its original priority.

        Returns:
            True if a new entry was pushed
        """
        if point in self._members:
            return False
        self._members.add(point)
        heapq.heappush(self._heap, FrontierEntry(f_score, self._sequence, point))
        self._sequence += 1
        self.max_size = max(self.max_size, len(self._members))
        return True

    def pop(self) -> Optional[FrontierEntry]:
        """Pop the lowest-f live entry and close its point.

        Stale entries (point no longer open) are discarded on the way.

        Returns:
            The live entry, or None once the heap is empty
        """
        while self._heap:
            entry = heapq.heappop(self._heap)
            if entry.point not in self._members:
                self.stale_discarded += 1
                logger.debug(f"Discarded stale frontier entry for {entry.point}")
                continue
            self._members.remove(entry.point)
            return entry
        return None

    def discard(self, point: Point) -> None:
        """Drop ``point`` from the open set without touching the heap.

        Its entry stays in the heap and is skipped by a later ``pop``. The A*
        driver never withdraws an open point, so during a search every heap
        entry is live and this is the only way entries become stale.
        """
        self._members.discard(point)

    @property
    def heap_size(self) -> int:
        """Number of heap entries, stale ones included."""
        return len(self._heap)

    def __contains__(self, point: Point) -> bool:
        return point in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __bool__(self) -> bool:
        return bool(self._members)
