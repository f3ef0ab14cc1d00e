"""Rate-limited progress observation for long searches."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_INTERVAL = 0.05


@dataclass(frozen=True)
class ProgressSnapshot:
    """Search progress at one point in time."""
    best_distance: float
    frontier_size: int
    nodes_expanded: int
    elapsed: float

    def format(self) -> str:
        return (f"searching... distance to goal: {self.best_distance:.9f}, "
                f"size of open set: {self.frontier_size}")


ProgressCallback = Callable[[ProgressSnapshot], None]


class ProgressReporter:
    """Forward snapshots to a callback at most once per interval.

    The first offered snapshot is always delivered. Callback failures are
    logged and otherwise ignored; they never reach the search loop.
    """

    def __init__(self, callback: ProgressCallback,
                 interval: float = DEFAULT_PROGRESS_INTERVAL,
                 clock: Callable[[], float] = time.monotonic):
        self.callback = callback
        self.interval = interval
        self.clock = clock
        self.reports_sent = 0
        self._last_report: Optional[float] = None

    def offer(self, snapshot_factory: Callable[[], ProgressSnapshot]) -> bool:
        """Deliver a snapshot if the interval has elapsed since the last one.

        The snapshot is only built when it will actually be delivered.

        Returns:
            True if the callback was invoked
        """
        now = self.clock()
        if self._last_report is not None and now - self._last_report <= self.interval:
            return False
        self._last_report = now

        try:
            self.callback(snapshot_factory())
        except Exception as e:
            logger.warning(f"Progress callback failed: {e}")
            return False
        self.reports_sent += 1
        return True
