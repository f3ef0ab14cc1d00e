"""A* search over the scalar state space.

This module implements the search driver: it pops the lowest f-score point
from the frontier, tests it against the goal with an epsilon, and otherwise
relaxes its four generated successors into the ledger. Edge cost is one per
move while the heuristic is the coordinate distance, so the search always
returns a valid path when it finds one but not necessarily the shortest.
"""

import math
import time
import logging
from typing import Optional, List, Dict, Tuple, Any, Union
from dataclasses import dataclass, field

from scalar_astar.core.data_models import Point, Action, distance
from scalar_astar.search.successors import MoveSet, generate_successors, DEFAULT_STEP, DEFAULT_ANCHORS
from scalar_astar.search.frontier import PriorityFrontier
from scalar_astar.search.ledger import CostLedger
from scalar_astar.search.path import reconstruct_path
from scalar_astar.search.progress import (
    ProgressReporter, ProgressSnapshot, ProgressCallback, DEFAULT_PROGRESS_INTERVAL
)

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 1e-6

PointLike = Union[Point, float]


@dataclass
class SearchResult:
    """Result from A* search."""
    success: bool
    termination_reason: str = "unknown"
    path: List[Point] = field(default_factory=list)
    # actions[i] labels path[i] -> path[i + 1]; the last slot holds terminal_action
    actions: List[Optional[Action]] = field(default_factory=list)
    # Last action examined before the search stopped. Not necessarily the
    # move that reached the terminal point; see arrival_action for that.
    terminal_action: Optional[Action] = None
    arrival_action: Optional[Action] = None
    best_distance: float = math.inf
    nodes_expanded: int = 0
    nodes_generated: int = 0
    computation_time: float = 0.0
    statistics: Optional[Dict[str, Any]] = None

    @property
    def final_point(self) -> Optional[Point]:
        return self.path[-1] if self.path else None

    @property
    def edge_actions(self) -> List[Optional[Action]]:
        """Actions backed by the predecessor ledger, one per edge of the path."""
        return self.actions[:-1]

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to a JSON-friendly dictionary."""
        return {
            'success': self.success,
            'termination_reason': self.termination_reason,
            'path': [p.x for p in self.path],
            'actions': [str(a) if a is not None else None for a in self.actions],
            'terminal_action': str(self.terminal_action) if self.terminal_action else None,
            'arrival_action': str(self.arrival_action) if self.arrival_action else None,
            'best_distance': self.best_distance,
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'computation_time': self.computation_time,
            'statistics': self.statistics
        }


@dataclass
class SearchStatistics:
    """Detailed search statistics."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    stale_entries_skipped: int = 0
    relaxations: int = 0
    reopened_states: int = 0
    max_frontier_size: int = 0
    best_distance: float = math.inf

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'stale_entries_skipped': self.stale_entries_skipped,
            'relaxations': self.relaxations,
            'reopened_states': self.reopened_states,
            'max_frontier_size': self.max_frontier_size,
            'best_distance': self.best_distance
        }


@dataclass
class SearchConfig:
    """Configuration for A* search."""
    precision: float = DEFAULT_PRECISION  # goal reached when distance < precision
    step: float = DEFAULT_STEP  # constant move size
    anchors: Tuple[float, float] = DEFAULT_ANCHORS  # interpolation targets
    max_nodes_expanded: Optional[int] = None  # None means unbounded
    max_computation_time: Optional[float] = None  # seconds, None means unbounded
    progress_interval: float = DEFAULT_PROGRESS_INTERVAL

    @property
    def moves(self) -> MoveSet:
        return MoveSet.from_anchors(self.step, self.anchors)


def _as_point(value: PointLike) -> Point:
    return value if isinstance(value, Point) else Point(value)


class AStarSearcher:
    """A* search with a lazy-deletion frontier and an explicit budget."""

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize A* searcher.

        Args:
            config: Search configuration parameters
        """
        self.config = config or SearchConfig()

        # State of the most recent search, kept for inspection
        self.statistics = SearchStatistics()
        self.ledger = CostLedger()
        self.frontier = PriorityFrontier()

        logger.debug(f"A* searcher initialized with precision={self.config.precision}, "
                     f"step={self.config.step}, anchors={self.config.anchors}")

    def search(self, start: PointLike, goal: PointLike,
               progress_callback: Optional[ProgressCallback] = None) -> SearchResult:
        """Search for a move sequence from start to within precision of goal.

        Args:
            start: Starting point
            goal: Goal point
            progress_callback: Optional sink for rate-limited progress snapshots

        Returns:
            SearchResult with path, actions and statistics
        """
        start_time = time.perf_counter()
        start = _as_point(start)
        goal = _as_point(goal)
        precision = self.config.precision
        moves = self.config.moves

        self.statistics = SearchStatistics()
        self.ledger = CostLedger()
        self.frontier = PriorityFrontier()
        stats = self.statistics

        reporter = None
        if progress_callback is not None:
            reporter = ProgressReporter(progress_callback, interval=self.config.progress_interval)

        logger.info(f"Starting A* search: {start} -> {goal} "
                    f"(precision={precision}, step={moves.step})")

        h_start = distance(start, goal)
        self.ledger.seed(start, h_start)
        self.frontier.push(start, h_start)

        deadline = None
        if self.config.max_computation_time is not None:
            deadline = start_time + self.config.max_computation_time

        # Updated after every examined successor, accepted or not
        last_action: Optional[Action] = None

        while True:
            if deadline is not None and time.perf_counter() > deadline:
                termination_reason = "timeout"
                break

            entry = self.frontier.pop()
            if entry is None:
                termination_reason = "search_exhausted"
                break
            current = entry.point

            distance_to_goal = distance(current, goal)
            stats.best_distance = min(stats.best_distance, distance_to_goal)

            # Open-set size counts the point just popped
            if reporter is not None:
                reporter.offer(lambda: ProgressSnapshot(
                    best_distance=stats.best_distance,
                    frontier_size=len(self.frontier) + 1,
                    nodes_expanded=stats.nodes_expanded,
                    elapsed=time.perf_counter() - start_time
                ))

            if distance_to_goal < precision:
                logger.info(f"Found a path with distance={distance_to_goal}")
                return self._create_success_result(
                    current, last_action, time.perf_counter() - start_time
                )

            if (self.config.max_nodes_expanded is not None and
                    stats.nodes_expanded >= self.config.max_nodes_expanded):
                termination_reason = "max_nodes_reached"
                break

            stats.nodes_expanded += 1
            tentative_g = self.ledger.g(current) + 1.0

            for neighbor, action in generate_successors(current, moves):
                stats.nodes_generated += 1
                reopening = neighbor in self.ledger and neighbor not in self.frontier
                if self.ledger.relax(neighbor, tentative_g, distance(neighbor, goal),
                                     current, action):
                    if reopening:
                        stats.reopened_states += 1
                    self.frontier.push(neighbor, self.ledger.f(neighbor))
                last_action = action

        computation_time = time.perf_counter() - start_time
        logger.info(f"A* search stopped without reaching the goal: {termination_reason} "
                    f"after {stats.nodes_expanded} expansions")
        self._finalize_statistics()

        return SearchResult(
            success=False,
            termination_reason=termination_reason,
            best_distance=stats.best_distance,
            nodes_expanded=stats.nodes_expanded,
            nodes_generated=stats.nodes_generated,
            computation_time=computation_time,
            statistics=stats.to_dict()
        )

    def _finalize_statistics(self) -> None:
        """Copy frontier and ledger counters into the statistics."""
        self.statistics.stale_entries_skipped = self.frontier.stale_discarded
        self.statistics.relaxations = self.ledger.relaxations
        self.statistics.max_frontier_size = self.frontier.max_size

    def _create_success_result(self, terminal: Point, last_action: Optional[Action],
                               computation_time: float) -> SearchResult:
        """Create result for a successful search."""
        self._finalize_statistics()
        path, actions = reconstruct_path(self.ledger.came_from, terminal, last_action)

        arrival = self.ledger.predecessor(terminal)
        arrival_action = arrival[1] if arrival is not None else None
        if arrival_action is not None and arrival_action != last_action:
            logger.debug(f"Last explored action {last_action} differs from the move "
                         f"that reached {terminal} ({arrival_action})")

        return SearchResult(
            success=True,
            termination_reason="goal_reached",
            path=path,
            actions=actions,
            terminal_action=last_action,
            arrival_action=arrival_action,
            best_distance=self.statistics.best_distance,
            nodes_expanded=self.statistics.nodes_expanded,
            nodes_generated=self.statistics.nodes_generated,
            computation_time=computation_time,
            statistics=self.statistics.to_dict()
        )


def create_astar_searcher(precision: float = DEFAULT_PRECISION,
                          step: float = DEFAULT_STEP,
                          max_nodes_expanded: Optional[int] = None,
                          max_computation_time: Optional[float] = None,
                          progress_interval: float = DEFAULT_PROGRESS_INTERVAL) -> AStarSearcher:
    """Factory function to create A* searcher with custom configuration.

    Args:
        precision: Goal tolerance; the search stops at distance < precision
        step: Size of the constant moves
        max_nodes_expanded: Expansion budget (None for unbounded)
        max_computation_time: Wall-clock budget in seconds (None for unbounded)
        progress_interval: Minimum seconds between progress snapshots

    Returns:
        Configured AStarSearcher instance
    """
    config = SearchConfig(
        precision=precision,
        step=step,
        max_nodes_expanded=max_nodes_expanded,
        max_computation_time=max_computation_time,
        progress_interval=progress_interval
    )

    return AStarSearcher(config)


def search(start: PointLike, goal: PointLike,
           precision: float = DEFAULT_PRECISION,
           step: float = DEFAULT_STEP,
           anchors: Tuple[float, float] = DEFAULT_ANCHORS,
           max_nodes_expanded: Optional[int] = None,
           max_computation_time: Optional[float] = None,
           progress_callback: Optional[ProgressCallback] = None,
           progress_interval: float = DEFAULT_PROGRESS_INTERVAL) -> SearchResult:
    """Run a single A* search with explicit parameters.

    Inputs are not validated here; callers must pass a positive finite
    precision, a finite non-zero step and finite points.
    """
    config = SearchConfig(
        precision=precision,
        step=step,
        anchors=(float(anchors[0]), float(anchors[1])),
        max_nodes_expanded=max_nodes_expanded,
        max_computation_time=max_computation_time,
        progress_interval=progress_interval
    )
    return AStarSearcher(config).search(start, goal, progress_callback=progress_callback)
