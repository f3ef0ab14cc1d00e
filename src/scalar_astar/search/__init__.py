"""Search algorithms for the scalar state space.

This module implements A* over points generated by interpolation toward two
anchors and constant steps, with a lazy-deletion frontier.
"""

from .successors import MoveSet, generate_successors
from .frontier import PriorityFrontier
from .ledger import CostLedger
from .path import reconstruct_path
from .progress import ProgressReporter, ProgressSnapshot
from .astar import AStarSearcher, SearchResult, SearchConfig, SearchStatistics, create_astar_searcher, search

__all__ = [
    'MoveSet',
    'generate_successors',
    'PriorityFrontier',
    'CostLedger',
    'reconstruct_path',
    'ProgressReporter',
    'ProgressSnapshot',
    'AStarSearcher',
    'SearchResult',
    'SearchConfig',
    'SearchStatistics',
    'create_astar_searcher',
    'search'
]
