"""Back-pointer path reconstruction."""

from typing import List, Mapping, Optional, Tuple

from scalar_astar.core.data_models import Point, Action


def reconstruct_path(came_from: Mapping[Point, Tuple[Point, Action]],
                     terminal: Point,
                     terminal_action: Optional[Action]
                     ) -> Tuple[List[Point], List[Optional[Action]]]:
    """Walk ``came_from`` from ``terminal`` back to the start.

    ``actions[i]`` labels the edge ``path[i] -> path[i + 1]``. The final
    entry is ``terminal_action`` as supplied by the caller, which the search
    driver sets to the last action it examined, not the action recorded for
    the terminal point.

    Args:
        came_from: Predecessor map from the ledger
        terminal: Point the search stopped at
        terminal_action: Value for the last slot of the action list

    Returns:
        (path, actions), both ordered start to terminal and of equal length
    """
    path = [terminal]
    actions: List[Optional[Action]] = [terminal_action]

    current = terminal
    while current in came_from:
        current, action = came_from[current]
        path.append(current)
        actions.append(action)

    path.reverse()
    actions.reverse()
    return path, actions
