"""Shortest-path search over the board graph.

Breadth-first search with uniform step cost. Neighbors are expanded in
:data:`ghost_pursuit.directions.SEARCH_ORDER` (north, east, south, west) and
each square is claimed by the first square that discovers it, so among
equal-length paths the one preferring earlier directions at the earliest
step always wins.
"""

import logging
from collections import deque
from typing import Dict, Optional, Tuple

from ghost_pursuit.components import Position, UnitKind
from ghost_pursuit.directions import SEARCH_ORDER, Direction
from ghost_pursuit.state import State
from ghost_pursuit.types import EntityID, Path
from ghost_pursuit.utils.grid import is_passable_for, neighbor_of

logger = logging.getLogger(__name__)


def shortest_path(
    state: State,
    start: Position,
    goal: Position,
    traveler: Optional[EntityID] = None,
) -> Optional[Path]:
    """Find the shortest sequence of steps from ``start`` to ``goal``.

    Args:
        state (State): Board snapshot.
        start (Position): Origin square. Always expanded, even if the
            traveler could not enter it.
        goal (Position): Destination square.
        traveler (EntityID | None): Unit doing the travelling. Squares its
            kind may not occupy are excluded. With ``None`` only walls are
            excluded.

    Returns:
        list[Direction] | None: Steps to take, ``[]`` if ``start == goal``,
        ``None`` if the goal cannot be reached.
    """
    if start == goal:
        return []

    kind: Optional[UnitKind] = None
    if traveler is not None:
        kind = state.unit[traveler].kind

    queue: deque[Position] = deque([start])
    prev: Dict[Position, Tuple[Position, Direction]] = {}
    visited = {start}

    while queue:
        pos = queue.popleft()
        for direction in SEARCH_ORDER:
            next_pos = neighbor_of(state, pos, direction)
            if next_pos is None or next_pos in visited:
                continue
            if not is_passable_for(state, next_pos, kind):
                continue
            visited.add(next_pos)
            prev[next_pos] = (pos, direction)
            if next_pos == goal:
                return _reconstruct(prev, start, goal)
            queue.append(next_pos)

    logger.debug("No path from %s to %s (explored %d squares)", start, goal, len(visited))
    return None


def _reconstruct(
    prev: Dict[Position, Tuple[Position, Direction]], start: Position, goal: Position
) -> Path:
    path: Path = []
    pos = goal
    while pos != start:
        pos, direction = prev[pos]
        path.append(direction)
    path.reverse()
    return path
