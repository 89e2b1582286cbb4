"""Board adjacency & passability queries.

The decision engine never does coordinate arithmetic of its own; it only asks
for the neighbor of a square in a direction and whether a traveler may stand
on a square. Everything here is pure and cheap enough for BFS inner loops.
"""

from typing import Iterable, List, Optional

from ghost_pursuit.components import Position, UnitKind
from ghost_pursuit.directions import DIRECTION_DELTAS, SEARCH_ORDER, Direction
from ghost_pursuit.state import State
from ghost_pursuit.utils.ecs import entities_at


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the board rectangle."""
    return 0 <= pos.x < state.width and 0 <= pos.y < state.height


def wrap_position(x: int, y: int, width: int, height: int) -> Position:
    """Toroidal wrap for coordinates."""
    return Position(x % width, y % height)


def neighbor_of(state: State, pos: Position, direction: Direction) -> Optional[Position]:
    """Square adjacent to ``pos`` in ``direction``.

    Returns ``None`` past the board edge unless the board wraps.
    """
    dx, dy = DIRECTION_DELTAS[direction]
    if state.wrap:
        return wrap_position(pos.x + dx, pos.y + dy, state.width, state.height)
    next_pos = Position(pos.x + dx, pos.y + dy)
    if not is_in_bounds(state, next_pos):
        return None
    return next_pos


def is_blocked_at(state: State, pos: Position) -> bool:
    """Return True if a ``Blocking`` entity (wall) occupies ``pos``."""
    return any(eid in state.blocking for eid in entities_at(state, pos))


def is_barred_at(state: State, pos: Position, kind: UnitKind) -> bool:
    """Return True if a ``Barrier`` on ``pos`` excludes units of ``kind``."""
    return any(
        state.barrier[eid].blocks(kind)
        for eid in entities_at(state, pos)
        if eid in state.barrier
    )


def is_passable_for(state: State, pos: Position, kind: Optional[UnitKind]) -> bool:
    """Whether a traveler of ``kind`` may occupy ``pos``.

    ``kind=None`` honors only generic impassability (walls); barriers are
    kind-specific and are ignored.
    """
    if not is_in_bounds(state, pos) or is_blocked_at(state, pos):
        return False
    return kind is None or not is_barred_at(state, pos, kind)


def legal_directions(
    state: State, pos: Position, kind: Optional[UnitKind]
) -> List[Direction]:
    """Directions (in search order) leading to a passable neighbor."""
    legal: List[Direction] = []
    for direction in SEARCH_ORDER:
        next_pos = neighbor_of(state, pos, direction)
        if next_pos is not None and is_passable_for(state, next_pos, kind):
            legal.append(direction)
    return legal


def walk(state: State, start: Position, directions: Iterable[Direction]) -> Position:
    """Follow ``directions`` from ``start`` through board adjacency.

    Passability is not checked. If a step has no neighbor (board edge) the
    walk stops there and the last square reached is returned.
    """
    pos = start
    for direction in directions:
        next_pos = neighbor_of(state, pos, direction)
        if next_pos is None:
            break
        pos = next_pos
    return pos
