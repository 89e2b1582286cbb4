"""ECS convenience queries.

Helper functions for querying entity/component relationships without putting
iteration logic into systems. All functions are pure and operate on the
immutable :class:`ghost_pursuit.state.State` snapshot.

Performance: ``entities_at`` uses a cached reverse index of the immutable
``State.position`` PMap, so the many passability checks made by a single BFS
cost O(1) each.
"""

from functools import lru_cache
from typing import Dict, FrozenSet, List, Mapping, Optional, Set

from ghost_pursuit.components import Position, UnitKind
from ghost_pursuit.state import State
from ghost_pursuit.types import EntityID
from ghost_pursuit.utils.math import manhattan_distance


@lru_cache(maxsize=4096)
def _position_index(
    position_store: Mapping[EntityID, Position],
) -> Mapping[Position, FrozenSet[EntityID]]:
    """Build a reverse index from position to entity IDs.

    The argument is a persistent PMap, which is hashable and thus safe to use
    with ``lru_cache``. Every new position store is a distinct key.
    """
    index: Dict[Position, Set[EntityID]] = {}
    for eid, pos in position_store.items():
        index.setdefault(pos, set()).add(eid)
    return {pos: frozenset(eids) for pos, eids in index.items()}


def entities_at(state: State, pos: Position) -> Set[EntityID]:
    """Return entity IDs whose position equals ``pos``."""
    idx = _position_index(state.position)
    return set(idx.get(pos, ()))


def units_of_kind(state: State, kind: UnitKind) -> List[EntityID]:
    """IDs of positioned units of ``kind``, in ascending id order."""
    return sorted(
        eid
        for eid, unit in state.unit.items()
        if unit.kind == kind and eid in state.position
    )


def find_nearest(
    state: State,
    kind: UnitKind,
    reference: Position,
    exclude: Optional[EntityID] = None,
) -> Optional[EntityID]:
    """Closest unit of ``kind`` to ``reference`` by Manhattan distance.

    Ties go to the lowest entity id. ``exclude`` removes one entity from the
    candidates (a unit looking for the nearest *other* unit of its own kind).
    Returns ``None`` if there is no candidate.
    """
    nearest: Optional[EntityID] = None
    best = 0
    for eid in units_of_kind(state, kind):
        if eid == exclude:
            continue
        distance = manhattan_distance(state.position[eid], reference)
        if nearest is None or distance < best:
            nearest, best = eid, distance
    return nearest
