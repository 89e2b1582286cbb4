"""Built-in destination-selection functions.

Each *target function* maps (state, ghost id, player id, ally id, config) to
the square the ghost should head for this tick, or ``None`` when the rule
cannot determine one. The decider then paths to that square. Rules are
selected per ghost through the :class:`ghost_pursuit.components.Targeting`
component and looked up in :data:`TARGET_FN_REGISTRY`.

Contract (``TargetFn``):

* Must not mutate ``State``.
* ``ally`` is only provided to rules that need one (see :data:`DEFAULT_ALLY`);
  other rules receive ``None``.
* Returning ``None`` means "destination undetermined"; the decider falls back
  to a random move.
"""

import logging
from typing import Dict, Optional

from ghost_pursuit.components import Position, TargetingType, UnitKind
from ghost_pursuit.config import PursuitConfig
from ghost_pursuit.state import State
from ghost_pursuit.types import EntityID, TargetFn
from ghost_pursuit.utils.grid import walk
from ghost_pursuit.utils.math import manhattan_distance
from ghost_pursuit.utils.navigation import shortest_path

logger = logging.getLogger(__name__)


def project_ahead(state: State, eid: EntityID, distance: int) -> Position:
    """Square ``distance`` steps ahead of a unit along its facing direction.

    Stops early at the board edge. A unit without a ``Facing`` component has
    nowhere to project to and its own square is returned.
    """
    pos = state.position[eid]
    facing = state.facing.get(eid)
    if facing is None:
        return pos
    return walk(state, pos, [facing.direction] * distance)


def chase_target(
    state: State,
    eid: EntityID,
    player: EntityID,
    ally: Optional[EntityID],
    config: PursuitConfig,
) -> Optional[Position]:
    """Head straight for the player's square (Blinky)."""
    return state.position[player]


def ambush_target(
    state: State,
    eid: EntityID,
    player: EntityID,
    ally: Optional[EntityID],
    config: PursuitConfig,
) -> Optional[Position]:
    """Aim ``config.ambush_ahead`` squares in front of the player (Pinky)."""
    return project_ahead(state, player, config.ambush_ahead)


def patrol_corner_target(
    state: State,
    eid: EntityID,
    player: EntityID,
    ally: Optional[EntityID],
    config: PursuitConfig,
) -> Optional[Position]:
    """Chase from afar, retreat to the home corner up close (Clyde).

    When the player is more than ``config.shyness`` squares away (Manhattan)
    the ghost chases; otherwise it heads to ``Targeting.home``. A ghost with
    no home configured keeps chasing.
    """
    player_pos = state.position[player]
    if manhattan_distance(state.position[eid], player_pos) > config.shyness:
        return player_pos
    home = state.targeting[eid].home
    return home if home is not None else player_pos


def reflected_projection_target(
    state: State,
    eid: EntityID,
    player: EntityID,
    ally: Optional[EntityID],
    config: PursuitConfig,
) -> Optional[Position]:
    """Extend the line from the ally through a point ahead of the player (Inky).

    The board exposes adjacency only, so the reflection is built by walking
    the same relative path twice:

    1. B is ``config.squares_ahead`` squares ahead of the player.
    2. A is the ally's square.
    3. The shortest path A -> B is searched with no traveler (walls only).
    4. That direction sequence is walked again starting from B; the square
       reached is the destination C. Both walks stop early at the board edge.

    Returns ``None`` if there is no path from A to B.
    """
    if ally is None:
        raise ValueError("Reflected projection requires an ally unit")

    pivot = project_ahead(state, player, config.squares_ahead)
    logger.debug(
        "Calculated position B %s: %d squares %s of player.",
        pivot,
        config.squares_ahead,
        state.facing[player].direction if player in state.facing else None,
    )

    first_half = shortest_path(state, state.position[ally], pivot, None)
    if first_half is None:
        logger.debug("Could not find a path from A %s to B %s.", state.position[ally], pivot)
        return None

    destination = walk(state, pivot, first_half)
    logger.debug("Calculated position C %s.", destination)
    return destination


# Target function registry keyed by the Targeting component type
TARGET_FN_REGISTRY: Dict[TargetingType, TargetFn] = {
    TargetingType.CHASE: chase_target,
    TargetingType.AMBUSH: ambush_target,
    TargetingType.PATROL_CORNER: patrol_corner_target,
    TargetingType.REFLECTED_PROJECTION: reflected_projection_target,
}

# Ally kind a rule anchors on when the Targeting component does not name one
DEFAULT_ALLY: Dict[TargetingType, UnitKind] = {
    TargetingType.REFLECTED_PROJECTION: UnitKind.BLINKY,
}


def ally_kind_for(targeting_type: TargetingType, ally: Optional[UnitKind]) -> Optional[UnitKind]:
    """Resolve which ally kind (if any) a ghost must locate before targeting."""
    if ally is not None:
        return ally
    return DEFAULT_ALLY.get(targeting_type)
