"""Ghost movement system.

Moves every entity with a ``Targeting`` component one square according to
:func:`ghost_pursuit.decision.decide_move`. Ghosts are processed one after
another in ascending id order and each one decides on the state produced by
the ghosts before it, mirroring a scheduler that never runs two decisions at
the same time. A ghost in a dead end stays where it is.
"""

import random
from dataclasses import replace
from typing import Optional

from ghost_pursuit.components import Facing
from ghost_pursuit.config import DEFAULT_CONFIG, PursuitConfig
from ghost_pursuit.decision import decide_move, default_rng
from ghost_pursuit.state import State
from ghost_pursuit.types import EntityID
from ghost_pursuit.utils.grid import neighbor_of


def move_ghost(
    state: State,
    eid: EntityID,
    rng: Optional[random.Random] = None,
    config: PursuitConfig = DEFAULT_CONFIG,
) -> State:
    """Decide and apply a single ghost's move."""
    decision = decide_move(state, eid, rng, config)
    if decision.direction is None:
        return state
    next_pos = neighbor_of(state, state.position[eid], decision.direction)
    if next_pos is None:
        raise ValueError(
            f"Decision for {eid} points off the board: {decision.direction}"
        )
    return replace(
        state,
        position=state.position.set(eid, next_pos),
        facing=state.facing.set(eid, Facing(decision.direction)),
    )


def ghost_system(
    state: State,
    rng: Optional[random.Random] = None,
    config: PursuitConfig = DEFAULT_CONFIG,
) -> State:
    """Advance all ghosts by one square.

    Args:
        state (State): Current state.
        rng (random.Random | None): Shared source for fallback moves. When
            ``None`` each ghost gets its own :func:`default_rng` stream.
        config (PursuitConfig): Tuning constants.

    Returns:
        State: State with updated ghost positions and facings.
    """
    for eid in sorted(state.targeting.keys()):
        if eid not in state.position:
            continue
        ghost_rng = rng if rng is not None else default_rng(state, eid)
        state = move_ghost(state, eid, ghost_rng, config)
    return state
