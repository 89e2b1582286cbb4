"""Tick reducer.

:func:`step` is the public entry point for advancing the board by one
movement tick: every ghost decides and moves, then the turn counter is
bumped. The player's own movement is driven by the surrounding game and is
applied to the ``State`` (position and ``Facing``) before calling ``step``.
"""

import random
from dataclasses import replace
from typing import Optional

from ghost_pursuit.config import DEFAULT_CONFIG, PursuitConfig
from ghost_pursuit.state import State
from ghost_pursuit.systems.ghost import ghost_system


def step(
    state: State,
    rng: Optional[random.Random] = None,
    config: PursuitConfig = DEFAULT_CONFIG,
) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable state.
        rng (random.Random | None): Optional shared random source.
        config (PursuitConfig): Tuning constants.

    Returns:
        State: Next state snapshot with ``turn`` incremented.
    """
    state = ghost_system(state, rng, config)
    return replace(state, turn=state.turn + 1)
