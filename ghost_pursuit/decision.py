"""Per-tick movement decisions for ghosts.

:func:`decide_move` is the one place where locating units, picking a
destination and pathing to it are chained together. Every step of the chain
that cannot produce an answer degrades to a random legal move, so a caller
always gets a direction back. The single exception is a ghost boxed in with no
legal neighbor at all (``DecisionReason.DEAD_END``), which is reported with
``direction=None`` so the caller can leave it in place.

Nothing here mutates the ``State``; applying a decision is the job of
:func:`ghost_pursuit.systems.ghost.ghost_system` or an external scheduler.
"""

import logging
import random
import time
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Optional

from ghost_pursuit.components import Position, UnitKind
from ghost_pursuit.config import DEFAULT_CONFIG, PursuitConfig
from ghost_pursuit.directions import Direction
from ghost_pursuit.state import State
from ghost_pursuit.targeting import TARGET_FN_REGISTRY, ally_kind_for
from ghost_pursuit.types import EntityID
from ghost_pursuit.utils.ecs import find_nearest
from ghost_pursuit.utils.grid import legal_directions
from ghost_pursuit.utils.navigation import shortest_path

logger = logging.getLogger(__name__)


class DeadEndError(Exception):
    """Raised when a unit has no legal direction to move in."""


class DecisionReason(StrEnum):
    """Which branch of the decision chain produced a move."""

    TARGET = auto()
    NO_ALLY = auto()
    NO_PLAYER = auto()
    UNREACHABLE_INTERMEDIATE = auto()
    UNREACHABLE_DESTINATION = auto()
    ZERO_LENGTH_PATH = auto()
    DEAD_END = auto()


@dataclass(frozen=True)
class MoveDecision:
    """Outcome of one decision.

    Attributes:
        direction: Direction to move, ``None`` only for ``DEAD_END``.
        reason: ``TARGET`` if the ghost paths to its destination, otherwise the
            failure that triggered the random fallback.
        destination: Destination square when one was computed.
    """

    direction: Optional[Direction]
    reason: DecisionReason
    destination: Optional[Position] = None

    @property
    def is_dead_end(self) -> bool:
        return self.reason == DecisionReason.DEAD_END

    @property
    def is_fallback(self) -> bool:
        return self.reason not in (DecisionReason.TARGET, DecisionReason.DEAD_END)


def default_rng(state: State, eid: EntityID) -> random.Random:
    """Deterministic RNG for one unit on one tick.

    Seeded from ``(state.seed, state.turn, eid)`` so that two ghosts deciding
    on the same tick do not draw from the same stream.
    """
    base_seed = hash((state.seed if state.seed is not None else 0, state.turn, eid))
    return random.Random(base_seed)


def random_move(state: State, eid: EntityID, rng: random.Random) -> Direction:
    """Uniformly random direction towards a passable neighbor.

    Raises:
        DeadEndError: If no neighbor of the unit's square is passable for it.
    """
    pos = state.position[eid]
    kind = state.unit[eid].kind
    directions = legal_directions(state, pos, kind)
    if not directions:
        raise DeadEndError(f"Unit {eid} at {pos} has no legal move")
    return rng.choice(directions)


def movement_interval_millis(
    rng: Optional[random.Random] = None, config: PursuitConfig = DEFAULT_CONFIG
) -> int:
    """Delay before a ghost's next move: base interval plus random jitter.

    The result lies in ``[move_interval_ms, move_interval_ms +
    interval_variation_ms)``; 250-299 ms with the default config.
    """
    rng = rng if rng is not None else random.Random()
    return config.move_interval_ms + rng.randrange(config.interval_variation_ms)


def decide_move(
    state: State,
    eid: EntityID,
    rng: Optional[random.Random] = None,
    config: PursuitConfig = DEFAULT_CONFIG,
) -> MoveDecision:
    """Choose the direction a ghost moves this tick.

    Chain:
        1. Locate the nearest ally, if the ghost's rule needs one.
        2. Locate the nearest player.
        3. Ask the targeting rule for a destination.
        4. Find the shortest path there, honoring squares barred for the ghost.
        5. Move along the first step of that path.

    Any step failing falls back to :func:`random_move`.

    Args:
        state (State): Board snapshot.
        eid (EntityID): Ghost to decide for. Must have ``Position``,
            ``Targeting`` and ``Unit`` components.
        rng (random.Random | None): Source for fallback moves. Defaults to
            :func:`default_rng`.
        config (PursuitConfig): Tuning constants.

    Returns:
        MoveDecision: Chosen direction and the branch that produced it.
    """
    t0 = time.perf_counter()
    rng = rng if rng is not None else default_rng(state, eid)
    square = state.position[eid]
    targeting = state.targeting[eid]
    kind = state.unit[eid].kind
    logger.debug("Deciding move for %s %s at %s.", kind, eid, square)

    ally: Optional[EntityID] = None
    ally_kind = ally_kind_for(targeting.type, targeting.ally)
    if ally_kind is not None:
        ally = find_nearest(state, ally_kind, square, exclude=eid)
        if ally is None:
            logger.debug("Could not find %s, will move around randomly.", ally_kind)
            return _fallback(state, eid, rng, DecisionReason.NO_ALLY, t0)
        logger.debug("Found %s (position A).", ally_kind)

    player = find_nearest(state, UnitKind.PLAYER, square, exclude=eid)
    if player is None:
        logger.debug("Could not find player, will move around randomly.")
        return _fallback(state, eid, rng, DecisionReason.NO_PLAYER, t0)

    target_fn = TARGET_FN_REGISTRY[targeting.type]
    destination = target_fn(state, eid, player, ally, config)
    if destination is None:
        logger.debug("Could not determine a destination, will move randomly.")
        return _fallback(state, eid, rng, DecisionReason.UNREACHABLE_INTERMEDIATE, t0)

    path = shortest_path(state, square, destination, eid)
    if path is None:
        logger.debug("Could not find path to destination, will move around randomly.")
        return _fallback(
            state, eid, rng, DecisionReason.UNREACHABLE_DESTINATION, t0, destination
        )
    if not path:
        logger.debug("Already at destination, will move around randomly.")
        return _fallback(
            state, eid, rng, DecisionReason.ZERO_LENGTH_PATH, t0, destination
        )

    direction = path[0]
    logger.debug(
        "Found path to destination. Moving %s (calculated in %.3fms)",
        direction,
        (time.perf_counter() - t0) * 1000,
    )
    return MoveDecision(direction, DecisionReason.TARGET, destination)


def next_move(
    state: State,
    eid: EntityID,
    rng: Optional[random.Random] = None,
    config: PursuitConfig = DEFAULT_CONFIG,
) -> Optional[Direction]:
    """Direction the ghost moves this tick, ``None`` if it is boxed in."""
    return decide_move(state, eid, rng, config).direction


def _fallback(
    state: State,
    eid: EntityID,
    rng: random.Random,
    reason: DecisionReason,
    t0: float,
    destination: Optional[Position] = None,
) -> MoveDecision:
    try:
        direction = random_move(state, eid, rng)
    except DeadEndError:
        logger.debug("Unit %s is stuck in a dead end.", eid)
        return MoveDecision(None, DecisionReason.DEAD_END, destination)
    logger.debug(
        "Moving %s (calculated in %.3fms)", direction, (time.perf_counter() - t0) * 1000
    )
    return MoveDecision(direction, reason, destination)
