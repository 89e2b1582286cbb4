"""Entity factories for authoring boards.

Each ghost factory wires the targeting rule of its archetype, so the rule is
fixed the moment the ghost is placed on a ``Level``.
"""

from typing import Callable, Dict, Optional, Tuple

from pyrsistent import pset

from ghost_pursuit.components import (
    Barrier,
    Blocking,
    Facing,
    Position,
    Targeting,
    TargetingType,
    Unit,
    UnitKind,
)
from ghost_pursuit.directions import Direction
from ghost_pursuit.levels.entity_spec import EntitySpec


def create_wall() -> EntitySpec:
    """Square impassable for everyone."""
    return EntitySpec(blocking=Blocking())


def create_ghost_door() -> EntitySpec:
    """Ghost-house door: ghosts pass, the player does not."""
    return EntitySpec(barrier=Barrier(kinds=pset([UnitKind.PLAYER])))


def create_player(direction: Direction = Direction.WEST) -> EntitySpec:
    """The pursued unit, initially facing ``direction``."""
    return EntitySpec(unit=Unit(UnitKind.PLAYER), facing=Facing(direction))


def create_blinky() -> EntitySpec:
    """Shadow: chases the player's square."""
    return EntitySpec(
        unit=Unit(UnitKind.BLINKY),
        targeting=Targeting(TargetingType.CHASE),
    )


def create_pinky() -> EntitySpec:
    """Speedy: aims ahead of the player."""
    return EntitySpec(
        unit=Unit(UnitKind.PINKY),
        targeting=Targeting(TargetingType.AMBUSH),
    )


def create_inky() -> EntitySpec:
    """Bashful: reflects Blinky through a point ahead of the player."""
    return EntitySpec(
        unit=Unit(UnitKind.INKY),
        targeting=Targeting(TargetingType.REFLECTED_PROJECTION, ally=UnitKind.BLINKY),
    )


def create_clyde(home: Optional[Tuple[int, int]] = None) -> EntitySpec:
    """Pokey: chases from afar, retreats to ``home`` up close.

    Without a home Clyde simply chases.
    """
    return EntitySpec(
        unit=Unit(UnitKind.CLYDE),
        targeting=Targeting(
            TargetingType.PATROL_CORNER,
            home=Position(*home) if home is not None else None,
        ),
    )


GHOST_FACTORIES: Dict[UnitKind, Callable[[], EntitySpec]] = {
    UnitKind.BLINKY: create_blinky,
    UnitKind.PINKY: create_pinky,
    UnitKind.INKY: create_inky,
    UnitKind.CLYDE: create_clyde,
}
"""Registry of ghost kinds to their factory."""
