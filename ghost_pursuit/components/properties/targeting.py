"""Targeting component.

Selects, once at construction time, which destination rule a ghost uses
every tick. The rules themselves live in :mod:`ghost_pursuit.targeting`.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Optional

from ghost_pursuit.components.properties.position import Position
from ghost_pursuit.components.properties.unit import UnitKind


class TargetingType(StrEnum):
    CHASE = auto()
    AMBUSH = auto()
    PATROL_CORNER = auto()
    REFLECTED_PROJECTION = auto()


@dataclass(frozen=True)
class Targeting:
    """Destination-selection directive for a ghost.

    Attributes:
        type:
            Rule used to pick the destination square each tick.
        ally:
            Kind of the other unit the rule is anchored on. Only
            ``REFLECTED_PROJECTION`` uses one (Blinky); when set, a missing
            ally makes the ghost fall back to random movement.
        home:
            Square ``PATROL_CORNER`` retreats to when the player is
            close. Ignored by the other rules.
    """

    type: TargetingType = TargetingType.CHASE
    ally: Optional[UnitKind] = None
    home: Optional[Position] = None
