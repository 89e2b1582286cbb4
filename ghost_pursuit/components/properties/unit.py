"""Unit component.

Every mobile participant (the player and each ghost) carries a ``Unit``
component naming its kind. The unit locator queries the board by kind, and
barriers decide passability by kind.
"""

from dataclasses import dataclass
from enum import StrEnum, auto

class UnitKind(StrEnum):
    """Closed set of unit kinds."""

    PLAYER = auto()
    BLINKY = auto()
    PINKY = auto()
    INKY = auto()
    CLYDE = auto()


@dataclass(frozen=True)
class Unit:
    """Kind tag.

    Attributes:
        kind: Which archetype this entity is.
    """

    kind: UnitKind
