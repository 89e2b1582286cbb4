"""Barrier component.

A barrier makes its square impassable only for the listed unit kinds. The
classic use is the ghost-house door: ghosts walk through it, the player may
not. Searches without a traveler ignore barriers entirely.
"""

from dataclasses import dataclass

from pyrsistent import pset
from pyrsistent.typing import PSet

from ghost_pursuit.components.properties.unit import UnitKind


@dataclass(frozen=True)
class Barrier:
    """Kind-specific obstacle.

    Attributes:
        kinds: Unit kinds that may not enter the barrier's square.
    """

    kinds: PSet[UnitKind] = pset()

    def blocks(self, kind: UnitKind) -> bool:
        return kind in self.kinds
