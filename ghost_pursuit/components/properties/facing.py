"""Facing component.

The direction a unit is currently moving (or last moved). Targeting rules
that project ahead of the player read it; the ghost system rewrites it every
time a ghost steps.
"""

from dataclasses import dataclass

from ghost_pursuit.directions import Direction


@dataclass(frozen=True)
class Facing:
    direction: Direction
