"""Blocking component.

Marks an entity (typically a wall) as making its square impassable for every
traveler, including searches that carry no traveler at all.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Blocking:
    """Marker (no data)."""

    pass
