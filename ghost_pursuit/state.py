"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the
board and every unit on it at a single tick. Decision functions only read a
``State``; systems take a previous ``State`` and return a *new* one, nothing
is mutated in place. This keeps every decision deterministic for a given
snapshot and random source.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component.
* Squares are not entities. A square is a :class:`Position` inside the
    ``width`` x ``height`` rectangle; walls and doors are entities positioned
    on squares.
* ``wrap`` turns the board into a torus: stepping off one edge re-enters on
    the opposite side, so every square has four neighbors.
"""

from dataclasses import dataclass
from typing import Optional
from pyrsistent import PMap, pmap

from ghost_pursuit.entity import Entity
from ghost_pursuit.components.properties import (
    Barrier,
    Blocking,
    Facing,
    Position,
    Targeting,
    Unit,
)
from ghost_pursuit.types import EntityID


@dataclass(frozen=True)
class State:
    """Immutable board snapshot.

    Attributes:
        width (int): Board width in squares.
        height (int): Board height in squares.
        wrap (bool): Toroidal adjacency when True; edges have no neighbor otherwise.
        entity (PMap[EntityID, Entity]): Registry of allocated entity ids.
        barrier (PMap[EntityID, Barrier]): Kind-specific obstacles (doors).
        blocking (PMap[EntityID, Blocking]): Obstacles for every traveler (walls).
        facing (PMap[EntityID, Facing]): Current direction of mobile units.
        position (PMap[EntityID, Position]): Square occupied by each entity.
        targeting (PMap[EntityID, Targeting]): Destination rule of each ghost.
        unit (PMap[EntityID, Unit]): Kind of each mobile unit.
        turn (int): Tick counter (0-based).
        seed (int | None): Base RNG seed for deterministic fallback moves.
    """

    # Level
    width: int
    height: int
    wrap: bool = False

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    barrier: PMap[EntityID, Barrier] = pmap()
    blocking: PMap[EntityID, Blocking] = pmap()
    facing: PMap[EntityID, Facing] = pmap()
    position: PMap[EntityID, Position] = pmap()
    targeting: PMap[EntityID, Targeting] = pmap()
    unit: PMap[EntityID, Unit] = pmap()

    # Status
    turn: int = 0

    # RNG
    seed: Optional[int] = None
