from __future__ import annotations

from typing import Any, Dict

from pyrsistent import pmap

from ghost_pursuit.components.properties import Position
from ghost_pursuit.entity import Entity
from ghost_pursuit.levels.entity_spec import COMPONENT_TO_FIELD
from ghost_pursuit.levels.grid import Level
from ghost_pursuit.state import State
from ghost_pursuit.types import EntityID


def to_state(level: Level) -> State:
    """
    Freeze a Level into an immutable State.

    Entity ids are dense and start at zero. They are handed out square by
    square in row-major order, bottom of each stack first, so the same Level
    always yields the same ids.
    """
    entity: Dict[EntityID, Entity] = {}
    position: Dict[EntityID, Position] = {}
    stores: Dict[str, Dict[EntityID, Any]] = {
        store_name: {} for store_name in COMPONENT_TO_FIELD.values()
    }

    eid: EntityID = 0
    for (x, y), stack in level.iter_squares():
        for obj in stack:
            entity[eid] = Entity()
            position[eid] = Position(x, y)
            for store_name, comp in obj.iter_components():
                stores[store_name][eid] = comp
            eid += 1

    return State(
        width=level.width,
        height=level.height,
        wrap=level.wrap,
        entity=pmap(entity),
        position=pmap(position),
        turn=level.turn,
        seed=level.seed,
        **{store_name: pmap(store) for store_name, store in stores.items()},
    )
