"""Plain-text board format.

One character per square, one line per row::

    #######
    #B...I#
    #.#-#.#
    #C.P..#
    #######

Legend:

* ``#`` wall
* ``.`` or space: empty floor
* ``-`` ghost-house door (barrier for the player)
* ``P`` player, ``B`` Blinky, ``K`` Pinky, ``I`` Inky, ``C`` Clyde

Clyde's home is the floor square closest to the bottom-left corner of the
board. On a walled-in maze the corner itself is a wall, so the home is the
first square inside it.
"""

from typing import Dict, List, Optional, Tuple

from ghost_pursuit.components import Position, UnitKind
from ghost_pursuit.directions import Direction
from ghost_pursuit.levels.factories import (
    GHOST_FACTORIES,
    create_clyde,
    create_ghost_door,
    create_player,
    create_wall,
)
from ghost_pursuit.levels.grid import Level
from ghost_pursuit.state import State
from ghost_pursuit.utils.ecs import entities_at

WALL = "#"
FLOOR = (".", " ")
DOOR = "-"

GHOST_GLYPHS: Dict[str, UnitKind] = {
    "B": UnitKind.BLINKY,
    "K": UnitKind.PINKY,
    "I": UnitKind.INKY,
    "C": UnitKind.CLYDE,
}
PLAYER_GLYPH = "P"

UNIT_GLYPHS: Dict[UnitKind, str] = {kind: glyph for glyph, kind in GHOST_GLYPHS.items()}
UNIT_GLYPHS[UnitKind.PLAYER] = PLAYER_GLYPH


def nearest_floor(rows: List[str], corner: Tuple[int, int]) -> Tuple[int, int]:
    """Non-wall, non-door square closest to ``corner``.

    Distance is Manhattan; ties go to the square that comes first in
    row-major order.

    Raises:
        ValueError: If the map has no such square.
    """
    cx, cy = corner
    candidates = [
        (x, y)
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
        if char not in (WALL, DOOR)
    ]
    if not candidates:
        raise ValueError("Map has no floor square")
    return min(candidates, key=lambda p: (abs(p[0] - cx) + abs(p[1] - cy), p[1], p[0]))


def parse_level(
    text: str,
    player_direction: Direction = Direction.WEST,
    wrap: bool = False,
    seed: Optional[int] = None,
) -> Level:
    """Build a ``Level`` from the text format.

    Leading/trailing blank lines are ignored; every remaining row must have
    the same width.

    Raises:
        ValueError: On an empty map, ragged rows or an unknown character.
    """
    rows: List[str] = text.strip("\n").splitlines()
    if not rows or not rows[0]:
        raise ValueError("Map is empty")
    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Row {y} has width {len(row)}, expected {width}")

    level = Level(width=width, height=len(rows), wrap=wrap, seed=seed)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in FLOOR:
                continue
            if char == WALL:
                level.add((x, y), create_wall())
            elif char == DOOR:
                level.add((x, y), create_ghost_door())
            elif char == PLAYER_GLYPH:
                level.add((x, y), create_player(player_direction))
            elif char in GHOST_GLYPHS:
                kind = GHOST_GLYPHS[char]
                if kind == UnitKind.CLYDE:
                    spec = create_clyde(nearest_floor(rows, (0, level.height - 1)))
                else:
                    spec = GHOST_FACTORIES[kind]()
                level.add((x, y), spec)
            else:
                raise ValueError(f"Unknown map character {char!r} at {(x, y)}")
    return level


def render_state(state: State) -> str:
    """Dump a ``State`` back to the text format (units drawn over terrain)."""
    lines: List[str] = []
    for y in range(state.height):
        line: List[str] = []
        for x in range(state.width):
            eids = sorted(entities_at(state, Position(x, y)))
            glyph = "."
            for eid in eids:
                if eid in state.blocking:
                    glyph = WALL
                elif eid in state.barrier:
                    glyph = DOOR
            for eid in eids:
                if eid in state.unit:
                    glyph = UNIT_GLYPHS[state.unit[eid].kind]
            line.append(glyph)
        lines.append("".join(line))
    return "\n".join(lines)
