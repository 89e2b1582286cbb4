"""Direction enumeration.

``SEARCH_ORDER`` is the canonical ordering of the four cardinal directions.
Breadth-first search and legal-move enumeration iterate in this order, which
is what makes tie-breaking between equal-length paths deterministic.
"""

from enum import StrEnum, auto
from typing import Dict, List, Tuple


class Direction(StrEnum):
    """Cardinal direction on the board.

    Members:
        NORTH: Towards row 0 (``y - 1``).
        EAST: Towards the last column (``x + 1``).
        SOUTH: Towards the last row (``y + 1``).
        WEST: Towards column 0 (``x - 1``).
    """

    NORTH = auto()
    EAST = auto()
    SOUTH = auto()
    WEST = auto()


SEARCH_ORDER: List[Direction] = [
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
]

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}
