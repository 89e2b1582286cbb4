"""Authoring-time board.

A :class:`Level` is a mutable sparse map from squares to the entity specs
placed on them. It knows nothing about ``State``; use
:func:`ghost_pursuit.levels.convert.to_state` to freeze it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .entity_spec import EntitySpec

# (x, y) square on the authoring grid
Square = Tuple[int, int]


@dataclass
class Level:
    """Board under construction.

    Attributes:
        width, height: Board size in squares, both positive.
        wrap: Toroidal adjacency on the resulting ``State``.
        seed: Base seed copied to the resulting ``State``.
        turn: Starting turn.
    """

    width: int
    height: int
    wrap: bool = False
    seed: Optional[int] = None
    turn: int = 0

    cells: Dict[Square, List[EntitySpec]] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid board size: {self.width}x{self.height}")

    def add(self, pos: Square, obj: EntitySpec) -> None:
        """Stack ``obj`` on the square ``pos``."""
        self.cells.setdefault(self._checked(pos), []).append(obj)

    def objects_at(self, pos: Square) -> List[EntitySpec]:
        """Copy of the specs stacked on ``pos``, bottom first."""
        return list(self.cells.get(self._checked(pos), []))

    def iter_squares(self) -> Iterator[Tuple[Square, List[EntitySpec]]]:
        """Occupied squares in row-major order."""
        for pos in sorted(self.cells, key=lambda p: (p[1], p[0])):
            yield pos, self.cells[pos]

    def _checked(self, pos: Square) -> Square:
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Out of bounds: {(x, y)} for board {self.width}x{self.height}"
            )
        return (x, y)
