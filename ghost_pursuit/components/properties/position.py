"""Position component.

Immutable integer grid coordinates. A ``Position`` doubles as the identity of
a board square: two units stand on the same square exactly when their
positions compare equal.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
