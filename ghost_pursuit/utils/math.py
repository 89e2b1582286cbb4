"""Distance helpers used by the unit locator and targeting heuristics."""

from ghost_pursuit.components import Position


def manhattan_distance(a: Position, b: Position) -> int:
    """Return ``|dx| + |dy|`` between two squares (ignores walls and wrap)."""
    return abs(a.x - b.x) + abs(a.y - b.y)
