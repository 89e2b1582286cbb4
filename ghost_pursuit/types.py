"""Common type aliases.

``TargetFn`` is the extension point used by :mod:`ghost_pursuit.targeting`
to plug destination-selection rules in per ghost kind.
"""

from typing import Callable, List, Optional, TYPE_CHECKING


# Forward declaration for TargetFn typing to avoid circular imports:
if TYPE_CHECKING:
    from ghost_pursuit.config import PursuitConfig
    from ghost_pursuit.components import Position
    from ghost_pursuit.directions import Direction
    from ghost_pursuit.state import State

EntityID = int

Path = List["Direction"]

TargetFn = Callable[
    ["State", EntityID, EntityID, Optional[EntityID], "PursuitConfig"],
    Optional["Position"],
]
