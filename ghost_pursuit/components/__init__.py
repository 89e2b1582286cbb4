"""ghost_pursuit.components
=========================

Aggregate import surface for all ECS component dataclasses, e.g.::

    from ghost_pursuit.components import Position, Unit, UnitKind

Components are plain ``@dataclass(frozen=True)`` value objects with no
behavior beyond small predicates; the systems and decision functions
interpret them.
"""

from .properties import Barrier
from .properties import Blocking
from .properties import Facing
from .properties import Position
from .properties import Targeting, TargetingType
from .properties import Unit, UnitKind

__all__ = [
    "Barrier",
    "Blocking",
    "Facing",
    "Position",
    "Targeting",
    "TargetingType",
    "Unit",
    "UnitKind",
]
