"""Property component aggregates.

Re-exports the components that describe an entity on the board: where it is
(:class:`Position`), what it is (:class:`Unit`), which way it faces
(:class:`Facing`), how it picks destinations (:class:`Targeting`) and
whether it obstructs movement (:class:`Blocking`, :class:`Barrier`).

All components are immutable dataclasses; replacing an instance in a store
is how state changes between ticks.
"""

from .barrier import Barrier
from .blocking import Blocking
from .facing import Facing
from .position import Position
from .targeting import Targeting, TargetingType
from .unit import Unit, UnitKind

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
