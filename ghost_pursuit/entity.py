"""Entity primitive.

Every unit, wall and door is an ``EntityID`` (an integer) plus the component
dataclasses stored for it in the persistent maps on :class:`State`. Ids are
allocated by :func:`ghost_pursuit.levels.convert.to_state`, densely from zero,
so boards built from the same ``Level`` are identical.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Entity:
    """Marker stored in ``State.entity`` for every allocated id."""

    pass
