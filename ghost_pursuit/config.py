"""Tuning constants for the targeting rules and tick pacing.

``PursuitConfig`` groups every number the decision engine depends on so a
level (or a test) can override them without touching module globals. The
defaults reproduce the arcade behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PursuitConfig:
    """Decision-engine parameters.

    Attributes:
        squares_ahead: How far ahead of the player the reflected-projection
            rule places its pivot square (point B).
        ambush_ahead: How far ahead of the player the ambush rule aims.
        shyness: Manhattan distance under which a corner-patrolling ghost
            gives up the chase and retreats to its home corner.
        move_interval_ms: Base delay between two moves of the same ghost.
        interval_variation_ms: Exclusive upper bound of the random jitter
            added to ``move_interval_ms``.
    """

    squares_ahead: int = 2
    ambush_ahead: int = 4
    shyness: int = 8
    move_interval_ms: int = 250
    interval_variation_ms: int = 50

    def __post_init__(self) -> None:
        if self.squares_ahead < 0 or self.ambush_ahead < 0:
            raise ValueError("Look-ahead distances must be non-negative")
        if self.shyness < 0:
            raise ValueError(f"Invalid shyness: {self.shyness}")
        if self.move_interval_ms <= 0:
            raise ValueError(f"Invalid move interval: {self.move_interval_ms}")
        if self.interval_variation_ms <= 0:
            raise ValueError(
                f"Invalid interval variation: {self.interval_variation_ms}"
            )


DEFAULT_CONFIG = PursuitConfig()
