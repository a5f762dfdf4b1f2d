"""Health component: the pool drained by drowning damage."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Health:
    """Hit points of a breathing entity.

    Attributes:
        health: Current hit points; drowning damage never takes it below 0.
        max_health: Hit points the entity was created with.
    """

    health: int
    max_health: int
