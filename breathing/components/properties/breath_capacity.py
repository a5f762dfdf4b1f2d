"""Breath capacity component.

Static per-entity configuration describing how long the entity can hold its
breath, how fast it recovers and how it is hurt once out of breath. Built
with :func:`breathing.factories.create_breath_capacity`, which validates the
values; the state machine itself tolerates degenerate ones.
"""

from dataclasses import dataclass
from pyrsistent import PSet
from breathing.types import MediumTag


@dataclass(frozen=True)
class BreathCapacity:
    """Breathing configuration.

    Attributes:
        breath_capacity_ms: Time to fully deplete (or, at rate 1.0, refill) breath.
        breath_recharge_rate: Recharge speed multiplier relative to depletion.
        damage_interval_ms: Time between damage ticks while out of breath.
        damage_per_tick: Hit points removed per damage tick.
        breathable_media: Medium tags the entity can breathe.
    """

    breath_capacity_ms: int
    breath_recharge_rate: float
    damage_interval_ms: int
    damage_per_tick: int
    breathable_media: PSet[MediumTag]
