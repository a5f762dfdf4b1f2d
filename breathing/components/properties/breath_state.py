"""Breath state component.

Present only while breath is below 100% or being consumed. Breath is never
stored as a percentage; it is interpolated from the two timestamps that bound
the current phase (see :func:`breathing.breath.remaining_breath`).
"""

from dataclasses import dataclass
from breathing.types import Timestamp


@dataclass(frozen=True)
class BreathState:
    """Timing record of the current breathing phase.

    Attributes:
        is_breathing: True while recharging, False while depleting.
        start_time: Back-dated moment the current phase began.
        end_time: Moment the phase completes (full refill or full depletion).
        next_damage_time: Next damage application; ``math.inf`` while breathing.
    """

    is_breathing: bool
    start_time: Timestamp
    end_time: Timestamp
    next_damage_time: Timestamp
