"""Breath state machine.

Breath is never integrated tick by tick. A :class:`BreathState` stores the two
timestamps bounding the current phase and the remaining breath is
interpolated from them on demand, so skipped ticks and clock jumps cannot
desynchronize it.

* :func:`remaining_breath` reads the fraction of capacity left at ``now``.
* :func:`transition` re-seeds the timestamps when the entity starts or stops
  breathing, back-dating ``start_time`` so the fraction carries over exactly.
* :func:`evaluate` decides, once per tick, whether tracking can stop or a
  damage tick is due.

All three are pure; callers apply the returned values.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from breathing.components import BreathCapacity, BreathState
from breathing.types import Outcome, Timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    """Result of :func:`evaluate`.

    Attributes:
        outcome: Signal for the caller.
        state: Breath state to store afterwards (``None`` means remove it).
        damage: Hit points to apply; non-zero only for ``APPLY_DAMAGE``.
    """

    outcome: Outcome
    state: Optional[BreathState]
    damage: int = 0


def remaining_breath(state: BreathState, now: Timestamp) -> float:
    """Return the fraction of breath capacity left at ``now``.

    While breathing the phase progress is the recovered fraction; while not
    breathing it is the consumed fraction. A zero-length phase (capacity or
    recharge rate of zero) reads as full breath.
    """
    duration = state.end_time - state.start_time
    if not duration > 0:
        return 1.0
    progress = (now - state.start_time) / duration
    if math.isnan(progress):
        return 1.0
    progress = min(1.0, max(0.0, progress))
    return progress if state.is_breathing else 1.0 - progress


def _phase_durations(
    capacity: BreathCapacity, progress: float, scale: float
) -> Tuple[float, float]:
    """Elapsed and remaining milliseconds of a phase at ``progress``."""
    capacity_ms = capacity.breath_capacity_ms
    if not (capacity_ms > 0 and scale > 0) or math.isinf(capacity_ms / scale):
        if capacity_ms != 0:
            logger.warning(
                "Degenerate breath configuration (capacity=%s, scale=%s); "
                "treating phase as complete",
                capacity_ms,
                scale,
            )
        return 0.0, 0.0
    return capacity_ms * progress / scale, capacity_ms * (1.0 - progress) / scale


def transition(
    state: Optional[BreathState],
    now: Timestamp,
    capacity: BreathCapacity,
    entering_breathable: bool,
) -> Optional[BreathState]:
    """Recompute the breath state for a change of medium at ``now``.

    Args:
        state: Current breath state, or ``None`` when breath is full.
        now: Clock reading of the medium change.
        capacity: Entity breathing configuration.
        entering_breathable: True when the head entered a breathable medium.

    Returns:
        BreathState | None: The new state. The same object is returned when
        it already reflects the requested phase. ``None`` means no tracking is
        needed: breath is (or already was) full while breathing, including
        a recharge that completes instantly.
    """
    if state is not None and state.is_breathing == entering_breathable:
        return state
    if state is None and entering_breathable:
        return None

    current = 1.0 if state is None else remaining_breath(state, now)
    if entering_breathable and current >= 1.0:
        return None

    progress = current if entering_breathable else 1.0 - current
    scale = capacity.breath_recharge_rate if entering_breathable else 1.0
    elapsed, remaining = _phase_durations(capacity, progress, scale)

    start_time = now - elapsed
    end_time = now + remaining
    if entering_breathable and not end_time > start_time:
        logger.debug("Breath refilled instantly at %s", now)
        return None
    if entering_breathable:
        next_damage_time = math.inf
    else:
        next_damage_time = end_time + max(0, capacity.damage_interval_ms)

    logger.debug(
        "Breath %s at %s: remaining=%.3f, phase [%s, %s]",
        "recharging" if entering_breathable else "depleting",
        now,
        current,
        start_time,
        end_time,
    )
    return BreathState(
        is_breathing=entering_breathable,
        start_time=start_time,
        end_time=end_time,
        next_damage_time=next_damage_time,
    )


def evaluate(
    state: BreathState, now: Timestamp, capacity: BreathCapacity
) -> Evaluation:
    """Check ``state`` against the clock for one tick.

    At most one damage tick is signalled per call, however far ``now`` has
    overshot; the tick driver must run at least once per damage interval.
    The next damage time advances from the previous due time, not from
    ``now``, so delayed ticks do not slow the damage rate.
    """
    if state.is_breathing:
        if now > state.end_time:
            return Evaluation(outcome=Outcome.REMOVE_STATE, state=None)
        return Evaluation(outcome=Outcome.NO_OP, state=state)

    if now > state.next_damage_time:
        next_damage_time = state.next_damage_time + max(0, capacity.damage_interval_ms)
        return Evaluation(
            outcome=Outcome.APPLY_DAMAGE,
            state=replace(state, next_damage_time=next_damage_time),
            damage=capacity.damage_per_tick,
        )
    return Evaluation(outcome=Outcome.NO_OP, state=state)
