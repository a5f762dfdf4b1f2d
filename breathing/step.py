"""State reducer and tick orchestration.

This module wires the systems together to implement a single host tick. The
exported :func:`step` is the public entry point for advancing time and is
pure: it returns a *new* :class:`breathing.state.State`.

Ordering:

1. The clock is advanced to ``now`` (it may never move backwards).
2. Medium notifications received since the last tick are applied in order,
    all at ``now``.
3. ``breath_system`` evaluates every active breath state.
4. The garbage collector drops components of despawned entities.
"""

from dataclasses import replace
from typing import Iterable

from breathing.events import EnterMediumEvent
from breathing.state import State
from breathing.systems.breath import breath_system
from breathing.systems.medium import medium_system
from breathing.types import Timestamp
from breathing.utils.gc import run_garbage_collector


def step(
    state: State, now: Timestamp, events: Iterable[EnterMediumEvent] = ()
) -> State:
    """Advance the simulation to ``now``.

    Args:
        state (State): Previous immutable state.
        now (Timestamp): Current clock reading in milliseconds.
        events (Iterable[EnterMediumEvent]): Medium notifications to apply
            before evaluating breath.

    Returns:
        State: Next state snapshot.

    Raises:
        ValueError: If ``now`` is earlier than ``state.time``.
    """
    if now < state.time:
        raise ValueError(f"Clock moved backwards: {now} < {state.time}")

    state = replace(state, time=now)
    for event in events:
        state = medium_system(state, event)
    state = breath_system(state)
    state = run_garbage_collector(state)
    return state
