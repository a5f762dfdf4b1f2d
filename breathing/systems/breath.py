"""Breath tick system.

Evaluates every active :class:`BreathState` against ``state.time`` once per
tick: finished recharges stop being tracked and entities out of breath take
periodic damage through ``state.damage_fn``.
"""

import logging
from dataclasses import replace

from breathing.breath import evaluate
from breathing.state import State
from breathing.types import Outcome

logger = logging.getLogger(__name__)


def breath_system(state: State) -> State:
    """Evaluate every active breath state at ``state.time``.

    Dead entities and entities without a ``BreathCapacity`` are skipped.
    A finished recharge removes the entry; a due damage tick goes through
    ``state.damage_fn`` with the medium at head level. Either change is then
    reported to ``state.state_changed_fn`` (with ``None`` for a removal).

    Args:
        state (State): Current state.

    Returns:
        State: Updated state.
    """
    for eid, breath_state in list(state.breath_state.items()):
        if eid in state.dead:
            continue
        capacity = state.breath_capacity.get(eid)
        if capacity is None:
            continue

        result = evaluate(breath_state, state.time, capacity)
        if result.outcome == Outcome.NO_OP:
            continue

        if result.state is None:
            logger.debug("Entity %s recovered full breath at %s", eid, state.time)
            state = replace(state, breath_state=state.breath_state.remove(eid))
        else:
            state = replace(
                state, breath_state=state.breath_state.set(eid, result.state)
            )
            submersion = state.submersion.get(eid)
            medium = submersion.medium if submersion is not None else None
            logger.info(
                "Entity %s takes %s drowning damage in %s at %s",
                eid,
                result.damage,
                medium,
                state.time,
            )
            state = state.damage_fn(state, eid, result.damage, medium)
        state = state.state_changed_fn(state, eid, result.state)
    return state
