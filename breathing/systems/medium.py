"""Medium change system (environment sampler entry point).

Turns an :class:`EnterMediumEvent` into a breath phase change. Only the block
at head level matters: an entity wading with its head above water keeps
breathing. The resulting breath state is stored on the ``State`` and reported
to ``state.state_changed_fn``.
"""

import logging
from dataclasses import replace

from breathing.breath import transition
from breathing.components import Submersion
from breathing.events import EnterMediumEvent
from breathing.state import State
from breathing.utils.medium import is_breathable, is_head_level, normalize_medium

logger = logging.getLogger(__name__)


def medium_system(state: State, event: EnterMediumEvent) -> State:
    """Apply a medium notification at ``state.time``.

    Events for unregistered or dead entities, entities lacking a
    ``BreathCapacity`` or ``Body``, and events below head level leave the
    state untouched. Repeated notifications for the same phase are no-ops.

    Args:
        state (State): Current state; ``state.time`` is the notification time.
        event (EnterMediumEvent): The medium change.

    Returns:
        State: Updated state.
    """
    eid = event.entity_id
    if eid not in state.entity or eid in state.dead:
        return state

    capacity = state.breath_capacity.get(eid)
    body = state.body.get(eid)
    if capacity is None or body is None:
        return state
    if not is_head_level(body, event.relative_y):
        return state

    state = replace(
        state,
        submersion=state.submersion.set(
            eid, Submersion(medium=normalize_medium(event.medium))
        ),
    )

    current = state.breath_state.get(eid)
    breathable = is_breathable(capacity, event.medium)
    new = transition(current, state.time, capacity, breathable)
    if new is current:
        return state

    if new is None:
        logger.debug("Entity %s back at full breath at %s", eid, state.time)
        state = replace(state, breath_state=state.breath_state.remove(eid))
    else:
        state = replace(state, breath_state=state.breath_state.set(eid, new))
    return state.state_changed_fn(state, eid, new)
