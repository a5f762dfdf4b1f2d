"""Host callback functions and registries.

``damage_fn`` and ``state_changed_fn`` on :class:`State` connect the breath
state machine to the rest of the host. The defaults keep everything inside
the ``State``: damage reduces :class:`Health` and breath state changes need
no extra persistence.
"""

import logging
from dataclasses import replace
from typing import Dict, Optional

from breathing.components import BreathState
from breathing.state import State
from breathing.types import DamageFn, EntityID, MediumTag, StateChangedFn
from breathing.utils.health import apply_damage_and_check_death

logger = logging.getLogger(__name__)


def default_damage_fn(
    state: State, entity_id: EntityID, amount: int, medium: Optional[MediumTag]
) -> State:
    """Subtract ``amount`` HP, marking the entity dead at zero."""
    health, dead = apply_damage_and_check_death(
        state.health, state.dead, entity_id, amount
    )
    if entity_id in dead and entity_id not in state.dead:
        logger.info("Entity %s drowned in %s", entity_id, medium)
    return replace(state, health=health, dead=dead)


def default_state_changed_fn(
    state: State, entity_id: EntityID, breath_state: Optional[BreathState]
) -> State:
    """No-op: the breath state already lives in ``state.breath_state``."""
    return state


DAMAGE_FN_REGISTRY: Dict[str, DamageFn] = {
    "default": default_damage_fn,
}
"""Name → damage function mapping for host configuration."""

STATE_CHANGED_FN_REGISTRY: Dict[str, StateChangedFn] = {
    "default": default_state_changed_fn,
}
"""Name → breath state listener mapping for host configuration."""
