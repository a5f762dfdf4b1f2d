"""Convenience factory functions for configuring breathing entities.

``create_breath_capacity`` is the configuration layer: it validates values
before they reach the state machine. ``add_entity`` registers a fully
equipped entity on a ``State``.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable, Optional, Tuple
from pyrsistent import pset

from breathing.components import Body, BreathCapacity, Health, Submersion
from breathing.entity import Entity, new_entity_id
from breathing.hooks import DAMAGE_FN_REGISTRY, STATE_CHANGED_FN_REGISTRY
from breathing.state import State
from breathing.types import EntityID, Medium, MediumTag
from breathing.utils.medium import normalize_medium

DEFAULT_BREATH_CAPACITY_MS = 10000
DEFAULT_BREATH_RECHARGE_RATE = 1.0
DEFAULT_DAMAGE_INTERVAL_MS = 2000
DEFAULT_DAMAGE_PER_TICK = 5


def create_breath_capacity(
    breath_capacity_ms: int = DEFAULT_BREATH_CAPACITY_MS,
    breath_recharge_rate: float = DEFAULT_BREATH_RECHARGE_RATE,
    damage_interval_ms: int = DEFAULT_DAMAGE_INTERVAL_MS,
    damage_per_tick: int = DEFAULT_DAMAGE_PER_TICK,
    breathable_media: Iterable[MediumTag] = (Medium.AIR,),
) -> BreathCapacity:
    """Validated breathing configuration.

    Raises:
        ValueError: If a duration or damage is negative, or the recharge rate
            is negative or not finite.
    """
    if breath_capacity_ms < 0:
        raise ValueError(f"Negative breath capacity: {breath_capacity_ms}")
    if not math.isfinite(breath_recharge_rate) or breath_recharge_rate < 0:
        raise ValueError(f"Invalid breath recharge rate: {breath_recharge_rate}")
    if damage_interval_ms < 0:
        raise ValueError(f"Negative damage interval: {damage_interval_ms}")
    if damage_per_tick < 0:
        raise ValueError(f"Negative damage per tick: {damage_per_tick}")
    return BreathCapacity(
        breath_capacity_ms=breath_capacity_ms,
        breath_recharge_rate=breath_recharge_rate,
        damage_interval_ms=damage_interval_ms,
        damage_per_tick=damage_per_tick,
        breathable_media=pset(normalize_medium(m) for m in breathable_media),
    )


def create_state(
    damage_fn_name: str = "default", state_changed_fn_name: str = "default"
) -> State:
    """Empty state with hooks looked up by registry name.

    Raises:
        ValueError: If a hook name is not registered.
    """
    if damage_fn_name not in DAMAGE_FN_REGISTRY:
        raise ValueError(f"Unknown damage function: {damage_fn_name}")
    if state_changed_fn_name not in STATE_CHANGED_FN_REGISTRY:
        raise ValueError(f"Unknown state changed function: {state_changed_fn_name}")
    return State(
        damage_fn=DAMAGE_FN_REGISTRY[damage_fn_name],
        state_changed_fn=STATE_CHANGED_FN_REGISTRY[state_changed_fn_name],
    )


def add_entity(
    state: State,
    capacity: Optional[BreathCapacity] = None,
    health: int = 20,
    height: float = 1.8,
    medium: MediumTag = Medium.AIR,
) -> Tuple[State, EntityID]:
    """Register a breathing entity standing in ``medium``.

    The entity starts at full breath (no breath state), so ``medium`` should
    be breathable for it; otherwise send an ``EnterMediumEvent`` to start the
    depletion phase.
    """
    eid = new_entity_id()
    if capacity is None:
        capacity = create_breath_capacity()
    state = replace(
        state,
        entity=state.entity.set(eid, Entity()),
        body=state.body.set(eid, Body(height=height)),
        breath_capacity=state.breath_capacity.set(eid, capacity),
        health=state.health.set(eid, Health(health=health, max_health=health)),
        submersion=state.submersion.set(
            eid, Submersion(medium=normalize_medium(medium))
        ),
    )
    return state, eid
