import math
from typing import List, Optional, Tuple

from pyrsistent import pset

from breathing.components import BreathCapacity, BreathState
from breathing.events import EnterMediumEvent
from breathing.factories import add_entity, create_breath_capacity, create_state
from breathing.state import State
from breathing.types import EntityID, Medium, MediumTag


def make_capacity(
    breath_capacity_ms: int = 10000,
    breath_recharge_rate: float = 1.0,
    damage_interval_ms: int = 2000,
    damage_per_tick: int = 5,
) -> BreathCapacity:
    """Capacity used by the reference scenarios; bypasses validation."""
    return BreathCapacity(
        breath_capacity_ms=breath_capacity_ms,
        breath_recharge_rate=breath_recharge_rate,
        damage_interval_ms=damage_interval_ms,
        damage_per_tick=damage_per_tick,
        breathable_media=pset([Medium.AIR]),
    )


def make_depleting_state(
    start_time: float = 0, end_time: float = 10000, next_damage_time: float = 12000
) -> BreathState:
    return BreathState(
        is_breathing=False,
        start_time=start_time,
        end_time=end_time,
        next_damage_time=next_damage_time,
    )


def make_recharging_state(start_time: float = 0, end_time: float = 10000) -> BreathState:
    return BreathState(
        is_breathing=True,
        start_time=start_time,
        end_time=end_time,
        next_damage_time=math.inf,
    )


def make_diver_state(
    capacity: Optional[BreathCapacity] = None,
    health: int = 20,
    height: float = 1.8,
) -> Tuple[State, EntityID]:
    """State with a single entity standing in air, head at row 1."""
    state = create_state()
    if capacity is None:
        capacity = create_breath_capacity()
    return add_entity(state, capacity=capacity, health=health, height=height)


def head_event(eid: EntityID, medium: MediumTag) -> EnterMediumEvent:
    """Medium notification at head level for the default 1.8 block body."""
    return EnterMediumEvent(entity_id=eid, medium=medium, relative_y=1)


def recording_state_changed_fn(
    log: List[Tuple[EntityID, Optional[BreathState]]],
):
    def state_changed_fn(
        state: State, entity_id: EntityID, breath_state: Optional[BreathState]
    ) -> State:
        log.append((entity_id, breath_state))
        return state

    return state_changed_fn
