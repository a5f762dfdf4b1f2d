"""Garbage collection utilities.

Removes component entries whose entity is no longer registered in
``State.entity``. Hosts despawn an entity by removing it from the registry;
the collector then drops its capacity, breath state, health and the rest on
the next step.
"""

from dataclasses import replace
from pyrsistent import pmap
from breathing.types import EntityID
from breathing.state import State
from typing import Set, Any, Dict, cast
from pyrsistent.typing import PMap


def compute_alive_entities(state: State) -> Set[EntityID]:
    """Return the IDs of all registered entities."""
    return set(state.entity.keys())


def run_garbage_collector(state: State) -> State:
    """Prune component maps to only contain registered entity IDs."""
    alive = compute_alive_entities(state)
    new_fields: Dict[str, Any] = {}
    for field in state.__dataclass_fields__:
        value = getattr(state, field)
        if field != "entity" and isinstance(value, type(pmap())):
            value_map = cast(PMap[EntityID, Any], value)
            if all(k in alive for k in value_map):
                continue
            new_fields[field] = pmap({k: v for k, v in value_map.items() if k in alive})
    if not new_fields:
        return state
    return replace(state, **new_fields)
