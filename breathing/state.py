"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents every
tracked entity's breathing situation at a single moment of the host clock.
All systems are pure functions that take a previous ``State`` plus inputs
(a medium notification, a new clock reading) and return a *new* ``State``;
no mutation happens in-place.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component.
* An entity without a ``breath_state`` entry is at full breath. The entry is
    created when its head enters a non-breathable medium and removed once
    breath has been observed back at 100%.
* ``damage_fn`` / ``state_changed_fn`` are the host callbacks invoked when an
    entity takes drowning damage or its breath state changes.
* ``time`` is the last clock reading processed; the reducer refuses to move
    it backwards.

See :mod:`breathing.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any
from pyrsistent import PMap, pmap

from breathing.entity import Entity
from breathing.components import (
    Body,
    BreathCapacity,
    BreathState,
    Dead,
    Health,
    Submersion,
)
from breathing.types import DamageFn, EntityID, StateChangedFn, Timestamp


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        damage_fn (DamageFn): Applies drowning damage to an entity.
        state_changed_fn (StateChangedFn): Notified after every breath state
            creation, update or removal.
        entity (PMap[EntityID, Entity]): Registry of entity descriptors.
        body (PMap[EntityID, Body]): Character dimensions for head-level checks.
        breath_capacity (PMap[EntityID, BreathCapacity]): Per-entity breathing configuration.
        breath_state (PMap[EntityID, BreathState]): Active timing records.
        dead (PMap[EntityID, Dead]): Entities killed by damage.
        health (PMap[EntityID, Health]): Health pools for damage.
        submersion (PMap[EntityID, Submersion]): Medium last seen at head level.
        time (Timestamp): Last processed clock reading in milliseconds.
    """

    # Hooks
    damage_fn: "DamageFn"
    state_changed_fn: "StateChangedFn"

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    body: PMap[EntityID, Body] = pmap()
    breath_capacity: PMap[EntityID, BreathCapacity] = pmap()
    breath_state: PMap[EntityID, BreathState] = pmap()
    dead: PMap[EntityID, Dead] = pmap()
    health: PMap[EntityID, Health] = pmap()
    submersion: PMap[EntityID, Submersion] = pmap()

    # Clock
    time: Timestamp = 0

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Returns:
            PMap[str, Any]: Persistent map of field name to value for all
            populated fields, skipping empty component stores.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, type(pmap())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
