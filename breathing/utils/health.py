"""Health and damage helpers."""

from typing import Tuple
from pyrsistent import PMap

from breathing.components import Health, Dead
from breathing.types import EntityID


def apply_damage_and_check_death(
    health_dict: PMap[EntityID, Health],
    dead_dict: PMap[EntityID, Dead],
    eid: EntityID,
    damage: int,
) -> Tuple[PMap[EntityID, Health], PMap[EntityID, Dead]]:
    """Apply damage to entity and mark dead if HP reaches zero."""
    if eid not in health_dict:
        return health_dict, dead_dict
    hp = health_dict[eid]
    new_hp = max(0, hp.health - damage)
    health_dict = health_dict.set(eid, Health(health=new_hp, max_health=hp.max_health))
    if new_hp == 0:
        dead_dict = dead_dict.set(eid, Dead())
    return health_dict, dead_dict
