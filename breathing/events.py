"""Medium change notifications.

The host's environment sampler emits an :class:`EnterMediumEvent` whenever a
block occupied by an entity changes medium. Only the event for the block at
head level affects breathing; the others are ignored by
:func:`breathing.systems.medium.medium_system`.
"""

from dataclasses import dataclass
from breathing.types import EntityID, MediumTag


@dataclass(frozen=True)
class EnterMediumEvent:
    """An entity entered a block holding ``medium``.

    Attributes:
        entity_id: Entity that moved.
        medium: Tag of the medium in the entered block.
        relative_y: Row of the block relative to the entity's feet (0 = feet).
    """

    entity_id: EntityID
    medium: MediumTag
    relative_y: int
