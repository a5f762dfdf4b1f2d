"""Entity primitives & ID generation.

Each breathing creature is an ``EntityID`` (an integer) plus the component
dataclasses stored for it in the persistent maps on :class:`State`.

Examples
--------
>>> from breathing.entity import new_entity_id
>>> eid = new_entity_id()

IDs count up from 0 and are never reused, even after a drowned or despawned
entity is garbage collected.
"""

from dataclasses import dataclass
from itertools import count

from breathing.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Registry marker; presence in ``State.entity`` keeps components alive."""

    pass


_entity_ids = count()


def new_entity_id() -> EntityID:
    """Allocate the next entity ID for a creature joining the session."""
    return next(_entity_ids)

