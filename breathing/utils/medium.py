"""Environment sensing helpers.

Pure predicates used by :mod:`breathing.systems.medium` to decide whether a
medium notification concerns the entity's head and whether the entity can
breathe there.
"""

import math
from typing import Dict

from breathing.components import Body, BreathCapacity
from breathing.types import Medium, MediumTag

MEDIUM_ALIASES: Dict[str, MediumTag] = {
    "oxygen": Medium.AIR,
}
"""Alternative names accepted in ``breathable_media`` and notifications."""


def normalize_medium(medium: MediumTag) -> MediumTag:
    """Lower-case ``medium`` and resolve known aliases."""
    tag = medium.strip().lower()
    return MEDIUM_ALIASES.get(tag, tag)


def is_head_level(body: Body, relative_y: int) -> bool:
    """Return True if block row ``relative_y`` (0 = feet) holds the head."""
    return math.ceil(body.height) - 1 == relative_y


def is_breathable(capacity: BreathCapacity, medium: MediumTag) -> bool:
    """Return True if ``medium`` is one of the entity's breathable media."""
    tag = normalize_medium(medium)
    return any(normalize_medium(m) == tag for m in capacity.breathable_media)
