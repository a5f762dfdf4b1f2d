"""Property component aggregates.

This module re-exports the components describing a breathing entity:
configuration (:class:`BreathCapacity`, :class:`Body`), the timing record
(:class:`BreathState`), the current surroundings (:class:`Submersion`) and the
damage target (:class:`Health`, :class:`Dead`).

All properties are immutable dataclasses; creating a new instance (or removing
one from an entity) is how state changes are expressed between ticks.
"""

from .body import Body
from .breath_capacity import BreathCapacity
from .breath_state import BreathState
from .dead import Dead
from .health import Health
from .submersion import Submersion

__all__ = [
    "Body",
    "BreathCapacity",
    "BreathState",
    "Dead",
    "Health",
    "Submersion",
]
