"""breathing.components
=================================

Aggregate import surface for all ECS component dataclasses used by the
breathing engine, e.g.::

    from breathing.components import BreathCapacity, BreathState, Health

All component classes are simple frozen ``@dataclass`` value objects; they
carry no behavior beyond their fields and are manipulated by systems during
the tick pipeline. See :mod:`breathing.breath` for the timing logic.
"""

from .properties import Body
from .properties import BreathCapacity
from .properties import BreathState
from .properties import Dead
from .properties import Health
from .properties import Submersion

__all__ = [
    "Body",
    "BreathCapacity",
    "BreathState",
    "Dead",
    "Health",
    "Submersion",
]
