"""Common type aliases and enumerations.

``DamageFn`` and ``StateChangedFn`` are the extension points stored on
``State`` that connect the breath state machine to the host's damage and
persistence layers.
"""

from enum import StrEnum, auto
from typing import Callable, Optional, TYPE_CHECKING


# Forward declaration for callback typing to avoid circular imports:
if TYPE_CHECKING:
    from breathing.state import State
    from breathing.components import BreathState

EntityID = int

Timestamp = float
"""Milliseconds on the host game clock. ``math.inf`` means "never"."""

MediumTag = str

DamageFn = Callable[["State", EntityID, int, Optional[MediumTag]], "State"]
StateChangedFn = Callable[["State", EntityID, Optional["BreathState"]], "State"]


class Medium(StrEnum):
    """Built-in medium tags. Hosts may use any other string tag."""

    AIR = auto()
    WATER = auto()


class Outcome(StrEnum):
    """Signal produced by evaluating a breath state against the clock."""

    NO_OP = auto()
    APPLY_DAMAGE = auto()
    REMOVE_STATE = auto()
