"""Body component.

Character height in blocks. Only the block at head level decides whether the
entity is breathing, so medium notifications for lower blocks are ignored.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Body:
    """Character dimensions.

    Attributes:
        height: Height in blocks (may be fractional, e.g. 1.8).
    """

    height: float
