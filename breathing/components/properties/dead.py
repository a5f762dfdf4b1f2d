"""Dead marker component."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Dead:
    """Set when drowning damage empties ``Health``; both systems then skip the entity."""

    pass
