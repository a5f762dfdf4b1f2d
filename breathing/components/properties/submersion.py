"""Submersion component: the medium last observed at head level."""

from dataclasses import dataclass
from breathing.types import MediumTag


@dataclass(frozen=True)
class Submersion:
    medium: MediumTag
