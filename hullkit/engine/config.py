"""Hull configuration — controls policy choices the algorithm leaves open."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hullkit.config import Settings


@dataclass(frozen=True)
class HullConfig:
    """Policies for edge cases of the Graham scan."""

    # Empty input: False raises EmptyPointSetError, True returns []
    allow_empty: bool = False

    # Collinear step during the sweep: True keeps the previous top and pushes
    # the new point, False replaces the top (minimal-vertex hull)
    keep_collinear: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> HullConfig:
        return cls(
            allow_empty=settings.hull_allow_empty,
            keep_collinear=settings.hull_keep_collinear,
        )
