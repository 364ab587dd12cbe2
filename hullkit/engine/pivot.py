"""Pivot selection — origin of the angular sort."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from hullkit.engine.errors import EmptyPointSetError
from hullkit.engine.orientation import widen
from hullkit.models.point import PointLike

P = TypeVar("P", bound=PointLike)


def lowest_point(points: Sequence[P]) -> P:
    """Point with the smallest y; ties broken by smallest x. First occurrence wins."""
    if len(points) == 0:
        raise EmptyPointSetError("Cannot select a pivot from an empty point set")

    lowest = points[0]
    low_x, low_y = widen(lowest.x), widen(lowest.y)
    for p in points[1:]:
        x, y = widen(p.x), widen(p.y)
        if y < low_y or (y == low_y and x < low_x):
            lowest, low_x, low_y = p, x, y
    return lowest
