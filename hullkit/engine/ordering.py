"""Angular ordering about the pivot, with value deduplication.

Two separate phases: duplicates are dropped first, then the distinct points
are sorted. The comparison is exact: angle order comes from the sign of the
cross product about the pivot, so it agrees with the orientation predicate
at any integer magnitude. Ties fall back to squared distance, then the raw
coordinates, so distinct points always keep their own entries.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Sequence
from typing import TypeVar

from hullkit.engine.orientation import cross, widen
from hullkit.engine.pivot import lowest_point
from hullkit.models.point import PointLike

P = TypeVar("P", bound=PointLike)


def value_key(p: PointLike) -> tuple[int | float, int | float]:
    return (widen(p.x), widen(p.y))


def unique_points(points: Iterable[P]) -> list[P]:
    """Drop value-equal repeats, keeping the first occurrence and input order."""
    seen: dict[tuple[int | float, int | float], P] = {}
    for p in points:
        seen.setdefault(value_key(p), p)
    return list(seen.values())


def squared_distance(p: PointLike, pivot: PointLike) -> int | float:
    x, y = value_key(p)
    px, py = value_key(pivot)
    return (x - px) ** 2 + (y - py) ** 2


def compare_polar(a: PointLike, b: PointLike, pivot: PointLike) -> int:
    """-1 if ``a`` sorts before ``b`` about the pivot, 1 if after, 0 if value-equal.

    Valid when every point lies at a polar angle in [0, pi) from the pivot,
    which holds when the pivot is the lowest point.
    """
    turn = cross(pivot, a, b)
    if turn > 0:
        return -1
    if turn < 0:
        return 1

    da, db = squared_distance(a, pivot), squared_distance(b, pivot)
    if da != db:
        return -1 if da < db else 1

    ka, kb = value_key(a), value_key(b)
    if ka != kb:
        return -1 if ka < kb else 1
    return 0


def sort_by_angle(points: Iterable[P], pivot: PointLike) -> list[P]:
    return sorted(points, key=functools.cmp_to_key(lambda a, b: compare_polar(a, b, pivot)))


def angular_order(points: Sequence[P], pivot: P | None = None) -> list[P]:
    """Distinct points sorted by polar angle about the pivot, nearest first on ties.

    The pivot itself sorts first when it is the lowest point.
    """
    if pivot is None:
        pivot = lowest_point(points)
    return sort_by_angle(unique_points(points), pivot)
