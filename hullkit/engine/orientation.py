"""Orientation predicate — the turn made by walking through three points.

Leaf module. Coordinates are widened before any arithmetic: integral values
(Python ints, numpy fixed-width integers) become Python ``int`` and are exact
at any magnitude and are never converted to float; everything else becomes
a Python ``float``. Float coordinates above ~1e154 in magnitude can overflow
the products, in which case the returned turn is undefined.
"""

from __future__ import annotations

import enum
import numbers

from hullkit.models.point import PointLike


class Turn(enum.IntEnum):
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTER_CLOCKWISE = 1


def widen(value: float) -> int | float:
    """Promote a coordinate to an overflow-free Python number."""
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return float(value)
    raise TypeError(f"Coordinate must be a real number, got {type(value).__name__}")


def cross(a: PointLike, b: PointLike, c: PointLike) -> int | float:
    """2-D cross product of (b - a) and (c - a). Positive = CCW."""
    ax, ay = widen(a.x), widen(a.y)
    bx, by = widen(b.x), widen(b.y)
    cx, cy = widen(c.x), widen(c.y)
    return (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)


def orientation(a: PointLike, b: PointLike, c: PointLike) -> Turn:
    value = cross(a, b, c)
    if value > 0:
        return Turn.COUNTER_CLOCKWISE
    elif value < 0:
        return Turn.CLOCKWISE
    return Turn.COLLINEAR
