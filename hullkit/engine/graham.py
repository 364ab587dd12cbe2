"""Graham scan — backtracking stack sweep over the angularly ordered points.

Usage:
    from hullkit.engine.graham import convex_hull
    from hullkit.models.point import Point

    ring = convex_hull([Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)])
    # [(0, 0), (2, 0), (2, 2), (0, 2), (0, 0)]

A real hull comes back closed (first vertex repeated at the end) and
counter-clockwise. Fewer than three distinct points, or a fully collinear set,
returns the input sequence unchanged and unclosed.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from hullkit.engine.config import HullConfig
from hullkit.engine.errors import EmptyPointSetError, InvalidPointSetError
from hullkit.engine.orientation import Turn, orientation, widen
from hullkit.engine.ordering import angular_order
from hullkit.engine.pivot import lowest_point
from hullkit.models.point import PointLike

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=PointLike)

EMPTY = "empty"
TOO_FEW_POINTS = "too_few_points"
COLLINEAR = "collinear"


@dataclass
class HullResult(Generic[P]):
    """Outcome of one scan. ``vertices`` is what ``convex_hull`` returns."""

    vertices: list[P]
    pivot: P | None = None
    # Distinct points in angular order, pivot first
    ordered: list[P] = field(default_factory=list)
    closed: bool = False
    # None for a real hull, otherwise EMPTY, TOO_FEW_POINTS or COLLINEAR
    degenerate: str | None = None


def _materialize(points: Iterable[P] | None) -> list[P]:
    if points is None:
        raise InvalidPointSetError("points must not be None")

    materialized = list(points)
    for i, p in enumerate(materialized):
        try:
            x, y = widen(p.x), widen(p.y)
        except (AttributeError, TypeError, ValueError) as e:
            raise InvalidPointSetError(f"Point {i} has no numeric x/y: {p!r}") from e
        if (isinstance(x, float) and not math.isfinite(x)) or (
            isinstance(y, float) and not math.isfinite(y)
        ):
            raise InvalidPointSetError(f"Point {i} has a non-finite coordinate: {p!r}")
    return materialized


def all_collinear(ordered: list[P]) -> bool:
    """True when no consecutive triple of the ordered points makes a turn."""
    for i in range(len(ordered) - 2):
        if orientation(ordered[i], ordered[i + 1], ordered[i + 2]) is not Turn.COLLINEAR:
            return False
    return True


def sweep(ordered: list[P], keep_collinear: bool = True) -> list[P]:
    """Stack scan over ordered points (pivot first). Returns the closed ring."""
    stack = [ordered[0], ordered[1]]
    pops = 0

    i = 2
    while i < len(ordered):
        head = ordered[i]
        if len(stack) < 2:
            stack.append(head)
            i += 1
            continue

        turn = orientation(stack[-2], stack[-1], head)
        if turn is Turn.CLOCKWISE:
            # Top is interior; retry the same point against the shorter stack
            stack.pop()
            pops += 1
            continue

        if turn is Turn.COLLINEAR and not keep_collinear:
            stack.pop()
        stack.append(head)
        i += 1

    stack.append(ordered[0])
    logger.debug("Sweep: %d ordered -> %d ring vertices (%d pops)", len(ordered), len(stack), pops)
    return stack


def graham_scan(points: Iterable[P] | None, config: HullConfig | None = None) -> HullResult[P]:
    """Run the full scan and report which branch produced the result."""
    config = config or HullConfig()
    original = _materialize(points)

    if not original:
        if config.allow_empty:
            logger.debug("Empty point set, returning empty hull")
            return HullResult(vertices=[], degenerate=EMPTY)
        raise EmptyPointSetError("Cannot compute the convex hull of an empty point set")

    pivot = lowest_point(original)
    ordered = angular_order(original, pivot)

    if len(ordered) < 3:
        logger.debug("Only %d distinct points, returning input unchanged", len(ordered))
        return HullResult(vertices=list(original), pivot=pivot, ordered=ordered, degenerate=TOO_FEW_POINTS)

    if all_collinear(ordered):
        logger.debug("All %d distinct points collinear, returning input unchanged", len(ordered))
        return HullResult(vertices=list(original), pivot=pivot, ordered=ordered, degenerate=COLLINEAR)

    ring = sweep(ordered, keep_collinear=config.keep_collinear)
    return HullResult(vertices=ring, pivot=pivot, ordered=ordered, closed=True)


def convex_hull(points: Iterable[P] | None, config: HullConfig | None = None) -> list[P]:
    """Convex hull of ``points`` as a closed CCW ring, or the input for degenerate sets."""
    return graham_scan(points, config).vertices
