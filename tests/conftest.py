"""Shared test fixtures."""

from __future__ import annotations

import pytest

from hullkit.engine.orientation import Turn, orientation
from hullkit.models.point import Point


SQUARE = [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]

DIAGONAL = [Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3)]

PAIR = [Point(0, 0), Point(5, 5)]

# (1, 1) twice, interior to the triangle (0,0) (4,0) (2,3)
WITH_DUPLICATES = [Point(1, 1), Point(0, 0), Point(4, 0), Point(1, 1), Point(2, 3)]

# Convex pentagon in general position, listed clockwise from an arbitrary vertex
PENTAGON = [Point(2, 6), Point(5, 4), Point(4, 1), Point(0, 0), Point(-1, 3)]

# 3x3 integer grid: collinear points on every edge
GRID_3X3 = [Point(x, y) for y in range(3) for x in range(3)]


def open_ring(ring: list) -> list:
    """Drop the closing duplicate of a closed ring."""
    return ring[:-1]


def has_right_turn(ring: list) -> bool:
    """True if any cyclic consecutive triple of the open ring turns clockwise."""
    pts = open_ring(ring)
    n = len(pts)
    return any(
        orientation(pts[i], pts[(i + 1) % n], pts[(i + 2) % n]) is Turn.CLOCKWISE
        for i in range(n)
    )


@pytest.fixture
def square() -> list[Point]:
    return list(SQUARE)


@pytest.fixture
def grid() -> list[Point]:
    return list(GRID_3X3)


@pytest.fixture
def random_points():
    """Factory for float point clouds in general position."""
    import numpy as np

    def make(n: int, seed: int) -> list[Point]:
        rng = np.random.default_rng(seed)
        coords = rng.random((n, 2)) * 100.0
        return [Point(float(x), float(y)) for x, y in coords]

    return make
