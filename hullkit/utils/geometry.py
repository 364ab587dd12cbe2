"""Leaf-node ring measurements. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from hullkit.models.point import PointLike


def to_array(points: Sequence[PointLike]) -> NDArray[np.float64]:
    """Nx2 float array of (x, y)."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def signed_area(ring: NDArray[np.float64]) -> float:
    """Shoelace formula over a closed ring. Positive = CCW, Negative = CW."""
    if len(ring) < 2:
        return 0.0
    x = ring[:, 0]
    y = ring[:, 1]
    return float(0.5 * np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def perimeter(ring: NDArray[np.float64]) -> float:
    """Total edge length of a closed ring."""
    if len(ring) < 2:
        return 0.0
    diffs = np.diff(ring, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )
