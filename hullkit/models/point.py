"""Point value type accepted and returned by the hull engine."""

from __future__ import annotations

from typing import NamedTuple, Protocol, runtime_checkable


@runtime_checkable
class PointLike(Protocol):
    """Anything with numeric ``x`` and ``y``. Equality is value equality of (x, y)."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


class Point(NamedTuple):
    x: float
    y: float
