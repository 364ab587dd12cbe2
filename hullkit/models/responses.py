"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from hullkit.models.requests import PointModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class HullResponse(BaseModel):
    hull: list[PointModel] = Field(default_factory=list)
    closed: bool = False
    degenerate: str | None = None
    vertex_count: int = 0
    pivot: PointModel | None = None
    area: float = 0.0
    perimeter: float = 0.0
    # (xmin, ymin, xmax, ymax) of the input points
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    processing_time_ms: float = 0.0
