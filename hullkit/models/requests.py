"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PointModel(BaseModel):
    x: float = Field(..., description="X coordinate")
    y: float = Field(..., description="Y coordinate")


class HullRequest(BaseModel):
    points: list[PointModel] = Field(..., description="Input point set")
    keep_collinear: bool | None = Field(
        default=None,
        description="Override the collinear policy (default from settings)",
    )
    allow_empty: bool | None = Field(
        default=None,
        description="Return an empty hull instead of 422 for no points",
    )
