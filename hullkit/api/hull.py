"""POST /api/hull — convex hull of a posted point set."""

from __future__ import annotations

import dataclasses
import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from hullkit.config import Settings
from hullkit.dependencies import get_hull_config, get_settings
from hullkit.engine.config import HullConfig
from hullkit.engine.errors import InvalidPointSetError
from hullkit.engine.graham import graham_scan
from hullkit.models.requests import HullRequest, PointModel
from hullkit.models.responses import HullResponse
from hullkit.utils.geometry import bbox, perimeter, signed_area, to_array

logger = logging.getLogger(__name__)

router = APIRouter()


# Plain def: FastAPI runs it in the threadpool, the scan is CPU-bound
@router.post("/hull", response_model=HullResponse)
def hull(
    req: HullRequest,
    settings: Settings = Depends(get_settings),
    config: HullConfig = Depends(get_hull_config),
) -> HullResponse:
    if len(req.points) > settings.max_points:
        raise HTTPException(
            status_code=413,
            detail=f"Too many points: {len(req.points)} > {settings.max_points}",
        )

    overrides = {
        k: v
        for k, v in (("keep_collinear", req.keep_collinear), ("allow_empty", req.allow_empty))
        if v is not None
    }
    if overrides:
        config = dataclasses.replace(config, **overrides)

    start = time.perf_counter()
    try:
        result = graham_scan(req.points, config)
    except InvalidPointSetError as e:
        logger.warning("Hull request rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    elapsed = (time.perf_counter() - start) * 1000

    area = 0.0
    length = 0.0
    vertex_count = len(result.vertices)
    if result.closed:
        ring = to_array(result.vertices)
        area = signed_area(ring)
        length = perimeter(ring)
        vertex_count -= 1

    logger.info(
        "Hull: %d points -> %d vertices (%s) in %.1fms",
        len(req.points),
        vertex_count,
        result.degenerate or "closed",
        elapsed,
    )

    return HullResponse(
        hull=[PointModel(x=p.x, y=p.y) for p in result.vertices],
        closed=result.closed,
        degenerate=result.degenerate,
        vertex_count=vertex_count,
        pivot=PointModel(x=result.pivot.x, y=result.pivot.y) if result.pivot is not None else None,
        area=round(area, 6),
        perimeter=round(length, 6),
        bbox=bbox(to_array(req.points)),
        processing_time_ms=round(elapsed, 3),
    )
