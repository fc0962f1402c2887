"""POST /api/analyze: classify and score one drawn stroke."""

from __future__ import annotations

import dataclasses
import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from starsight.dependencies import get_star_config
from starsight.engine.analysis import analyze_stroke
from starsight.engine.config import StarConfig
from starsight.grading import grade
from starsight.models.requests import AnalyzeRequest
from starsight.models.responses import AnalyzeResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _effective_config(req: AnalyzeRequest, defaults: StarConfig) -> StarConfig:
    if req.config is None:
        return defaults
    overrides = req.config.model_dump(exclude_none=True)
    try:
        return dataclasses.replace(defaults, **overrides)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    req: AnalyzeRequest,
    defaults: StarConfig = Depends(get_star_config),
) -> AnalyzeResponse:
    start = time.perf_counter()
    config = _effective_config(req, defaults)

    analysis = analyze_stroke([(p.x, p.y) for p in req.points], config)
    category = grade(analysis, config)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Analyzed %d points: %s (perfection=%s) in %.1fms",
        len(req.points),
        category.value,
        analysis.perfection,
        elapsed,
    )

    return AnalyzeResponse(
        is_star_like=analysis.is_star_like,
        perfection=analysis.perfection,
        category=category.value,
        vertex_count=analysis.vertex_count,
        signals=analysis.signals,
        sub_scores=analysis.sub_scores,
        processing_time_ms=round(elapsed, 3),
        transforms_completed=analysis.transforms_completed,
        transforms_failed=len(analysis.errors),
        errors=analysis.errors,
    )
