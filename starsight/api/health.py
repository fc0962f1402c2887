"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from starsight import __version__
from starsight.dependencies import get_star_config
from starsight.engine.config import StarConfig
from starsight.engine.registry import get_registry
from starsight.models.responses import ConfigResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        transforms_registered=get_registry().count,
    )


@router.get("/config", response_model=ConfigResponse)
async def config(star_config: StarConfig = Depends(get_star_config)) -> ConfigResponse:
    return ConfigResponse(
        perfect_threshold=star_config.perfect_threshold,
        good_threshold=star_config.good_threshold,
        min_points=star_config.min_points,
        star_points_min=star_config.star_points_min,
        star_points_max=star_config.star_points_max,
        sample_rate=star_config.sample_rate,
    )
