"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class ConfigResponse(BaseModel):
    perfect_threshold: float
    good_threshold: float
    min_points: int
    star_points_min: int
    star_points_max: int
    sample_rate: int


class AnalyzeResponse(BaseModel):
    is_star_like: bool
    perfection: float | None = None
    category: str = "not_star"
    vertex_count: int = 0
    signals: list[str] = Field(default_factory=list)
    sub_scores: dict[str, float] = Field(default_factory=dict)
    processing_time_ms: float = 0.0
    transforms_completed: int = 0
    transforms_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)
