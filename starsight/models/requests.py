"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_POINTS = 20_000


class PointModel(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    x: float
    y: float


class StarConfigOverrides(BaseModel):
    """Per-request overrides of the default analysis configuration."""

    perfect_threshold: float | None = Field(default=None, ge=0.0, le=1.0)
    good_threshold: float | None = Field(default=None, ge=0.0, le=1.0)
    min_points: int | None = Field(default=None, ge=0)
    star_points_min: int | None = Field(default=None, ge=0)
    star_points_max: int | None = Field(default=None, ge=0)
    sample_rate: int | None = Field(default=None, ge=1)


class AnalyzeRequest(BaseModel):
    points: list[PointModel] = Field(
        ...,
        max_length=MAX_POINTS,
        description="Drawn points in drawing order",
    )
    config: StarConfigOverrides | None = Field(
        default=None,
        description="Optional overrides of the server's default thresholds",
    )
