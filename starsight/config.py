"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from starsight.engine.config import StarConfig


class Settings(BaseSettings):
    starsight_env: str = "development"
    starsight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Default star analysis boundary values
    perfect_threshold: float = 0.85
    good_threshold: float = 0.65
    min_points: int = 12
    star_points_min: int = 4
    star_points_max: int = 12
    sample_rate: int = 4

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def star_config(self) -> StarConfig:
        return StarConfig(
            perfect_threshold=self.perfect_threshold,
            good_threshold=self.good_threshold,
            min_points=self.min_points,
            star_points_min=self.star_points_min,
            star_points_max=self.star_points_max,
            sample_rate=self.sample_rate,
        )


settings = Settings()
