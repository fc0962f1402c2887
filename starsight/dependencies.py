"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from starsight.config import Settings, settings
from starsight.engine.config import StarConfig


def get_settings() -> Settings:
    return settings


def get_star_config(current: Settings = Depends(get_settings)) -> StarConfig:
    return current.star_config()
