"""StarSight stroke analysis engine."""

from starsight.engine.registry import transform, Layer, get_registry
from starsight.engine.config import StarConfig
from starsight.engine.context import StrokeContext
from starsight.engine.pipeline import Pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "StarConfig",
    "StrokeContext",
    "Pipeline",
]
