"""StarSight: decide whether a hand-drawn stroke is a star, and how good a star it is."""

from starsight.engine.analysis import (
    StarAnalysis,
    analyze_stroke,
    calculate_perfection,
    is_star_like,
)
from starsight.engine.config import StarConfig

__version__ = "0.1.0"

__all__ = [
    "StarAnalysis",
    "StarConfig",
    "analyze_stroke",
    "calculate_perfection",
    "is_star_like",
]
