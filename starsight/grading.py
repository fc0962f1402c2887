"""Map an analysis onto the user-facing verdict the drawing game shows."""

from __future__ import annotations

import enum

from starsight.engine.analysis import StarAnalysis
from starsight.engine.config import StarConfig


class StarCategory(str, enum.Enum):
    NOT_STAR = "not_star"
    PERFECT = "perfect"
    GOOD = "good"
    BAD = "bad"


def grade(analysis: StarAnalysis, config: StarConfig) -> StarCategory:
    if not analysis.is_star_like or analysis.perfection is None:
        return StarCategory.NOT_STAR
    if analysis.perfection >= config.perfect_threshold:
        return StarCategory.PERFECT
    if analysis.perfection >= config.good_threshold:
        return StarCategory.GOOD
    return StarCategory.BAD
