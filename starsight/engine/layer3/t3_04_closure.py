"""T3.04 — Closure Score.

Gap between the first and last sampled point relative to the stroke's
radius (farthest sampled point from the centroid), penalized 2x.
"""

from __future__ import annotations

import numpy as np

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform
from starsight.utils.math_helpers import floored_score, safe_ratio


@transform(
    id="T3.04",
    layer=Layer.SCORING,
    dependencies=["T0.02"],
    description="Score how well the stroke returns to its start",
)
def closure(ctx: StrokeContext) -> None:
    if len(ctx.sampled) == 0:
        ctx.features["closure"] = 0.0
        return

    gap = float(np.linalg.norm(ctx.sampled[-1] - ctx.sampled[0]))
    radius = float(np.max(ctx.distances))
    ctx.features["closure_gap"] = round(gap, 4)
    ctx.features["closure"] = floored_score(
        safe_ratio(gap, radius, default=float("inf")),
        ctx.config.closure_distance_scale,
    )
