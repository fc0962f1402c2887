"""T3.03 — Line Smoothness Score.

Straight strokes put each sampled point on the midpoint of its neighbors.
The mean offset from that midpoint, relative to the neighbor span, is
penalized 3x. Corners count too, so wobble and rounded tips both cost.
"""

from __future__ import annotations

import numpy as np

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform
from starsight.utils.geometry import neighbor_deviations
from starsight.utils.math_helpers import floored_score


@transform(
    id="T3.03",
    layer=Layer.SCORING,
    dependencies=["T0.01"],
    description="Score how straight the drawn lines are",
)
def smoothness(ctx: StrokeContext) -> None:
    if len(ctx.sampled) < 3:
        ctx.features["smoothness"] = 0.0
        return

    deviations = neighbor_deviations(ctx.sampled)
    mean_deviation = float(np.mean(deviations)) if len(deviations) > 0 else 0.0
    ctx.features["mean_line_deviation"] = round(mean_deviation, 4)
    ctx.features["smoothness"] = floored_score(
        mean_deviation, ctx.config.smoothness_deviation_scale
    )
