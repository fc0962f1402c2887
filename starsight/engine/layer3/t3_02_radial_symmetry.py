"""T3.02 — Radial Symmetry Score.

1 - 1.5 x mean relative deviation of tip distances, floored at 0.
A tip sitting on the centroid makes the mean zero and the score 0.
"""

from __future__ import annotations

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform
from starsight.utils.math_helpers import floored_score, mean_relative_deviation


@transform(
    id="T3.02",
    layer=Layer.SCORING,
    dependencies=["T1.01"],
    description="Score how equally far star tips are from the centroid",
)
def radial_symmetry(ctx: StrokeContext) -> None:
    deviation = mean_relative_deviation(ctx.vertex_distances)
    ctx.features["radial_symmetry"] = floored_score(
        deviation, ctx.config.radial_deviation_scale
    )
