"""T3.01 — Angular Symmetry Score.

1 - 1.5 x mean relative deviation of tip-to-tip angular gaps, floored at 0.
"""

from __future__ import annotations

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform
from starsight.utils.geometry import angular_gaps
from starsight.utils.math_helpers import floored_score, mean_relative_deviation


@transform(
    id="T3.01",
    layer=Layer.SCORING,
    dependencies=["T1.01"],
    description="Score how evenly star tips are spaced",
)
def angular_symmetry(ctx: StrokeContext) -> None:
    deviation = mean_relative_deviation(angular_gaps(ctx.vertex_angles))
    ctx.features["angular_symmetry"] = floored_score(
        deviation, ctx.config.angular_deviation_scale
    )
