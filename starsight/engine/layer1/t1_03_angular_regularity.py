"""T1.03 — Angular Regularity.

Gaps between angle-sorted tips (wrapping through 2pi) and their mean
absolute deviation. Evenly spread tips give a variance near zero.
"""

from __future__ import annotations

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform
from starsight.utils.geometry import angular_gaps
from starsight.utils.math_helpers import mean_absolute_deviation


@transform(
    id="T1.03",
    layer=Layer.SHAPE_ANALYSIS,
    dependencies=["T1.01"],
    description="Measure how evenly star tips are spaced around the centroid",
)
def angular_regularity(ctx: StrokeContext) -> None:
    gaps = angular_gaps(ctx.vertex_angles)
    ctx.features["angle_gaps"] = [round(float(g), 4) for g in gaps]
    ctx.features["angle_variance"] = (
        mean_absolute_deviation(gaps) if len(gaps) > 0 else float("inf")
    )
