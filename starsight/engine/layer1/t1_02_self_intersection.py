"""T1.02 — Self-Intersection.

Interlaced ("cross") stars are drawn in one stroke whose segments cross
each other. Two crossings between non-adjacent strided segments are enough.
"""

from __future__ import annotations

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform
from starsight.utils.geometry import has_self_intersections


@transform(
    id="T1.02",
    layer=Layer.SHAPE_ANALYSIS,
    dependencies=["T0.01"],
    description="Detect crossings between non-adjacent path segments",
)
def self_intersection(ctx: StrokeContext) -> None:
    ctx.features["has_self_intersections"] = has_self_intersections(
        ctx.sampled,
        segment_divisor=ctx.config.intersection_segment_divisor,
        min_count=ctx.config.intersection_min_count,
    )
