"""T3.05 — Peak/Valley Alternation Score.

Resample the radial profile every 5 degrees (nearest sampled point by
angle) and count switches between strict peaks and strict valleys. A
perfect N-pointed star alternates 2N times.
"""

from __future__ import annotations

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform
from starsight.utils.geometry import count_alternations, resample_radial_profile


@transform(
    id="T3.05",
    layer=Layer.SCORING,
    dependencies=["T1.01"],
    description="Score alternation of peaks and valleys around the centroid",
)
def pattern_alternation(ctx: StrokeContext) -> None:
    cfg = ctx.config
    if ctx.num_vertices < cfg.pattern_min_vertices:
        ctx.features["alternation_count"] = 0
        ctx.features["pattern_alternation"] = 0.0
        return

    profile = resample_radial_profile(ctx.angles, ctx.distances, cfg.pattern_samples)
    alternations = count_alternations(profile)
    expected = ctx.num_vertices * 2
    ctx.features["alternation_count"] = alternations
    ctx.features["pattern_alternation"] = min(1.0, alternations / expected)
