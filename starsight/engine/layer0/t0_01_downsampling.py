"""T0.01 — Path Downsampling.

Keep every Nth drawn point plus the final point. Bounds the cost of the
quadratic transforms downstream and smooths pointer jitter.
"""

from __future__ import annotations

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform
from starsight.utils.geometry import downsample_path


@transform(
    id="T0.01",
    layer=Layer.SAMPLING,
    description="Downsample the drawn path to every Nth point",
)
def downsampling(ctx: StrokeContext) -> None:
    ctx.sampled = downsample_path(ctx.points, ctx.config.sample_rate)
    ctx.features["sampled_point_count"] = len(ctx.sampled)
