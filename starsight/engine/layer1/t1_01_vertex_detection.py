"""T1.01 — Star Tip Detection.

Sort the polar set by angle and keep points that no neighbor within the
window out-reaches (window = max(3, N/30), wrapping around). Tips closer
than the minimum angular separation collapse onto the farther one.
"""

from __future__ import annotations

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform
from starsight.utils.geometry import detect_vertices


@transform(
    id="T1.01",
    layer=Layer.SHAPE_ANALYSIS,
    dependencies=["T0.02"],
    description="Detect star tips as deduplicated local radial maxima",
)
def vertex_detection(ctx: StrokeContext) -> None:
    cfg = ctx.config
    ctx.vertex_indices = detect_vertices(
        ctx.angles,
        ctx.distances,
        min_separation=cfg.min_vertex_separation,
        min_window=cfg.vertex_window_min,
        window_divisor=cfg.vertex_window_divisor,
    )
    ctx.features["vertex_count"] = ctx.num_vertices
