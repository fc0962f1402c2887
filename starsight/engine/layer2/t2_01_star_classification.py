"""T2.01 — Star Classification.

No single signal is reliable on hand-drawn input, so a stroke with a
plausible tip count is accepted when any of three signatures holds:

  self_intersection:  the stroke crosses itself (interlaced star)
  angular_regularity: evenly spaced tips and a wide radial spread
  peak_valley:        at least half as many strict peaks and valleys as tips
"""

from __future__ import annotations

import logging

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform

logger = logging.getLogger(__name__)


@transform(
    id="T2.01",
    layer=Layer.CLASSIFICATION,
    dependencies=["T1.01", "T1.02", "T1.03", "T1.04"],
    description="Accept or reject the stroke as star-like",
)
def star_classification(ctx: StrokeContext) -> None:
    cfg = ctx.config
    ctx.features["is_star_like"] = False
    ctx.features["signals"] = []

    if len(ctx.sampled) == 0:
        return

    n_vertices = ctx.num_vertices
    if not cfg.star_points_min <= n_vertices <= cfg.star_points_max:
        logger.debug(
            "Rejected: %d tips outside [%d, %d]",
            n_vertices,
            cfg.star_points_min,
            cfg.star_points_max,
        )
        return

    f = ctx.features
    signals: list[str] = []
    if f.get("has_self_intersections", False):
        signals.append("self_intersection")
    if (
        f.get("angle_variance", float("inf")) < cfg.angle_variance_max
        and f.get("radial_range_ratio", 0.0) > cfg.radial_range_min
    ):
        signals.append("angular_regularity")
    half = n_vertices / 2
    if f.get("peak_count", 0) >= half and f.get("valley_count", 0) >= half:
        signals.append("peak_valley")

    f["signals"] = signals
    f["is_star_like"] = bool(signals)
