"""T1.04 — Radial Profile.

Distance-from-centroid profile of the whole sampled path, ordered by angle.
A star swings between tips and valleys, so the spread is large relative to
the mean and the profile has clear strict peaks and valleys.
"""

from __future__ import annotations

import numpy as np

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform
from starsight.utils.geometry import peak_valley_counts
from starsight.utils.math_helpers import safe_ratio


@transform(
    id="T1.04",
    layer=Layer.SHAPE_ANALYSIS,
    dependencies=["T0.02"],
    description="Measure radial spread and count peaks/valleys of the distance profile",
)
def radial_profile(ctx: StrokeContext) -> None:
    if len(ctx.distances) == 0:
        ctx.features["radial_range_ratio"] = 0.0
        ctx.features["peak_count"] = 0
        ctx.features["valley_count"] = 0
        return

    spread = float(np.max(ctx.distances) - np.min(ctx.distances))
    ctx.features["radial_range_ratio"] = safe_ratio(spread, float(np.mean(ctx.distances)))

    profile = ctx.distances[np.argsort(ctx.angles, kind="stable")]
    peaks, valleys = peak_valley_counts(profile, window=ctx.config.peak_valley_window)
    ctx.features["peak_count"] = peaks
    ctx.features["valley_count"] = valleys
