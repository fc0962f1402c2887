"""T0.02 — Polar Transform.

Centroid of the sampled path, then (angle, distance) of every sampled point
relative to it. Everything after this is centroid-relative, so results do
not depend on where the stroke was drawn.
"""

from __future__ import annotations

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform
from starsight.utils.geometry import centroid, polar_coordinates


@transform(
    id="T0.02",
    layer=Layer.SAMPLING,
    dependencies=["T0.01"],
    description="Compute centroid and polar coordinates of sampled points",
)
def polar_transform(ctx: StrokeContext) -> None:
    ctx.centroid = centroid(ctx.sampled)
    ctx.angles, ctx.distances = polar_coordinates(ctx.sampled, ctx.centroid)
