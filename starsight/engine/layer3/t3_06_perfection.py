"""T3.06 — Perfection Score.

Fixed weighted sum of the five sub-scores. Weights sum to 1 and every
sub-score is floored at 0, so the result stays in [0, 1] without
re-normalizing. A sub-score whose transform failed counts as 0.
"""

from __future__ import annotations

from starsight.engine.context import StrokeContext
from starsight.engine.registry import Layer, transform


@transform(
    id="T3.06",
    layer=Layer.SCORING,
    dependencies=["T3.01", "T3.02", "T3.03", "T3.04", "T3.05"],
    description="Combine sub-scores into the perfection score",
)
def perfection(ctx: StrokeContext) -> None:
    ctx.features["perfection"] = sum(
        float(ctx.features.get(name, 0.0)) * weight
        for name, weight in ctx.config.weights.items()
    )
