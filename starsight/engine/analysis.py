"""Stroke analysis entry points: classify, score, or both in one pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from starsight.engine.config import StarConfig
from starsight.engine.context import StrokeContext
from starsight.engine.pipeline import create_pipeline

SUB_SCORES = (
    "angular_symmetry",
    "radial_symmetry",
    "smoothness",
    "closure",
    "pattern_alternation",
)


@dataclass
class StarAnalysis:
    """Outcome of analyzing one drawn stroke. ``perfection`` is set only for stars."""

    is_star_like: bool
    perfection: float | None = None
    vertex_count: int = 0
    signals: list[str] = field(default_factory=list)
    sub_scores: dict[str, float] = field(default_factory=dict)
    features: dict[str, Any] = field(default_factory=dict)
    transforms_completed: int = 0
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_context(cls, ctx: StrokeContext) -> StarAnalysis:
        star = ctx.is_star_like
        return cls(
            is_star_like=star,
            perfection=ctx.perfection if star else None,
            vertex_count=ctx.num_vertices,
            signals=list(ctx.features.get("signals", [])),
            sub_scores={k: ctx.features[k] for k in SUB_SCORES if k in ctx.features},
            features=dict(ctx.features),
            transforms_completed=len(ctx.completed_transforms),
            errors=dict(ctx.errors),
        )


def analyze_stroke(path: Any, config: StarConfig | None = None) -> StarAnalysis:
    """Classify a stroke and, when it is star-like, score it."""
    ctx = StrokeContext.from_path(path, config)
    create_pipeline().run(ctx)
    return StarAnalysis.from_context(ctx)


def is_star_like(path: Any, config: StarConfig | None = None) -> bool:
    ctx = StrokeContext.from_path(path, config)
    create_pipeline().classify(ctx)
    return ctx.is_star_like


def calculate_perfection(path: Any, config: StarConfig | None = None) -> float:
    """Perfection score in [0, 1]. Only meaningful for strokes already classified as star-like."""
    ctx = StrokeContext.from_path(path, config)
    create_pipeline().score(ctx)
    return float(ctx.features.get("perfection", 0.0))
