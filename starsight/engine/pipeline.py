"""Pipeline orchestrator: runs transforms in dependency order with adaptive gating."""

from __future__ import annotations

import logging
import time

import numpy as np

from starsight.engine.context import StrokeContext
from starsight.engine.registry import (
    Layer,
    TransformRegistry,
    TransformSpec,
    get_registry,
    register_transforms,
)

logger = logging.getLogger(__name__)

CLASSIFICATION_ID = "T2.01"
PERFECTION_ID = "T3.06"


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: StrokeContext) -> StrokeContext:
        """Classify the stroke, then score it if it was accepted."""
        start = time.perf_counter()

        skip_ids = self._adaptive_gate(ctx)
        requested = {s.id for s in self.registry.all()} - skip_ids
        ordered = self.registry.resolve_order(requested)

        analysis = [s for s in ordered if s.layer < Layer.SCORING]
        scoring = [s for s in ordered if s.layer >= Layer.SCORING]

        logger.info(
            "Pipeline: %d transforms queued (%d skipped)",
            len(ordered),
            len(skip_ids),
        )

        self._run_specs(analysis, ctx)
        if ctx.is_star_like:
            self._run_specs(scoring, ctx)
        elif scoring:
            logger.debug("  stroke rejected, skipping %d scoring transforms", len(scoring))

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.1fms (star_like=%s)",
            len(ctx.completed_transforms),
            len(ordered),
            total,
            ctx.is_star_like,
        )
        return ctx

    def classify(self, ctx: StrokeContext) -> StrokeContext:
        """Run the classifier and its dependencies only."""
        if self._adaptive_gate(ctx):
            return ctx
        self._run_specs(self.registry.resolve_order({CLASSIFICATION_ID}), ctx)
        return ctx

    def score(self, ctx: StrokeContext) -> StrokeContext:
        """Run the perfection scorer and its dependencies, without classifying.

        Callers are expected to have classified the stroke as star-like.
        """
        self._run_specs(self.registry.resolve_order({PERFECTION_ID}), ctx)
        return ctx

    def run_layer(self, ctx: StrokeContext, layer: Layer) -> StrokeContext:
        """Run only transforms in a specific layer."""
        return self._run_specs(self.registry.get_layer(layer), ctx)

    def _run_specs(self, specs: list[TransformSpec], ctx: StrokeContext) -> StrokeContext:
        for spec in specs:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
        return ctx

    def _adaptive_gate(self, ctx: StrokeContext) -> set[str]:
        """Determine which transforms to skip based on the raw stroke.

        Strokes shorter than ``min_points`` or with non-finite coordinates
        are rejected without analysis.
        """
        if ctx.num_points < ctx.config.min_points:
            logger.debug(
                "Stroke has %d points (< %d), skipping analysis",
                ctx.num_points,
                ctx.config.min_points,
            )
        elif not np.isfinite(ctx.points).all():
            logger.debug("Stroke has non-finite coordinates, skipping analysis")
        else:
            return set()
        ctx.features["is_star_like"] = False
        return {s.id for s in self.registry.all()}


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline over the global registry."""
    register_transforms()
    return Pipeline()
