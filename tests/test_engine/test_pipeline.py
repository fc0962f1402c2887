"""Tests for the pipeline orchestrator."""

import numpy as np

from starsight.engine.config import StarConfig
from starsight.engine.context import StrokeContext
from starsight.engine.pipeline import Pipeline, create_pipeline
from starsight.engine.registry import Layer, TransformRegistry, TransformSpec


def _ctx(n: int = 20) -> StrokeContext:
    return StrokeContext(points=np.zeros((n, 2)))


def test_pipeline_runs_transforms():
    reg = TransformRegistry()
    results = []

    def t1(ctx: StrokeContext) -> None:
        results.append("t1")

    def t2(ctx: StrokeContext) -> None:
        results.append("t2")

    reg.register(TransformSpec(id="T0.01", layer=Layer.SAMPLING, fn=t1))
    reg.register(TransformSpec(id="T0.02", layer=Layer.SAMPLING, fn=t2, dependencies=["T0.01"]))

    pipeline = Pipeline(registry=reg)
    ctx = _ctx()
    pipeline.run(ctx)

    assert results == ["t1", "t2"]
    assert "T0.01" in ctx.completed_transforms
    assert "T0.02" in ctx.completed_transforms


def test_pipeline_handles_errors():
    reg = TransformRegistry()

    def fail(ctx: StrokeContext) -> None:
        raise ValueError("test error")

    reg.register(TransformSpec(id="T0.01", layer=Layer.SAMPLING, fn=fail))

    pipeline = Pipeline(registry=reg)
    ctx = _ctx()
    pipeline.run(ctx)

    assert "T0.01" in ctx.errors
    assert "test error" in ctx.errors["T0.01"]
    assert "T0.01" not in ctx.completed_transforms


def test_scoring_layer_runs_only_for_accepted_strokes():
    reg = TransformRegistry()
    scored = []

    def accept(ctx: StrokeContext) -> None:
        ctx.features["is_star_like"] = ctx.num_points > 15

    def score(ctx: StrokeContext) -> None:
        scored.append(ctx.num_points)

    reg.register(TransformSpec(id="T2.01", layer=Layer.CLASSIFICATION, fn=accept))
    reg.register(TransformSpec(id="T3.06", layer=Layer.SCORING, fn=score, dependencies=["T2.01"]))

    pipeline = Pipeline(registry=reg)
    pipeline.run(_ctx(12))
    pipeline.run(_ctx(20))

    assert scored == [20]


def test_adaptive_gate_skips_short_strokes():
    reg = TransformRegistry()
    calls = []
    reg.register(TransformSpec(id="T0.01", layer=Layer.SAMPLING, fn=lambda ctx: calls.append(1)))

    pipeline = Pipeline(registry=reg)
    ctx = _ctx(11)
    pipeline.run(ctx)

    assert calls == []
    assert ctx.features["is_star_like"] is False
    assert not ctx.completed_transforms


def test_min_points_is_configurable():
    ctx = StrokeContext(points=np.zeros((5, 2)), config=StarConfig(min_points=3))
    create_pipeline().classify(ctx)
    assert "T0.01" in ctx.completed_transforms


def test_full_run_on_star(perfect_star):
    ctx = StrokeContext.from_path(perfect_star)
    create_pipeline().run(ctx)
    assert ctx.is_star_like
    assert len(ctx.completed_transforms) == 13
    assert not ctx.errors
    assert 0.0 <= ctx.perfection <= 1.0


def test_full_run_skips_scoring_for_line(line_path):
    ctx = StrokeContext.from_path(line_path)
    create_pipeline().run(ctx)
    assert not ctx.is_star_like
    assert "perfection" not in ctx.features
    assert not any(tid.startswith("T3.") for tid in ctx.completed_transforms)


def test_run_layer():
    ctx = StrokeContext.from_path(np.zeros((20, 2)))
    pipeline = create_pipeline()
    pipeline.run_layer(ctx, Layer.SAMPLING)
    assert ctx.completed_transforms == {"T0.01", "T0.02"}
