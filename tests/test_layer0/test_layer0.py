"""Tests for Layer 0 transforms: downsampling and polar transform."""

from __future__ import annotations

import numpy as np
import pytest

from starsight.engine.config import StarConfig
from starsight.engine.context import StrokeContext
from starsight.engine.pipeline import create_pipeline
from starsight.engine.registry import Layer, get_registry


def test_layer0_registers_2_transforms():
    create_pipeline()
    assert [s.id for s in get_registry().get_layer(Layer.SAMPLING)] == ["T0.01", "T0.02"]


def test_sampling_keeps_stride_and_last_point():
    pts = np.column_stack([np.arange(14, dtype=float), np.zeros(14)])
    ctx = StrokeContext.from_path(pts, StarConfig(sample_rate=4))
    create_pipeline().run_layer(ctx, Layer.SAMPLING)

    assert list(ctx.sampled[:, 0]) == [0, 4, 8, 12, 13]
    assert ctx.features["sampled_point_count"] == 5
    assert {"T0.01", "T0.02"} <= ctx.completed_transforms


def test_polar_transform_is_centroid_relative(star_path):
    ctx = StrokeContext.from_path(star_path(per_edge=8), StarConfig(sample_rate=1))
    create_pipeline().run_layer(ctx, Layer.SAMPLING)

    cx, cy = ctx.centroid
    assert len(ctx.angles) == len(ctx.distances) == len(ctx.sampled)
    assert np.all(ctx.angles > -np.pi) and np.all(ctx.angles <= np.pi)
    expected = np.hypot(ctx.sampled[:, 0] - cx, ctx.sampled[:, 1] - cy)
    assert ctx.distances == pytest.approx(expected)


def test_centroid_includes_duplicate_closing_point(star_path):
    # 80 symmetric points plus the repeated start pull the centroid towards tip 0
    ctx = StrokeContext.from_path(star_path(per_edge=8), StarConfig(sample_rate=1))
    create_pipeline().run_layer(ctx, Layer.SAMPLING)

    cx, cy = ctx.centroid
    assert cx == pytest.approx(150.0 + 100.0 / 81)
    assert cy == pytest.approx(150.0)
