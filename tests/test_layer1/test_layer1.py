"""Tests for Layer 1 transforms: tips, crossings, regularity, radial profile."""

from __future__ import annotations

import numpy as np
import pytest

from starsight.engine.config import StarConfig
from starsight.engine.context import StrokeContext
from starsight.engine.pipeline import create_pipeline
from starsight.engine.registry import Layer, get_registry


def _analyzed(path, config: StarConfig | None = None) -> StrokeContext:
    ctx = StrokeContext.from_path(path, config)
    pipeline = create_pipeline()
    pipeline.run_layer(ctx, Layer.SAMPLING)
    pipeline.run_layer(ctx, Layer.SHAPE_ANALYSIS)
    return ctx


def test_layer1_registers_4_transforms():
    create_pipeline()
    assert len(get_registry().get_layer(Layer.SHAPE_ANALYSIS)) == 4


@pytest.mark.parametrize("points", [4, 5, 6, 8, 12])
def test_regular_star_tips(star_path, points):
    ctx = _analyzed(star_path(points=points))
    assert ctx.features["vertex_count"] == points
    # Every tip lies at the outer radius
    assert ctx.vertex_distances == pytest.approx([100.0] * points, rel=0.02)


def test_tips_respect_minimum_separation(star_path):
    ctx = _analyzed(star_path(points=8))
    angles = np.sort(ctx.vertex_angles)
    gaps = np.diff(np.append(angles, angles[0] + 2 * np.pi))
    assert np.all(gaps >= 0.2)


def test_outline_star_does_not_cross_itself(perfect_star):
    ctx = _analyzed(perfect_star)
    assert ctx.features["has_self_intersections"] is False


def test_pentagram_crosses_itself(pentagram_path):
    ctx = _analyzed(pentagram_path())
    assert ctx.features["has_self_intersections"] is True
    assert ctx.features["vertex_count"] == 5


def test_angular_regularity_of_regular_star(perfect_star):
    ctx = _analyzed(perfect_star)
    assert len(ctx.features["angle_gaps"]) == 5
    assert sum(ctx.features["angle_gaps"]) == pytest.approx(2 * np.pi, abs=1e-3)
    assert ctx.features["angle_variance"] < 0.05


def test_radial_profile_of_regular_star(perfect_star):
    ctx = _analyzed(perfect_star)
    assert ctx.features["radial_range_ratio"] > 0.5
    assert ctx.features["valley_count"] == 5
    assert ctx.features["peak_count"] >= 4


def test_back_and_forth_line_has_two_tips(line_path):
    ctx = _analyzed(line_path)
    assert ctx.features["vertex_count"] == 2
