"""Shared test fixtures: synthetic strokes."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray


def _trace(corners: list[tuple[float, float]], per_edge: int) -> NDArray[np.float64]:
    """Closed polyline through ``corners`` with ``per_edge`` evenly spaced points per edge."""
    pts = np.array(corners, dtype=np.float64)
    t = np.arange(per_edge)[:, None] / per_edge
    edges = [pts[i] + t * (pts[(i + 1) % len(pts)] - pts[i]) for i in range(len(pts))]
    return np.vstack(edges + [pts[:1]])


def make_star_path(
    points: int = 5,
    outer: float = 100.0,
    inner: float = 40.0,
    center: tuple[float, float] = (150.0, 150.0),
    per_edge: int = 200,
    rotation: float = 0.0,
) -> NDArray[np.float64]:
    """Outline of a regular star: tips and valleys alternate, start == end."""
    corners = []
    for i in range(points * 2):
        angle = rotation + i * np.pi / points
        radius = outer if i % 2 == 0 else inner
        corners.append((center[0] + radius * np.cos(angle), center[1] + radius * np.sin(angle)))
    return _trace(corners, per_edge)


def make_pentagram_path(
    radius: float = 100.0,
    center: tuple[float, float] = (150.0, 150.0),
    per_edge: int = 200,
) -> NDArray[np.float64]:
    """Five-pointed star drawn tip to tip, skipping one tip each time."""
    corners = []
    for k in range(5):
        angle = -np.pi / 2 + (2 * k % 5) * 2 * np.pi / 5
        corners.append((center[0] + radius * np.cos(angle), center[1] + radius * np.sin(angle)))
    return _trace(corners, per_edge)


def make_polygon_path(
    sides: int = 6,
    radius: float = 100.0,
    center: tuple[float, float] = (150.0, 150.0),
    per_edge: int = 60,
) -> NDArray[np.float64]:
    """Outline of a regular polygon, corners on the circle of ``radius``."""
    angles = 2 * np.pi * np.arange(sides) / sides
    corners = [(center[0] + radius * np.cos(a), center[1] + radius * np.sin(a)) for a in angles]
    return _trace(corners, per_edge)


def make_line_back_and_forth() -> NDArray[np.float64]:
    """Horizontal stroke from x=0 to x=200 and back, y fixed."""
    forward = np.arange(0.0, 205.0, 5.0)
    back = np.arange(195.0, -5.0, -5.0)
    xs = np.concatenate([forward, back])
    return np.column_stack([xs, np.full(len(xs), 100.0)])


@pytest.fixture
def star_path():
    return make_star_path


@pytest.fixture
def pentagram_path():
    return make_pentagram_path


@pytest.fixture
def polygon_path():
    return make_polygon_path


@pytest.fixture
def perfect_star() -> NDArray[np.float64]:
    return make_star_path()


@pytest.fixture
def line_path() -> NDArray[np.float64]:
    return make_line_back_and_forth()
