"""StrokeContext: the single mutable state object flowing through all transforms.

Per-stroke geometry lives in typed fields; scalar results go to
StrokeContext.features keyed by feature name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from starsight.engine.config import StarConfig
from starsight.utils.geometry import as_points


@dataclass
class StrokeContext:
    """State for one analysis of one drawn stroke."""

    # Raw drawn points: Nx2 array of (x, y), drawing order
    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    config: StarConfig = field(default_factory=StarConfig)
    # Every sample_rate-th point plus the last
    sampled: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    centroid: tuple[float, float] = (0.0, 0.0)
    # Polar coordinates of sampled points relative to the centroid
    angles: NDArray[np.float64] = field(default_factory=lambda: np.empty(0))
    distances: NDArray[np.float64] = field(default_factory=lambda: np.empty(0))
    # Indices into angles/distances, retention order
    vertex_indices: NDArray[np.int64] = field(default_factory=lambda: np.empty(0, dtype=np.int64))
    features: dict[str, Any] = field(default_factory=dict)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_path(cls, path: Any, config: StarConfig | None = None) -> StrokeContext:
        return cls(points=as_points(path), config=config or StarConfig())

    @property
    def num_points(self) -> int:
        return len(self.points)

    @property
    def num_vertices(self) -> int:
        return len(self.vertex_indices)

    @property
    def vertex_angles(self) -> NDArray[np.float64]:
        return self.angles[self.vertex_indices]

    @property
    def vertex_distances(self) -> NDArray[np.float64]:
        return self.distances[self.vertex_indices]

    @property
    def is_star_like(self) -> bool:
        return bool(self.features.get("is_star_like", False))

    @property
    def perfection(self) -> float | None:
        return self.features.get("perfection")
