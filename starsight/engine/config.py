"""Star analysis configuration: boundary thresholds plus heuristic tuning."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StarConfig:
    """Controls sampling, classification and scoring of a drawn stroke."""

    # Grading thresholds (read by the caller, never by the engine)
    perfect_threshold: float = 0.85
    good_threshold: float = 0.65

    # Input requirements
    min_points: int = 12
    star_points_min: int = 4
    star_points_max: int = 12
    sample_rate: int = 4  # keep every Nth point

    # Vertex detection
    vertex_window_min: int = 3
    vertex_window_divisor: int = 30  # window = max(min, N // divisor)
    min_vertex_separation: float = 0.2  # radians

    # Self-intersection
    intersection_segment_divisor: int = 40
    intersection_min_count: int = 2

    # Classification
    peak_valley_window: int = 5
    angle_variance_max: float = 0.6  # radians
    radial_range_min: float = 0.2

    # Pattern alternation
    pattern_samples: int = 72  # every 5 degrees
    pattern_min_vertices: int = 4

    # Sub-score scaling
    angular_deviation_scale: float = 1.5
    radial_deviation_scale: float = 1.5
    smoothness_deviation_scale: float = 3.0
    closure_distance_scale: float = 2.0

    # Sub-score weights (sum to 1.0)
    angular_weight: float = 0.25
    radial_weight: float = 0.20
    smoothness_weight: float = 0.30
    closure_weight: float = 0.10
    pattern_weight: float = 0.15

    def __post_init__(self) -> None:
        if self.sample_rate < 1:
            raise ValueError(f"sample_rate must be >= 1, got {self.sample_rate}")
        if self.min_points < 0:
            raise ValueError(f"min_points must be >= 0, got {self.min_points}")
        if self.star_points_min > self.star_points_max:
            raise ValueError(
                f"star_points_min ({self.star_points_min}) exceeds "
                f"star_points_max ({self.star_points_max})"
            )

    @property
    def weights(self) -> dict[str, float]:
        return {
            "angular_symmetry": self.angular_weight,
            "radial_symmetry": self.radial_weight,
            "smoothness": self.smoothness_weight,
            "closure": self.closure_weight,
            "pattern_alternation": self.pattern_weight,
        }
