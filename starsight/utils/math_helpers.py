"""Math helpers: deviations, floored scores. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

# Denominators below this are treated as zero.
EPSILON = 1e-10


def mean_absolute_deviation(values: NDArray[np.float64]) -> float:
    """Mean of |v - mean(v)|. 0 for an empty array."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.abs(values - np.mean(values))))


def mean_relative_deviation(values: NDArray[np.float64]) -> float:
    """Mean of |v - mean| / mean. ``inf`` when the mean is (near) zero or there are no values."""
    if len(values) == 0:
        return float("inf")
    mean = float(np.mean(values))
    if abs(mean) < EPSILON:
        return float("inf")
    return float(np.mean(np.abs(values - mean)) / mean)


def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """numerator / denominator, or ``default`` when the denominator is (near) zero."""
    if abs(denominator) < EPSILON:
        return default
    return numerator / denominator


def floored_score(penalty: float, scale: float) -> float:
    """max(0, 1 - scale * penalty). Non-finite penalties score 0."""
    if not np.isfinite(penalty):
        return 0.0
    return max(0.0, 1.0 - scale * penalty)
