"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

TWO_PI = 2 * np.pi


def as_points(path: Any) -> NDArray[np.float64]:
    """Normalize a path to an Nx2 float array.

    Accepts an Nx2 array, a sequence of (x, y) pairs or a sequence of
    {"x": .., "y": ..} mappings.
    """
    if isinstance(path, np.ndarray):
        if path.size == 0:
            return np.empty((0, 2))
        return np.asarray(path, dtype=np.float64).reshape(-1, 2)
    if not isinstance(path, Sequence) or len(path) == 0:
        return np.empty((0, 2))
    if isinstance(path[0], Mapping):
        return np.array([(p["x"], p["y"]) for p in path], dtype=np.float64)
    return np.array([(p[0], p[1]) for p in path], dtype=np.float64)


def downsample_path(points: NDArray[np.float64], stride: int) -> NDArray[np.float64]:
    """Keep every ``stride``-th point plus the final point.

    The final point is appended when the stride skipped it, so closure can
    still be measured on the sampled path.
    """
    if len(points) == 0:
        return np.empty((0, 2))
    sampled = points[::stride]
    if (len(points) - 1) % stride != 0:
        sampled = np.vstack([sampled, points[-1:]])
    return sampled.copy()


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def polar_coordinates(
    points: NDArray[np.float64],
    center: tuple[float, float],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """(angles, distances) of each point relative to ``center``, same order.

    Angles come from atan2 and lie in (-pi, pi].
    """
    if len(points) == 0:
        return np.empty(0), np.empty(0)
    dx = points[:, 0] - center[0]
    dy = points[:, 1] - center[1]
    return np.arctan2(dy, dx), np.sqrt(dx**2 + dy**2)


def angular_separation(a: float, b: float) -> float:
    """Shorter-arc distance between two angles in radians."""
    diff = abs(a - b)
    return min(diff, TWO_PI - diff)


def local_maxima(distances: NDArray[np.float64], window: int) -> list[int]:
    """Indices whose value is not exceeded within ``window`` positions.

    Indexing wraps around. A point fails only when a neighbor is strictly
    greater, so plateaus yield several candidates.
    """
    n = len(distances)
    candidates: list[int] = []
    for i in range(n):
        is_max = True
        for j in range(1, window + 1):
            if distances[i] < distances[(i - j) % n] or distances[i] < distances[(i + j) % n]:
                is_max = False
                break
        if is_max:
            candidates.append(i)
    return candidates


def merge_close_vertices(
    angles: NDArray[np.float64],
    distances: NDArray[np.float64],
    candidates: Sequence[int],
    min_separation: float,
) -> list[int]:
    """Collapse candidates closer than ``min_separation`` radians.

    Candidates are visited in order. The first retained vertex within range
    absorbs a candidate, keeping whichever of the two lies farther out.
    """
    retained: list[int] = []
    for idx in candidates:
        for slot, kept in enumerate(retained):
            if angular_separation(angles[idx], angles[kept]) < min_separation:
                if distances[idx] > distances[kept]:
                    retained[slot] = idx
                break
        else:
            retained.append(idx)
    return retained


def detect_vertices(
    angles: NDArray[np.float64],
    distances: NDArray[np.float64],
    min_separation: float = 0.2,
    min_window: int = 3,
    window_divisor: int = 30,
) -> NDArray[np.int64]:
    """Indices (into ``angles``/``distances``) of star-tip candidates.

    Local radial maxima over the angle-sorted profile, deduplicated by
    angular proximity. Returned in retention order, not angular order.
    """
    n = len(angles)
    if n == 0:
        return np.empty(0, dtype=np.int64)

    order = np.argsort(angles, kind="stable")
    window = max(min_window, n // window_divisor)
    candidates = [int(order[i]) for i in local_maxima(distances[order], window)]
    return np.array(
        merge_close_vertices(angles, distances, candidates, min_separation),
        dtype=np.int64,
    )


def _ccw(p1: NDArray[np.float64], p2: NDArray[np.float64], p3: NDArray[np.float64]) -> bool:
    return bool((p3[1] - p1[1]) * (p2[0] - p1[0]) > (p2[1] - p1[1]) * (p3[0] - p1[0]))


def segments_intersect(
    a1: NDArray[np.float64],
    a2: NDArray[np.float64],
    b1: NDArray[np.float64],
    b2: NDArray[np.float64],
) -> bool:
    """Orientation test for segment a1-a2 crossing b1-b2."""
    if np.array_equal(a1, a2) or np.array_equal(b1, b2):
        return False
    return _ccw(a1, b1, b2) != _ccw(a2, b1, b2) and _ccw(a1, a2, b1) != _ccw(a1, a2, b2)


def count_self_intersections(
    points: NDArray[np.float64],
    segment_divisor: int = 40,
    stop_at: int | None = None,
) -> int:
    """Count crossings between non-adjacent strided segments of a path.

    Segments span ``max(1, N // segment_divisor)`` points and are only
    compared when their starts are at least two strides apart. Counting
    stops early once ``stop_at`` crossings are found.
    """
    n = len(points)
    stride = max(1, n // segment_divisor)
    count = 0
    for i in range(0, n - stride, stride):
        a1, a2 = points[i], points[i + stride]
        for j in range(i + 2 * stride, n - stride, stride):
            if segments_intersect(a1, a2, points[j], points[j + stride]):
                count += 1
                if stop_at is not None and count >= stop_at:
                    return count
    return count


def has_self_intersections(
    points: NDArray[np.float64],
    segment_divisor: int = 40,
    min_count: int = 2,
) -> bool:
    """True when at least ``min_count`` segment pairs cross."""
    return count_self_intersections(points, segment_divisor, stop_at=min_count) >= min_count


def angular_gaps(angles: NDArray[np.float64]) -> NDArray[np.float64]:
    """Gaps between consecutive sorted angles, last-to-first wrapped through 2pi."""
    if len(angles) == 0:
        return np.empty(0)
    ordered = np.sort(angles)
    gaps = np.roll(ordered, -1) - ordered
    return np.where(gaps < 0, gaps + TWO_PI, gaps)


def peak_valley_counts(profile: NDArray[np.float64], window: int = 5) -> tuple[int, int]:
    """Count strict peaks and valleys of a circular profile.

    A peak is strictly greater than every other value within ``window``
    positions on each side; a valley strictly less. Offsets that wrap back
    onto the point itself are ignored.
    """
    n = len(profile)
    peaks = valleys = 0
    for i in range(n):
        is_peak = is_valley = True
        for offset in range(-window, window + 1):
            j = (i + offset) % n
            if j == i:
                continue
            if profile[i] <= profile[j]:
                is_peak = False
            if profile[i] >= profile[j]:
                is_valley = False
        peaks += is_peak
        valleys += is_valley
    return peaks, valleys


def resample_radial_profile(
    angles: NDArray[np.float64],
    distances: NDArray[np.float64],
    num_samples: int = 72,
) -> NDArray[np.float64]:
    """Distance at ``num_samples`` evenly spaced angles by nearest-angle lookup.

    Nearness is measured on the shorter arc; the first of equally near
    points wins. Samples start at angle 0.
    """
    samples = np.zeros(num_samples)
    if len(angles) == 0:
        return samples
    for i in range(num_samples):
        target = i / num_samples * TWO_PI
        separation = np.abs((angles - target + np.pi) % TWO_PI - np.pi)
        samples[i] = distances[int(np.argmin(separation))]
    return samples


def count_alternations(profile: NDArray[np.float64]) -> int:
    """Number of peak-to-valley or valley-to-peak switches in a circular profile."""
    n = len(profile)
    alternations = 0
    last_was_peak: bool | None = None
    for i in range(n):
        prev = profile[(i - 1) % n]
        curr = profile[i]
        nxt = profile[(i + 1) % n]
        is_peak = curr > prev and curr > nxt
        is_valley = curr < prev and curr < nxt
        if is_peak or is_valley:
            if last_was_peak is not None and is_peak != last_was_peak:
                alternations += 1
            last_was_peak = is_peak
    return alternations


def neighbor_deviations(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Deviation of each interior point from the midpoint of its neighbors.

    Normalized by the neighbor-to-neighbor distance. Points whose neighbors
    coincide are skipped.
    """
    if len(points) < 3:
        return np.empty(0)
    prev = points[:-2]
    curr = points[1:-1]
    nxt = points[2:]
    span = np.linalg.norm(nxt - prev, axis=1)
    offset = np.linalg.norm(curr - (prev + nxt) / 2, axis=1)
    valid = span > 0
    return offset[valid] / span[valid]
