from __future__ import annotations

from typing import Final

import numpy as np

GROUND_SIZE: Final[float] = 1000.0
GRID_STEP: Final[float] = 50.0
PLATFORM_SIZE: Final[float] = 20.0 * 480.0 / 360.0
ROCKET_HEIGHT: Final[float] = 6.0


def ground_grid(size: float = GROUND_SIZE, step: float = GRID_STEP) -> np.ndarray:
    """Segments (M, 2, 3) of a square grid on the y = 0 plane."""
    half = size / 2.0
    ticks = np.arange(-half, half + step / 2.0, step)
    segments = []
    for v in ticks:
        segments.append([[v, 0.0, -half], [v, 0.0, half]])
        segments.append([[-half, 0.0, v], [half, 0.0, v]])
    return np.array(segments, dtype=float)


def platform_outline(size: float = PLATFORM_SIZE) -> np.ndarray:
    """Closed outline of the landing pad as (4, 2, 3) segments."""
    h = size / 2.0
    corners = np.array(
        [[-h, 0.0, -h], [h, 0.0, -h], [h, 0.0, h], [-h, 0.0, h]], dtype=float
    )
    return np.stack([corners, np.roll(corners, -1, axis=0)], axis=1)


def polyline(points) -> np.ndarray:
    """Consecutive-pair segments (N-1, 2, 3) along a path of N points."""
    pts = np.asarray(points, dtype=float).reshape(-1, 3)
    if len(pts) < 2:
        return np.zeros((0, 2, 3))
    return np.stack([pts[:-1], pts[1:]], axis=1)


def flight_paths(points, episodes) -> np.ndarray:
    """
    Path segments for each episode's own samples.

    No segment joins one attempt's terminal sample to the next attempt's
    first sample.
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 3)
    parts = [polyline(pts[e.from_index : e.to_index + 1]) for e in episodes]
    if not parts:
        return np.zeros((0, 2, 3))
    return np.concatenate(parts)
