"""
Robot footprint helpers.

A footprint is a ``[K, 2]`` array of polygon vertices in the robot frame.
"""

import math
import numpy as np
from typing import Sequence, Tuple


def as_footprint(points: Sequence[Sequence[float]]) -> np.ndarray:
    """Validate and convert a vertex list to a ``[K, 2]`` float array."""
    footprint = np.asarray(points, dtype=np.float64)
    if footprint.ndim != 2 or footprint.shape[1] != 2 or footprint.shape[0] < 3:
        raise ValueError(f'Footprint needs at least 3 (x, y) vertices, got shape {footprint.shape}')
    return footprint


def make_footprint_from_radius(radius: float, num_points: int = 16) -> np.ndarray:
    """Regular polygon approximating a circular robot."""
    angles = np.arange(num_points) * (2.0 * math.pi / num_points)
    return np.stack([radius * np.cos(angles), radius * np.sin(angles)], axis=1)


def _distance_to_segment(px: float, py: float, x0: float, y0: float, x1: float, y1: float) -> float:
    dx = x1 - x0
    dy = y1 - y0
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return math.hypot(px - x0, py - y0)

    t = ((px - x0) * dx + (py - y0) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(px - (x0 + t * dx), py - (y0 + t * dy))


def calculate_min_and_max_distances(footprint: np.ndarray) -> Tuple[float, float]:
    """
    Inscribed and circumscribed radius of a footprint.

    Returns:
        min_dist: smallest distance from the robot centre to any vertex or edge
        max_dist: largest distance from the robot centre to any vertex
    """
    footprint = as_footprint(footprint)

    min_dist = float('inf')
    max_dist = 0.0

    num_points = footprint.shape[0]
    for i in range(num_points):
        x0, y0 = footprint[i]
        x1, y1 = footprint[(i + 1) % num_points]

        vertex_dist = math.hypot(x0, y0)
        min_dist = min(min_dist, vertex_dist)
        max_dist = max(max_dist, vertex_dist)

        min_dist = min(min_dist, _distance_to_segment(0.0, 0.0, x0, y0, x1, y1))

    return min_dist, max_dist


def transform_footprint(x: float, y: float, yaw: float, footprint: np.ndarray) -> np.ndarray:
    """Rotate by ``yaw`` and translate to ``(x, y)``."""
    c, s = math.cos(yaw), math.sin(yaw)
    rotation = np.array([[c, -s], [s, c]])
    return footprint @ rotation.T + np.array([x, y])
