"""
2D grid of traversal costs with a world <-> map transform.
"""

import numpy as np
from typing import Optional, Tuple

from .cost_values import FREE_SPACE, NO_INFORMATION


class Costmap2D:
    """
    Fixed-size cost grid.

    Cells are stored row-major as ``costs[my, mx]`` with values in 0..255.
    The origin is the world position of the lower-left corner of cell (0, 0).
    """

    def __init__(
        self,
        size_x: int,
        size_y: int,
        resolution: float,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
        default_value: int = FREE_SPACE,
    ):
        if size_x <= 0 or size_y <= 0:
            raise ValueError(f'Costmap size must be positive, got {size_x}x{size_y}')
        if resolution <= 0.0:
            raise ValueError(f'Costmap resolution must be positive, got {resolution}')

        self.size_x = int(size_x)
        self.size_y = int(size_y)
        self.resolution = float(resolution)
        self.origin_x = float(origin_x)
        self.origin_y = float(origin_y)
        self.default_value = default_value

        self.costs = np.full((self.size_y, self.size_x), default_value, dtype=np.uint8)

    @classmethod
    def from_array(
        cls,
        costs: np.ndarray,
        resolution: float,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
    ) -> 'Costmap2D':
        """Build a costmap from a ``[size_y, size_x]`` array of costs."""
        costs = np.asarray(costs)
        if costs.ndim != 2:
            raise ValueError(f'Expected a 2D cost array, got shape {costs.shape}')

        costmap = cls(costs.shape[1], costs.shape[0], resolution, origin_x, origin_y)
        costmap.costs[:, :] = np.clip(costs, 0, NO_INFORMATION).astype(np.uint8)
        return costmap

    def world_to_map(self, wx: float, wy: float) -> Optional[Tuple[int, int]]:
        """
        Convert world coordinates to cell indices.

        Returns:
            (mx, my), or None if the point lies outside the grid
        """
        if wx < self.origin_x or wy < self.origin_y:
            return None

        mx = int((wx - self.origin_x) / self.resolution)
        my = int((wy - self.origin_y) / self.resolution)

        if mx < self.size_x and my < self.size_y:
            return mx, my
        return None

    def world_to_map_batch(
        self,
        wx: np.ndarray,
        wy: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Vectorized world_to_map.

        Args:
            wx, wy: arrays of identical shape in world coordinates

        Returns:
            mx, my: integer cell indices (clamped into the grid)
            valid: boolean mask, False where the point lies outside the grid
        """
        wx = np.asarray(wx, dtype=np.float64)
        wy = np.asarray(wy, dtype=np.float64)

        fx = (wx - self.origin_x) / self.resolution
        fy = (wy - self.origin_y) / self.resolution

        valid = (wx >= self.origin_x) & (wy >= self.origin_y)
        valid &= (fx < self.size_x) & (fy < self.size_y)

        mx = np.clip(fx, 0, self.size_x - 1).astype(np.int64)
        my = np.clip(fy, 0, self.size_y - 1).astype(np.int64)

        return mx, my, valid

    def map_to_world(self, mx: int, my: int) -> Tuple[float, float]:
        """World coordinates of the centre of a cell."""
        wx = self.origin_x + (mx + 0.5) * self.resolution
        wy = self.origin_y + (my + 0.5) * self.resolution
        return wx, wy

    def in_bounds(self, mx: int, my: int) -> bool:
        return 0 <= mx < self.size_x and 0 <= my < self.size_y

    def get_cost(self, mx: int, my: int) -> int:
        return int(self.costs[my, mx])

    def set_cost(self, mx: int, my: int, cost: int):
        self.costs[my, mx] = cost

    def lookup_costs(self, wx: np.ndarray, wy: np.ndarray) -> np.ndarray:
        """
        Cost under each world point, NO_INFORMATION where off the grid.

        Returns:
            costs: float32 array with the shape of ``wx``
        """
        mx, my, valid = self.world_to_map_batch(wx, wy)
        costs = self.costs[my, mx].astype(np.float32)
        costs[~valid] = float(NO_INFORMATION)
        return costs

    def reset(self):
        self.costs.fill(self.default_value)

    @property
    def size_in_meters(self) -> Tuple[float, float]:
        return self.size_x * self.resolution, self.size_y * self.resolution
