"""
Footprint collision checking against a cost grid.
"""

import numpy as np
from typing import Iterator, Optional, Tuple

from wheelchair_mppi_critics.costmap.cost_values import LETHAL_OBSTACLE
from wheelchair_mppi_critics.costmap.costmap_2d import Costmap2D
from wheelchair_mppi_critics.costmap.footprint import transform_footprint


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    """Cells on the raster line between two cells, endpoints included."""
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


class FootprintCollisionChecker:
    """
    Polygon footprint cost lookup.

    The cost of a footprint is the maximum cell cost along its perimeter.
    A footprint with any vertex off the grid is treated as lethal.
    """

    def __init__(self, costmap: Optional[Costmap2D] = None):
        self.costmap = costmap

    def set_costmap(self, costmap: Costmap2D):
        self.costmap = costmap

    def get_costmap(self) -> Costmap2D:
        return self.costmap

    def footprint_cost(self, footprint: np.ndarray) -> float:
        """
        Cost of a footprint already expressed in world coordinates.

        Args:
            footprint: [K, 2] polygon vertices

        Returns:
            max cost along the edges, LETHAL_OBSTACLE if off the grid
        """
        cells = []
        for wx, wy in footprint:
            cell = self.costmap.world_to_map(wx, wy)
            if cell is None:
                return float(LETHAL_OBSTACLE)
            cells.append(cell)

        footprint_cost = 0.0
        for i in range(len(cells)):
            x0, y0 = cells[i]
            x1, y1 = cells[(i + 1) % len(cells)]
            footprint_cost = max(self.line_cost(x0, x1, y0, y1), footprint_cost)

            # Nothing can be worse than lethal
            if footprint_cost == LETHAL_OBSTACLE:
                return footprint_cost

        return footprint_cost

    def footprint_cost_at_pose(
        self,
        x: float,
        y: float,
        theta: float,
        footprint: np.ndarray,
    ) -> float:
        """Cost of the robot-frame footprint placed at (x, y, theta)."""
        return self.footprint_cost(transform_footprint(x, y, theta, footprint))

    def line_cost(self, x0: int, x1: int, y0: int, y1: int) -> float:
        line_cost = 0.0
        for mx, my in bresenham(x0, y0, x1, y1):
            point_cost = self.point_cost(mx, my)
            if point_cost == LETHAL_OBSTACLE:
                return point_cost
            line_cost = max(line_cost, point_cost)
        return line_cost

    def point_cost(self, mx: int, my: int) -> float:
        return float(self.costmap.get_cost(mx, my))


if __name__ == '__main__':
    # Quick check on a 4m x 4m map with a wall
    costmap = Costmap2D(80, 80, 0.05)
    costmap.costs[:, 50] = LETHAL_OBSTACLE

    checker = FootprintCollisionChecker(costmap)
    square = np.array([[0.3, 0.3], [0.3, -0.3], [-0.3, -0.3], [-0.3, 0.3]])

    print(f"Far from wall: {checker.footprint_cost_at_pose(1.0, 2.0, 0.0, square)}")
    print(f"Touching wall: {checker.footprint_cost_at_pose(2.3, 2.0, 0.0, square)}")
