"""
Inflation (potential field) cost model.

Maps a distance from the nearest obstacle to a cost with an exponential
decay beyond the robot's inscribed radius.
"""

import math
from typing import Optional

from .cost_values import INSCRIBED_INFLATED_OBSTACLE, LETHAL_OBSTACLE


class InflationLayer:
    """
    Distance-to-cost model attached to a layered costmap.

    Args:
        name: Layer name used for lookup
        inflation_radius: Distance (m) at which inflation stops
        cost_scaling_factor: Exponential decay rate
    """

    def __init__(
        self,
        name: str = 'inflation_layer',
        inflation_radius: float = 0.55,
        cost_scaling_factor: float = 10.0,
    ):
        if cost_scaling_factor <= 0.0:
            raise ValueError(f'cost_scaling_factor must be positive, got {cost_scaling_factor}')

        self.name = name
        self.inflation_radius = inflation_radius
        self.cost_scaling_factor = cost_scaling_factor

        # Set when attached to a layered costmap
        self.resolution = 0.05
        self.inscribed_radius = 0.0

    def on_footprint_changed(self, inscribed_radius: float, resolution: float):
        self.inscribed_radius = inscribed_radius
        self.resolution = resolution

    def compute_cost(self, distance: float) -> int:
        """
        Cost at a given distance from an obstacle.

        Args:
            distance: Distance in cells

        Returns:
            cost in 0..LETHAL_OBSTACLE
        """
        if distance == 0:
            return LETHAL_OBSTACLE

        if distance * self.resolution <= self.inscribed_radius:
            return INSCRIBED_INFLATED_OBSTACLE

        # Beyond the inscribed radius the cost falls off exponentially
        factor = math.exp(
            -1.0 * self.cost_scaling_factor * (distance * self.resolution - self.inscribed_radius))
        return int((INSCRIBED_INFLATED_OBSTACLE - 1) * factor)


def get_inflation_layer(layered_costmap, layer_name: str = '') -> Optional[InflationLayer]:
    """
    Find an inflation layer among the costmap's plugins.

    An empty ``layer_name`` selects the first inflation layer found.
    """
    for layer in layered_costmap.plugins:
        if not isinstance(layer, InflationLayer):
            continue
        if not layer_name or layer.name == layer_name:
            return layer
    return None
