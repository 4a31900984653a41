"""Cost grid, layers and footprint handling."""

from .cost_values import (
    FREE_SPACE,
    INSCRIBED_INFLATED_OBSTACLE,
    LETHAL_OBSTACLE,
    NO_INFORMATION,
)
from .costmap_2d import Costmap2D
from .footprint import (
    calculate_min_and_max_distances,
    make_footprint_from_radius,
    transform_footprint,
)
from .inflation_layer import InflationLayer, get_inflation_layer
from .layered_costmap import LayeredCostmap

__all__ = [
    'FREE_SPACE',
    'INSCRIBED_INFLATED_OBSTACLE',
    'LETHAL_OBSTACLE',
    'NO_INFORMATION',
    'Costmap2D',
    'calculate_min_and_max_distances',
    'make_footprint_from_radius',
    'transform_footprint',
    'InflationLayer',
    'get_inflation_layer',
    'LayeredCostmap',
]
