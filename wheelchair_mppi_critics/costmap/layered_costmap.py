"""
Costmap with its layer plugins and the robot footprint.
"""

import numpy as np
from typing import List, Optional, Sequence

from .costmap_2d import Costmap2D
from .footprint import as_footprint, calculate_min_and_max_distances


class LayeredCostmap:
    """
    Owns the master cost grid, the layers feeding it and the footprint.

    The footprint may be replaced at runtime; inscribed and circumscribed
    radii are recomputed and pushed to every layer that cares.
    """

    def __init__(
        self,
        costmap: Costmap2D,
        footprint: Sequence[Sequence[float]],
        track_unknown: bool = False,
        plugins: Optional[List] = None,
    ):
        self.costmap = costmap
        self.track_unknown = track_unknown
        self.plugins = []

        self.footprint = None
        self.inscribed_radius = 0.0
        self.circumscribed_radius = 0.0
        self.set_footprint(footprint)

        for plugin in plugins or []:
            self.add_plugin(plugin)

    def add_plugin(self, plugin):
        self.plugins.append(plugin)
        if hasattr(plugin, 'on_footprint_changed'):
            plugin.on_footprint_changed(self.inscribed_radius, self.costmap.resolution)

    def set_footprint(self, footprint: Sequence[Sequence[float]]):
        self.footprint = as_footprint(footprint)
        self.inscribed_radius, self.circumscribed_radius = \
            calculate_min_and_max_distances(self.footprint)

        for plugin in self.plugins:
            if hasattr(plugin, 'on_footprint_changed'):
                plugin.on_footprint_changed(self.inscribed_radius, self.costmap.resolution)

    def get_footprint(self) -> np.ndarray:
        return self.footprint

    def get_circumscribed_radius(self) -> float:
        return self.circumscribed_radius

    def get_inscribed_radius(self) -> float:
        return self.inscribed_radius

    def is_tracking_unknown(self) -> bool:
        return self.track_unknown
