"""
Costmap obstacle critic for MPPI trajectory batches.

Scores every sampled trajectory by the grid cost under its poses:
    - Trajectories touching a collision get a fixed collision cost
    - Poses at inscribed cost get a fixed critical penalty
    - Other non-free poses add their raw cost, except near the goal

In footprint mode the full polygon is only checked when the point cost
says the robot could possibly be in collision.
"""

import numpy as np
import torch
from loguru import logger
from typing import Callable, Dict, Optional, Tuple, Union

from wheelchair_mppi_critics.config import CostCriticParams
from wheelchair_mppi_critics.costmap.cost_values import (
    INSCRIBED_INFLATED_OBSTACLE,
    LETHAL_OBSTACLE,
    NO_INFORMATION,
)
from wheelchair_mppi_critics.costmap.inflation_layer import get_inflation_layer
from wheelchair_mppi_critics.costmap.layered_costmap import LayeredCostmap
from wheelchair_mppi_critics.planning.collision_checker import FootprintCollisionChecker
from wheelchair_mppi_critics.planning.critic_data import (
    CriticData,
    InputShapeError,
    as_trajectory_batch,
)
from wheelchair_mppi_critics.planning.goal_utils import within_position_goal_tolerance

FootprintCostFn = Callable[[float, float, float], float]


class CircumscribedCostEstimator:
    """
    Cost the inflation layer assigns at the footprint's circumscribed radius.

    Any point cost below this value is far enough from obstacles that the
    footprint cannot touch one. The result is cached per radius; -1.0 means
    no inflation layer was available.
    """

    def __init__(self, inflation_layer_name: str = ''):
        self.inflation_layer_name = inflation_layer_name
        self.circumscribed_radius = -1.0
        self.circumscribed_cost = -1.0
        self._warned_missing_layer = False

    def estimate(self, layered_costmap: LayeredCostmap) -> float:
        circum_radius = layered_costmap.get_circumscribed_radius()
        if circum_radius == self.circumscribed_radius:
            return self.circumscribed_cost

        result = -1.0
        inflation_layer = get_inflation_layer(layered_costmap, self.inflation_layer_name)
        if inflation_layer is not None:
            resolution = layered_costmap.costmap.resolution
            result = float(inflation_layer.compute_cost(circum_radius / resolution))
        elif not self._warned_missing_layer:
            logger.warning(
                'No inflation layer found in the costmap (requested name: "{}"). '
                'Footprint checks cannot be skipped far from obstacles, so every '
                'non-free pose will be checked with the full footprint.',
                self.inflation_layer_name)
            self._warned_missing_layer = True

        self.circumscribed_radius = circum_radius
        self.circumscribed_cost = result

        return self.circumscribed_cost


def in_collision(
    cost: float,
    x: float,
    y: float,
    yaw: float,
    consider_footprint: bool,
    possible_collision_cost: float,
    footprint_cost_fn: Optional[FootprintCostFn],
    tracking_unknown: bool,
) -> bool:
    """
    Decide whether a pose with the given point cost is in collision.

    Args:
        cost: Grid cost under the robot centre
        x, y, yaw: Pose in world coordinates
        consider_footprint: Use the full footprint instead of the centre point
        possible_collision_cost: Point cost from which the footprint could
            touch an obstacle, < 1.0 if unknown
        footprint_cost_fn: (x, y, yaw) -> max cost under the footprint
        tracking_unknown: Unknown space is traversable

    Returns:
        True if in collision
    """
    if consider_footprint and (cost >= possible_collision_cost or possible_collision_cost < 1.0):
        cost = footprint_cost_fn(x, y, yaw)

    cost = int(cost)
    if cost == LETHAL_OBSTACLE:
        return True
    if cost == INSCRIBED_INFLATED_OBSTACLE:
        # The footprint check already tells us whether the polygon is clear
        return not consider_footprint
    if cost == NO_INFORMATION:
        return not tracking_unknown
    return False


class PointCostClassifier:
    """Collision from the centre-point cost only."""

    consider_footprint = False

    def __init__(self, tracking_unknown: bool = False):
        self.tracking_unknown = tracking_unknown

    def in_collision(self, cost: float, x: float, y: float, yaw: float) -> bool:
        return in_collision(cost, x, y, yaw, False, -1.0, None, self.tracking_unknown)


class FootprintGatedClassifier:
    """Collision from the footprint cost whenever a collision is possible."""

    consider_footprint = True

    def __init__(
        self,
        footprint_cost_fn: FootprintCostFn,
        possible_collision_cost: float = -1.0,
        tracking_unknown: bool = False,
    ):
        self.footprint_cost_fn = footprint_cost_fn
        self.possible_collision_cost = possible_collision_cost
        self.tracking_unknown = tracking_unknown

    def in_collision(self, cost: float, x: float, y: float, yaw: float) -> bool:
        return in_collision(
            cost, x, y, yaw,
            True,
            self.possible_collision_cost,
            self.footprint_cost_fn,
            self.tracking_unknown,
        )


def make_classifier(
    consider_footprint: bool,
    tracking_unknown: bool,
    possible_collision_cost: float = -1.0,
    footprint_cost_fn: Optional[FootprintCostFn] = None,
):
    if consider_footprint:
        if footprint_cost_fn is None:
            raise ValueError('Footprint mode needs a footprint cost function')
        return FootprintGatedClassifier(footprint_cost_fn, possible_collision_cost, tracking_unknown)
    return PointCostClassifier(tracking_unknown)


class CostCritic:
    """
    Obstacle critic scoring trajectory batches against a layered costmap.

    Args:
        layered_costmap: Costmap, layers and footprint
        params: CostCriticParams or a plain config dict
        name: Critic name used in log messages
    """

    def __init__(
        self,
        layered_costmap: LayeredCostmap,
        params: Optional[Union[CostCriticParams, Dict]] = None,
        name: str = 'CostCritic',
    ):
        if not isinstance(params, CostCriticParams):
            params = CostCriticParams.from_dict(params)

        self.name = name
        self.params = params
        self.layered_costmap = layered_costmap

        self.weight = params.normalized_weight
        self.collision_checker = FootprintCollisionChecker(layered_costmap.costmap)
        self.circumscribed_estimator = CircumscribedCostEstimator(params.inflation_layer_name)
        self.possible_collision_cost = -1.0

        self.initialize()

    def initialize(self):
        self.possible_collision_cost = self.circumscribed_estimator.estimate(self.layered_costmap)

        if self.possible_collision_cost < 1.0:
            logger.error(
                '{}: inflation layer missing or inflation radius too small for fast '
                'non-circular collision checking. Set the inflation radius to at least '
                'half of the robot\'s largest cross-section; every non-free pose will '
                'otherwise be checked with the full footprint.',
                self.name)

        logger.info(
            '{} instantiated with power {} and critical cost {} / weight {}. '
            'Collision checking is {}.',
            self.name,
            self.params.cost_power,
            self.params.critical_cost,
            self.weight,
            'footprint based' if self.params.consider_footprint else 'circular')

    def score(self, data: CriticData) -> Optional[Tuple[torch.Tensor, bool]]:
        """
        Add this critic's cost to every trajectory in ``data``.

        Args:
            data: Critic data with trajectories [N, T, 3] and an N-long
                cost accumulator

        Returns:
            contributions: [N] costs added to the accumulator
            all_collide: True if every trajectory is in collision
            or None when the critic is disabled

        Raises:
            InputShapeError: empty or ragged batch, or cost vector of the
                wrong length; nothing is written in that case
        """
        if not self.params.enabled:
            return None

        trajectories = as_trajectory_batch(data.trajectories)
        num_trajectories, traj_len = trajectories.shape[0], trajectories.shape[1]
        if len(data.costs) != num_trajectories:
            raise InputShapeError(
                f'Cost vector has {len(data.costs)} entries for {num_trajectories} trajectories')

        tracking_unknown = self.layered_costmap.is_tracking_unknown()

        if self.params.consider_footprint:
            # Footprint may have changed since initialization
            self.possible_collision_cost = \
                self.circumscribed_estimator.estimate(self.layered_costmap)

        # The goal is often near obstacles, so drop the proximity term there
        near_goal = within_position_goal_tolerance(
            self.params.near_goal_distance, data.pose, data.path)

        footprint = self.layered_costmap.get_footprint()
        classifier = make_classifier(
            self.params.consider_footprint,
            tracking_unknown,
            self.possible_collision_cost,
            lambda x, y, yaw: self.collision_checker.footprint_cost_at_pose(x, y, yaw, footprint),
        )

        poses = trajectories.detach().cpu().numpy().astype(np.float64)
        point_costs = self.collision_checker.get_costmap().lookup_costs(
            poses[..., 0], poses[..., 1])

        repulsive_cost = np.zeros(num_trajectories, dtype=np.float64)
        collided = np.zeros(num_trajectories, dtype=bool)

        for i in range(num_trajectories):
            # Free space never contributes
            for j in np.flatnonzero(point_costs[i] >= 1.0):
                pose_cost = float(point_costs[i, j])
                x, y, yaw = poses[i, j]

                if classifier.in_collision(pose_cost, x, y, yaw):
                    collided[i] = True
                    break

                # Scored on the centre-point cost even in footprint mode
                if pose_cost >= INSCRIBED_INFLATED_OBSTACLE:
                    repulsive_cost[i] += self.params.critical_cost
                elif not near_goal:
                    repulsive_cost[i] += pose_cost

        contributions = self.weight * np.power(repulsive_cost / traj_len, self.params.cost_power)
        contributions[collided] = self.params.collision_cost
        all_collide = bool(collided.all())

        contributions = torch.from_numpy(contributions)
        data.costs.add_contributions(contributions)
        data.fail_flag = all_collide

        logger.debug(
            '{}: {}/{} trajectories in collision (near goal: {})',
            self.name, int(collided.sum()), num_trajectories, near_goal)

        return contributions, all_collide
