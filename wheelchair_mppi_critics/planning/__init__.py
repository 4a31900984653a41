"""Trajectory critics for the MPPI controller."""

from .collision_checker import FootprintCollisionChecker
from .cost_critic import (
    CircumscribedCostEstimator,
    CostCritic,
    FootprintGatedClassifier,
    PointCostClassifier,
    in_collision,
    make_classifier,
)
from .critic_data import CostAccumulator, CriticData, InputShapeError
from .goal_utils import within_position_goal_tolerance

__all__ = [
    'FootprintCollisionChecker',
    'CircumscribedCostEstimator',
    'CostCritic',
    'FootprintGatedClassifier',
    'PointCostClassifier',
    'in_collision',
    'make_classifier',
    'CostAccumulator',
    'CriticData',
    'InputShapeError',
    'within_position_goal_tolerance',
]
