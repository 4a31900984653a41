"""Tests for footprint collision checking and goal tolerance."""

import math
import unittest

import numpy as np
import torch

from wheelchair_mppi_critics.costmap import LETHAL_OBSTACLE, Costmap2D
from wheelchair_mppi_critics.planning import (
    FootprintCollisionChecker,
    within_position_goal_tolerance,
)
from wheelchair_mppi_critics.planning.collision_checker import bresenham

SQUARE_FOOTPRINT = np.array([[0.2, 0.2], [0.2, -0.2], [-0.2, -0.2], [-0.2, 0.2]])


class TestBresenham(unittest.TestCase):

    def test_horizontal(self):
        self.assertEqual(list(bresenham(0, 0, 3, 0)), [(0, 0), (1, 0), (2, 0), (3, 0)])

    def test_single_cell(self):
        self.assertEqual(list(bresenham(2, 5, 2, 5)), [(2, 5)])

    def test_diagonal_reversed(self):
        cells = list(bresenham(3, 3, 0, 0))
        self.assertEqual(cells, [(3, 3), (2, 2), (1, 1), (0, 0)])

    def test_steep_line_is_connected(self):
        cells = list(bresenham(0, 0, 2, 7))

        self.assertEqual(cells[0], (0, 0))
        self.assertEqual(cells[-1], (2, 7))
        for (x0, y0), (x1, y1) in zip(cells, cells[1:]):
            self.assertLessEqual(max(abs(x1 - x0), abs(y1 - y0)), 1)


class TestFootprintCollisionChecker(unittest.TestCase):

    def setUp(self):
        self.costmap = Costmap2D(40, 40, 0.1)
        self.checker = FootprintCollisionChecker(self.costmap)

    def test_free_footprint(self):
        self.assertEqual(self.checker.footprint_cost_at_pose(2.05, 2.05, 0.0, SQUARE_FOOTPRINT), 0.0)

    def test_max_cost_on_perimeter(self):
        # Right edge of the footprint at x = 2.25 lies in column 22
        self.costmap.costs[20, 22] = 90
        self.costmap.costs[21, 22] = 120

        cost = self.checker.footprint_cost_at_pose(2.05, 2.05, 0.0, SQUARE_FOOTPRINT)

        self.assertEqual(cost, 120.0)

    def test_interior_is_not_checked(self):
        self.costmap.costs[20, 20] = LETHAL_OBSTACLE
        self.assertEqual(self.checker.footprint_cost_at_pose(2.05, 2.05, 0.0, SQUARE_FOOTPRINT), 0.0)

    def test_lethal_edge(self):
        self.costmap.costs[:, 22] = LETHAL_OBSTACLE
        cost = self.checker.footprint_cost_at_pose(2.05, 2.05, 0.0, SQUARE_FOOTPRINT)
        self.assertEqual(cost, float(LETHAL_OBSTACLE))

    def test_rotation_moves_edges(self):
        self.costmap.costs[:, 22] = LETHAL_OBSTACLE

        # Rotated by 45 degrees the corners reach further but the
        # footprint is placed far enough left to stay clear
        cost = self.checker.footprint_cost_at_pose(1.85, 2.05, math.pi / 4, SQUARE_FOOTPRINT)
        self.assertLess(cost, LETHAL_OBSTACLE)

        cost = self.checker.footprint_cost_at_pose(1.95, 2.05, math.pi / 4, SQUARE_FOOTPRINT)
        self.assertEqual(cost, float(LETHAL_OBSTACLE))

    def test_off_grid_is_lethal(self):
        cost = self.checker.footprint_cost_at_pose(0.1, 2.0, 0.0, SQUARE_FOOTPRINT)
        self.assertEqual(cost, float(LETHAL_OBSTACLE))

    def test_set_costmap(self):
        other = Costmap2D(10, 10, 0.1)
        self.checker.set_costmap(other)
        self.assertIs(self.checker.get_costmap(), other)


class TestGoalTolerance(unittest.TestCase):

    def setUp(self):
        self.path = torch.tensor([[0.0, 0.0, 0.0], [1.0, 1.0, 0.0], [2.0, 1.0, 0.0]])

    def test_within(self):
        pose = torch.tensor([1.8, 1.1, 0.3])
        self.assertTrue(within_position_goal_tolerance(0.5, pose, self.path))

    def test_outside(self):
        pose = torch.tensor([1.0, 1.0, 0.0])
        self.assertFalse(within_position_goal_tolerance(0.5, pose, self.path))

    def test_empty_path(self):
        pose = torch.tensor([0.0, 0.0, 0.0])
        self.assertFalse(within_position_goal_tolerance(0.5, pose, None))
        self.assertFalse(within_position_goal_tolerance(0.5, pose, torch.zeros((0, 3))))
