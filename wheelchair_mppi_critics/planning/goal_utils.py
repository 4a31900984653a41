"""Goal proximity helpers."""

import torch


def within_position_goal_tolerance(
    tolerance: float,
    robot_pose: torch.Tensor,
    path: torch.Tensor,
) -> bool:
    """
    Whether the robot is within ``tolerance`` (m) of the path's final pose.

    Args:
        tolerance: Distance threshold in meters
        robot_pose: [>=2] current pose (x, y, ...)
        path: [P, >=2] reference path

    Returns:
        True if the planar distance to the goal is below the tolerance
    """
    if path is None or len(path) == 0:
        return False

    goal = path[-1]
    dx = float(robot_pose[0]) - float(goal[0])
    dy = float(robot_pose[1]) - float(goal[1])

    return dx * dx + dy * dy < tolerance * tolerance
