"""
Per-cycle data shared between the controller and its critics.
"""

import torch
from typing import Optional, Sequence, Union


class InputShapeError(ValueError):
    """Trajectory batch or cost vector has an unusable shape."""


class CostAccumulator:
    """
    Shared per-trajectory cost vector.

    Every critic adds its contribution; nobody overwrites or resets it
    during a cycle.
    """

    def __init__(self, costs: Union[torch.Tensor, int]):
        if isinstance(costs, int):
            costs = torch.zeros(costs, dtype=torch.float32)
        if costs.dim() != 1:
            raise InputShapeError(f'Cost vector must be 1D, got shape {tuple(costs.shape)}')
        self.costs = costs

    def __len__(self) -> int:
        return self.costs.shape[0]

    def add_contribution(self, index: int, value: float):
        self.costs[index] += value

    def add_contributions(self, values: torch.Tensor):
        """Element-wise add of a full ``[N]`` contribution vector."""
        if values.shape != self.costs.shape:
            raise InputShapeError(
                f'Contribution shape {tuple(values.shape)} does not match '
                f'cost vector shape {tuple(self.costs.shape)}')
        self.costs += values.to(dtype=self.costs.dtype, device=self.costs.device)

    def tensor(self) -> torch.Tensor:
        return self.costs


def as_trajectory_batch(
    trajectories: Union[torch.Tensor, Sequence[torch.Tensor]],
) -> torch.Tensor:
    """
    Validate a trajectory batch and return it as a ``[N, T, 3]`` tensor.

    Accepts a ``[N, T, >=3]`` tensor or a sequence of ``[T, >=3]`` tensors.

    Raises:
        InputShapeError: empty batch, zero-length or ragged trajectories
    """
    if not isinstance(trajectories, torch.Tensor):
        trajectories = list(trajectories)
        if len(trajectories) == 0:
            raise InputShapeError('Trajectory batch is empty')

        lengths = {len(traj) for traj in trajectories}
        if len(lengths) != 1:
            raise InputShapeError(
                f'Trajectories have inconsistent timestep counts: {sorted(lengths)}')

        trajectories = torch.stack([torch.as_tensor(traj) for traj in trajectories])

    if trajectories.dim() != 3 or trajectories.shape[-1] < 3:
        raise InputShapeError(
            f'Expected trajectories of shape [N, T, 3], got {tuple(trajectories.shape)}')

    if trajectories.shape[0] == 0:
        raise InputShapeError('Trajectory batch is empty')

    if trajectories.shape[1] == 0:
        raise InputShapeError('Trajectories have no timesteps')

    return trajectories[..., :3]


class CriticData:
    """
    Inputs and outputs of one scoring cycle.

    Attributes:
        trajectories: [N, T, 3] sampled trajectories (x, y, yaw)
        costs: shared cost accumulator of length N
        pose: [3] current robot pose
        path: [P, >=2] reference path, last pose is the goal
        fail_flag: set by critics when every trajectory is unusable
    """

    def __init__(
        self,
        trajectories: Union[torch.Tensor, Sequence[torch.Tensor]],
        costs: Union[CostAccumulator, torch.Tensor],
        pose: torch.Tensor,
        path: Optional[torch.Tensor] = None,
    ):
        if not isinstance(costs, CostAccumulator):
            costs = CostAccumulator(costs)

        self.trajectories = trajectories
        self.costs = costs
        self.pose = pose
        self.path = path
        self.fail_flag = False
