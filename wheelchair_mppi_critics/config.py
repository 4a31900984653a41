"""
Critic parameters and YAML loading.
"""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from wheelchair_mppi_critics.costmap.cost_values import COST_NORMALIZER


@dataclass
class CostCriticParams:
    """Parameters of the costmap obstacle critic."""
    enabled: bool = True
    consider_footprint: bool = False
    cost_power: int = 1
    cost_weight: float = 3.81
    critical_cost: float = 300.0
    collision_cost: float = 1000000.0
    near_goal_distance: float = 0.5
    inflation_layer_name: str = ''

    def __post_init__(self):
        if int(self.cost_power) != self.cost_power or self.cost_power < 1:
            raise ValueError(f'cost_power must be a positive integer, got {self.cost_power}')
        if self.cost_weight <= 0.0:
            raise ValueError(f'cost_weight must be positive, got {self.cost_weight}')
        if self.near_goal_distance < 0.0:
            raise ValueError(f'near_goal_distance must be non-negative, got {self.near_goal_distance}')

        self.cost_power = int(self.cost_power)

    @property
    def normalized_weight(self) -> float:
        """Weight in the same regime as the other critics."""
        return self.cost_weight / COST_NORMALIZER

    @classmethod
    def from_dict(cls, config: Optional[Dict] = None) -> 'CostCriticParams':
        config = config or {}

        return cls(
            enabled=bool(config.get('enabled', True)),
            consider_footprint=bool(config.get('consider_footprint', False)),
            cost_power=config.get('cost_power', 1),
            cost_weight=float(config.get('cost_weight', 3.81)),
            critical_cost=float(config.get('critical_cost', 300.0)),
            collision_cost=float(config.get('collision_cost', 1000000.0)),
            near_goal_distance=float(config.get('near_goal_distance', 0.5)),
            inflation_layer_name=str(config.get('inflation_layer_name', '') or ''),
        )


def load_params(
    path: Union[str, Path],
    critic_name: str = 'CostCritic',
) -> CostCriticParams:
    """
    Load critic parameters from a YAML file.

    The file holds one mapping per critic, keyed by critic name.

    Raises:
        FileNotFoundError: the file does not exist
        KeyError: no section for ``critic_name``
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'Critic config not found: {path}')

    with open(path, 'r') as f:
        config = yaml.safe_load(f) or {}

    if critic_name not in config:
        raise KeyError(f'No "{critic_name}" section in {path}')

    return CostCriticParams.from_dict(config[critic_name])
