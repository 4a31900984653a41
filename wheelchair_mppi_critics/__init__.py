"""
Costmap Critics for the Wheelchair MPPI Controller

Scores batches of sampled trajectories against a layered costmap,
with fast circumscribed-cost gating of full footprint collision checks.
"""

__version__ = '0.1.0'
__author__ = 'Siddharth Tiwari'
__email__ = 's24035@students.iitmandi.ac.in'

from . import config
from . import costmap
from . import planning

__all__ = ['config', 'costmap', 'planning']
