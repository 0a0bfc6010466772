"""2D bullet hell module - boss fight simulation core and Gymnasium environment"""

from .simulation import Simulation, FrameLoop, RoundState
from .player import Action
from .entities import Owner
from .shooter_env import BulletHellEnv, run_random_episode

__all__ = ['Simulation', 'FrameLoop', 'RoundState', 'Action', 'Owner',
           'BulletHellEnv', 'run_random_episode']
