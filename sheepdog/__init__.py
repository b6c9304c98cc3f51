"""
Sheepdog: a flock of sheep, a dog, some fences and a pen to drive them into.
"""

from .core import Flock, SimulationConfig, SimulationContext, default_context
from .simulation import TickDriver, TickResult

__version__ = "0.1.0"

__all__ = ['Flock', 'SimulationConfig', 'SimulationContext', 'default_context',
           'TickDriver', 'TickResult']
