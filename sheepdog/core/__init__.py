"""
Core module containing configuration, geometry, the flock and its agents.
"""

from .config import SimulationConfig, DEFAULT_CONFIG, load_config
from .context import Obstacle, ScoringZone, SimulationContext
from .errors import SheepdogError, ConfigurationError, MissingFlockError
from .flock import Flock, inverse_square
from .layout import default_context
from .spatial_grid import SpatialGrid

__all__ = [
    'SimulationConfig', 'DEFAULT_CONFIG', 'load_config',
    'Obstacle', 'ScoringZone', 'SimulationContext',
    'SheepdogError', 'ConfigurationError', 'MissingFlockError',
    'Flock', 'inverse_square', 'default_context', 'SpatialGrid',
]
