"""
Agent classes for the flocking simulation.
"""

from .base import Agent
from .sheep import Sheep, predator_proximity

__all__ = ['Agent', 'Sheep', 'predator_proximity']
