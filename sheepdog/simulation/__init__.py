"""
Simulation module containing the tick driver and the headless and interactive runners.
"""

from .tick import TickDriver, TickResult
from .headless import HeadlessSimulation

__all__ = ['TickDriver', 'TickResult', 'HeadlessSimulation']
