"""
Base Agent class for all simulation entities.
"""

import math

import pygame

from ..geometry import clamp


class Agent:
    """
    Base class for all agents in the simulation.

    Holds position, velocity and heading, and provides the speed limit and
    turn limit used when integrating movement.
    """

    def __init__(self, x: float, y: float):
        """
        Initialize an agent at rest.

        Args:
            x: Initial x position
            y: Initial y position
        """
        self.position = pygame.Vector2(x, y)
        self.velocity = pygame.Vector2(0, 0)
        self.heading = 0.0

    def limit_speed(self, max_speed: float, stop_speed: float) -> None:
        """
        Scale the velocity down to max_speed if it is too fast.

        When scaling happens, an axis left slower than stop_speed is set to
        exactly zero. A velocity already under the limit is left untouched.

        Args:
            max_speed: Maximum speed in any direction
            stop_speed: Per-axis speed below which a scaled axis stops
        """
        speed = math.hypot(self.velocity.x, self.velocity.y)

        if speed < max_speed:
            return

        self.velocity.x = self.velocity.x / speed * max_speed
        if abs(self.velocity.x) < stop_speed:
            self.velocity.x = 0

        self.velocity.y = self.velocity.y / speed * max_speed
        if abs(self.velocity.y) < stop_speed:
            self.velocity.y = 0

    def turn_towards(self, target: float, max_turn: float) -> None:
        """
        Rotate the heading toward a target angle by at most max_turn radians.

        Args:
            target: Desired heading in radians
            max_turn: Largest change allowed in one call
        """
        self.heading = clamp(target, self.heading - max_turn, self.heading + max_turn)
