"""
Flock of sheep and the rules that move them.

Flocking is the collective motion of a group of self-propelled individuals.
It emerges from a few simple rules followed by each individual, without any
central coordination (Reynolds, 1987):

- Cohesion: steer towards the average position of the others
- Separation: avoid crowding neighbours and fences
- Alignment: steer towards the average velocity of nearby neighbours

plus a fourth rule, Escape, that drives sheep away from the dog.
"""

import logging
import math
from typing import Iterable, Optional, Tuple

import numpy as np
import pygame

from .agents.sheep import Sheep
from .config import (
    ALIGNMENT_DIVISOR, COHESION_DIVISOR, DEFAULT_CONFIG, OBSTACLE_REPULSION,
    SimulationConfig,
)
from .geometry import distance, project_onto_segment
from .spatial_grid import SpatialGrid

logger = logging.getLogger(__name__)

# Stands in for a zero distance to the predator
ESCAPE_EPSILON = 1e-9


def inverse_square(x: float, s: float) -> float:
    """
    Inverse square falloff used to prioritise nearby objects.

    Args:
        x: Distance between the objects
        s: Softness factor; larger values slow the rapid growth near zero

    Returns:
        (x / s) ** -2
    """
    return (x / s) ** -2


class Flock:
    """
    A fixed-size flock of sheep in a rectangular pen.

    All rule queries are read-only: they look at the sheep's current
    positions and velocities but change nothing.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, rng=None):
        """
        Create a flock and place its sheep.

        Args:
            config: Simulation configuration (uses defaults if None)
            rng: numpy Generator or integer seed; falls back to config.seed
        """
        self.config = (config if config else DEFAULT_CONFIG).validate()

        if rng is None:
            rng = self.config.seed
        self.rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)

        self.width = self.config.arenaWidth
        self.height = self.config.arenaHeight

        self._sheep = tuple(Sheep(self) for _ in range(self.config.flockSize))

        self.spatial_grid = None
        if self.config.useSpatialGrid:
            self.spatial_grid = SpatialGrid(self.width, self.height, self.config.gridCellSize)
            for sheep in self._sheep:
                self.spatial_grid.insert(sheep)

        logger.info("created flock of %d sheep in a %dx%d pen (spatial grid %s)",
                    len(self._sheep), self.width, self.height,
                    "on" if self.spatial_grid else "off")

    @property
    def sheep(self) -> Tuple[Sheep, ...]:
        """The sheep, in update order."""
        return self._sheep

    def __len__(self) -> int:
        return len(self._sheep)

    def __iter__(self):
        return iter(self._sheep)

    def sheep_moved(self, sheep: Sheep) -> None:
        """Keep the neighbour index in step with a sheep that has just moved."""
        if self.spatial_grid is not None:
            self.spatial_grid.relocate(sheep)

    def _neighbours(self, sheep: Sheep, radius: float, inclusive: bool = False):
        """Other sheep within radius of this one."""
        if self.spatial_grid is not None:
            for other in self.spatial_grid.get_neighbors(sheep.position, radius, inclusive):
                if other is not sheep:
                    yield other
            return

        for other in self._sheep:
            if other is sheep:
                continue
            dist = distance(sheep.position, other.position)
            if dist < radius or (inclusive and dist == radius):
                yield other

    def center_of_mass(self, sheep: Sheep) -> pygame.Vector2:
        """
        Centre of all sheep except this one.

        Args:
            sheep: Sheep to leave out

        Returns:
            Average position of the others, or the sheep's own position when
            it is alone
        """
        if len(self._sheep) < 2:
            return pygame.Vector2(sheep.position)

        x = 0.0
        y = 0.0
        for other in self._sheep:
            if other is sheep:
                continue
            x += other.position.x
            y += other.position.y

        count = len(self._sheep) - 1
        return pygame.Vector2(x / count, y / count)

    def cohesion(self, sheep: Sheep) -> pygame.Vector2:
        """
        Rule 1: move 1% of the way towards the centre of the flock each tick.

        Args:
            sheep: Sheep to steer

        Returns:
            Cohesion vector
        """
        centre = self.center_of_mass(sheep)
        return (centre - sheep.position) / COHESION_DIVISOR

    def separation(self, sheep: Sheep, obstacles: Iterable = ()) -> pygame.Vector2:
        """
        Rule 2: keep a small distance away from other sheep and fences.

        Each sheep closer than separationDistance pushes this one away by its
        own displacement. Fences are then checked against the position the
        sheep would have after that push; a fence closer than
        obstacleDistance pushes back twice as hard. Each fence segment sees
        the offset accumulated so far.

        Args:
            sheep: Sheep to steer
            obstacles: Obstacle polylines to avoid

        Returns:
            Separation vector
        """
        config = self.config
        c = pygame.Vector2(0, 0)

        for other in self._neighbours(sheep, config.separationDistance):
            c -= other.position - sheep.position

        for obstacle in obstacles:
            for start, end in obstacle.segments():
                closest, on_segment = project_onto_segment(start, end, sheep.position + c)
                if on_segment and distance(closest, sheep.position) < config.obstacleDistance:
                    c -= OBSTACLE_REPULSION * (closest - sheep.position)

        return c

    def alignment(self, sheep: Sheep) -> pygame.Vector2:
        """
        Rule 3: match the velocity of nearby sheep.

        Averages the velocity of every other sheep within alignmentRadius
        (inclusive) and closes an eighth of the gap.

        Args:
            sheep: Sheep to steer

        Returns:
            Alignment vector
        """
        total = pygame.Vector2(0, 0)
        count = 0

        for other in self._neighbours(sheep, self.config.alignmentRadius, inclusive=True):
            total += other.velocity
            count += 1

        if count > 0:
            total /= count

        return (total - sheep.velocity) / ALIGNMENT_DIVISOR

    @staticmethod
    def escape(sheep: Sheep, predator: pygame.Vector2, softness: float = 10) -> pygame.Vector2:
        """
        Rule 4: run away from the predator.

        Args:
            sheep: Sheep to steer
            predator: Predator position
            softness: Softness factor of the inverse square falloff

        Returns:
            Unit vector pointing away from the predator, scaled by
            inverse_square(distance, softness)
        """
        away = sheep.position - predator
        dist = math.hypot(away.x, away.y)
        if dist == 0:
            dist = ESCAPE_EPSILON

        strength = inverse_square(dist, softness)
        return pygame.Vector2(away.x / dist * strength, away.y / dist * strength)

    def boundary_correction(self, sheep: Sheep) -> pygame.Vector2:
        """
        Nudge a sheep back towards the pen when it is at or past an edge.

        This is not a hard wall: a sheep can be outside the pen for a few
        ticks while the nudges bring it back.

        Args:
            sheep: Sheep to check

        Returns:
            Offset to add to the sheep's position
        """
        margin = self.config.boundaryMargin
        nudge = self.config.boundaryNudge
        p = pygame.Vector2(0, 0)

        if sheep.position.x < margin:
            p.x = nudge
        if sheep.position.x > self.width - margin:
            p.x = -nudge
        if sheep.position.y < margin:
            p.y = nudge
        if sheep.position.y > self.height - margin:
            p.y = -nudge

        return p

    def cap_velocity(self, sheep: Sheep) -> None:
        """Stop a sheep running unrealistically fast."""
        sheep.limit_speed(self.config.maxVelocity, self.config.minimumSpeed)

    def centroid(self) -> pygame.Vector2:
        """Unweighted average position of the whole flock."""
        x = 0.0
        y = 0.0
        for sheep in self._sheep:
            x += sheep.position.x
            y += sheep.position.y
        return pygame.Vector2(x / len(self._sheep), y / len(self._sheep))
