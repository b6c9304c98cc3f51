"""
Sheep agent: integrates the flocking rules one tick at a time.
"""

import logging
import math

from .base import Agent
from ..config import (
    COHESION_WEIGHT, COHESION_PREDATOR_MODIFIER,
    SEPARATION_WEIGHT, SEPARATION_PREDATOR_MODIFIER,
    ALIGNMENT_WEIGHT, ALIGNMENT_PREDATOR_MODIFIER,
    ESCAPE_WEIGHT, PREDATOR_DISTANCE_EPSILON,
)
from ..errors import MissingFlockError

logger = logging.getLogger(__name__)


def predator_proximity(radius: float, dist: float, width: float = 20) -> float:
    """
    Sigmoid that grows from 0 to 1 as the predator closes in.

    The slope is steepest at dist == radius (the edge of the flight zone),
    where the value is 0.5.

    Args:
        radius: Flight zone radius
        dist: Distance from the sheep to the predator
        width: Controls how quickly the sigmoid ramps

    Returns:
        Value in (0, 1)
    """
    return 1 / math.pi * math.atan((radius - dist) / width) + 0.5


class Sheep(Agent):
    """
    A sheep that moves with flocking characteristics.

    A sheep only makes sense as part of a flock: every rule it follows is
    computed by the flock against the other sheep. Now and then a sheep stops
    to graze for a few ticks.
    """

    def __init__(self, flock, rng=None):
        """
        Create a sheep at a random spot in the top left of the pen.

        Args:
            flock: Flock the sheep belongs to
            rng: numpy Generator for placement and grazing (defaults to the flock's)

        Raises:
            MissingFlockError: If flock is None
        """
        if flock is None:
            raise MissingFlockError()

        self.flock = flock
        self.rng = rng if rng is not None else flock.rng
        config = flock.config

        super().__init__(
            int(self.rng.integers(0, int(config.arenaWidth) // 6 + 20)),
            int(self.rng.integers(0, int(config.arenaHeight) // 6)) + 40,
        )

        self.paused = False
        self.paused_ticks_remaining = 0

    def pause(self, ticks: int = 0) -> None:
        """
        Stop the sheep for a number of ticks.

        Args:
            ticks: Ticks to stay still; below 1 picks a random duration
        """
        if ticks < 1:
            ticks = int(self.rng.integers(1, self.flock.config.maxPauseTicks + 1))

        self.paused_ticks_remaining = ticks
        self.paused = True

    def step(self, context) -> None:
        """
        Advance the sheep by one tick.

        Args:
            context: SimulationContext with the predator and obstacles
        """
        if self.paused:
            self.paused_ticks_remaining -= 1
            if self.paused_ticks_remaining > 0:
                return
            self.paused = False

        config = self.flock.config

        dist_to_predator = self.position.distance_to(context.predator) + PREDATOR_DISTANCE_EPSILON
        if dist_to_predator > config.predatorSensingRadius:
            proximity = 0.0
        else:
            proximity = predator_proximity(
                config.predatorSensingRadius, dist_to_predator, config.predatorSigmoidWidth
            )

        cohesion = self.flock.cohesion(self)
        separation = self.flock.separation(self, context.obstacles)
        alignment = self.flock.alignment(self)
        escape = self.flock.escape(self, context.predator, config.escapeSoftness)

        # velocity carries over between ticks; the rules only nudge it
        self.velocity += (
            cohesion * (COHESION_WEIGHT * (1 + proximity * COHESION_PREDATOR_MODIFIER))
            + separation * (SEPARATION_WEIGHT * (1 + proximity * SEPARATION_PREDATOR_MODIFIER))
            + alignment * (ALIGNMENT_WEIGHT * (1 + proximity * ALIGNMENT_PREDATOR_MODIFIER))
            + escape * ESCAPE_WEIGHT
        )

        # sheep walk forwards, so they can only turn so fast
        self.turn_towards(math.atan2(self.velocity.y, self.velocity.x), config.maxTurnPerTick)

        self.flock.cap_velocity(self)

        self.position += self.velocity
        self.position += self.flock.boundary_correction(self)
        self.flock.sheep_moved(self)

        if self.rng.random() < config.pauseChance:
            self.pause()
            logger.debug("sheep at (%.1f, %.1f) stops to graze for %d ticks",
                         self.position.x, self.position.y, self.paused_ticks_remaining)
