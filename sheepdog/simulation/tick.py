"""
Tick driver: advances the flock one step at a time and scores it.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import List, Tuple

import pygame

from ..core.context import SimulationContext
from ..core.flock import Flock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickResult:
    """What a renderer needs to annotate a frame."""

    tick: int
    score: int
    centroid: pygame.Vector2


class TickDriver:
    """
    Drives a flock through discrete ticks against a simulation context.

    The driver does not own a clock; callers decide how often to call
    advance().
    """

    def __init__(self, flock: Flock, context: SimulationContext):
        """
        Args:
            flock: Flock to move
            context: Predator, fences and scoring zone shared by the flock
        """
        self.flock = flock
        self.context = context
        self.tick = 0
        self.last_result = None

    def move_predator(self, x: float, y: float) -> None:
        """Reposition the predator; takes effect from the next tick."""
        self.context.move_predator(x, y)

    def advance(self) -> TickResult:
        """
        Move every sheep once, then count the sheep in the scoring zone.

        Sheep are stepped in flock order and each one sees the neighbours
        that have already moved this tick. The predator position is read
        once at the start of the tick.

        Returns:
            TickResult with the score and the flock centroid
        """
        tick_context = dataclasses.replace(
            self.context, predator=pygame.Vector2(self.context.predator)
        )

        for sheep in self.flock:
            sheep.step(tick_context)

        zone = tick_context.scoring_zone
        score = sum(1 for sheep in self.flock if zone.contains(sheep.position))

        self.tick += 1
        self.last_result = TickResult(tick=self.tick, score=score, centroid=self.flock.centroid())

        logger.debug("tick %d: score=%d centroid=(%.1f, %.1f)", self.tick, score,
                     self.last_result.centroid.x, self.last_result.centroid.y)
        return self.last_result

    def agent_states(self) -> List[Tuple[pygame.Vector2, float]]:
        """Copies of each sheep's (position, heading) for drawing."""
        return [(pygame.Vector2(sheep.position), sheep.heading) for sheep in self.flock]
