"""
Shared world state read by every sheep during a tick.

The predator, the fences and the scoring pen are owned by a
SimulationContext rather than by any flock, so several independent
simulations can run side by side in one process.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple

import pygame

from .errors import ConfigurationError


class Obstacle:
    """
    An open polyline the sheep must keep away from (a fence).

    Args:
        points: Two or more (x, y) points
    """

    def __init__(self, points: Iterable[Sequence[float]]):
        self.points = [pygame.Vector2(p) for p in points]
        if len(self.points) < 2:
            raise ConfigurationError(
                f"an obstacle needs at least 2 points, got {len(self.points)}"
            )

    def segments(self) -> Iterator[Tuple[pygame.Vector2, pygame.Vector2]]:
        """Yield each (start, end) segment, skipping repeated points."""
        for start, end in zip(self.points, self.points[1:]):
            if start == end:
                continue
            yield start, end

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        coords = ", ".join(f"({p.x:g}, {p.y:g})" for p in self.points)
        return f"Obstacle([{coords}])"


@dataclass(frozen=True)
class ScoringZone:
    """
    Axis-aligned rectangle that counts the sheep inside it.

    The left and top edges belong to the zone, the right and bottom edges do not.
    """

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: pygame.Vector2) -> bool:
        """Check whether a point lies inside the zone."""
        return (self.x <= point.x < self.x + self.width
                and self.y <= point.y < self.y + self.height)

    def as_rect(self) -> Tuple[float, float, float, float]:
        """Return (x, y, width, height) for drawing."""
        return (self.x, self.y, self.width, self.height)


@dataclass
class SimulationContext:
    """World state shared by all sheep: predator position, fences and the scoring pen."""

    predator: pygame.Vector2 = field(default_factory=lambda: pygame.Vector2(100, 100))
    obstacles: List[Obstacle] = field(default_factory=list)
    scoring_zone: ScoringZone = field(default_factory=lambda: ScoringZone(100, 100, 100, 100))

    def move_predator(self, x: float, y: float) -> None:
        """Place the predator at a new position."""
        self.predator = pygame.Vector2(x, y)

    def add_obstacle(self, points: Iterable[Sequence[float]]) -> Obstacle:
        """
        Add a fence to the world.

        Args:
            points: Two or more (x, y) points

        Returns:
            The created obstacle
        """
        obstacle = Obstacle(points)
        self.obstacles.append(obstacle)
        return obstacle
