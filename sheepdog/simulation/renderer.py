"""
Draws the pen, fences, flock and dog onto a pygame surface.
"""

import math

import pygame

from ..core.context import SimulationContext
from ..core.config import SimulationConfig
from ..core.flock import Flock

# Radius of the circle drawn around the centre of mass
CENTROID_RING_RADIUS = 300


class Renderer:
    """Renders one frame of the simulation."""

    def __init__(self, config: SimulationConfig):
        self.config = config
        self.font = None

    def draw(self, surface: pygame.Surface, flock: Flock, context: SimulationContext,
             result=None) -> None:
        """
        Draw a frame.

        Args:
            surface: Target surface, the size of the pen
            flock: Flock to draw
            context: Fences, scoring zone and predator
            result: Latest TickResult, for the score and centroid
        """
        surface.fill(self.config.penColor)

        self._draw_scoring_zone(surface, context)

        for obstacle in context.obstacles:
            pygame.draw.lines(surface, self.config.fenceColor, False,
                              [(p.x, p.y) for p in obstacle.points], 4)

        for sheep in flock:
            self._draw_sheep(surface, sheep)

        pygame.draw.circle(surface, self.config.predatorColor,
                           (int(context.predator.x), int(context.predator.y)), 3)

        if result is not None:
            self._draw_centroid(surface, result.centroid)
            self._draw_score(surface, result.score)

    def _draw_sheep(self, surface: pygame.Surface, sheep) -> None:
        """A pink blob with a black dot for a head."""
        width, height = surface.get_size()
        x, y = sheep.position.x, sheep.position.y
        if x < 0 or x >= width or y < 0 or y >= height:
            return

        pygame.draw.circle(surface, self.config.sheepColor, (int(x), int(y)), 3)

        head_x = math.cos(sheep.heading) * 3 + x
        head_y = math.sin(sheep.heading) * 3 + y
        pygame.draw.rect(surface, (0, 0, 0), (int(head_x), int(head_y), 1, 1))

    def _draw_scoring_zone(self, surface: pygame.Surface, context: SimulationContext) -> None:
        """Cross-hatch the home pen with faint white lines."""
        x, y, w, h = context.scoring_zone.as_rect()
        hatch = pygame.Surface((int(w), int(h)), pygame.SRCALPHA)
        for offset in range(-int(h), int(w), 8):
            pygame.draw.line(hatch, (255, 255, 255, 30), (offset, 0), (offset + h, h))
            pygame.draw.line(hatch, (255, 255, 255, 30), (offset, h), (offset + h, 0))
        surface.blit(hatch, (x, y))

    def _draw_centroid(self, surface: pygame.Surface, centroid: pygame.Vector2) -> None:
        """Red X at the centre of mass with a dashed ring around it."""
        cx, cy = centroid.x, centroid.y
        pygame.draw.line(surface, (255, 0, 0), (cx - 4, cy - 4), (cx + 4, cy + 4))
        pygame.draw.line(surface, (255, 0, 0), (cx - 4, cy + 4), (cx + 4, cy - 4))

        # dashes every 6 degrees
        for i in range(0, 360, 6):
            a1 = math.radians(i)
            a2 = math.radians(i + 3)
            pygame.draw.line(
                surface, (255, 50, 50),
                (cx + math.cos(a1) * CENTROID_RING_RADIUS, cy + math.sin(a1) * CENTROID_RING_RADIUS),
                (cx + math.cos(a2) * CENTROID_RING_RADIUS, cy + math.sin(a2) * CENTROID_RING_RADIUS),
            )

    def _draw_score(self, surface: pygame.Surface, score: int) -> None:
        if self.font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self.font = pygame.font.Font(None, 18)
        text = self.font.render(f"Score {score}", True, (255, 255, 255))
        surface.blit(text, (0, 0))
