"""
Interactive simulation with pygame GUI.

The dog follows the mouse; the flock is advanced once per frame.
"""

import logging
import sys
from typing import Optional

import pygame

from ..core.config import SimulationConfig, DEFAULT_CONFIG
from ..core.flock import Flock
from ..core.layout import default_context
from .renderer import Renderer
from .tick import TickDriver

logger = logging.getLogger(__name__)


class InteractiveSimulation:
    """
    Interactive sheep herding with pygame visualization.

    Move the mouse to move the dog and drive the flock into the pen in the
    top right corner.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
        """
        pygame.init()

        self.config = config if config else DEFAULT_CONFIG

        width = self.config.arenaWidth
        height = self.config.arenaHeight

        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Sheepdog")
        self.clock = pygame.time.Clock()

        self.flock = Flock(self.config)
        self.context = default_context(width, height)
        self.driver = TickDriver(self.flock, self.context)
        self.renderer = Renderer(self.config)

        self.running = True

    def update(self) -> None:
        """Advance the flock one tick and redraw."""
        result = self.driver.advance()
        self.renderer.draw(self.screen, self.flock, self.context, result)
        pygame.display.flip()

    def run(self) -> None:
        """Run the simulation main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.type == pygame.MOUSEMOTION:
                    self.driver.move_predator(*event.pos)

            self.update()
            self.clock.tick(self.config.fpsTarget)

        result = self.driver.last_result
        logger.info("stopped after %d ticks with score %d",
                    self.driver.tick, result.score if result else 0)
        pygame.quit()
        sys.exit()
