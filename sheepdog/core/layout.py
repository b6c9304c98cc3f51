"""
The default pen: fences, the home pen scoring zone and the dog's start position.
"""

import logging

import pygame

from .context import ScoringZone, SimulationContext

logger = logging.getLogger(__name__)


def default_context(width: int, height: int) -> SimulationContext:
    """
    Build the standard arena for a pen of the given size.

    The home pen sits in the top right corner with an open side and a short
    lead-in fence; three more fences split the field so the flock has to be
    driven around them.

    Args:
        width: Pen width in pixels
        height: Pen height in pixels

    Returns:
        A new context with the predator at (100, 100)
    """
    context = SimulationContext(
        predator=pygame.Vector2(100, 100),
        scoring_zone=ScoringZone(width - 100, 0, 96, 80),
    )

    # the home pen
    context.add_obstacle([
        (width - 4, 80),
        (width - 4, 0),
        (width - 100, 0),
        (width - 100, 0),
        (width - 100, 80),
        (width - 150, 120),
    ])

    # the start
    context.add_obstacle([
        (width // 4, 0),
        (width // 4, height // 4 * 3),
    ])

    # a restricted point
    context.add_obstacle([
        (width // 2, 0),
        (width // 2, height // 4 * 1.8),
        (width // 2 + width // 4, height // 4 * 1.8),
    ])
    context.add_obstacle([
        (width // 2, height),
        (width // 2, height - height // 4 * 1.8),
    ])

    logger.debug("built default layout for %dx%d pen with %d fences",
                 width, height, len(context.obstacles))
    return context
