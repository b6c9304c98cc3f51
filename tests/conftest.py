import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from sheepdog.core.config import SimulationConfig
from sheepdog.core.context import SimulationContext
from sheepdog.core.flock import Flock


@pytest.fixture
def make_flock():
    """Build a seeded flock with grazing switched off."""

    def _make(size=2, **overrides):
        overrides.setdefault("pauseChance", 0.0)
        config = SimulationConfig(flockSize=size, seed=1234, **overrides)
        return Flock(config)

    return _make


@pytest.fixture
def far_context():
    """A context with the predator well outside everyone's flight zone."""
    return SimulationContext(predator=pygame.Vector2(10_000, 10_000))

@pytest.fixture
def place():
    """Put a sheep at a position with a given velocity."""

    def _place(sheep, x, y, vx=0.0, vy=0.0):
        sheep.position = pygame.Vector2(x, y)
        sheep.velocity = pygame.Vector2(vx, vy)
        return sheep

    return _place
