import pygame
import pytest

from sheepdog.core.config import SimulationConfig
from sheepdog.core.flock import Flock
from sheepdog.core.layout import default_context
from sheepdog.simulation.renderer import Renderer
from sheepdog.simulation.tick import TickDriver


@pytest.fixture
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


def test_draws_a_frame(pygame_headless):
    config = SimulationConfig(flockSize=10, seed=3)
    flock = Flock(config)
    context = default_context(config.arenaWidth, config.arenaHeight)
    result = TickDriver(flock, context).advance()
    surface = pygame.Surface((config.arenaWidth, config.arenaHeight))

    Renderer(config).draw(surface, flock, context, result)

    # an empty patch of grass in the bottom left
    assert tuple(surface.get_at((10, 480)))[:3] == tuple(config.penColor)
    # the fence splitting the bottom half of the field
    assert tuple(surface.get_at((400, 490)))[:3] == tuple(config.fenceColor)


def test_sheep_outside_the_pen_are_not_drawn(pygame_headless):
    config = SimulationConfig(flockSize=1, seed=3)
    flock = Flock(config)
    (sheep,) = flock.sheep
    sheep.position = pygame.Vector2(-50, -50)
    context = default_context(config.arenaWidth, config.arenaHeight)
    surface = pygame.Surface((config.arenaWidth, config.arenaHeight))

    Renderer(config).draw(surface, flock, context)

    assert tuple(surface.get_at((0, 0)))[:3] == tuple(config.penColor)


def test_interactive_frame(pygame_headless):
    from sheepdog.simulation.interactive import InteractiveSimulation

    sim = InteractiveSimulation(SimulationConfig(flockSize=5, seed=2))
    sim.driver.move_predator(30, 60)
    sim.update()

    assert sim.driver.tick == 1
    assert sim.screen.get_size() == (800, 500)
