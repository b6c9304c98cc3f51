import math

import pygame
import pytest

from sheepdog.core.agents import Sheep, predator_proximity
from sheepdog.core.context import SimulationContext
from sheepdog.core.errors import MissingFlockError


def test_sheep_needs_a_flock():
    with pytest.raises(MissingFlockError):
        Sheep(None)


def test_missing_flock_is_a_value_error():
    with pytest.raises(ValueError, match="flock"):
        Sheep(None)


def test_predator_proximity_shape():
    assert predator_proximity(150, 150) == pytest.approx(0.5)
    assert predator_proximity(150, 0) == pytest.approx(math.atan(7.5) / math.pi + 0.5)
    values = [predator_proximity(150, d) for d in (0, 50, 100, 150)]
    assert all(0 < v < 1 for v in values)
    assert values == sorted(values, reverse=True)


def test_paused_sheep_stays_put(make_flock, far_context, place):
    flock = make_flock(size=1)
    (sheep,) = flock.sheep
    place(sheep, 300, 300, vx=0.5)
    sheep.pause(3)

    sheep.step(far_context)

    assert sheep.paused
    assert sheep.paused_ticks_remaining == 2
    assert (sheep.position.x, sheep.position.y) == (300, 300)


def test_last_pause_tick_moves_in_the_same_step(make_flock, place):
    flock = make_flock(size=1)
    (sheep,) = flock.sheep
    place(sheep, 400, 300)
    sheep.pause(1)
    context = SimulationContext(predator=pygame.Vector2(100, 100))

    sheep.step(context)

    assert not sheep.paused
    assert sheep.paused_ticks_remaining == 0
    assert sheep.position.x != pytest.approx(400, abs=1e-9)
    assert sheep.position.y != pytest.approx(300, abs=1e-9)


def test_pause_without_duration_picks_one(make_flock):
    flock = make_flock(size=1, maxPauseTicks=5)
    (sheep,) = flock.sheep
    for _ in range(20):
        sheep.pause()
        assert sheep.paused
        assert 1 <= sheep.paused_ticks_remaining <= 5


def test_velocity_accumulates_between_ticks(make_flock, far_context, place):
    flock = make_flock(size=1)
    (sheep,) = flock.sheep
    place(sheep, 400, 250, vx=0.2)

    escape = flock.escape(sheep, far_context.predator)
    sheep.step(far_context)

    # lone sheep: no cohesion or separation; alignment pulls towards a standstill
    expected_x = 0.2 + 0.3 * (-0.2 / 8) + 3 * escape.x
    expected_y = 3 * escape.y
    assert sheep.velocity.x == pytest.approx(expected_x)
    assert sheep.velocity.y == pytest.approx(expected_y)
    assert sheep.position.x == pytest.approx(400 + expected_x)
    assert sheep.position.y == pytest.approx(250 + expected_y)


def test_predator_close_by_makes_sheep_run(make_flock, place):
    flock = make_flock(size=1)
    (sheep,) = flock.sheep
    place(sheep, 400, 250)
    context = SimulationContext(predator=pygame.Vector2(395, 250))

    sheep.step(context)

    assert sheep.velocity.length() == pytest.approx(0.7)
    assert sheep.velocity.x > 0
    assert sheep.position.x == pytest.approx(400.7)


def test_speed_never_exceeds_maximum(make_flock, place):
    flock = make_flock(size=10)
    context = SimulationContext(predator=pygame.Vector2(60, 80))

    for _ in range(100):
        for sheep in flock:
            sheep.step(context)
            assert sheep.velocity.length() <= 0.7 + 1e-9


def test_heading_turns_at_most_max_step(make_flock, place):
    flock = make_flock(size=1)
    (sheep,) = flock.sheep
    place(sheep, 400, 250)
    sheep.heading = 0.0
    # predator straight below: the sheep wants to head up (-pi/2)
    context = SimulationContext(predator=pygame.Vector2(400, 255))
    max_turn = flock.config.maxTurnPerTick

    previous = sheep.heading
    for _ in range(10):
        sheep.step(context)
        assert abs(sheep.heading - previous) <= max_turn + 1e-12
        previous = sheep.heading

    assert sheep.heading == pytest.approx(-10 * max_turn)


def test_heading_reaches_target_when_close(make_flock, place):
    flock = make_flock(size=1)
    (sheep,) = flock.sheep
    sheep.heading = 0.01
    sheep.turn_towards(0.0, flock.config.maxTurnPerTick)
    assert sheep.heading == 0.0


def test_sheep_can_start_grazing(make_flock, far_context):
    flock = make_flock(size=1, pauseChance=1.0)
    (sheep,) = flock.sheep

    sheep.step(far_context)

    assert sheep.paused
    assert sheep.paused_ticks_remaining >= 1
