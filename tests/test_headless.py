import pytest

from sheepdog.core.config import SimulationConfig
from sheepdog.simulation.headless import HeadlessSimulation


def test_run_summary():
    sim = HeadlessSimulation(SimulationConfig(flockSize=15, seed=8))
    summary = sim.run(40)

    assert summary["ticks"] == 40
    assert summary["flock_size"] == 15
    assert 0 <= summary["final_score"] <= summary["best_score"] <= 15
    assert len(summary["score_over_time"]) == 40
    assert len(summary["spread_over_time"]) == 40
    assert summary["mean_spread"] == pytest.approx(
        sum(summary["spread_over_time"]) / 40
    )
    assert summary["final_centroid"] is not None


def test_results_before_running():
    sim = HeadlessSimulation(SimulationConfig(flockSize=3, seed=1))
    summary = sim.get_results()
    assert summary["ticks"] == 0
    assert summary["final_score"] == 0
    assert summary["final_centroid"] is None
    assert summary["mean_spread"] == 0.0


def test_predator_without_route_stays_put():
    sim = HeadlessSimulation(SimulationConfig(flockSize=3, seed=1))
    sim.update()
    assert (sim.context.predator.x, sim.context.predator.y) == (100, 100)


def test_predator_walks_its_route():
    config = SimulationConfig(flockSize=3, seed=1, predatorSpeed=3.0)
    sim = HeadlessSimulation(config, waypoints=[(100, 107), (100, 100)])

    sim.update()
    assert sim.context.predator.y == pytest.approx(103)
    sim.update()
    assert sim.context.predator.y == pytest.approx(106)
    sim.update()
    # reached the first waypoint, now heading back
    assert sim.context.predator.y == pytest.approx(107)
    sim.update()
    assert sim.context.predator.y == pytest.approx(104)


def test_spread_of_a_single_point_flock():
    sim = HeadlessSimulation(SimulationConfig(flockSize=1, seed=1))
    (sheep,) = sim.flock.sheep
    assert sim.spread(sheep.position) == 0.0


def test_same_seed_same_summary():
    config = SimulationConfig(flockSize=10, seed=77)
    first = HeadlessSimulation(config, waypoints=[(30, 60), (160, 120)]).run(50)
    second = HeadlessSimulation(config, waypoints=[(30, 60), (160, 120)]).run(50)
    assert first == second
