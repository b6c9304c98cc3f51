"""
Headless simulation for batch runs and data collection.
"""

import logging
import time
from typing import Any, Dict, Iterable, Optional, Sequence

import numpy as np
import pygame

from ..core.config import SimulationConfig, DEFAULT_CONFIG
from ..core.flock import Flock
from ..core.layout import default_context
from .tick import TickDriver

logger = logging.getLogger(__name__)


class HeadlessSimulation:
    """
    Runs the flock without a display.

    With no mouse to follow, the dog walks a scripted route: it heads for
    each waypoint in turn at predatorSpeed per tick and starts over after
    the last one. Without waypoints it stays where the layout puts it.
    Statistics are kept in memory only.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 waypoints: Optional[Iterable[Sequence[float]]] = None, rng=None):
        """
        Initialize headless simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
            waypoints: (x, y) points the predator visits in order
            rng: numpy Generator or seed passed to the flock
        """
        self.config = config if config else DEFAULT_CONFIG
        self.flock = Flock(self.config, rng=rng)
        self.context = default_context(self.config.arenaWidth, self.config.arenaHeight)
        self.driver = TickDriver(self.flock, self.context)

        self.waypoints = [pygame.Vector2(p) for p in (waypoints or [])]
        self._next_waypoint = 0

        self.stats = {
            "best_score": 0,
            "first_score_tick": None,
            "score_over_time": [],
            "spread_over_time": [],
        }

    def _move_predator(self) -> None:
        """Walk the predator one tick along its route."""
        if not self.waypoints:
            return

        target = self.waypoints[self._next_waypoint]
        offset = target - self.context.predator
        if offset.length() <= self.config.predatorSpeed:
            self.driver.move_predator(target.x, target.y)
            self._next_waypoint = (self._next_waypoint + 1) % len(self.waypoints)
        else:
            offset.scale_to_length(self.config.predatorSpeed)
            new_position = self.context.predator + offset
            self.driver.move_predator(new_position.x, new_position.y)

    def spread(self, centroid: pygame.Vector2) -> float:
        """Mean distance of the sheep from the flock centroid."""
        positions = np.array([(s.position.x, s.position.y) for s in self.flock])
        return float(np.mean(np.linalg.norm(positions - (centroid.x, centroid.y), axis=1)))

    def update(self) -> None:
        """Advance the simulation by one tick."""
        self._move_predator()
        result = self.driver.advance()

        if result.score > self.stats["best_score"]:
            self.stats["best_score"] = result.score
        if result.score > 0 and self.stats["first_score_tick"] is None:
            self.stats["first_score_tick"] = result.tick
            logger.info("first sheep reached the pen at tick %d", result.tick)

        self.stats["score_over_time"].append(result.score)
        self.stats["spread_over_time"].append(self.spread(result.centroid))

    def run(self, ticks: int) -> Dict[str, Any]:
        """
        Run the simulation for a number of ticks.

        Args:
            ticks: Number of ticks to run

        Returns:
            Summary of the run (see get_results)
        """
        start = time.time()
        for _ in range(ticks):
            self.update()
        logger.info("ran %d ticks in %.2fs", ticks, time.time() - start)
        return self.get_results()

    def get_results(self) -> Dict[str, Any]:
        """
        Get run results.

        Returns:
            Dictionary of summary statistics and the per-tick series
        """
        result = self.driver.last_result
        spreads = self.stats["spread_over_time"]

        return {
            "ticks": self.driver.tick,
            "flock_size": len(self.flock),
            "final_score": result.score if result else 0,
            "best_score": self.stats["best_score"],
            "first_score_tick": self.stats["first_score_tick"],
            "final_centroid": (result.centroid.x, result.centroid.y) if result else None,
            "mean_spread": float(np.mean(spreads)) if spreads else 0.0,
            "score_over_time": list(self.stats["score_over_time"]),
            "spread_over_time": list(spreads),
        }
