"""
Configuration classes and defaults for the sheep flocking simulation.
"""

import json
import math
from dataclasses import dataclass, field, fields
from typing import List, Optional

from .errors import ConfigurationError


@dataclass
class SimulationConfig:
    """Configuration for the sheep flocking simulation."""

    # Pen settings
    arenaWidth: int = 800
    arenaHeight: int = 500

    # Agent count (fixed for the lifetime of a flock)
    flockSize: int = 50

    # Movement parameters
    maxVelocity: float = 0.7
    minimumSpeed: float = 0.1
    maxTurnPerTick: float = 0.0872665 / 3  # 5 degrees spread over 3 ticks

    # Neighbor detection
    alignmentRadius: float = 50
    separationDistance: float = 6
    obstacleDistance: float = 10
    useSpatialGrid: bool = False
    gridCellSize: int = 50

    # Pen boundary
    boundaryMargin: float = 5
    boundaryNudge: float = 5

    # Predator parameters
    predatorSensingRadius: float = 150
    predatorSigmoidWidth: float = 20
    escapeSoftness: float = 10
    predatorSpeed: float = 3.0

    # Grazing
    pauseChance: float = 7 / 500
    maxPauseTicks: int = 29

    # Randomness
    seed: Optional[int] = None

    # Visualization
    fpsTarget: int = 100
    penColor: List[int] = field(default_factory=lambda: [0, 128, 0])
    sheepColor: List[int] = field(default_factory=lambda: [255, 192, 203])
    fenceColor: List[int] = field(default_factory=lambda: [165, 42, 42])
    predatorColor: List[int] = field(default_factory=lambda: [0, 0, 255])

    def validate(self) -> "SimulationConfig":
        """
        Check the configuration for values the simulation cannot run with.

        Returns:
            The config itself, so calls can be chained

        Raises:
            ConfigurationError: If a parameter is out of range
        """
        if self.arenaWidth <= 0:
            raise ConfigurationError("arenaWidth", "must be positive")
        if self.arenaHeight < 6:
            raise ConfigurationError("arenaHeight", "must be at least 6 pixels to place the flock")
        if self.flockSize < 1:
            raise ConfigurationError("flockSize", "a flock needs at least one sheep")
        if self.maxVelocity <= 0:
            raise ConfigurationError("maxVelocity", "must be positive")
        if self.minimumSpeed < 0:
            raise ConfigurationError("minimumSpeed", "must not be negative")
        if not 0 <= self.pauseChance <= 1:
            raise ConfigurationError("pauseChance", "must be a probability in [0, 1]")
        if self.maxPauseTicks < 1:
            raise ConfigurationError("maxPauseTicks", "must be at least 1")
        if self.gridCellSize < max(self.alignmentRadius, self.separationDistance):
            raise ConfigurationError(
                "gridCellSize",
                "must be at least alignmentRadius and separationDistance so adjacent cells cover them",
            )
        if not math.isfinite(self.maxTurnPerTick) or self.maxTurnPerTick < 0:
            raise ConfigurationError("maxTurnPerTick", "must be a non-negative number")
        return self

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "arenaWidth": self.arenaWidth,
            "arenaHeight": self.arenaHeight,
            "flockSize": self.flockSize,
            "maxVelocity": self.maxVelocity,
            "minimumSpeed": self.minimumSpeed,
            "maxTurnPerTick": self.maxTurnPerTick,
            "alignmentRadius": self.alignmentRadius,
            "separationDistance": self.separationDistance,
            "obstacleDistance": self.obstacleDistance,
            "useSpatialGrid": self.useSpatialGrid,
            "gridCellSize": self.gridCellSize,
            "boundaryMargin": self.boundaryMargin,
            "boundaryNudge": self.boundaryNudge,
            "predatorSensingRadius": self.predatorSensingRadius,
            "predatorSigmoidWidth": self.predatorSigmoidWidth,
            "escapeSoftness": self.escapeSoftness,
            "predatorSpeed": self.predatorSpeed,
            "pauseChance": self.pauseChance,
            "maxPauseTicks": self.maxPauseTicks,
            "seed": self.seed,
            "fpsTarget": self.fpsTarget,
            "penColor": self.penColor,
            "sheepColor": self.sheepColor,
            "fenceColor": self.fenceColor,
            "predatorColor": self.predatorColor,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


def load_config(path: str) -> SimulationConfig:
    """
    Load and validate a configuration from a JSON file.

    Keys that are not config fields are ignored.

    Args:
        path: Path to a JSON object file

    Returns:
        Validated configuration
    """
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a JSON object at the top level")
    return SimulationConfig.from_dict(data).validate()


# Default configuration for interactive simulation
DEFAULT_CONFIG = SimulationConfig()


# Rule weights (used across modules). The predator modifiers scale each rule
# by (1 + proximity * modifier) as the dog closes in.
COHESION_WEIGHT = 0.3
COHESION_PREDATOR_MODIFIER = -0.7
SEPARATION_WEIGHT = 0.4
SEPARATION_PREDATOR_MODIFIER = -0.9
ALIGNMENT_WEIGHT = 0.3
ALIGNMENT_PREDATOR_MODIFIER = 0.4
ESCAPE_WEIGHT = 3.0

# Cohesion moves a sheep this fraction of the way to the centre each tick
COHESION_DIVISOR = 100
# Alignment closes this fraction of the gap to the neighbours' mean velocity
ALIGNMENT_DIVISOR = 8
# Obstacles push back twice as hard as other sheep
OBSTACLE_REPULSION = 2

# Added to the predator distance so the proximity factor never divides by zero
PREDATOR_DISTANCE_EPSILON = 0.00001
