"""Configuration layer: constants and typed config dataclasses."""

from maze_walkers.config.constants import (
    BIAS_WEIGHT,
    CELL_SCALE,
    CLUSTER_RADIUS,
    CORRIDOR_TURN_CHANCE,
    DRUNKEN_BACKTRACK_CHANCE,
    FLUSH_THRESHOLD,
    MAX_GENERATION_WORK_UNITS,
    NUM_TICKS,
    RANDOM_TRAIL_PREFERENCE,
    ROOM_SIZE,
    ZIGZAG_TURN_CHANCE,
)
from maze_walkers.config.types import (
    DEFAULT_ROSTER,
    GenerationConfig,
    InvalidConfiguration,
    WalkerSpec,
)

__all__ = [
    "BIAS_WEIGHT",
    "CELL_SCALE",
    "CLUSTER_RADIUS",
    "CORRIDOR_TURN_CHANCE",
    "DEFAULT_ROSTER",
    "DRUNKEN_BACKTRACK_CHANCE",
    "FLUSH_THRESHOLD",
    "GenerationConfig",
    "InvalidConfiguration",
    "MAX_GENERATION_WORK_UNITS",
    "NUM_TICKS",
    "RANDOM_TRAIL_PREFERENCE",
    "ROOM_SIZE",
    "WalkerSpec",
    "ZIGZAG_TURN_CHANCE",
]
