"""Domain layer: shared occupancy set and walker movement policies."""

from maze_walkers.domain.occupancy import Cell, OccupancySet
from maze_walkers.domain.walkers import (
    CARDINALS,
    WALKER_KINDS,
    ChaoticClusterWalker,
    CorridorWalker,
    Displacement,
    DrunkenWalker,
    RandomWalker,
    RoomExpander,
    SpiralWalker,
    Walker,
    WallHuggerWalker,
    WeightedWalker,
    ZigZagWalker,
    create_walker,
    turn_left,
    turn_right,
)

__all__ = [
    "CARDINALS",
    "Cell",
    "ChaoticClusterWalker",
    "CorridorWalker",
    "Displacement",
    "DrunkenWalker",
    "OccupancySet",
    "RandomWalker",
    "RoomExpander",
    "SpiralWalker",
    "WALKER_KINDS",
    "Walker",
    "WallHuggerWalker",
    "WeightedWalker",
    "ZigZagWalker",
    "create_walker",
    "turn_left",
    "turn_right",
]
