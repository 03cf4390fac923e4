"""Multi-walker procedural maze generation on an unbounded grid."""

from maze_walkers.config.types import GenerationConfig, InvalidConfiguration, WalkerSpec
from maze_walkers.domain.occupancy import Cell, OccupancySet
from maze_walkers.domain.walkers import WALKER_KINDS, Walker, create_walker
from maze_walkers.simulation.engine import GenerationSummary, run_generation
from maze_walkers.simulation.session import MazeSession

__all__ = [
    "Cell",
    "GenerationConfig",
    "GenerationSummary",
    "InvalidConfiguration",
    "MazeSession",
    "OccupancySet",
    "WALKER_KINDS",
    "Walker",
    "WalkerSpec",
    "create_walker",
    "run_generation",
]
