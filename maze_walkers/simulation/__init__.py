"""Simulation layer: generation session, engine, and Parquet persistence."""

from maze_walkers.simulation.engine import GenerationSummary, run_generation
from maze_walkers.simulation.persistence import flush_growth_columns
from maze_walkers.simulation.session import MazeSession

__all__ = [
    "GenerationSummary",
    "MazeSession",
    "flush_growth_columns",
    "run_generation",
]
