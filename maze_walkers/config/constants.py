"""Centralized defaults for walker policies and generation runs.

Walker constructors and config dataclasses read their defaults from here
rather than defining inline literals.
"""

from __future__ import annotations

ROOM_SIZE = 5
"""Default side length of the square stamped by the room expander."""

CLUSTER_RADIUS = 5
"""Default per-axis distance a chaotic-cluster walker may stray from its start."""

BIAS_WEIGHT = 3
"""Default number of extra copies of the bias direction in the weighted pool."""

RANDOM_TRAIL_PREFERENCE = 0.3
"""Probability that the uniform-random walker first looks for an occupied neighbour."""

CORRIDOR_TURN_CHANCE = 0.2
"""Per-step probability that a corridor walker turns without being blocked."""

ZIGZAG_TURN_CHANCE = 0.5
"""Per-step probability that a zig-zag walker turns."""

DRUNKEN_BACKTRACK_CHANCE = 0.2
"""Per-step probability that a drunken walker reverses its previous move."""

NUM_TICKS = 500
"""Default number of generation ticks per run."""

CELL_SCALE = 3
"""Pixels per cell edge in rendered layouts."""

FLUSH_THRESHOLD = 8_192
"""Flush growth-log rows to Parquet once this in-memory row count is reached."""

MAX_GENERATION_WORK_UNITS = 50_000_000
"""Safety cap on walker steps (ticks x walkers) for a single run."""
