"""Layout metrics over carved cells."""

from maze_walkers.metrics.spatial import (
    bounding_box,
    component_count,
    dead_end_count,
    fill_ratio,
    layout_metrics,
    occupancy_graph,
    walker_coverage,
)

__all__ = [
    "bounding_box",
    "component_count",
    "dead_end_count",
    "fill_ratio",
    "layout_metrics",
    "occupancy_graph",
    "walker_coverage",
]
