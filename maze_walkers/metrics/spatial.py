"""Spatial metrics: bounds, fill, connectivity and dead ends of a carved layout."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import networkx as nx

from maze_walkers.domain.occupancy import Cell
from maze_walkers.domain.walkers import CARDINALS, Walker


def bounding_box(cells: Iterable[Cell]) -> tuple[int, int, int, int] | None:
    """Return ``(min_x, min_y, max_x, max_y)``, or None for an empty layout."""
    cell_list = list(cells)
    if not cell_list:
        return None
    xs = [x for x, _ in cell_list]
    ys = [y for _, y in cell_list]
    return min(xs), min(ys), max(xs), max(ys)


def fill_ratio(cells: Iterable[Cell]) -> float:
    """Fraction of the bounding box that is carved. NaN for an empty layout."""
    cell_set = set(cells)
    box = bounding_box(cell_set)
    if box is None:
        return float("nan")
    min_x, min_y, max_x, max_y = box
    area = (max_x - min_x + 1) * (max_y - min_y + 1)
    return len(cell_set) / area


def occupancy_graph(cells: Iterable[Cell]) -> nx.Graph:
    """Build the 4-connected adjacency graph of carved cells."""
    cell_set = set(cells)
    graph = nx.Graph()
    graph.add_nodes_from(cell_set)
    for x, y in cell_set:
        # Right and down cover every edge exactly once.
        for nx_, ny_ in ((x + 1, y), (x, y + 1)):
            if (nx_, ny_) in cell_set:
                graph.add_edge((x, y), (nx_, ny_))
    return graph


def component_count(cells: Iterable[Cell]) -> int:
    """Count 4-connected components among carved cells."""
    return nx.number_connected_components(occupancy_graph(cells))


def dead_end_count(cells: Iterable[Cell]) -> int:
    """Count carved cells with exactly one carved 4-neighbour."""
    cell_set = set(cells)
    n = 0
    for x, y in cell_set:
        degree = sum((x + dx, y + dy) in cell_set for dx, dy in CARDINALS)
        if degree == 1:
            n += 1
    return n


def walker_coverage(walkers: Sequence[Walker]) -> list[dict[str, object]]:
    """Per-walker trail sizes, in roster order."""
    return [
        {
            "walker_index": i,
            "kind": walker.kind,
            "color": walker.color,
            "trail_size": len(walker.visited),
            "position": list(walker.position),
        }
        for i, walker in enumerate(walkers)
    ]


def layout_metrics(cells: Iterable[Cell]) -> dict[str, int | float]:
    """Compute the summary metric block for a carved layout."""
    cell_set = set(cells)
    box = bounding_box(cell_set)
    if box is None:
        width = height = 0
    else:
        width = box[2] - box[0] + 1
        height = box[3] - box[1] + 1
    return {
        "occupied_cells": len(cell_set),
        "component_count": component_count(cell_set),
        "dead_end_count": dead_end_count(cell_set),
        "fill_ratio": fill_ratio(cell_set),
        "bbox_width": width,
        "bbox_height": height,
    }
