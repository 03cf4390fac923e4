"""Matplotlib-based rendering of walker trails and growth logs."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pyarrow.compute as pc
import pyarrow.parquet as pq
from matplotlib.colors import is_color_like, to_rgb

from maze_walkers.domain.walkers import Walker
from maze_walkers.metrics.spatial import bounding_box
from maze_walkers.viz.theme import DEFAULT_THEME, Theme


def resolve_walker_color(
    walker: Walker, theme: Theme = DEFAULT_THEME
) -> tuple[float, float, float]:
    """Pick the RGB colour a walker's trail is drawn in."""
    if theme.override_walker_colors and walker.kind in theme.kind_colors:
        color = theme.kind_colors[walker.kind]
    elif is_color_like(walker.color):
        color = walker.color
    else:
        color = theme.kind_colors.get(walker.kind, theme.fallback_walker_color)
    return to_rgb(color)


def build_trail_image(walkers: Sequence[Walker], theme: Theme = DEFAULT_THEME) -> np.ndarray:
    """Return an (H, W, 3) float RGB array with every walker's trail drawn.

    The image is centred on the carved bounds plus ``theme.margin_cells`` on
    each side; each cell is a ``cell_scale`` square. Later walkers in the
    roster paint over earlier ones where trails overlap.
    """
    trails = [walker.visited for walker in walkers]
    box = bounding_box(cell for trail in trails for cell in trail)
    if box is None:
        raise ValueError("Cannot render an empty layout")
    min_x, min_y, max_x, max_y = box
    scale = theme.cell_scale
    margin = theme.margin_cells
    width = (max_x - min_x + 1 + 2 * margin) * scale
    height = (max_y - min_y + 1 + 2 * margin) * scale

    image = np.empty((height, width, 3), dtype=float)
    image[:, :] = to_rgb(theme.background_color)
    for walker, trail in zip(walkers, trails, strict=True):
        rgb = resolve_walker_color(walker, theme)
        for x, y in trail:
            col = (x - min_x + margin) * scale
            row = (y - min_y + margin) * scale
            image[row : row + scale, col : col + scale] = rgb
    return image


def render_maze(
    walkers: Sequence[Walker],
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
    dpi: int = 100,
) -> Path:
    """Render all trails to an image file and return its path."""
    image = build_trail_image(walkers, theme)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    height, width = image.shape[:2]
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
    ax.imshow(image, origin="upper", interpolation="nearest", aspect="equal")
    ax.set_axis_off()
    fig.savefig(output_path, dpi=dpi, facecolor=theme.background_color)
    plt.close(fig)
    return output_path


def render_growth_curve(
    growth_log_path: Path,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Plot occupied cells per tick from a growth-log Parquet file."""
    table = pq.read_table(growth_log_path, columns=["tick", "occupied_cells"])
    if table.num_rows == 0:
        raise ValueError(f"No growth rows found in {growth_log_path}")
    per_tick = table.group_by("tick").aggregate([("occupied_cells", "max")]).sort_by("tick")
    ticks = np.asarray(per_tick.column("tick").to_pylist())
    occupied = np.asarray(per_tick.column("occupied_cells_max").to_pylist())
    peak = pc.max(table.column("occupied_cells")).as_py()

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(6, 4))
    fig.patch.set_facecolor(theme.growth_face_color)
    ax.plot(ticks, occupied, color=theme.growth_line_color, linewidth=1.5)
    ax.set_xlabel("Tick")
    ax.set_ylabel("Occupied cells")
    ax.set_title(f"Carved area (final {peak} cells)")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)
    return output_path
