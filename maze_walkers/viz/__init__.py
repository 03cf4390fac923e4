"""Visualization layer: themes and renderers."""

from maze_walkers.viz.render import (
    build_trail_image,
    render_growth_curve,
    render_maze,
    resolve_walker_color,
)
from maze_walkers.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "build_trail_image",
    "get_theme",
    "render_growth_curve",
    "render_maze",
    "resolve_walker_color",
]
