"""Visualization theme presets for layout renderers.

Themes are frozen dataclasses that group all styling constants together, so a
palette can be swapped via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from maze_walkers.config.constants import CELL_SCALE


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    background_color: str = "#000000"
    fallback_walker_color: str = "white"
    cell_scale: int = CELL_SCALE
    margin_cells: int = 2

    # Per-kind colours: fallback for unparseable walker colours, or a full
    # repaint when override_walker_colors is set
    kind_colors: dict[str, str] = field(default_factory=dict)
    override_walker_colors: bool = False

    # Growth-curve plot
    growth_line_color: str = "tab:blue"
    growth_face_color: str = "#FFFFFF"

    def __post_init__(self) -> None:
        if self.cell_scale < 1:
            raise ValueError("cell_scale must be >= 1")
        if self.margin_cells < 0:
            raise ValueError("margin_cells must be >= 0")


_KIND_COLORS: dict[str, str] = {
    "R": "red",
    "W": "blue",
    "C": "green",
    "O": "purple",
    "Z": "yellow",
    "C2": "orange",
    "S": "cyan",
    "D": "brown",
    "H": "pink",
}

DEFAULT_THEME = Theme(kind_colors=_KIND_COLORS)

PAPER_THEME = Theme(
    background_color="#FFFFFF",
    fallback_walker_color="#333333",
    kind_colors={
        "R": "#d62728",
        "W": "#1f77b4",
        "C": "#2ca02c",
        "O": "#9467bd",
        "Z": "#bcbd22",
        "C2": "#ff7f0e",
        "S": "#17becf",
        "D": "#8c564b",
        "H": "#e377c2",
    },
    override_walker_colors=True,
    growth_line_color="#1f77b4",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
