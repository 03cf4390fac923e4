"""Tests for viz/render.py and viz/theme.py."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from matplotlib.colors import to_rgb

from maze_walkers.config.types import GenerationConfig, WalkerSpec
from maze_walkers.domain.occupancy import OccupancySet
from maze_walkers.domain.walkers import CorridorWalker, SpiralWalker
from maze_walkers.simulation.engine import run_generation
from maze_walkers.viz.render import (
    build_trail_image,
    render_growth_curve,
    render_maze,
    resolve_walker_color,
)
from maze_walkers.viz.theme import DEFAULT_THEME, PAPER_THEME, Theme, get_theme


class TestTheme:
    def test_get_theme_case_insensitive(self) -> None:
        assert get_theme("PAPER") is PAPER_THEME

    def test_unknown_theme_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown theme"):
            get_theme("neon")

    def test_cell_scale_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="cell_scale"):
            Theme(cell_scale=0)


class TestResolveWalkerColor:
    def test_uses_walker_color(self) -> None:
        walker = SpiralWalker(0, 0, OccupancySet(), color="red")
        assert resolve_walker_color(walker) == to_rgb("red")

    def test_unparseable_color_falls_back_to_kind(self) -> None:
        walker = SpiralWalker(0, 0, OccupancySet(), color="not-a-colour")
        assert resolve_walker_color(walker) == to_rgb(DEFAULT_THEME.kind_colors["S"])

    def test_override_theme_repaints(self) -> None:
        walker = SpiralWalker(0, 0, OccupancySet(), color="red")
        assert resolve_walker_color(walker, PAPER_THEME) == to_rgb(PAPER_THEME.kind_colors["S"])


class TestBuildTrailImage:
    def test_single_cell_shape_and_colour(self) -> None:
        theme = Theme(cell_scale=3, margin_cells=2)
        walker = SpiralWalker(0, 0, OccupancySet(), color="red")
        image = build_trail_image([walker], theme)
        assert image.shape == (15, 15, 3)
        assert tuple(image[7, 7]) == to_rgb("red")
        assert tuple(image[0, 0]) == to_rgb(theme.background_color)

    def test_negative_coordinates_fit(self) -> None:
        occupancy = OccupancySet()
        walker = CorridorWalker(-50, -50, occupancy, turn_chance=0.0, color="blue")
        for _ in range(4):
            walker.step()
        image = build_trail_image([walker], Theme(cell_scale=1, margin_cells=0))
        assert image.shape == (1, 5, 3)
        assert np.allclose(image, to_rgb("blue"))

    def test_later_walkers_paint_on_top(self) -> None:
        occupancy = OccupancySet()
        first = SpiralWalker(0, 0, occupancy, color="red")
        second = SpiralWalker(0, 0, occupancy, color="blue")
        image = build_trail_image([first, second], Theme(cell_scale=1, margin_cells=0))
        assert tuple(image[0, 0]) == to_rgb("blue")

    def test_empty_roster_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty layout"):
            build_trail_image([])


class TestRenderFiles:
    def test_render_maze_writes_png(self, tmp_path: Path) -> None:
        walker = SpiralWalker(0, 0, OccupancySet())
        for _ in range(30):
            walker.step()
        out = render_maze([walker], tmp_path / "nested" / "maze.png")
        assert out.exists()
        assert out.stat().st_size > 0

    def test_render_growth_curve(self, tmp_path: Path) -> None:
        config = GenerationConfig(
            walkers=(WalkerSpec("S"), WalkerSpec("R", 10, 10)),
            ticks=15,
            out_dir=tmp_path,
            render=False,
        )
        summary = run_generation(config)
        out = render_growth_curve(Path(summary.growth_log), tmp_path / "growth.png")
        assert out.exists()
