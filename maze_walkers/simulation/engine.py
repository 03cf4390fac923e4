"""Generation engine: seeded session run with a streamed growth log."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

import pyarrow.parquet as pq

from maze_walkers.config.constants import FLUSH_THRESHOLD
from maze_walkers.config.types import GenerationConfig
from maze_walkers.io.paths import (
    generation_summary_path,
    growth_log_path,
    logs_dir,
    maze_image_path,
)
from maze_walkers.metrics.spatial import layout_metrics, walker_coverage
from maze_walkers.simulation.persistence import flush_growth_columns, new_growth_columns
from maze_walkers.simulation.session import MazeSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationSummary:
    """Top-level result for one generation run."""

    ticks: int
    sim_seed: int | None
    occupied_cells: int
    layout: dict[str, int | float]
    walkers: list[dict[str, object]]
    growth_log: str
    image: str | None


def _append_tick_rows(
    columns: dict[str, list[int | str]], session: MazeSession
) -> None:
    occupied = session.occupancy.size()
    for i, walker in enumerate(session.walkers):
        columns["tick"].append(session.tick)
        columns["walker_index"].append(i)
        columns["kind"].append(walker.kind)
        columns["x"].append(walker.x)
        columns["y"].append(walker.y)
        columns["trail_size"].append(len(walker.visited))
        columns["occupied_cells"].append(occupied)


def run_generation(
    config: GenerationConfig, session: MazeSession | None = None
) -> GenerationSummary:
    """Run ``config.ticks`` ticks and persist the growth log and summary.

    Row ``tick=0`` records the walkers' starting state. A pre-built *session*
    may be passed in place of the one derived from ``config.walkers``.
    """
    out_dir = Path(config.out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    log_path = growth_log_path(out_dir)

    if session is None:
        session = MazeSession.from_config(config)
    logger.info(
        "Generating %d ticks with %d walkers (seed=%s)",
        config.ticks,
        len(session.walkers),
        config.sim_seed,
    )

    columns = new_growth_columns()
    writer: pq.ParquetWriter | None = None
    try:
        _append_tick_rows(columns, session)
        for _ in range(config.ticks):
            session.advance()
            _append_tick_rows(columns, session)
            if len(columns["tick"]) >= FLUSH_THRESHOLD:
                writer = flush_growth_columns(columns, log_path, writer)
        writer = flush_growth_columns(columns, log_path, writer)
    finally:
        if writer is not None:
            writer.close()

    cells = session.occupancy.snapshot()
    image: Path | None = None
    if config.render:
        from maze_walkers.viz.render import render_maze
        from maze_walkers.viz.theme import get_theme

        image = maze_image_path(out_dir)
        render_maze(session.walkers, image, theme=get_theme(config.theme))

    summary = GenerationSummary(
        ticks=session.tick,
        sim_seed=config.sim_seed,
        occupied_cells=len(cells),
        layout=layout_metrics(cells),
        walkers=walker_coverage(session.walkers),
        growth_log=str(log_path),
        image=str(image) if image is not None else None,
    )
    generation_summary_path(out_dir).write_text(
        json.dumps(asdict(summary), ensure_ascii=False, indent=2)
    )
    logger.info("Carved %d cells after %d ticks", len(cells), session.tick)
    return summary
