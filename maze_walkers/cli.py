"""CLI entrypoint: run a generation session or plot a growth log."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from maze_walkers.config.constants import NUM_TICKS
from maze_walkers.config.types import DEFAULT_ROSTER, GenerationConfig, WalkerSpec
from maze_walkers.domain.walkers import WALKER_KINDS
from maze_walkers.io.paths import resolve_within_base
from maze_walkers.simulation.engine import run_generation
from maze_walkers.viz.render import render_growth_curve
from maze_walkers.viz.theme import get_theme


def _parse_walker(raw: str) -> WalkerSpec:
    """Parse ``KIND@X,Y[:COLOR]`` into a walker spec."""
    if "@" not in raw:
        raise ValueError(f"Expected KIND@X,Y[:COLOR] format, got: {raw}")
    kind, rest = raw.split("@", 1)
    if kind not in WALKER_KINDS:
        valid = ", ".join(sorted(WALKER_KINDS))
        raise ValueError(f"Unknown walker kind {kind!r}; available: {valid}")
    coords, _, color = rest.partition(":")
    parts = [part.strip() for part in coords.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected two coordinates in {raw!r}")
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError(f"Coordinates must be integers in {raw!r}") from exc
    return WalkerSpec(kind, x, y, color or None)


def _build_generate_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("generate", help="Run walkers and write growth log, summary and image")
    p.set_defaults(func=_handle_generate)
    p.add_argument("--ticks", type=int, default=NUM_TICKS)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--out-dir", type=Path, default=Path("data/generation"))
    p.add_argument("--base-dir", type=Path, default=Path("."))
    p.add_argument(
        "--walker",
        action="append",
        default=None,
        metavar="KIND@X,Y[:COLOR]",
        help="Walker to place (can repeat); defaults to the demo roster",
    )
    p.add_argument("--no-render", action="store_true")
    p.add_argument("--thread-safe", action="store_true")


def _build_plot_growth_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("plot-growth", help="Plot occupied cells per tick")
    p.set_defaults(func=_handle_plot_growth)
    p.add_argument("--growth-log", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _handle_generate(args: argparse.Namespace) -> None:
    base_dir = Path(args.base_dir).resolve()
    walkers = (
        tuple(_parse_walker(raw) for raw in args.walker) if args.walker else DEFAULT_ROSTER
    )
    config = GenerationConfig(
        walkers=walkers,
        ticks=args.ticks,
        sim_seed=args.seed,
        out_dir=resolve_within_base(args.out_dir, base_dir),
        render=not args.no_render,
        theme=args.theme,
        thread_safe=args.thread_safe,
    )
    summary = run_generation(config)
    print(json.dumps(asdict(summary), ensure_ascii=False, indent=2))


def _handle_plot_growth(args: argparse.Namespace) -> None:
    base_dir = Path(args.base_dir).resolve()
    render_growth_curve(
        growth_log_path=resolve_within_base(args.growth_log, base_dir),
        output_path=resolve_within_base(args.output, base_dir),
        theme=get_theme(args.theme),
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Multi-walker maze generation")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme preset name (default, paper)",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    sub = parser.add_subparsers(dest="command", required=True)
    _build_generate_parser(sub)
    _build_plot_growth_parser(sub)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Fail fast on a bad theme name before any work starts
    get_theme(args.theme)

    args.func(args)


if __name__ == "__main__":
    main()
