"""Configuration dataclasses and the construction-time error type.

Everything here is frozen and validated in ``__post_init__`` so a bad
configuration fails before any walker moves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from maze_walkers.config.constants import MAX_GENERATION_WORK_UNITS, NUM_TICKS

__all__ = [
    "DEFAULT_ROSTER",
    "GenerationConfig",
    "InvalidConfiguration",
    "MAX_GENERATION_WORK_UNITS",
    "WalkerSpec",
]


class InvalidConfiguration(ValueError):
    """Raised when a walker or run is constructed with unusable parameters."""


@dataclass(frozen=True)
class WalkerSpec:
    """Declarative description of one walker in a generation roster."""

    kind: str
    x: int = 0
    y: int = 0
    color: str | None = None
    params: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, str) or not self.kind:
            raise InvalidConfiguration("kind must be a non-empty string")
        if not isinstance(self.x, int) or not isinstance(self.y, int):
            raise InvalidConfiguration("x and y must be integers")


DEFAULT_ROSTER: tuple[WalkerSpec, ...] = (
    WalkerSpec("R", 0, 0, "red"),
    WalkerSpec("W", 10, 10, "blue", {"bias_direction": (1, 0), "bias_weight": 5}),
    WalkerSpec("C", -10, -10, "green"),
    WalkerSpec("O", -5, 5, "purple", {"room_size": 5}),
    WalkerSpec("H", 15, 15, "magenta"),
    WalkerSpec("D", -20, -20, "yellow"),
    WalkerSpec("C2", -30, -30, "orange", {"cluster_radius": 8}),
    WalkerSpec("Z", 30, 30, "pink"),
)
"""Eight-walker demo roster; the spiral walker is left out as in the demo."""


@dataclass(frozen=True)
class GenerationConfig:
    """Settings for one generation run."""

    walkers: tuple[WalkerSpec, ...] = DEFAULT_ROSTER
    ticks: int = NUM_TICKS
    sim_seed: int | None = 0
    out_dir: Path = Path("data/generation")
    render: bool = True
    theme: str = "default"
    thread_safe: bool = False

    def __post_init__(self) -> None:
        if not self.walkers:
            raise InvalidConfiguration("walkers must not be empty")
        if self.ticks < 1:
            raise InvalidConfiguration("ticks must be >= 1")
        if self.ticks * len(self.walkers) > MAX_GENERATION_WORK_UNITS:
            raise InvalidConfiguration(
                "generation workload exceeds safety threshold; reduce ticks or walkers"
            )
