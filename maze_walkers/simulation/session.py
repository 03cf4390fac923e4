"""Generation session: one shared occupancy set and an ordered walker roster."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from random import Random

from maze_walkers.config.types import GenerationConfig, InvalidConfiguration, WalkerSpec
from maze_walkers.domain.occupancy import OccupancySet
from maze_walkers.domain.walkers import Walker, create_walker


@dataclass
class MazeSession:
    """Steps every walker once per tick, strictly in roster order."""

    occupancy: OccupancySet
    walkers: list[Walker] = field(default_factory=list)
    tick: int = 0

    @classmethod
    def from_specs(
        cls,
        specs: Sequence[WalkerSpec],
        sim_seed: int | None = None,
        thread_safe: bool = False,
    ) -> MazeSession:
        """Build walkers on a fresh occupancy set.

        Each walker gets its own ``Random`` seeded from a session-level
        generator, so a fixed *sim_seed* reproduces the whole layout.
        """
        occupancy = OccupancySet(thread_safe=thread_safe)
        seeder = Random(sim_seed)
        walkers = [
            create_walker(
                spec.kind,
                spec.x,
                spec.y,
                occupancy,
                color=spec.color,
                rng=Random(seeder.getrandbits(64)),
                **spec.params,
            )
            for spec in specs
        ]
        return cls(occupancy=occupancy, walkers=walkers)

    @classmethod
    def from_config(cls, config: GenerationConfig) -> MazeSession:
        return cls.from_specs(
            config.walkers, sim_seed=config.sim_seed, thread_safe=config.thread_safe
        )

    def add_walker(self, walker: Walker) -> None:
        if walker.occupancy is not self.occupancy:
            raise InvalidConfiguration("walker must share this session's occupancy set")
        self.walkers.append(walker)

    def advance(self) -> None:
        """Run one tick: a single ``step()`` on every walker."""
        for walker in self.walkers:
            walker.step()
        self.tick += 1

    def expand(self, ticks: int = 10) -> None:
        if ticks < 0:
            raise ValueError("ticks must be >= 0")
        for _ in range(ticks):
            self.advance()
