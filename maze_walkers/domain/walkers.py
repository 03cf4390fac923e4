"""Walker movement policies carving a shared, unbounded grid.

Each walker owns a position and its private trail, and writes every cell it
enters into the shared :class:`OccupancySet`. Walkers never read each other's
trails directly; the shared set is their only channel.

Step invariant: after construction and after every ``step()`` the walker's
position is a member of both its own trail and the shared set.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from random import Random
from typing import Any, ClassVar, TypeAlias

from maze_walkers.config.constants import (
    BIAS_WEIGHT,
    CLUSTER_RADIUS,
    CORRIDOR_TURN_CHANCE,
    DRUNKEN_BACKTRACK_CHANCE,
    RANDOM_TRAIL_PREFERENCE,
    ROOM_SIZE,
    ZIGZAG_TURN_CHANCE,
)
from maze_walkers.config.types import InvalidConfiguration
from maze_walkers.domain.occupancy import Cell, OccupancySet

Displacement: TypeAlias = tuple[int, int]

UP: Displacement = (0, -1)
DOWN: Displacement = (0, 1)
LEFT: Displacement = (-1, 0)
RIGHT: Displacement = (1, 0)

# Scan order matters for the uniform-random walker's trail preference.
CARDINALS: tuple[Displacement, ...] = (UP, DOWN, LEFT, RIGHT)

# 8-neighbourhood plus staying put.
MOORE_WITH_STAY: tuple[Displacement, ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)
)


def turn_left(facing: Displacement) -> Displacement:
    dx, dy = facing
    return (dy, -dx)


def turn_right(facing: Displacement) -> Displacement:
    dx, dy = facing
    return (-dy, dx)


def _require_displacement(value: object, name: str) -> Displacement:
    if isinstance(value, list):
        value = tuple(value)
    if (
        not isinstance(value, tuple)
        or len(value) != 2
        or not all(isinstance(v, int) for v in value)
    ):
        raise InvalidConfiguration(f"{name} must be a (dx, dy) pair of integers")
    return value  # type: ignore[return-value]


def _require_probability(value: float, name: str) -> float:
    if not 0.0 <= value <= 1.0:
        raise InvalidConfiguration(f"{name} must be in [0.0, 1.0]")
    return value


class Walker(ABC):
    """Base walker: position, private trail, and one movement policy."""

    kind: ClassVar[str]
    default_color: ClassVar[str] = "white"

    def __init__(
        self,
        x: int,
        y: int,
        occupancy: OccupancySet | set[Cell],
        color: str | None = None,
        rng: Random | None = None,
    ) -> None:
        if not isinstance(occupancy, (OccupancySet, set)):
            raise InvalidConfiguration("walker requires a valid shared occupancy set")
        if not isinstance(x, int) or not isinstance(y, int):
            raise InvalidConfiguration("x and y must be integers")
        self.x = x
        self.y = y
        self.color = color if color is not None else self.default_color
        self.occupancy = occupancy
        self.rng = rng if rng is not None else Random()
        self.step_count = 0
        self._visited: set[Cell] = set()
        self._carve(self.position)

    @property
    def position(self) -> Cell:
        return (self.x, self.y)

    @property
    def visited(self) -> frozenset[Cell]:
        """Read-only snapshot of this walker's own trail."""
        return frozenset(self._visited)

    def has_visited(self, cell: Cell) -> bool:
        return cell in self._visited

    def step(self) -> None:
        """Choose one displacement, move, and record the new cell."""
        dx, dy = self.choose_displacement()
        self.x += dx
        self.y += dy
        self.mark()
        self.step_count += 1

    def mark(self) -> None:
        """Record the cells carved at the current position."""
        self._carve(self.position)

    @abstractmethod
    def choose_displacement(self) -> Displacement:
        """Return this step's move and advance any policy state."""

    def _carve(self, cell: Cell) -> None:
        # Own trail first, then the shared set.
        self._visited.add(cell)
        self.occupancy.add(cell)

    def _ahead(self, facing: Displacement) -> Cell:
        return (self.x + facing[0], self.y + facing[1])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind!r}, position={self.position}, "
            f"trail={len(self._visited)})"
        )


class RandomWalker(Walker):
    """Uniform random steps, sometimes thickening an already carved corridor."""

    kind = "R"
    default_color = "red"

    def __init__(
        self,
        x: int,
        y: int,
        occupancy: OccupancySet | set[Cell],
        color: str | None = None,
        rng: Random | None = None,
        trail_preference: float = RANDOM_TRAIL_PREFERENCE,
    ) -> None:
        self.trail_preference = _require_probability(trail_preference, "trail_preference")
        super().__init__(x, y, occupancy, color, rng)

    def choose_displacement(self) -> Displacement:
        if self.rng.random() < self.trail_preference:
            for move in CARDINALS:
                if self._ahead(move) in self.occupancy:
                    return move
        return self.rng.choice(CARDINALS)


class WeightedWalker(Walker):
    """Random steps drawn from a pool padded with copies of a bias direction."""

    kind = "W"
    default_color = "blue"

    def __init__(
        self,
        x: int,
        y: int,
        occupancy: OccupancySet | set[Cell],
        color: str | None = None,
        rng: Random | None = None,
        bias_direction: Displacement = RIGHT,
        bias_weight: int = BIAS_WEIGHT,
    ) -> None:
        self.bias_direction = _require_displacement(bias_direction, "bias_direction")
        if not isinstance(bias_weight, int) or bias_weight < 0:
            raise InvalidConfiguration("bias_weight must be an integer >= 0")
        self.bias_weight = bias_weight
        self.pool: tuple[Displacement, ...] = CARDINALS + (self.bias_direction,) * bias_weight
        super().__init__(x, y, occupancy, color, rng)

    def choose_displacement(self) -> Displacement:
        return self.rng.choice(self.pool)


class CorridorWalker(Walker):
    """Long straight runs; turns occasionally or when the cell ahead is taken."""

    kind = "C"
    default_color = "green"

    def __init__(
        self,
        x: int,
        y: int,
        occupancy: OccupancySet | set[Cell],
        color: str | None = None,
        rng: Random | None = None,
        turn_chance: float = CORRIDOR_TURN_CHANCE,
    ) -> None:
        self.turn_chance = _require_probability(turn_chance, "turn_chance")
        self.facing: Displacement = RIGHT
        super().__init__(x, y, occupancy, color, rng)

    def choose_displacement(self) -> Displacement:
        if self.rng.random() < self.turn_chance or self._ahead(self.facing) in self.occupancy:
            if self.rng.random() < 0.5:
                self.facing = turn_left(self.facing)
            else:
                self.facing = turn_right(self.facing)
        return self.facing


class RoomExpander(Walker):
    """Drifts through the 8-neighbourhood and stamps a square room each step."""

    kind = "O"
    default_color = "purple"

    def __init__(
        self,
        x: int,
        y: int,
        occupancy: OccupancySet | set[Cell],
        color: str | None = None,
        rng: Random | None = None,
        room_size: int = ROOM_SIZE,
    ) -> None:
        if not isinstance(room_size, int) or room_size < 1:
            raise InvalidConfiguration("room_size must be an integer >= 1")
        self.room_size = room_size
        super().__init__(x, y, occupancy, color, rng)

    @property
    def half_extent(self) -> int:
        return self.room_size // 2

    def choose_displacement(self) -> Displacement:
        return (self.rng.randint(-1, 1), self.rng.randint(-1, 1))

    def mark(self) -> None:
        half = self.half_extent
        for dx in range(-half, half + 1):
            for dy in range(-half, half + 1):
                self._carve((self.x + dx, self.y + dy))


class ZigZagWalker(Walker):
    """Keeps a facing but turns left or right on half of its steps."""

    kind = "Z"
    default_color = "yellow"

    def __init__(
        self,
        x: int,
        y: int,
        occupancy: OccupancySet | set[Cell],
        color: str | None = None,
        rng: Random | None = None,
        turn_chance: float = ZIGZAG_TURN_CHANCE,
    ) -> None:
        self.turn_chance = _require_probability(turn_chance, "turn_chance")
        self.facing: Displacement = RIGHT
        super().__init__(x, y, occupancy, color, rng)

    def choose_displacement(self) -> Displacement:
        if self.rng.random() < self.turn_chance:
            if self.rng.random() < 0.5:
                self.facing = turn_left(self.facing)
            else:
                self.facing = turn_right(self.facing)
        return self.facing


class ChaoticClusterWalker(Walker):
    """Random 8-neighbourhood moves confined to a square around the start.

    Sampling uniformly from the displacements that keep the walker inside the
    square gives the same distribution as resampling until one fits, without
    an unbounded loop.
    """

    kind = "C2"
    default_color = "orange"

    def __init__(
        self,
        x: int,
        y: int,
        occupancy: OccupancySet | set[Cell],
        color: str | None = None,
        rng: Random | None = None,
        cluster_radius: int = CLUSTER_RADIUS,
    ) -> None:
        # Radius 0 would pin the walker to (0, 0) moves forever.
        if not isinstance(cluster_radius, int) or cluster_radius < 1:
            raise InvalidConfiguration("cluster_radius must be an integer >= 1")
        self.cluster_radius = cluster_radius
        self.start: Cell = (x, y)
        super().__init__(x, y, occupancy, color, rng)

    def _within_cluster(self, move: Displacement) -> bool:
        sx, sy = self.start
        r = self.cluster_radius
        return abs(self.x + move[0] - sx) <= r and abs(self.y + move[1] - sy) <= r

    def choose_displacement(self) -> Displacement:
        allowed = [move for move in MOORE_WITH_STAY if self._within_cluster(move)]
        return self.rng.choice(allowed)


class SpiralWalker(Walker):
    """Deterministic expanding rectangular spiral: legs of 1, 1, 2, 2, 3, 3, ..."""

    kind = "S"
    default_color = "cyan"
    directions: ClassVar[tuple[Displacement, ...]] = (RIGHT, DOWN, LEFT, UP)

    def __init__(
        self,
        x: int,
        y: int,
        occupancy: OccupancySet | set[Cell],
        color: str | None = None,
        rng: Random | None = None,
    ) -> None:
        self.run_length = 1
        self.leg_steps = 0
        self.direction_index = 0
        super().__init__(x, y, occupancy, color, rng)

    def choose_displacement(self) -> Displacement:
        move = self.directions[self.direction_index]
        self.leg_steps += 1
        if self.leg_steps >= self.run_length:
            self.leg_steps = 0
            self.direction_index = (self.direction_index + 1) % 4
            if self.direction_index % 2 == 0:
                self.run_length += 1
        return move


class DrunkenWalker(Walker):
    """Random steps that sometimes stagger straight back the way they came."""

    kind = "D"
    default_color = "brown"

    def __init__(
        self,
        x: int,
        y: int,
        occupancy: OccupancySet | set[Cell],
        color: str | None = None,
        rng: Random | None = None,
        backtrack_chance: float = DRUNKEN_BACKTRACK_CHANCE,
    ) -> None:
        self.backtrack_chance = _require_probability(backtrack_chance, "backtrack_chance")
        self.previous_move: Displacement | None = None
        super().__init__(x, y, occupancy, color, rng)

    def choose_displacement(self) -> Displacement:
        if self.previous_move is not None and self.rng.random() < self.backtrack_chance:
            move = (-self.previous_move[0], -self.previous_move[1])
        else:
            move = self.rng.choice(CARDINALS)
        self.previous_move = move
        return move


class WallHuggerWalker(Walker):
    """Runs straight into open ground, otherwise follows someone else's trail."""

    kind = "H"
    default_color = "pink"

    def __init__(
        self,
        x: int,
        y: int,
        occupancy: OccupancySet | set[Cell],
        color: str | None = None,
        rng: Random | None = None,
        direction: Displacement = RIGHT,
    ) -> None:
        self.facing = _require_displacement(direction, "direction")
        super().__init__(x, y, occupancy, color, rng)

    def _is_foreign_trail(self, cell: Cell) -> bool:
        return cell in self.occupancy and not self.has_visited(cell)

    def choose_displacement(self) -> Displacement:
        ahead = self._ahead(self.facing)
        if not self.has_visited(ahead) and ahead not in self.occupancy:
            move = self.facing
        else:
            foreign = [m for m in CARDINALS if self._is_foreign_trail(self._ahead(m))]
            move = self.rng.choice(foreign) if foreign else self.rng.choice(CARDINALS)
        self.facing = move
        return move


WALKER_KINDS: dict[str, type[Walker]] = {
    cls.kind: cls
    for cls in (
        RandomWalker,
        WeightedWalker,
        CorridorWalker,
        RoomExpander,
        ZigZagWalker,
        ChaoticClusterWalker,
        SpiralWalker,
        DrunkenWalker,
        WallHuggerWalker,
    )
}


def create_walker(
    kind: str,
    x: int,
    y: int,
    occupancy: OccupancySet | set[Cell],
    color: str | None = None,
    rng: Random | None = None,
    **params: Any,
) -> Walker:
    """Build a walker of *kind* (``"R"``, ``"W"``, ``"C"``, ...) on *occupancy*."""
    walker_cls = WALKER_KINDS.get(kind)
    if walker_cls is None:
        valid = ", ".join(sorted(WALKER_KINDS))
        raise InvalidConfiguration(f"Unknown walker kind {kind!r}; available: {valid}")
    try:
        return walker_cls(x, y, occupancy, color, rng, **params)
    except TypeError as exc:
        raise InvalidConfiguration(f"Invalid parameters for walker kind {kind!r}: {exc}") from exc
