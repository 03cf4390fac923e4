"""Tests for maze_walkers.domain.walkers module."""

from __future__ import annotations

from collections import Counter
from random import Random

import pytest

from maze_walkers.config.types import InvalidConfiguration
from maze_walkers.domain.occupancy import OccupancySet
from maze_walkers.domain.walkers import (
    CARDINALS,
    DOWN,
    LEFT,
    RIGHT,
    UP,
    WALKER_KINDS,
    ChaoticClusterWalker,
    CorridorWalker,
    DrunkenWalker,
    RandomWalker,
    RoomExpander,
    SpiralWalker,
    WallHuggerWalker,
    WeightedWalker,
    ZigZagWalker,
    create_walker,
    turn_left,
    turn_right,
)


class _StillRandom(Random):
    """Seeded Random whose randint always lands on zero."""

    def randint(self, a: int, b: int) -> int:
        return 0


class TestWalkerContract:
    @pytest.mark.parametrize("bad", [None, [], {}, "cells", frozenset()])
    def test_invalid_occupancy_rejected(self, bad: object) -> None:
        with pytest.raises(InvalidConfiguration):
            RandomWalker(0, 0, bad)  # type: ignore[arg-type]

    def test_construction_records_start(self) -> None:
        occupancy = OccupancySet()
        walker = CorridorWalker(3, -4, occupancy)
        assert walker.position == (3, -4)
        assert walker.visited == frozenset({(3, -4)})
        assert (3, -4) in occupancy

    def test_plain_set_accepted(self) -> None:
        cells: set[tuple[int, int]] = set()
        walker = SpiralWalker(0, 0, cells)
        walker.step()
        assert cells == {(0, 0), (1, 0)}

    def test_default_color_per_kind(self) -> None:
        occupancy = OccupancySet()
        assert RandomWalker(0, 0, occupancy).color == "red"
        assert RandomWalker(0, 0, occupancy, color="teal").color == "teal"

    def test_visited_is_a_snapshot(self) -> None:
        walker = SpiralWalker(0, 0, OccupancySet())
        before = walker.visited
        walker.step()
        assert before == frozenset({(0, 0)})
        assert len(walker.visited) == 2

    @pytest.mark.parametrize("kind", sorted(WALKER_KINDS))
    def test_position_always_in_trail_and_shared_set(self, kind: str) -> None:
        occupancy = OccupancySet()
        walker = create_walker(kind, 0, 0, occupancy, rng=Random(11))
        for _ in range(300):
            walker.step()
            assert walker.position in walker.visited
            assert walker.position in occupancy

    @pytest.mark.parametrize("kind", sorted(WALKER_KINDS))
    def test_growth_is_monotonic(self, kind: str) -> None:
        occupancy = OccupancySet()
        walker = create_walker(kind, 5, 5, occupancy, rng=Random(3))
        shared_sizes = [occupancy.size()]
        trail_sizes = [len(walker.visited)]
        for _ in range(200):
            walker.step()
            shared_sizes.append(occupancy.size())
            trail_sizes.append(len(walker.visited))
        assert shared_sizes == sorted(shared_sizes)
        assert trail_sizes == sorted(trail_sizes)
        assert walker.visited <= occupancy.snapshot()

    def test_step_count_tracks_calls(self) -> None:
        walker = DrunkenWalker(0, 0, OccupancySet(), rng=Random(0))
        for _ in range(7):
            walker.step()
        assert walker.step_count == 7


class TestRotation:
    def test_left_and_right_are_inverse(self) -> None:
        for facing in CARDINALS:
            assert turn_right(turn_left(facing)) == facing

    def test_rotation_formulas(self) -> None:
        assert turn_left((1, 0)) == (0, -1)
        assert turn_right((1, 0)) == (0, 1)


class TestRandomWalker:
    def test_prefers_first_occupied_neighbour_in_scan_order(self) -> None:
        occupancy = OccupancySet([(1, 0), (0, 1)])
        walker = RandomWalker(0, 0, occupancy, rng=Random(0), trail_preference=1.0)
        walker.step()
        # Scan order is up, down, left, right: down wins over right.
        assert walker.position == (0, 1)

    def test_falls_back_to_random_when_nothing_nearby(self) -> None:
        walker = RandomWalker(0, 0, OccupancySet(), rng=Random(0), trail_preference=1.0)
        move = walker.choose_displacement()
        assert move in CARDINALS

    def test_invalid_preference_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration):
            RandomWalker(0, 0, OccupancySet(), trail_preference=1.5)


class TestWeightedWalker:
    def test_pool_contains_bias_copies(self) -> None:
        walker = WeightedWalker(0, 0, OccupancySet(), bias_direction=UP, bias_weight=3)
        assert len(walker.pool) == 7
        assert walker.pool.count(UP) == 4

    def test_bias_frequency(self) -> None:
        walker = WeightedWalker(0, 0, OccupancySet(), rng=Random(5), bias_weight=3)
        counts = Counter(walker.choose_displacement() for _ in range(7000))
        assert counts[RIGHT] / 7000 == pytest.approx(4 / 7, abs=0.03)
        assert counts[LEFT] / 7000 == pytest.approx(1 / 7, abs=0.03)

    def test_zero_weight_is_uniform_pool(self) -> None:
        walker = WeightedWalker(0, 0, OccupancySet(), bias_weight=0)
        assert walker.pool == CARDINALS

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration):
            WeightedWalker(0, 0, OccupancySet(), bias_weight=-1)

    def test_malformed_bias_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration):
            WeightedWalker(0, 0, OccupancySet(), bias_direction=(1, 0, 0))  # type: ignore[arg-type]


class TestCorridorWalker:
    def test_straight_run_without_turns(self) -> None:
        walker = CorridorWalker(0, 0, OccupancySet(), rng=Random(0), turn_chance=0.0)
        for _ in range(25):
            walker.step()
        assert walker.position == (25, 0)
        assert walker.visited == {(x, 0) for x in range(26)}

    def test_turns_when_cell_ahead_is_occupied(self) -> None:
        occupancy = OccupancySet([(1, 0)])
        walker = CorridorWalker(0, 0, occupancy, rng=Random(0), turn_chance=0.0)
        walker.step()
        assert walker.facing in (UP, DOWN)
        assert walker.position in ((0, -1), (0, 1))

    def test_always_turning_alternates_axis(self) -> None:
        walker = CorridorWalker(0, 0, OccupancySet(), rng=Random(2), turn_chance=1.0)
        previous = walker.facing
        for _ in range(20):
            walker.step()
            assert walker.facing[0] * previous[0] + walker.facing[1] * previous[1] == 0
            previous = walker.facing


class TestRoomExpander:
    def test_one_step_stamps_square(self) -> None:
        occupancy = OccupancySet()
        walker = RoomExpander(0, 0, occupancy, rng=_StillRandom(0), room_size=5)
        walker.step()
        expected = {(x, y) for x in range(-2, 3) for y in range(-2, 3)}
        assert walker.visited == expected
        assert occupancy.snapshot() == expected

    def test_square_is_centred_on_new_position(self) -> None:
        walker = RoomExpander(0, 0, OccupancySet(), rng=Random(4), room_size=3)
        walker.step()
        cx, cy = walker.position
        assert {(cx + dx, cy + dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)} <= walker.visited

    def test_moves_within_moore_neighbourhood(self) -> None:
        walker = RoomExpander(0, 0, OccupancySet(), rng=Random(9))
        for _ in range(50):
            x, y = walker.position
            walker.step()
            assert abs(walker.x - x) <= 1 and abs(walker.y - y) <= 1

    def test_room_size_one_carves_single_cell(self) -> None:
        occupancy = OccupancySet()
        walker = RoomExpander(0, 0, occupancy, rng=_StillRandom(0), room_size=1)
        walker.step()
        assert occupancy.snapshot() == {(0, 0)}

    @pytest.mark.parametrize("room_size", [0, -3])
    def test_non_positive_room_size_rejected(self, room_size: int) -> None:
        with pytest.raises(InvalidConfiguration, match="room_size"):
            RoomExpander(0, 0, OccupancySet(), room_size=room_size)


class TestZigZagWalker:
    def test_never_turning_goes_straight(self) -> None:
        walker = ZigZagWalker(0, 0, OccupancySet(), rng=Random(0), turn_chance=0.0)
        for _ in range(10):
            walker.step()
        assert walker.position == (10, 0)

    def test_unit_moves(self) -> None:
        walker = ZigZagWalker(0, 0, OccupancySet(), rng=Random(8))
        for _ in range(100):
            x, y = walker.position
            walker.step()
            assert abs(walker.x - x) + abs(walker.y - y) == 1


class TestChaoticClusterWalker:
    def test_stays_within_radius(self) -> None:
        walker = ChaoticClusterWalker(0, 0, OccupancySet(), rng=Random(1), cluster_radius=5)
        for _ in range(10_000):
            walker.step()
        assert all(abs(x) <= 5 and abs(y) <= 5 for x, y in walker.visited)

    def test_radius_is_relative_to_start(self) -> None:
        walker = ChaoticClusterWalker(-30, -30, OccupancySet(), rng=Random(2), cluster_radius=2)
        for _ in range(2000):
            walker.step()
        assert all(abs(x + 30) <= 2 and abs(y + 30) <= 2 for x, y in walker.visited)

    def test_radius_zero_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration, match="cluster_radius"):
            ChaoticClusterWalker(0, 0, OccupancySet(), cluster_radius=0)


class TestSpiralWalker:
    def test_first_ten_cells(self) -> None:
        walker = SpiralWalker(0, 0, OccupancySet())
        cells = []
        for _ in range(10):
            walker.step()
            cells.append(walker.position)
        assert cells == [
            (1, 0),
            (1, 1),
            (0, 1),
            (-1, 1),
            (-1, 0),
            (-1, -1),
            (0, -1),
            (1, -1),
            (2, -1),
            (2, 0),
        ]

    def test_run_lengths_grow_every_second_leg(self) -> None:
        walker = SpiralWalker(0, 0, OccupancySet())
        legs: list[int] = []
        current = 0
        last_direction = walker.direction_index
        for _ in range(2 + 4 + 6 + 8):
            walker.step()
            current += 1
            if walker.direction_index != last_direction:
                legs.append(current)
                current = 0
                last_direction = walker.direction_index
        assert legs == [1, 1, 2, 2, 3, 3, 4, 4]

    def test_never_revisits_a_cell(self) -> None:
        walker = SpiralWalker(7, 7, OccupancySet())
        for _ in range(400):
            walker.step()
        assert len(walker.visited) == 401


class TestDrunkenWalker:
    def test_forced_backtrack_negates_previous(self) -> None:
        walker = DrunkenWalker(0, 0, OccupancySet(), rng=Random(0), backtrack_chance=1.0)
        walker.previous_move = (1, 0)
        assert walker.choose_displacement() == (-1, 0)

    def test_no_backtrack_without_history(self) -> None:
        walker = DrunkenWalker(0, 0, OccupancySet(), rng=Random(0), backtrack_chance=1.0)
        walker.step()
        assert walker.previous_move in CARDINALS

    def test_forced_backtrack_oscillates(self) -> None:
        walker = DrunkenWalker(0, 0, OccupancySet(), rng=Random(0), backtrack_chance=1.0)
        walker.step()
        first = walker.position
        walker.step()
        assert walker.position == (0, 0)
        walker.step()
        assert walker.position == first


class TestWallHuggerWalker:
    def test_keeps_facing_through_open_ground(self) -> None:
        walker = WallHuggerWalker(0, 0, OccupancySet(), rng=Random(0), direction=DOWN)
        for _ in range(6):
            walker.step()
        assert walker.position == (0, 6)

    def test_follows_foreign_trail_when_blocked(self) -> None:
        occupancy = OccupancySet([(1, 0), (0, -1)])
        walker = WallHuggerWalker(0, 0, occupancy, rng=Random(0))
        walker.step()
        assert walker.position in ((1, 0), (0, -1))
        assert walker.facing in (RIGHT, UP)

    def test_ignores_own_trail_when_choosing(self) -> None:
        occupancy = OccupancySet()
        walker = WallHuggerWalker(0, 0, occupancy, rng=Random(0))
        walker.step()  # now at (1, 0), own trail behind
        occupancy.add((1, -1))  # someone else's cell above
        occupancy.add((2, 0))  # someone else's cell ahead blocks the run
        walker.step()
        assert walker.position in ((1, -1), (2, 0))

    def test_unconstrained_fallback(self) -> None:
        occupancy = OccupancySet()
        walker = WallHuggerWalker(0, 0, occupancy, rng=Random(0), direction=LEFT)
        occupancy.add((-1, 0))
        walker._visited.add((-1, 0))  # own trail ahead, no foreign neighbours
        walker.step()
        assert walker.facing in CARDINALS
        assert walker.position in {(0, -1), (0, 1), (-1, 0), (1, 0)}


class TestCreateWalker:
    def test_builds_every_kind(self) -> None:
        occupancy = OccupancySet()
        for kind, cls in WALKER_KINDS.items():
            walker = create_walker(kind, 0, 0, occupancy)
            assert isinstance(walker, cls)
            assert walker.kind == kind

    def test_kind_specific_params_forwarded(self) -> None:
        walker = create_walker("O", 0, 0, OccupancySet(), "purple", room_size=7)
        assert isinstance(walker, RoomExpander)
        assert walker.room_size == 7
        assert walker.color == "purple"

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration, match="Unknown walker kind"):
            create_walker("X", 0, 0, OccupancySet())

    def test_unknown_param_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration, match="Invalid parameters"):
            create_walker("S", 0, 0, OccupancySet(), room_size=3)

    def test_missing_set_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration):
            create_walker("R", 0, 0, None)  # type: ignore[arg-type]

    def test_nine_policies(self) -> None:
        assert set(WALKER_KINDS) == {"R", "W", "C", "O", "Z", "C2", "S", "D", "H"}
