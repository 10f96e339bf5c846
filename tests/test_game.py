"""Tests for gridsnake.game - the movement engine."""

import random

from conftest import make_state
from gridsnake.config import DELTA, Config, Direction, OPPOSITE
from gridsnake.game import Outcome, advance, new_game_state
from gridsnake.grid import Cell


def assert_consistent(state):
    """Body is in bounds, distinct, and matches the grid's snake cells."""
    body = list(state.body)
    assert len(body) >= 1
    assert len(set(body)) == len(body)
    assert all(state.grid.in_bounds(p) for p in body)
    assert sorted(state.grid.positions_of(Cell.SNAKE)) == sorted(body)
    assert state.grid.count(Cell.FOOD) <= 1


class TestNewGameState:
    def test_fresh_state(self):
        cfg = Config(grid_size=10, initial_position=(4, 4))
        state = new_game_state(cfg, random.Random(0))
        assert list(state.body) == [(4, 4)]
        assert state.outcome is None
        assert state.food is not None and state.food != (4, 4)
        assert state.grid.positions_of(Cell.FOOD) == [state.food]
        assert_consistent(state)

    def test_single_cell_board_starts_full(self):
        """No free cell for food: the game is already won, the placer is never called."""
        state = new_game_state(Config(grid_size=1, initial_position=(0, 0)))
        assert list(state.body) == [(0, 0)]
        assert state.food is None
        assert state.outcome is Outcome.FULL
        assert state.grid.count(Cell.FOOD) == 0
        assert advance(state, Direction.UP) is False
        assert state.outcome is Outcome.FULL

    def test_seed_from_config(self):
        cfg = Config(grid_size=10, initial_position=(4, 4), seed=11)
        assert new_game_state(cfg).food == new_game_state(cfg).food


class TestCollisions:
    def test_wall_collision(self):
        """Size 5, head at (0, 2), heading left leaves the board."""
        state = make_state(5, [(0, 2)])
        assert advance(state, Direction.LEFT) is False
        assert state.outcome is Outcome.WALL
        assert list(state.body) == [(0, 2)]

    def test_wall_collision_on_every_edge(self):
        for head, direction in [((2, 0), Direction.UP), ((4, 2), Direction.RIGHT),
                                ((2, 4), Direction.DOWN)]:
            state = make_state(5, [head])
            assert advance(state, direction) is False
            assert state.outcome is Outcome.WALL

    def test_self_collision_closed_loop(self):
        """Moving into the tail of a closed loop counts as a collision."""
        state = make_state(6, [(2, 2), (2, 3), (3, 3), (3, 2)])
        assert advance(state, Direction.RIGHT) is False
        assert state.outcome is Outcome.SELF
        assert list(state.body) == [(2, 2), (2, 3), (3, 3), (3, 2)]
        assert_consistent(state)


class TestMovement:
    def test_normal_move_keeps_length(self):
        state = make_state(10, [(5, 5), (5, 6), (5, 7)], food=(0, 0))
        assert advance(state, Direction.UP) is True
        assert list(state.body) == [(5, 4), (5, 5), (5, 6)]
        assert state.grid.at((5, 7)) is Cell.EMPTY
        assert state.food == (0, 0)
        assert_consistent(state)

    def test_food_consumption(self):
        state = make_state(10, [(5, 5)], food=(5, 6))
        assert advance(state, Direction.DOWN) is True
        assert list(state.body) == [(5, 6), (5, 5)]
        assert state.food not in state.body
        assert state.grid.positions_of(Cell.FOOD) == [state.food]
        assert_consistent(state)

    def test_filling_the_board_ends_the_game(self):
        state = make_state(2, [(0, 0), (0, 1), (1, 1)], food=(1, 0))
        assert advance(state, Direction.RIGHT) is False
        assert state.outcome is Outcome.FULL
        assert state.food is None
        assert state.length == 4
        assert state.grid.count(Cell.SNAKE) == 4


class TestRandomPlay:
    def test_invariants_hold_through_random_games(self):
        """Every reachable body stays in bounds, distinct and on the grid."""
        rng = random.Random(1234)
        cfg = Config(grid_size=8, initial_position=(4, 4))
        for game in range(20):
            state = new_game_state(cfg, random.Random(game))
            direction = Direction.UP
            while True:
                requested = rng.choice(list(Direction))
                if requested is not OPPOSITE[direction]:
                    direction = requested
                dx, dy = DELTA[direction]
                nxt = (state.head[0] + dx, state.head[1] + dy)
                ate = state.grid.in_bounds(nxt) and state.grid.at(nxt) is Cell.FOOD
                before = state.length
                if not advance(state, direction):
                    break
                assert state.length == before + (1 if ate else 0)
                assert state.grid.count(Cell.FOOD) == 1
                assert state.food not in state.body
                assert_consistent(state)
            assert state.outcome in (Outcome.WALL, Outcome.SELF, Outcome.FULL)
