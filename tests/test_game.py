"""
Tests for the simulation engine (src/snake/game.py) and grid helpers.
"""
import random

import pytest

from src.snake.config import Config, ORIGIN, UP, DOWN, LEFT, RIGHT, MOVE_EVERY_MS
from src.snake.game import GameState, new_game_state, set_heading, spawn_food, step_game
from src.snake.grid import in_bounds, offset, is_opposite, all_cells


def make_state(snake, direction=RIGHT, food=(0, 0), width=5, height=5, seed=0):
    return GameState(
        snake=list(snake),
        direction=direction,
        pending=direction,
        food=food,
        score=0,
        last_move=0,
        move_every_ms=MOVE_EVERY_MS,
        width=width,
        height=height,
        rng=random.Random(seed),
    )


class TestGrid:

    def test_in_bounds_corners(self):
        assert in_bounds(0, 0, 5, 5)
        assert in_bounds(4, 4, 5, 5)
        assert not in_bounds(5, 0, 5, 5)
        assert not in_bounds(0, 5, 5, 5)

    def test_negative_cells_are_off_grid(self):
        assert not in_bounds(-1, 0, 5, 5)
        assert not in_bounds(0, -1, 5, 5)

    def test_offset_is_signed(self):
        assert offset((0, 0), LEFT) == (-1, 0)
        assert offset((0, 0), UP) == (0, -1)
        assert offset((2, 3), DOWN) == (2, 4)

    def test_opposites(self):
        assert is_opposite(UP, DOWN)
        assert is_opposite(LEFT, RIGHT)
        assert not is_opposite(UP, LEFT)
        assert not is_opposite(RIGHT, RIGHT)

    def test_all_cells_covers_grid(self):
        cells = list(all_cells(3, 2))
        assert len(cells) == 6
        assert len(set(cells)) == 6
        assert all(in_bounds(x, y, 3, 2) for x, y in cells)


class TestNewGame:

    def test_initial_state(self):
        state = new_game_state(1234, Config(seed=7))
        assert state.snake == [ORIGIN]
        assert state.direction == RIGHT
        assert state.pending == RIGHT
        assert state.score == 0
        assert state.last_move == 1234
        assert state.alive is True
        assert state.food is not None
        assert state.food != ORIGIN

    def test_origin_is_clamped_into_small_grids(self):
        state = new_game_state(0, Config(grid_w=5, grid_h=3, seed=1))
        assert state.snake == [(4, 2)]
        assert in_bounds(*state.food, 5, 3)

    def test_same_seed_same_food(self):
        a = new_game_state(0, Config(seed=42))
        b = new_game_state(0, Config(seed=42))
        assert a.food == b.food

    def test_config_rejects_empty_grid(self):
        with pytest.raises(ValueError):
            Config(grid_w=0)


class TestSetHeading:

    def test_reverse_is_ignored(self):
        state = make_state([(2, 2)], direction=RIGHT)
        set_heading(state, LEFT)
        assert state.pending == RIGHT

    @pytest.mark.parametrize("heading", [UP, DOWN, RIGHT])
    def test_same_or_perpendicular_is_accepted(self, heading):
        state = make_state([(2, 2)], direction=RIGHT)
        set_heading(state, heading)
        assert state.pending == heading

    def test_fast_keys_between_ticks_cannot_reverse(self):
        state = make_state([(2, 2), (1, 2)], direction=RIGHT)
        set_heading(state, UP)
        set_heading(state, LEFT)  # opposite of the heading actually applied
        assert state.pending == UP

    def test_guard_follows_applied_heading(self):
        state = make_state([(2, 2)], direction=RIGHT, food=(4, 4))
        set_heading(state, UP)
        assert step_game(state, 100)
        assert state.direction == UP
        set_heading(state, DOWN)
        assert state.pending == UP
        set_heading(state, LEFT)
        assert state.pending == LEFT

    def test_unknown_heading_raises(self):
        state = make_state([(2, 2)])
        with pytest.raises(ValueError):
            set_heading(state, (1, 1))


class TestStep:

    def test_no_move_before_interval(self):
        state = make_state([(2, 2)], food=(4, 4))
        assert step_game(state, MOVE_EVERY_MS - 1)
        assert state.snake == [(2, 2)]
        assert state.last_move == 0

    def test_eat_food_grows_and_scores(self):
        state = make_state([(2, 2)], direction=RIGHT, food=(3, 2))
        assert step_game(state, 100)
        assert state.snake == [(3, 2), (2, 2)]
        assert state.score == 1
        assert state.food != (3, 2)
        assert state.food not in state.snake
        assert state.last_move == 100

    def test_move_without_food_keeps_length(self):
        state = make_state(
            [(5, 5), (4, 5), (3, 5), (2, 5)], direction=RIGHT, food=(9, 9),
            width=10, height=10,
        )
        assert step_game(state, 100)
        assert state.snake == [(6, 5), (5, 5), (4, 5), (3, 5)]
        assert state.score == 0
        assert state.food == (9, 9)

    def test_left_wall_at_zero_is_a_collision(self):
        state = make_state([(0, 2), (1, 2)], direction=LEFT, food=(4, 4))
        assert not step_game(state, 100)
        assert state.alive is False
        assert state.death_reason == "wall"
        assert state.snake == [(0, 2), (1, 2)]

    def test_top_wall_at_zero_is_a_collision(self):
        state = make_state([(2, 0)], direction=UP, food=(4, 4))
        assert not step_game(state, 100)
        assert state.death_reason == "wall"
        assert state.snake == [(2, 0)]

    @pytest.mark.parametrize("head,direction", [((4, 2), RIGHT), ((2, 4), DOWN)])
    def test_far_walls(self, head, direction):
        state = make_state([head], direction=direction, food=(0, 0))
        assert not step_game(state, 100)
        assert state.death_reason == "wall"

    def test_self_collision(self):
        body = [(2, 2), (3, 2), (3, 3), (2, 3), (1, 3)]
        state = make_state(body, direction=LEFT, food=(0, 0))
        set_heading(state, DOWN)
        assert not step_game(state, 100)
        assert state.death_reason == "self"
        assert state.snake == body
        assert state.direction == LEFT

    def test_nothing_changes_after_collision(self):
        state = make_state([(4, 2)], direction=RIGHT, food=(0, 0))
        assert not step_game(state, 100)
        set_heading(state, UP)
        assert not step_game(state, 1000)
        assert state.snake == [(4, 2)]
        assert state.food == (0, 0)
        assert state.score == 0
        assert state.last_move == 0

    def test_board_full_ends_the_game(self):
        state = make_state([(0, 0)], direction=RIGHT, food=(1, 0), width=2, height=1)
        assert not step_game(state, 100)
        assert state.death_reason == "board_full"
        assert state.score == 1
        assert state.snake == [(1, 0), (0, 0)]
        assert state.food is None


class TestSpawnFood:

    def test_never_on_snake(self):
        rng = random.Random(3)
        snake = [(x, 0) for x in range(5)] + [(x, 1) for x in range(5)]
        for _ in range(200):
            food = spawn_food(snake, 5, 3, rng)
            assert food not in snake
            assert in_bounds(*food, 5, 3)

    def test_single_free_cell_is_found(self):
        snake = [c for c in all_cells(4, 4) if c != (2, 3)]
        assert spawn_food(snake, 4, 4, random.Random(0)) == (2, 3)

    def test_full_board_returns_none(self):
        snake = list(all_cells(3, 3))
        assert spawn_food(snake, 3, 3, random.Random(0)) is None
