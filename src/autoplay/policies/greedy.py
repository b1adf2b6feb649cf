import numpy as np # type: ignore
from src.snake.config import UP, DOWN, LEFT, RIGHT, DIRECTIONS
from src.snake.game import GameState
from src.snake.grid import in_bounds, offset, is_opposite
from src.autoplay.policies.random import policy_random


def best_move_toward_food(hx: int, hy: int, fx: int, fy: int):
    """
    Returns a preference ordering of moves that reduce Manhattan distance to food.
    Does NOT check collisions; caller should filter unsafe moves.
    """
    prefs = []
    if fx < hx:
        prefs.append(LEFT)
    elif fx > hx:
        prefs.append(RIGHT)
    if fy < hy:
        prefs.append(UP)
    elif fy > hy:
        prefs.append(DOWN)
    # Orthogonal options last, so the caller still has moves when the
    # preferred axis is blocked.
    for d in DIRECTIONS:
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def is_safe(state: GameState, direction) -> bool:
    """True if moving the head one cell in 'direction' survives the next tick."""
    nx, ny = offset(state.snake[0], direction)
    if not in_bounds(nx, ny, state.width, state.height):
        return False
    return (nx, ny) not in state.snake


def policy_greedy(state: GameState, rng: np.random.Generator):
    """
    Greedy on food distance with simple safety:
    - prefer headings that reduce Manhattan distance
    - never propose a 180° turn (the engine would drop it anyway)
    - skip any heading that would hit a wall or the body
    - if every heading is fatal, fall back to random (we're boxed in)
    """
    hx, hy = state.snake[0]
    if state.food is None:
        prefs = list(DIRECTIONS)
    else:
        prefs = best_move_toward_food(hx, hy, state.food[0], state.food[1])

    for d in prefs:
        if is_opposite(d, state.direction):
            continue
        if is_safe(state, d):
            return d

    return policy_random(state, rng)
