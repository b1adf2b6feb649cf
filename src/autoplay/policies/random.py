import numpy as np # type: ignore
from src.snake.config import DIRECTIONS
from src.snake.game import GameState


def policy_random(state: GameState, rng: np.random.Generator):
    """
    Random policy: pick a uniformly random heading.
    Reversals are simply ignored by the engine, so this dies fast.
    """
    return DIRECTIONS[rng.integers(len(DIRECTIONS))]
