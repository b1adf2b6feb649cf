# game.py
from dataclasses import dataclass, field
from typing import List, Tuple, Optional
import logging
import random

from .config import (
    ORIGIN, RIGHT, DIRECTIONS, FOOD_MAX_TRIES,
    CFG, Config,
)
from .grid import in_bounds, offset, is_opposite, all_cells

logger = logging.getLogger(__name__)

# ---------- Helpers ----------
def spawn_food(
    snake: List[Tuple[int, int]],
    width: int,
    height: int,
    rng: random.Random,
) -> Optional[Tuple[int, int]]:
    """
    Pick a random free cell. Rejection sampling is fast while the board is
    mostly empty; after FOOD_MAX_TRIES misses we sample from the explicit
    list of free cells instead. Returns None only if the board is full.
    """
    occupied = set(snake)
    for _ in range(FOOD_MAX_TRIES):
        fx = rng.randrange(width)
        fy = rng.randrange(height)
        if (fx, fy) not in occupied:
            return (fx, fy)

    free = [c for c in all_cells(width, height) if c not in occupied]
    if not free:
        return None
    return rng.choice(free)

def start_cell(width: int, height: int) -> Tuple[int, int]:
    """ORIGIN, pulled inside the grid when the grid is smaller than it."""
    return (min(ORIGIN[0], width - 1), min(ORIGIN[1], height - 1))

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Tuple[int, int]]   # head at index 0
    direction: Tuple[int, int]     # heading applied on the last tick
    pending: Tuple[int, int]       # heading for the next tick
    food: Optional[Tuple[int, int]]
    score: int
    last_move: int                 # ms timestamp of last step
    move_every_ms: int = CFG.move_every_ms
    width: int = CFG.grid_w
    height: int = CFG.grid_h
    alive: bool = True
    death_reason: Optional[str] = None   # "wall", "self" or "board_full"
    rng: random.Random = field(default_factory=random.Random, repr=False)

def new_game_state(
    now_ms: int,
    cfg: Config = CFG,
    rng: Optional[random.Random] = None,
) -> GameState:
    if rng is None:
        rng = random.Random(cfg.seed)
    snake = [start_cell(cfg.grid_w, cfg.grid_h)]
    food = spawn_food(snake, cfg.grid_w, cfg.grid_h, rng)
    logger.debug("New game: head=%s food=%s", snake[0], food)
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=food,
        score=0,
        last_move=now_ms,
        move_every_ms=cfg.move_every_ms,
        width=cfg.grid_w,
        height=cfg.grid_h,
        rng=rng,
    )

# ---------- Input / Update ----------
def set_heading(state: GameState, requested: Tuple[int, int]) -> None:
    """
    Queue a heading for the next tick. A request opposite to the heading
    used on the last tick is silently dropped (no 180° turns), so any
    number of key presses between two ticks can't reverse the snake.
    """
    if requested not in DIRECTIONS:
        raise ValueError(f"Unknown heading: {requested}")
    if not is_opposite(requested, state.direction):
        state.pending = requested

def step_game(state: GameState, now_ms: int) -> bool:
    """
    Advance the game by one tick if move_every_ms has elapsed.
    Returns True if alive, False if game over.
    """
    if not state.alive:
        return False
    if now_ms - state.last_move < state.move_every_ms:
        return True  # not time to move yet

    nx, ny = offset(state.snake[0], state.pending)

    # Wall collision
    if not in_bounds(nx, ny, state.width, state.height):
        state.alive = False
        state.death_reason = "wall"
        logger.info("Hit the wall at (%d, %d), score=%d", nx, ny, state.score)
        return False

    new_head = (nx, ny)

    # Self collision
    if new_head in state.snake:
        state.alive = False
        state.death_reason = "self"
        logger.info("Hit own body at %s, score=%d", new_head, state.score)
        return False

    state.direction = state.pending

    # Move / grow
    if new_head == state.food:
        state.snake.insert(0, new_head)
        state.score += 1
        state.food = spawn_food(state.snake, state.width, state.height, state.rng)
        logger.debug("Ate food at %s, score=%d, next food=%s", new_head, state.score, state.food)
        if state.food is None:
            state.alive = False
            state.death_reason = "board_full"
            logger.info("Board full, score=%d", state.score)
            return False
    else:
        state.snake.insert(0, new_head)
        state.snake.pop()

    state.last_move = now_ms
    return True
