from dataclasses import dataclass
from typing import Optional

# ----- Grid & window -----
GRID_W, GRID_H = 40, 40
CELL_SIZE = 20
WIDTH, HEIGHT = GRID_W * CELL_SIZE, GRID_H * CELL_SIZE

# ----- Colors -----
BG    = (0, 0, 0)
GREEN = (80, 200, 80)
HEAD  = (120, 240, 120)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

# ----- Directions (dx, dy), y grows downward -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Simulation -----
ORIGIN = (10, 10)          # where every new snake starts
MOVE_EVERY_MS = 100        # fixed tick period
FOOD_MAX_TRIES = 64        # random draws before sampling the free cells

@dataclass
class Config:
    seed: Optional[int] = None
    move_every_ms: int = MOVE_EVERY_MS
    grid_w: int = GRID_W
    grid_h: int = GRID_H

    def __post_init__(self):
        if self.grid_w <= 0 or self.grid_h <= 0:
            raise ValueError(f"Grid must be positive, got {self.grid_w}x{self.grid_h}")
        if self.move_every_ms < 0:
            raise ValueError(f"move_every_ms must be >= 0, got {self.move_every_ms}")

CFG = Config()
