# grid.py
from typing import Iterator, Tuple

from .config import GRID_W, GRID_H

Cell = Tuple[int, int]


def in_bounds(x: int, y: int, width: int = GRID_W, height: int = GRID_H) -> bool:
    """Check if a cell is inside the grid."""
    return 0 <= x < width and 0 <= y < height


def offset(cell: Cell, direction: Tuple[int, int]) -> Cell:
    """
    Move one cell in 'direction'. Signed on purpose: stepping past the
    top/left edge gives -1, which in_bounds() rejects like the far edges.
    """
    return (cell[0] + direction[0], cell[1] + direction[1])


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def all_cells(width: int = GRID_W, height: int = GRID_H) -> Iterator[Cell]:
    for y in range(height):
        for x in range(width):
            yield (x, y)
