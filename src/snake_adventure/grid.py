# grid.py
from typing import Tuple

from .config import GRID_W, GRID_H

Cell = Tuple[int, int]
Direction = Tuple[int, int]


def in_bounds(cell: Cell, width: int = GRID_W, height: int = GRID_H) -> bool:
    """Check if a cell is inside the grid."""
    x, y = cell
    return 0 <= x < width and 0 <= y < height


def step(cell: Cell, direction: Direction) -> Cell:
    """Translate a cell by one unit in 'direction' (no bounds check)."""
    return (cell[0] + direction[0], cell[1] + direction[1])
