"""
Random obstacle generation: places axis-aligned wall rectangles on a grid.
"""
from __future__ import annotations
import random
from typing import List, Optional

from .config import DEFAULT_WALL_COUNT
from .grid import Cell


def add_rectangle(
    cells: List[Cell], x_start: int, x_end: int, y_start: int, y_end: int
) -> None:
    """Append every cell of the inclusive rectangle; reversed bounds are swapped."""
    if x_start > x_end:
        x_start, x_end = x_end, x_start
    if y_start > y_end:
        y_start, y_end = y_end, y_start
    for x in range(x_start, x_end + 1):
        for y in range(y_start, y_end + 1):
            cells.append(Cell(x, y))


def generate_walls(
    width: int,
    height: int,
    number: int = DEFAULT_WALL_COUNT,
    rng: Optional[random.Random] = None,
) -> List[Cell]:
    """
    Generate `number` random wall rectangles for a width x height grid.
    Each rectangle has its corner inside the grid and spans up to a third of
    the grid on each axis, so it may overhang the far edges.
    rng: random source; pass a seeded random.Random for reproducible walls.
    """
    rng = rng or random.Random()
    max_w = max(1, width // 3)
    max_h = max(1, height // 3)
    cells: List[Cell] = []
    for _ in range(number):
        x1 = rng.randint(0, width - 1)
        x2 = x1 + rng.randint(1, max_w)
        y1 = rng.randint(0, height - 1)
        y2 = y1 + rng.randint(1, max_h)
        add_rectangle(cells, x1, x2, y1, y2)
    return cells
