"""
Grid model: fixed-size coordinate space with a set of impassable walls.
"""

from __future__ import annotations
from typing import FrozenSet, Iterable, List, NamedTuple, Set

import numpy as np


class Cell(NamedTuple):
    """Single grid position; x grows east, y grows south."""

    x: int
    y: int


# Neighbour offsets in expansion order: east, south, west, north
NEIGHBOUR_OFFSETS = ((1, 0), (0, 1), (-1, 0), (0, -1))


class Grid:
    """Rectangular grid of width x height cells with an obstacle set."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(
                f"Grid dimensions must be positive, got {width}x{height}"
            )
        self._width = int(width)
        self._height = int(height)
        self._walls: Set[Cell] = set()

    def __repr__(self) -> str:
        return (
            f"<Grid {self._width}x{self._height} walls={len(self._walls)}>"
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def walls(self) -> FrozenSet[Cell]:
        """Snapshot of the current obstacle cells."""
        return frozenset(self._walls)

    def within(self, cell) -> bool:
        """Return True if cell lies inside [0, width) x [0, height)."""
        x, y = cell
        return 0 <= x < self._width and 0 <= y < self._height

    def operational(self, cell) -> bool:
        """Return True if cell is not a wall. Bounds are not checked."""
        return Cell(*cell) not in self._walls

    def passable(self, cell) -> bool:
        return self.within(cell) and self.operational(cell)

    def neighbours(self, cell) -> List[Cell]:
        """
        Orthogonal neighbours of cell that are inside the grid and not walls,
        always in the order east, south, west, north.
        """
        x, y = cell
        result = []
        for dx, dy in NEIGHBOUR_OFFSETS:
            nb = Cell(x + dx, y + dy)
            if self.within(nb) and self.operational(nb):
                result.append(nb)
        return result

    def set_walls(self, cells: Iterable) -> None:
        """
        Mark cells as walls. Duplicates collapse and cells outside the grid
        are dropped so every stored wall stays in bounds.
        """
        for cell in cells:
            if self.within(cell):
                self._walls.add(Cell(*cell))

    def unset_walls(self) -> None:
        """Remove every wall."""
        self._walls.clear()

    def occupancy(self) -> np.ndarray:
        """Boolean array indexed [y][x], True where a wall is."""
        occ = np.zeros((self._height, self._width), dtype=bool)
        for x, y in self._walls:
            occ[y, x] = True
        return occ
