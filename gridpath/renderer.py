"""
Pygame renderer: paints the grid, walls, endpoints and path onto a surface.
"""

from __future__ import annotations
import logging
from typing import Iterable, TYPE_CHECKING

import numpy as np
import pygame

from .config import (
    CELL_SIZE,
    FREE_COLOR,
    WALL_COLOR,
    PATH_COLOR,
    START_COLOR,
    GOAL_COLOR,
    GRID_LINE_COLOR,
)

if TYPE_CHECKING:
    from .grid import Grid

logger = logging.getLogger(__name__)


def grid_to_rgb(
    grid: Grid,
    track: Iterable = (),
    start=None,
    goal=None,
) -> np.ndarray:
    """
    Build an RGB image of the grid with one pixel per cell.
    Returns a uint8 array of shape (height, width, 3).
    """
    occ = grid.occupancy()
    image = np.empty((grid.height, grid.width, 3), dtype=np.uint8)
    image[...] = FREE_COLOR
    image[occ] = WALL_COLOR
    for x, y in track:
        if grid.within((x, y)):
            image[y, x] = PATH_COLOR
    # Endpoints are drawn last so they stay visible on top of the path
    if start is not None and grid.within(start):
        image[start[1], start[0]] = START_COLOR
    if goal is not None and grid.within(goal):
        image[goal[1], goal[0]] = GOAL_COLOR
    return image


class GridRenderer:
    """Scales the per-cell image to screen pixels and draws cell borders."""

    def __init__(self, cell_size: int = CELL_SIZE) -> None:
        self.cell_size = cell_size

    def window_size(self, grid: Grid):
        return grid.width * self.cell_size, grid.height * self.cell_size

    def render(
        self,
        surface: pygame.Surface,
        grid: Grid,
        track: Iterable = (),
        start=None,
        goal=None,
    ) -> None:
        expected = self.window_size(grid)
        if surface.get_size() != expected:
            logger.error(
                "Surface size %s does not match grid size %s",
                surface.get_size(),
                expected,
            )
            raise ValueError(
                f"Surface must be {expected[0]}x{expected[1]} pixels"
            )
        image = grid_to_rgb(grid, track, start, goal)
        # Upscale each cell to a cell_size x cell_size block
        scaled = np.repeat(
            np.repeat(image, self.cell_size, axis=0), self.cell_size, axis=1
        )
        # surfarray is indexed [x][y]
        pygame.surfarray.blit_array(surface, scaled.transpose(1, 0, 2))
        self._draw_lines(surface, grid)

    def _draw_lines(self, surface: pygame.Surface, grid: Grid) -> None:
        width_px, height_px = self.window_size(grid)
        for x in range(1, grid.width):
            px = x * self.cell_size
            pygame.draw.line(surface, GRID_LINE_COLOR, (px, 0), (px, height_px - 1))
        for y in range(1, grid.height):
            py = y * self.cell_size
            pygame.draw.line(surface, GRID_LINE_COLOR, (0, py), (width_px - 1, py))
