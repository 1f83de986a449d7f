from __future__ import annotations
import logging
import random
from typing import List, Optional, TYPE_CHECKING

import pygame

from .config import FPS, WINDOW_CAPTION, DEFAULT_WALL_COUNT
from .grid import Cell
from .input_handler import InputHandler
from .obstacles import generate_walls
from .pathfinding import SearchResult, search, reconstruct
from .renderer import GridRenderer

if TYPE_CHECKING:
    from .grid import Grid

logger = logging.getLogger(__name__)


class Viewer:
    """Pygame window showing a grid and the A* path between two cells."""

    def __init__(
        self,
        grid: Grid,
        start,
        goal,
        rng: Optional[random.Random] = None,
        wall_count: int = DEFAULT_WALL_COUNT,
        clock: Optional[pygame.time.Clock] = None,
    ) -> None:
        pygame.init()
        self.grid = grid
        self.start = Cell(*start)
        self.goal = Cell(*goal)
        self.rng = rng or random.Random()
        self.wall_count = wall_count
        self.renderer = GridRenderer()
        self.screen = pygame.display.set_mode(self.renderer.window_size(grid))
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.input = InputHandler()
        self.result: Optional[SearchResult] = None
        self.path: List[Cell] = []
        self.running = True
        self.solve()

    def solve(self) -> None:
        """Search the current grid and update the path and window caption."""
        self.result = search(self.grid, self.start, self.goal)
        if self.result:
            self.path = reconstruct(self.start, self.goal, self.result.came_from)
            caption = f"{WINDOW_CAPTION} - total cost {self.result.cost}"
        else:
            self.path = []
            caption = f"{WINDOW_CAPTION} - no path"
        pygame.display.set_caption(caption)

    def regenerate(self) -> None:
        """Replace every wall with a fresh random layout and search again."""
        self.grid.unset_walls()
        self.grid.set_walls(
            generate_walls(
                self.grid.width, self.grid.height, self.wall_count, self.rng
            )
        )
        logger.info("Regenerated walls: %d cells", len(self.grid.walls))
        self.solve()

    def handle_events(self) -> None:
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
        elif self.input.regenerate_pressed():
            self.regenerate()

    def render(self) -> None:
        self.renderer.render(
            self.screen, self.grid, self.path, self.start, self.goal
        )
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: handle events and redraw until the window is closed."""
        while self.running:
            self.clock.tick(self.fps)
            self.handle_events()
            self.render()
        pygame.quit()
