"""
Pathfinding utilities: implements grid-based A* search.
"""
from __future__ import annotations
import heapq
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, TYPE_CHECKING

from .config import STEP_COST
from .grid import Cell

if TYPE_CHECKING:
    from .grid import Grid

logger = logging.getLogger(__name__)


class NoPathError(LookupError):
    """Raised when a path is reconstructed for a goal that was never reached."""


@dataclass
class SearchResult:
    """
    Outcome of a single A* search.
    found: whether the goal was reached.
    cost: total step cost of the best path, 0 when not found.
    came_from: predecessor of every relaxed cell.
    costs: best known cost from start of every relaxed cell.
    expanded: number of cells taken off the frontier and expanded.
    """

    found: bool
    cost: int = 0
    came_from: Dict[Cell, Cell] = field(default_factory=dict)
    costs: Dict[Cell, int] = field(default_factory=dict)
    expanded: int = 0

    def __bool__(self) -> bool:
        return self.found


def heuristic(a, b) -> int:
    """Manhattan distance heuristic for grid."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def search(
    grid: Grid,
    start,
    goal,
    on_relax: Optional[Callable[[Cell, int], None]] = None,
) -> SearchResult:
    """
    Run A* on grid from start to goal with unit step costs.
    Endpoints outside the grid or on a wall yield a not-found result
    immediately. on_relax(cell, cost) is called whenever a cell receives a
    strictly lower cost.
    Frontier entries are ordered by priority, equal priorities pop in
    insertion order.
    """
    start = Cell(*start)
    goal = Cell(*goal)

    if not (grid.passable(start) and grid.passable(goal)):
        logger.debug("Endpoint %s or %s is off-grid or blocked", start, goal)
        return SearchResult(found=False)

    # Open set as a priority queue of (f_score, count, node)
    open_set = [(0, 0, start)]
    count = 0
    # G cost from start to node
    costs: Dict[Cell, int] = {start: 0}
    came_from: Dict[Cell, Cell] = {}
    # Expanded nodes; a repeated pop cannot improve anything under a
    # consistent heuristic
    closed = set()

    while open_set:
        _, _, current = heapq.heappop(open_set)
        if current == goal:
            logger.debug(
                "Reached %s with cost %d after %d expansions",
                goal,
                costs[goal],
                len(closed),
            )
            return SearchResult(
                found=True,
                cost=costs[goal],
                came_from=came_from,
                costs=costs,
                expanded=len(closed),
            )

        if current in closed:
            continue
        closed.add(current)

        for nb in grid.neighbours(current):
            tentative = costs[current] + STEP_COST
            if nb not in costs or tentative < costs[nb]:
                costs[nb] = tentative
                count += 1
                heapq.heappush(
                    open_set, (tentative + heuristic(nb, goal), count, nb)
                )
                came_from[nb] = current
                if on_relax is not None:
                    on_relax(nb, tentative)

    # Frontier exhausted
    logger.debug(
        "No path from %s to %s after %d expansions", start, goal, len(closed)
    )
    return SearchResult(
        found=False, came_from=came_from, costs=costs, expanded=len(closed)
    )


def reconstruct(start, goal, came_from: Dict[Cell, Cell]) -> List[Cell]:
    """
    Walk predecessor links back from goal to start.
    Returns the path as a list from start to goal inclusive.
    Raises NoPathError if the chain is broken or loops.
    """
    start = Cell(*start)
    current = Cell(*goal)
    path = [current]
    # A valid chain never visits more cells than there are links
    for _ in range(len(came_from) + 1):
        if current == start:
            path.reverse()
            return path
        try:
            current = came_from[current]
        except KeyError:
            raise NoPathError(
                f"No predecessor recorded for {current}; "
                f"{goal} is not reachable from {start}"
            ) from None
        path.append(current)
    raise NoPathError(f"Predecessor chain from {goal} never reaches {start}")


def find_path(grid: Grid, start, goal) -> List[Cell]:
    """
    Find a path on grid from start to goal using A*.
    Returns list of Cells from start to goal inclusive, or empty list if no path.
    """
    result = search(grid, start, goal)
    if not result:
        return []
    return reconstruct(start, goal, result.came_from)
