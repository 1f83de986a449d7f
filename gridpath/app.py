"""
Command-line front end: gathers the grid parameters, runs the search and
shows the result on the console or in a pygame window.
"""

from __future__ import annotations
import argparse
import logging
import random
from typing import Callable, Optional, Sequence

from .config import EXIT_OK
from .grid import Cell, Grid
from .obstacles import generate_walls
from .pathfinding import search, reconstruct
from .prompt import (
    InputError,
    read_int,
    read_cell,
    validate_dimensions,
    validate_endpoints,
)
from .text_renderer import render_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find a shortest path on a grid with random walls using A*."
    )
    parser.add_argument("--width", type=int, help="Grid width in cells")
    parser.add_argument("--height", type=int, help="Grid height in cells")
    parser.add_argument(
        "--walls",
        type=int,
        help="Number of random wall rectangles",
    )
    parser.add_argument(
        "--start", type=int, nargs=2, metavar=("X", "Y"), help="Start cell"
    )
    parser.add_argument(
        "--goal", type=int, nargs=2, metavar=("X", "Y"), help="Goal cell"
    )
    parser.add_argument(
        "--seed", type=int, help="Seed for reproducible wall placement"
    )
    parser.add_argument(
        "--gui", action="store_true", help="Show the result in a pygame window"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def run(
    args: argparse.Namespace,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[..., None] = print,
) -> int:
    """Execute one session and return the process exit code."""
    width = args.width if args.width is not None else read_int("Width", 0, input_fn)
    height = (
        args.height if args.height is not None else read_int("Height", 0, input_fn)
    )
    wall_count = (
        args.walls if args.walls is not None
        else read_int("How many walls", 0, input_fn)
    )
    validate_dimensions(width, height)

    rng = random.Random(args.seed)
    grid = Grid(width, height)
    grid.set_walls(generate_walls(width, height, wall_count, rng))
    print_fn(render_text(grid), end="")

    start = Cell(*args.start) if args.start else read_cell("Start", input_fn)
    goal = Cell(*args.goal) if args.goal else read_cell("Goal", input_fn)
    print_fn("\n")
    validate_endpoints(start, goal)

    if args.gui:
        from .viewer import Viewer

        Viewer(grid, start, goal, rng=rng, wall_count=wall_count).run()
        return EXIT_OK

    result = search(grid, start, goal)
    if result:
        track = reconstruct(start, goal, result.came_from)
        print_fn(render_text(grid, track), end="")
        print_fn(f"Total cost: {result.cost}")
    else:
        print_fn("Couldn't find track from 'start' to 'goal'.")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except InputError as e:
        logger.error("%s", e)
        return e.exit_code
