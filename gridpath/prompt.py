"""
Console input acquisition: reads grid dimensions, wall count and endpoints.
"""
from __future__ import annotations
import logging
from typing import Callable

from .config import MIN_GRID_SIZE, EXIT_GRID_TOO_SMALL, EXIT_SAME_ENDPOINTS
from .grid import Cell

logger = logging.getLogger(__name__)


class InputError(ValueError):
    """Invalid user input that ends the program with a specific exit code."""

    exit_code = 1


class GridTooSmallError(InputError):
    exit_code = EXIT_GRID_TOO_SMALL


class SameEndpointsError(InputError):
    exit_code = EXIT_SAME_ENDPOINTS


def read_int(
    label: str,
    minimum: int = 0,
    input_fn: Callable[[str], str] = input,
) -> int:
    """Prompt until the user enters an integer >= minimum."""
    while True:
        raw = input_fn(f"{label}: ")
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning("Not an integer: %r", raw)
            continue
        if value < minimum:
            logger.warning("%s must be at least %d, got %d", label, minimum, value)
            continue
        return value


def read_cell(
    label: str, input_fn: Callable[[str], str] = input
) -> Cell:
    """Prompt until the user enters two non-negative integers 'x y' or 'x, y'."""
    while True:
        raw = input_fn(f"{label} coordinates [x, y]: ")
        parts = raw.replace(",", " ").split()
        try:
            x, y = (int(p) for p in parts)
        except ValueError:
            logger.warning("Expected two integers, got %r", raw)
            continue
        if x < 0 or y < 0:
            logger.warning("Coordinates must be non-negative, got %r", raw)
            continue
        return Cell(x, y)


def validate_dimensions(width: int, height: int) -> None:
    if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
        raise GridTooSmallError(
            f"Grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}"
        )


def validate_endpoints(start, goal) -> None:
    if Cell(*start) == Cell(*goal):
        raise SameEndpointsError("Start and goal coordinates must be different.")
