"""
Console rendering of a grid, optionally marking the cells of a track.
"""
from __future__ import annotations
from typing import Iterable, Optional, TYPE_CHECKING

from .config import COLUMN_WIDTH, FREE_GLYPH, WALL_GLYPH, TRACK_GLYPH
from .grid import Cell

if TYPE_CHECKING:
    from .grid import Grid


def render_text(grid: Grid, track: Optional[Iterable] = None) -> str:
    """
    Return the grid as text: a header, a row of column indices and one line
    per row with a glyph per cell. Track cells are drawn over walls.
    """
    marked = {Cell(*c) for c in track} if track is not None else set()
    lines = [
        f"Grid[{grid.width}x{grid.height}]",
        "X-axis horizontally; Y-axis vertically",
        "",
    ]
    header = " ".rjust(COLUMN_WIDTH) + "".join(
        str(x).rjust(COLUMN_WIDTH) for x in range(grid.width)
    )
    lines.append(header)
    for y in range(grid.height):
        row = [str(y).rjust(COLUMN_WIDTH)]
        for x in range(grid.width):
            cell = Cell(x, y)
            if cell in marked:
                glyph = TRACK_GLYPH
            elif grid.operational(cell):
                glyph = FREE_GLYPH
            else:
                glyph = WALL_GLYPH
            row.append(glyph.rjust(COLUMN_WIDTH))
        lines.append("".join(row))
    # Trailing blank line after the last row
    return "\n".join(lines) + "\n\n"
