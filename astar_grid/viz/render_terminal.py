from __future__ import annotations
import sys
from typing import Dict, TextIO
from astar_grid.env.grid import FREE_COST, PATH_COST, Direction, Grid

CC_RED_BEGIN = "\033[31m"
CC_WHITE_BEGIN = "\033[37m"
CC_YELLOW_BEGIN = "\033[33m"
CC_END = "\033[0m"

FREE_GLYPH = "·"
WALL_GLYPH = "■"

DIRECTION_GLYPHS: Dict[Direction, str] = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
    Direction.TARGET: "☩",
    Direction.NONE: "■",
}


def render_cell(grid: Grid, idx: int, color: bool = True) -> str:
    cost = int(grid.traversal_cost[idx])
    if cost == PATH_COST:
        glyph, begin = DIRECTION_GLYPHS[Direction(int(grid.direction[idx]))], CC_YELLOW_BEGIN
    elif cost == FREE_COST:
        glyph, begin = FREE_GLYPH, CC_WHITE_BEGIN
    else:
        glyph, begin = WALL_GLYPH, CC_RED_BEGIN
    if not color:
        return f" {glyph} "
    return f"{begin} {glyph} {CC_END}"


def render_grid(grid: Grid, color: bool = True) -> str:
    """Row-major text picture of the grid, one line per row. Does not mutate `grid`."""
    rows = []
    for y in range(grid.H):
        rows.append("".join(render_cell(grid, grid.index(x, y), color) for x in range(grid.W)))
    return "\n".join(rows)


def print_grid(grid: Grid, color: bool = True, stream: TextIO = None) -> None:
    stream = stream or sys.stdout
    stream.write(render_grid(grid, color=color) + "\n")
    stream.flush()
