from __future__ import annotations
from typing import Iterable, Tuple
from astar_grid.env.grid import Grid, build_grid
from astar_grid.planning.a_star import AStarResult, a_star
from astar_grid.planning.heuristics import Coord


def plan_route(
    W: int,
    H: int,
    walls: Iterable[int],
    start: Coord,
    target: Coord,
    allow_diagonal: bool = False,
    wall_mode: str = "impassable",
) -> Tuple[Grid, AStarResult]:
    """Build the grid for `target` and run A* from `start` on it.

    Configuration problems raise GridConfigError before any search work;
    an unreachable target comes back as a result with found=False.
    """
    grid = build_grid(W, H, walls, target, allow_diagonal=allow_diagonal)
    res = a_star(grid, start, wall_mode=wall_mode)
    return grid, res
