from __future__ import annotations
from typing import List
import numpy as np
from astar_grid.env.grid import FREE_COST, IMPASSABLE_COST, PATH_COST, Grid
from astar_grid.planning.heuristics import DIAGONAL_STEP


def path_length(path: List[int]) -> int:
    return max(0, len(path) - 1)


def cost_of_path(grid: Grid, path: List[int]) -> float:
    """Sum of step_weight * cell cost over every cell entered after the start.

    Uses the static wall mask, so it is still valid after the backtrace has
    zeroed traversal_cost along the path.
    """
    if not path:
        return float("inf")
    total = 0.0
    for prev, cur in zip(path, path[1:]):
        (px, py), (cx, cy) = grid.coord(prev), grid.coord(cur)
        weight = DIAGONAL_STEP if (px != cx and py != cy) else 1.0
        total += weight * (IMPASSABLE_COST if grid.walls[cur] else FREE_COST)
    return float(total)


def on_path_mask(grid: Grid) -> np.ndarray:
    """bool[H, W], True where the backtrace marked a cell."""
    return (grid.traversal_cost == PATH_COST).reshape(grid.H, grid.W)
