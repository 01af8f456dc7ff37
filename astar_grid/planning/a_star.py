from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from astar_grid.env.grid import NO_PREDECESSOR, PATH_COST, Direction, Grid
from astar_grid.errors import GridConfigError, SearchInvariantError
from astar_grid.planning.heuristics import Coord

WALL_MODES = ("impassable", "weighted")


@dataclass
class AStarResult:
    found: bool
    path: List[int]  # cell indices, start -> target inclusive
    cost: float
    expansions: int


def step_direction(dx: int, dy: int) -> Direction:
    if (dx, dy) == (0, 1):
        return Direction.DOWN
    if (dx, dy) == (0, -1):
        return Direction.UP
    if (dx, dy) == (1, 0):
        return Direction.RIGHT
    if (dx, dy) == (-1, 0):
        return Direction.LEFT
    return Direction.NONE


def backtrace(grid: Grid, target_idx: int) -> List[int]:
    """
    Walk predecessors from the target back to the start, marking the path.

    Each path cell gets traversal_cost 0 and the direction of the move it
    makes towards the next path cell; the target gets Direction.TARGET.
    """
    grid.traversal_cost[target_idx] = PATH_COST
    grid.direction[target_idx] = Direction.TARGET
    path = [target_idx]
    current = target_idx
    while grid.predecessor[current] != NO_PREDECESSOR:
        # A simple path has at most n_cells - 1 steps.
        if len(path) >= grid.n_cells:
            raise SearchInvariantError(
                f"Predecessor chain from {target_idx} exceeds {grid.n_cells} cells (cycle?)"
            )
        prev = int(grid.predecessor[current])
        (cx, cy), (px, py) = grid.coord(current), grid.coord(prev)
        grid.traversal_cost[prev] = PATH_COST
        grid.direction[prev] = step_direction(cx - px, cy - py)
        path.append(prev)
        current = prev
    path.reverse()
    return path


def a_star(grid: Grid, start: Coord, wall_mode: str = "impassable") -> AStarResult:
    """
    A* from `start` to `grid.target`, mutating the grid in place.

      step_cost = step_weight * traversal_cost[next_cell]

    The frontier entry with the lowest f = g + h is expanded first; ties go to
    the entry inserted into the frontier earliest (relaxing a cell does not
    change its position). wall_mode="impassable" never enters wall cells,
    wall_mode="weighted" enters them at IMPASSABLE_COST.
    """
    if wall_mode not in WALL_MODES:
        raise GridConfigError(f"Unknown wall mode {wall_mode!r}, expected one of {WALL_MODES}")
    start_idx = grid.validate_endpoint(start, "start")
    target_idx = grid.index(*grid.target)
    include_walls = wall_mode == "weighted"

    grid.reset_search_state()

    open_heap: List[Tuple[float, int, int]] = []  # (f, insertion order, index)
    open_set: Set[int] = set()
    closed_set: Set[int] = set()
    order: Dict[int, int] = {}
    expansions = 0

    def push(idx: int) -> None:
        f = float(grid.accumulated_cost[idx] + grid.heuristic_cost[idx])
        heapq.heappush(open_heap, (f, order[idx], idx))

    def open_cell(idx: int, g: float, parent: int) -> None:
        grid.accumulated_cost[idx] = g
        grid.predecessor[idx] = parent
        order[idx] = len(order)
        open_set.add(idx)
        push(idx)

    open_cell(start_idx, 0.0, NO_PREDECESSOR)

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current not in open_set:
            continue  # superseded by a cheaper entry
        open_set.remove(current)
        expansions += 1

        if current == target_idx:
            path = backtrace(grid, current)
            return AStarResult(
                found=True,
                path=path,
                cost=float(grid.accumulated_cost[current]),
                expansions=expansions,
            )

        closed_set.add(current)
        g_current = float(grid.accumulated_cost[current])
        for nxt, weight in grid.neighbors(current, include_walls=include_walls):
            if nxt in closed_set:
                continue
            candidate = g_current + weight * float(grid.traversal_cost[nxt])
            if nxt not in open_set:
                open_cell(nxt, candidate, current)
            elif candidate < grid.accumulated_cost[nxt]:
                grid.accumulated_cost[nxt] = candidate
                grid.predecessor[nxt] = current
                push(nxt)

    return AStarResult(found=False, path=[], cost=float("inf"), expansions=expansions)
