from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Tuple

import numpy as np

from astar_grid.errors import GridConfigError
from astar_grid.planning.heuristics import DIAGONAL_STEP, Coord, heuristic_map

IMPASSABLE_COST = 100
FREE_COST = 1
PATH_COST = 0
NO_PREDECESSOR = -1

# (dx, dy) in expansion order: up, down, left, right, then the diagonals.
ORTHOGONAL_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))
DIAGONAL_STEPS = ((1, 1), (-1, 1), (1, -1), (-1, -1))


class Direction(IntEnum):
    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    TARGET = 5


def _is_int(v) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, bool)


@dataclass(eq=False)
class Grid:
    """
    Fixed W x H grid stored as flat per-cell arrays indexed by y * W + x.

    Static fields (walls, heuristic_cost) are set once by `build_grid`.
    accumulated_cost / predecessor are written by the search; traversal_cost
    and direction are overwritten on the winning path by the backtrace.
    """
    W: int
    H: int
    target: Coord
    allow_diagonal: bool
    walls: np.ndarray             # bool[W*H]
    traversal_cost: np.ndarray    # int[W*H]
    heuristic_cost: np.ndarray    # float[W*H]
    accumulated_cost: np.ndarray  # float[W*H], inf = unreached
    predecessor: np.ndarray       # int[W*H], -1 = none
    direction: np.ndarray         # int8[W*H], Direction codes

    @property
    def n_cells(self) -> int:
        return self.W * self.H

    def index(self, x: int, y: int) -> int:
        return y * self.W + x

    def coord(self, idx: int) -> Coord:
        return int(idx % self.W), int(idx // self.W)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.W and 0 <= y < self.H

    def is_wall(self, idx: int) -> bool:
        return bool(self.walls[idx])

    def neighbors(self, idx: int, include_walls: bool = False) -> Iterator[Tuple[int, float]]:
        """Yield (neighbor_index, step_weight); no wraparound at the borders."""
        x, y = self.coord(idx)
        steps = [(dx, dy, 1.0) for dx, dy in ORTHOGONAL_STEPS]
        if self.allow_diagonal:
            steps += [(dx, dy, DIAGONAL_STEP) for dx, dy in DIAGONAL_STEPS]
        for dx, dy, weight in steps:
            nx, ny = x + dx, y + dy
            if not self.in_bounds(nx, ny):
                continue
            nxt = self.index(nx, ny)
            if self.walls[nxt] and not include_walls:
                continue
            yield nxt, weight

    def validate_endpoint(self, cell: Coord, role: str) -> int:
        """Return the index of `cell`, or raise if it is off-grid or a wall."""
        if len(cell) != 2 or not all(_is_int(v) for v in cell):
            raise GridConfigError(f"{role} must be an (x, y) pair of integers, got {cell!r}")
        x, y = int(cell[0]), int(cell[1])
        if not self.in_bounds(x, y):
            raise GridConfigError(f"{role} {cell} is outside the {self.W}x{self.H} grid")
        idx = self.index(x, y)
        if self.walls[idx]:
            raise GridConfigError(f"{role} {cell} (index {idx}) is a wall")
        return idx

    def reset_search_state(self) -> None:
        """Forget any earlier search, including path marks from its backtrace."""
        self.traversal_cost[:] = np.where(self.walls, IMPASSABLE_COST, FREE_COST)
        self.accumulated_cost[:] = np.inf
        self.predecessor[:] = NO_PREDECESSOR
        self.direction[:] = int(Direction.NONE)

    def copy(self) -> "Grid":
        return Grid(
            W=self.W,
            H=self.H,
            target=self.target,
            allow_diagonal=self.allow_diagonal,
            walls=self.walls.copy(),
            traversal_cost=self.traversal_cost.copy(),
            heuristic_cost=self.heuristic_cost.copy(),
            accumulated_cost=self.accumulated_cost.copy(),
            predecessor=self.predecessor.copy(),
            direction=self.direction.copy(),
        )


def build_grid(
    W: int,
    H: int,
    wall_indices: Iterable[int],
    target: Coord,
    allow_diagonal: bool = False,
) -> Grid:
    """Allocate all W*H cells once, with walls and the heuristic towards `target`."""
    if not (_is_int(W) and _is_int(H)) or W <= 0 or H <= 0:
        raise GridConfigError(f"Grid dimensions must be positive integers, got {W}x{H}")
    W, H = int(W), int(H)
    n = W * H

    walls = np.zeros(n, dtype=bool)
    for i in wall_indices:
        if not _is_int(i) or not 0 <= i < n:
            raise GridConfigError(f"Wall index {i!r} is outside [0, {n})")
        walls[int(i)] = True

    traversal_cost = np.where(walls, IMPASSABLE_COST, FREE_COST).astype(np.int64)

    grid = Grid(
        W=W,
        H=H,
        target=target,
        allow_diagonal=bool(allow_diagonal),
        walls=walls,
        traversal_cost=traversal_cost,
        heuristic_cost=np.zeros(n, dtype=float),
        accumulated_cost=np.full(n, np.inf, dtype=float),
        predecessor=np.full(n, NO_PREDECESSOR, dtype=np.int64),
        direction=np.full(n, int(Direction.NONE), dtype=np.int8),
    )
    grid.validate_endpoint(target, "target")
    grid.target = (int(target[0]), int(target[1]))
    grid.heuristic_cost = heuristic_map(W, H, grid.target, grid.allow_diagonal)
    return grid
