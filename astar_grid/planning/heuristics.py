from __future__ import annotations

import math
from typing import Tuple

import numpy as np

Coord = Tuple[int, int]  # (x, y)

DIAGONAL_STEP = math.sqrt(2.0)


def manhattan(a: Coord, b: Coord) -> float:
    (x1, y1), (x2, y2) = a, b
    return float(abs(x2 - x1) + abs(y2 - y1))


def octile(a: Coord, b: Coord) -> float:
    """Admissible for 8-connected moves when a diagonal step costs sqrt(2)."""
    (x1, y1), (x2, y2) = a, b
    dx, dy = abs(x2 - x1), abs(y2 - y1)
    return float(max(dx, dy) + (DIAGONAL_STEP - 1.0) * min(dx, dy))


def heuristic_map(W: int, H: int, target: Coord, allow_diagonal: bool) -> np.ndarray:
    """
    Heuristic of every cell towards `target`, flattened row-major (length W*H).

    Manhattan for 4-connected movement, octile when diagonals are allowed.
    """
    ys, xs = np.indices((H, W))
    dx = np.abs(xs - target[0]).astype(float)
    dy = np.abs(ys - target[1]).astype(float)
    if allow_diagonal:
        h = np.maximum(dx, dy) + (DIAGONAL_STEP - 1.0) * np.minimum(dx, dy)
    else:
        h = dx + dy
    return h.reshape(-1)
