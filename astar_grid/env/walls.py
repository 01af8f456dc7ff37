from __future__ import annotations

from typing import List, Tuple

from astar_grid.errors import GridConfigError

REFERENCE_WALLS: Tuple[int, ...] = (5, 15, 25, 35, 45, 46, 47, 57, 64, 65, 66, 67, 77, 48)


def layout_walls(layout: str, W: int, H: int) -> List[int]:
    """
    Deterministic wall layouts, as linear row-major indices.

    Layout "reference_10x10":
      - vertical wall down column 5 from row 0 to row 4
      - horizontal bar on row 4 (columns 5-8) with stubs below at column 7
      - second bar on row 6 (columns 4-7)
    Layout "none": an empty grid.
    """
    if layout == "none":
        return []
    if layout == "reference_10x10":
        if (W, H) != (10, 10):
            raise GridConfigError(f"Layout {layout!r} needs a 10x10 grid, got {W}x{H}")
        return list(REFERENCE_WALLS)
    raise GridConfigError(f"Unknown wall layout: {layout}")


def parse_wall_list(text: str) -> List[int]:
    """'5,15,25' -> [5, 15, 25]; an empty string means no walls."""
    text = text.strip()
    if not text:
        return []
    try:
        return [int(tok) for tok in text.split(",") if tok.strip()]
    except ValueError as exc:
        raise GridConfigError(f"Bad wall list {text!r}: {exc}") from exc


def parse_cell(text: str) -> Tuple[int, int]:
    """'8,0' -> (8, 0)"""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:
        raise GridConfigError(f"Expected 'x,y', got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise GridConfigError(f"Expected 'x,y' integers, got {text!r}") from exc
