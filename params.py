from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class GridParams:
    W: int = 10
    H: int = 10
    layout: str = "reference_10x10"  # {"reference_10x10","none"}
    walls: Optional[Tuple[int, ...]] = None  # explicit wall indices, overrides layout
    start: Tuple[int, int] = (0, 0)  # (x, y)
    target: Tuple[int, int] = (8, 0)  # (x, y)
    allow_diagonal: bool = False


@dataclass(frozen=True)
class SearchParams:
    wall_mode: str = "impassable"  # {"impassable","weighted"}
    repeat: int = 1  # extra runs on grid copies to check the path is stable


@dataclass(frozen=True)
class RenderParams:
    color: bool = True


@dataclass(frozen=True)
class RunParams:

    grid: GridParams = field(default_factory=GridParams)
    search: SearchParams = field(default_factory=SearchParams)
    render: RenderParams = field(default_factory=RenderParams)
