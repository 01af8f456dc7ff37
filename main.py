from __future__ import annotations

import argparse
import sys
from dataclasses import asdict
from typing import List, Optional

from params import RunParams
from astar_grid.env.grid import build_grid
from astar_grid.env.walls import layout_walls, parse_cell, parse_wall_list
from astar_grid.errors import GridConfigError
from astar_grid.planning.a_star import WALL_MODES, a_star
from astar_grid.planning.path_metrics import path_length
from astar_grid.viz.render_terminal import print_grid
from astar_grid.utils.logging_utils import log, StageTimer, format_elapsed

EXIT_FOUND = 0
EXIT_NO_PATH = 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="A* shortest path on a fixed grid, rendered to the terminal.")
    p.add_argument("--width", type=int, default=None)
    p.add_argument("--height", type=int, default=None)
    p.add_argument("--layout", type=str, default=None, choices=["reference_10x10", "none"])
    p.add_argument("--walls", type=str, default=None, help="Comma-separated wall indices (overrides --layout).")
    p.add_argument("--start", type=str, default=None, help="Start cell as 'x,y'.")
    p.add_argument("--target", type=str, default=None, help="Target cell as 'x,y'.")
    p.add_argument("--allow_diagonal", action="store_true", help="8-directional movement (octile heuristic).")
    p.add_argument("--wall_mode", type=str, default=None, choices=list(WALL_MODES))
    p.add_argument("--repeat", type=int, default=None, help="Extra searches on grid copies; paths must agree.")
    p.add_argument("--no_color", action="store_true")
    return p


def params_from_args(args: argparse.Namespace) -> RunParams:
    rp = RunParams()

    grid_overrides = {}
    if args.width is not None:
        grid_overrides["W"] = args.width
    if args.height is not None:
        grid_overrides["H"] = args.height
    if args.layout is not None:
        grid_overrides["layout"] = args.layout
    if args.walls is not None:
        grid_overrides["walls"] = tuple(parse_wall_list(args.walls))
    if args.start is not None:
        grid_overrides["start"] = parse_cell(args.start)
    if args.target is not None:
        grid_overrides["target"] = parse_cell(args.target)
    if args.allow_diagonal:
        grid_overrides["allow_diagonal"] = True

    return RunParams(
        grid=type(rp.grid)(**{**asdict(rp.grid), **grid_overrides}),
        search=type(rp.search)(
            **{
                **asdict(rp.search),
                "wall_mode": args.wall_mode or rp.search.wall_mode,
                "repeat": args.repeat if args.repeat is not None else rp.search.repeat,
            }
        ),
        render=type(rp.render)(color=rp.render.color and not args.no_color),
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        rp = params_from_args(args)
        gp = rp.grid
        walls = list(gp.walls) if gp.walls is not None else layout_walls(gp.layout, gp.W, gp.H)
        if rp.search.repeat < 1:
            raise GridConfigError(f"--repeat must be >= 1, got {rp.search.repeat}")

        log("===== A* grid search =====")
        log(f"grid={gp.W}x{gp.H}, walls={len(walls)}, start={gp.start}, target={gp.target}")
        log(f"allow_diagonal={gp.allow_diagonal}, wall_mode={rp.search.wall_mode}")

        with StageTimer("Build grid"):
            grid = build_grid(gp.W, gp.H, walls, gp.target, allow_diagonal=gp.allow_diagonal)
            pristine = grid.copy()

        with StageTimer("A* search") as search_timer:
            res = a_star(grid, gp.start, wall_mode=rp.search.wall_mode)
    except GridConfigError as exc:
        parser.error(str(exc))

    log(f"Expanded {res.expansions} cells")

    if rp.search.repeat > 1:
        with StageTimer(f"Repeat search x{rp.search.repeat - 1}"):
            agree = all(
                a_star(pristine.copy(), gp.start, wall_mode=rp.search.wall_mode).path == res.path
                for _ in range(rp.search.repeat - 1)
            )
        log(f"Repeat runs agree: {agree}")

    print_grid(grid, color=rp.render.color)

    if res.found:
        print(f"\nPath found: {path_length(res.path)} steps, cost {res.cost:g}")
    else:
        print("\nNo path found")
    print(f"\nTime: {format_elapsed(search_timer.elapsed)}")

    return EXIT_FOUND if res.found else EXIT_NO_PATH


if __name__ == "__main__":
    sys.exit(main())
