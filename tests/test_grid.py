from __future__ import annotations
import math
import numpy as np
import pytest
from astar_grid.env.grid import IMPASSABLE_COST, NO_PREDECESSOR, Direction, build_grid
from astar_grid.env.walls import REFERENCE_WALLS, layout_walls, parse_cell, parse_wall_list
from astar_grid.errors import GridConfigError
from astar_grid.planning.heuristics import manhattan, octile


def test_build_reference_grid():
    grid = build_grid(10, 10, REFERENCE_WALLS, (8, 0))
    assert grid.n_cells == 100
    assert int(grid.walls.sum()) == len(REFERENCE_WALLS)
    assert np.all(grid.traversal_cost[list(REFERENCE_WALLS)] == IMPASSABLE_COST)
    assert int((grid.traversal_cost == 1).sum()) == 100 - len(REFERENCE_WALLS)
    assert np.all(np.isinf(grid.accumulated_cost))
    assert np.all(grid.predecessor == NO_PREDECESSOR)
    assert np.all(grid.direction == Direction.NONE)


def test_heuristic_is_manhattan_to_target():
    grid = build_grid(6, 4, [], (4, 1))
    for idx in range(grid.n_cells):
        assert grid.heuristic_cost[idx] == manhattan(grid.coord(idx), (4, 1))
    assert grid.heuristic_cost[grid.index(4, 1)] == 0


def test_heuristic_is_octile_with_diagonals():
    grid = build_grid(6, 4, [], (0, 0), allow_diagonal=True)
    assert grid.heuristic_cost[grid.index(3, 2)] == pytest.approx(3 + (math.sqrt(2) - 1) * 2)
    for idx in range(grid.n_cells):
        assert grid.heuristic_cost[idx] == pytest.approx(octile(grid.coord(idx), (0, 0)))


def test_index_round_trip_is_row_major():
    grid = build_grid(7, 3, [], (0, 0))
    assert grid.index(3, 2) == 17
    assert grid.coord(17) == (3, 2)


def test_neighbors_order_and_borders():
    grid = build_grid(3, 3, [], (0, 0))
    # up, down, left, right
    assert [n for n, _ in grid.neighbors(4)] == [1, 7, 3, 5]
    assert [n for n, _ in grid.neighbors(0)] == [3, 1]
    # no wraparound from the end of row 0 to the start of row 1
    assert 3 not in [n for n, _ in grid.neighbors(2)]


def test_neighbors_skip_walls_unless_asked():
    grid = build_grid(3, 3, [1, 5], (0, 0))
    assert [n for n, _ in grid.neighbors(4)] == [7, 3]
    assert [n for n, _ in grid.neighbors(4, include_walls=True)] == [1, 7, 3, 5]


def test_diagonal_neighbors_weigh_sqrt2():
    grid = build_grid(3, 3, [], (0, 0), allow_diagonal=True)
    steps = dict(grid.neighbors(4))
    assert len(steps) == 8
    assert steps[1] == 1.0
    assert steps[8] == pytest.approx(math.sqrt(2))
    assert len(dict(grid.neighbors(0))) == 3


def test_copy_is_independent():
    grid = build_grid(4, 4, [5], (3, 3))
    other = grid.copy()
    other.traversal_cost[0] = 0
    other.predecessor[1] = 0
    assert grid.traversal_cost[0] == 1
    assert grid.predecessor[1] == NO_PREDECESSOR


@pytest.mark.parametrize(
    "W,H,walls,target",
    [
        (0, 5, [], (0, 0)),
        (5, -1, [], (0, 0)),
        (2.5, 3, [], (0, 0)),
        (5, 5, [], (5, 0)),
        (5, 5, [], (0, -1)),
        (5, 5, [25], (0, 0)),
        (5, 5, [-1], (0, 0)),
        (5, 5, [7], (2, 1)),
    ],
)
def test_invalid_configuration_raises(W, H, walls, target):
    with pytest.raises(GridConfigError):
        build_grid(W, H, walls, target)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        build_grid(3, 3, [], (9, 9))


def test_layouts():
    assert layout_walls("reference_10x10", 10, 10) == list(REFERENCE_WALLS)
    assert layout_walls("none", 4, 4) == []
    with pytest.raises(GridConfigError):
        layout_walls("reference_10x10", 12, 10)
    with pytest.raises(GridConfigError):
        layout_walls("spiral", 10, 10)


def test_parsers():
    assert parse_cell("8,0") == (8, 0)
    assert parse_cell(" 3 , 4 ") == (3, 4)
    assert parse_wall_list("5,15, 25") == [5, 15, 25]
    assert parse_wall_list("") == []
    for bad in ["8", "a,b", "1,2,3"]:
        with pytest.raises(GridConfigError):
            parse_cell(bad)
    with pytest.raises(GridConfigError):
        parse_wall_list("1,x")
