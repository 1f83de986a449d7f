import numpy as np
import pytest

from gridpath.grid import Cell, Grid


def test_cell_value_semantics():
    a = Cell(1, 2)
    # Structural equality and hashing, interchangeable with plain tuples
    assert a == Cell(1, 2)
    assert a == (1, 2)
    assert hash(a) == hash((1, 2))
    assert len({a, Cell(1, 2), (1, 2)}) == 1
    assert sorted([Cell(1, 0), Cell(0, 5), Cell(0, 1)]) == [(0, 1), (0, 5), (1, 0)]


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
def test_grid_rejects_non_positive_dimensions(width, height):
    with pytest.raises(ValueError):
        Grid(width, height)


@pytest.mark.parametrize(
    "cell,expected",
    [
        ((0, 0), True),
        ((2, 1), True),
        ((3, 0), False),
        ((0, 2), False),
        ((-1, 0), False),
        ((0, -1), False),
    ],
)
def test_within(cell, expected):
    grid = Grid(3, 2)
    assert grid.within(cell) is expected


def test_operational_ignores_bounds():
    grid = Grid(3, 3)
    grid.set_walls([(1, 1)])
    assert not grid.operational((1, 1))
    assert grid.operational((0, 0))
    # Off-grid cells are never walls but are not passable either
    assert grid.operational((10, 10))
    assert not grid.passable((10, 10))


def test_neighbours_fixed_order_east_south_west_north():
    grid = Grid(3, 3)
    assert grid.neighbours((1, 1)) == [(2, 1), (1, 2), (0, 1), (1, 0)]


def test_neighbours_exclude_out_of_bounds_and_walls():
    grid = Grid(3, 3)
    # Corner: west and north would be negative
    assert grid.neighbours((0, 0)) == [(1, 0), (0, 1)]
    assert grid.neighbours((2, 2)) == [(1, 2), (2, 1)]
    grid.set_walls([(1, 0)])
    assert grid.neighbours((0, 0)) == [(0, 1)]


def test_set_walls_is_idempotent():
    walls = [(0, 1), (1, 1), (1, 1)]
    once = Grid(3, 3)
    once.set_walls(walls)
    twice = Grid(3, 3)
    twice.set_walls(walls)
    twice.set_walls(walls)
    assert once.walls == twice.walls == {(0, 1), (1, 1)}


def test_set_walls_drops_out_of_bounds_cells():
    grid = Grid(3, 3)
    grid.set_walls([(2, 2), (3, 2), (2, 5)])
    assert grid.walls == {(2, 2)}


def test_unset_then_set_matches_fresh_grid():
    walls = [(0, 2), (2, 0)]
    reused = Grid(4, 4)
    reused.set_walls([(1, 1), (3, 3)])
    reused.unset_walls()
    assert reused.walls == frozenset()
    reused.set_walls(walls)
    fresh = Grid(4, 4)
    fresh.set_walls(walls)
    assert reused.walls == fresh.walls
    assert reused.neighbours((1, 0)) == fresh.neighbours((1, 0))


def test_walls_snapshot_is_read_only():
    grid = Grid(2, 2)
    grid.set_walls([(0, 0)])
    snapshot = grid.walls
    grid.unset_walls()
    # Snapshot taken earlier is unaffected by later changes
    assert snapshot == {(0, 0)}
    assert isinstance(snapshot, frozenset)


def test_occupancy_indexed_by_row_then_column():
    grid = Grid(3, 2)
    grid.set_walls([(2, 0), (0, 1)])
    occ = grid.occupancy()
    assert occ.shape == (2, 3)
    assert occ.dtype == np.bool_
    assert occ[0, 2] and occ[1, 0]
    assert occ.sum() == 2
