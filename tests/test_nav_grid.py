"""
Unit tests for the Grid model.

Covers:
- bounds / wall queries
- neighbor order and filtering
- packed index round trip
- snapshot edits returning new grids
- construction validation
"""

from __future__ import annotations

import pytest

from nav import GRID_SIZE, Grid, neighbors


def test_empty_grid_defaults() -> None:
    grid = Grid.empty()

    assert grid.size == GRID_SIZE
    assert grid.start is None
    assert grid.end is None
    assert grid.free_cells() == GRID_SIZE * GRID_SIZE


def test_in_bounds() -> None:
    grid = Grid.empty(5)

    assert grid.in_bounds((0, 0))
    assert grid.in_bounds((4, 4))
    assert not grid.in_bounds((-1, 0))
    assert not grid.in_bounds((0, 5))
    assert not grid.in_bounds((5, 2))


def test_is_wall_out_of_bounds_raises() -> None:
    grid = Grid.empty(3)
    with pytest.raises(IndexError):
        grid.is_wall((3, 0))


def test_neighbors_order_is_up_down_left_right() -> None:
    grid = Grid.empty(3)
    assert grid.neighbors((1, 1)) == [(0, 1), (2, 1), (1, 0), (1, 2)]


def test_neighbors_clipped_at_corner() -> None:
    grid = Grid.empty(3)
    assert grid.neighbors((0, 0)) == [(1, 0), (0, 1)]
    assert grid.neighbors((2, 2)) == [(1, 2), (2, 1)]


def test_neighbors_skip_walls() -> None:
    grid = Grid.from_walls(3, [(0, 1), (1, 0)])

    assert grid.neighbors((1, 1)) == [(2, 1), (1, 2)]
    assert neighbors(grid, (0, 0)) == []


def test_index_round_trip() -> None:
    grid = Grid.empty(7)
    seen = set()
    for r in range(7):
        for c in range(7):
            idx = grid.index((r, c))
            assert grid.coord_of(idx) == (r, c)
            seen.add(idx)
    assert seen == set(range(49))


def test_from_walls_rejects_out_of_bounds_wall() -> None:
    with pytest.raises(ValueError):
        Grid.from_walls(3, [(3, 3)])


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size": 0, "walls": ()},
        {"size": 2, "walls": ((False, False),)},
        {"size": 2, "walls": ((False,), (False,))},
    ],
)
def test_malformed_walls_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        Grid(**kwargs)


def test_endpoint_on_wall_rejected() -> None:
    with pytest.raises(ValueError):
        Grid.from_walls(3, [(1, 1)], start=(1, 1))


def test_endpoint_out_of_bounds_rejected() -> None:
    with pytest.raises(ValueError):
        Grid.empty(3, end=(0, 3))


def test_with_endpoints_returns_new_grid() -> None:
    grid = Grid.empty(4, start=(0, 0), end=(3, 3))

    moved = grid.with_endpoints(start=(1, 1))

    assert moved.start == (1, 1)
    assert moved.end == (3, 3)
    # original snapshot untouched
    assert grid.start == (0, 0)

    cleared = moved.with_endpoints(end=None)
    assert cleared.end is None
    assert cleared.start == (1, 1)


def test_toggled_wall_flips_flag() -> None:
    grid = Grid.empty(3)

    walled = grid.toggled_wall((1, 1))
    assert walled.is_wall((1, 1))
    assert not grid.is_wall((1, 1))

    unwalled = walled.toggled_wall((1, 1))
    assert unwalled == grid


def test_toggled_wall_refuses_endpoint() -> None:
    grid = Grid.empty(3, start=(0, 0), end=(2, 2))
    with pytest.raises(ValueError):
        grid.toggled_wall((0, 0))
    with pytest.raises(ValueError):
        grid.toggled_wall((2, 2))


def test_cleared_resets_everything() -> None:
    grid = Grid.from_walls(4, [(1, 1), (2, 2)], start=(0, 0), end=(3, 3))

    reset = grid.cleared()

    assert reset == Grid.empty(4)
    assert reset.free_cells() == 16


def test_grid_is_frozen() -> None:
    grid = Grid.empty(2)
    with pytest.raises(AttributeError):
        grid.start = (0, 0)  # type: ignore[misc]


def test_walls_from_lists_are_copied() -> None:
    rows = [[False] * 3 for _ in range(3)]
    grid = Grid(size=3, walls=rows, start=(0, 0))  # type: ignore[arg-type]

    rows[0][1] = True
    rows.append([True] * 3)

    assert grid.walls == ((False,) * 3,) * 3
    assert not grid.is_wall((0, 1))
    assert grid.neighbors((0, 0)) == [(1, 0), (0, 1)]
    assert hash(grid) == hash(Grid.empty(3, start=(0, 0)))


def test_wall_flags_are_normalised_to_bool() -> None:
    grid = Grid(size=2, walls=[[0, 1], [1, 0]])  # type: ignore[arg-type]

    assert grid.walls == ((False, True), (True, False))
    assert grid == Grid.from_walls(2, [(0, 1), (1, 0)])
