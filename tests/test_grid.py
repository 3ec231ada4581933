import random

import pytest

from salvo.craft import Craft, Orientation, Position
from salvo.errors import InvalidConfiguration, OutOfBounds, PlacementInfeasible
from salvo.grid import Cell, CellKind, Grid, GridKind
from salvo.player import standard_fleet


def _occupied(grid):
    return {
        (x, y): token
        for y, row in enumerate(grid.rows())
        for x, token in enumerate(row)
        if token != "."
    }


def test_new_grid_defaults_to_ten_by_ten_and_empty():
    grid = Grid()
    assert grid.dimensions == (10, 10)
    assert grid.kind is GridKind.HOME
    assert all(token == "." for row in grid.rows() for token in row)
    assert grid.cell_at(9, 9) == Cell.empty()


@pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-1, 3), ("wide", 3)])
def test_bad_dimensions_are_rejected(width, height):
    with pytest.raises(InvalidConfiguration):
        Grid(width, height)


@pytest.mark.parametrize("seed", range(20))
def test_standard_fleet_never_overlaps_and_stays_in_bounds(seed):
    grid = Grid(10, 10)
    fleet = standard_fleet()
    grid.place_fleet(fleet, random.Random(seed))

    occupied = _occupied(grid)
    assert len(occupied) == sum(craft.length for craft in fleet) == 17

    seen = set()
    for craft in fleet:
        cells = craft.cells()
        assert len(cells) == craft.length
        for x, y in cells:
            assert 0 <= x < 10 and 0 <= y < 10
            assert occupied[(x, y)] == craft.id
        assert seen.isdisjoint(cells)
        seen.update(cells)


def test_non_square_grid_placement(rng):
    grid = Grid(7, 4)
    fleet = [Craft("frigate", 6), Craft("corvette", 3), Craft("launch", 2)]
    grid.place_fleet(fleet, rng)
    for craft in fleet:
        assert all(grid.in_bounds(x, y) for x, y in craft.cells())
    # Six cells only fit across a 7 x 4 grid.
    assert fleet[0].position.orientation is Orientation.HORIZONTAL


def test_craft_only_fitting_one_way_is_placed(rng):
    grid = Grid(10, 1)
    craft = Craft("longboat", 10)
    grid.place_fleet([craft], rng)
    assert craft.position == Position(0, 0, Orientation.HORIZONTAL)
    assert grid.rows() == (tuple("L" * 10),)


def test_fixed_positions_are_respected(rng):
    grid = Grid(5, 5)
    fixed = Craft("tug", 1, position=Position(4, 4))
    roaming = Craft("barge", 3)
    grid.place_fleet([roaming, fixed], rng)

    assert grid.cell_at(4, 4) == Cell.occupied("T")
    assert fixed.position == Position(4, 4)
    assert (4, 4) not in roaming.cells()


def test_fixed_position_off_the_grid_is_rejected(rng):
    grid = Grid(5, 5)
    with pytest.raises(InvalidConfiguration):
        grid.place_fleet([Craft("barge", 3, position=Position(3, 0))], rng)


def test_overlapping_fixed_positions_are_rejected(rng):
    grid = Grid(5, 5)
    fleet = [
        Craft("barge", 3, position=Position(0, 1)),
        Craft("scow", 3, position=Position(1, 0, Orientation.VERTICAL)),
    ]
    with pytest.raises(InvalidConfiguration):
        grid.place_fleet(fleet, rng)


def test_duplicate_craft_ids_are_rejected(rng):
    with pytest.raises(InvalidConfiguration):
        Grid().place_fleet([Craft("cruiser", 3), Craft("carrier", 5)], rng)


def test_craft_longer_than_grid_is_infeasible(rng):
    with pytest.raises(PlacementInfeasible):
        Grid(5, 5).place_fleet([Craft("leviathan", 6)], rng)


def test_crowded_grid_gives_up_after_max_attempts(rng):
    fleet = [Craft("alpha", 2), Craft("bravo", 2), Craft("charlie", 2)]
    with pytest.raises(PlacementInfeasible):
        Grid(2, 2).place_fleet(fleet, rng, max_attempts=50)


def test_fleet_cannot_go_on_a_tracking_grid(rng):
    with pytest.raises(InvalidConfiguration):
        Grid.tracking(10, 10).place_fleet(standard_fleet(), rng)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (10, 0), (0, 10)])
def test_cell_access_is_bounds_checked(x, y):
    grid = Grid()
    with pytest.raises(OutOfBounds):
        grid.cell_at(x, y)
    with pytest.raises(OutOfBounds):
        grid.mark(x, y, Cell.empty())


def test_home_grid_marks_and_tokens():
    grid = Grid(3, 2)
    grid.mark(0, 0, Cell.occupied("b"))
    grid.mark(1, 0, Cell.occupied("B"))
    grid.mark(1, 0, Cell.occupied_hit("B"))

    assert grid.cell_at(0, 0) == Cell(CellKind.OCCUPIED, "B")
    assert grid.cell_at(1, 0) == Cell(CellKind.OCCUPIED_HIT, "B")
    assert grid.rows() == (("B", "b", "."), (".", ".", "."))
    assert grid.cells_of("B") == [(0, 0), (1, 0)]


def test_tracking_grid_marks_and_tokens():
    grid = Grid.tracking(2, 2)
    assert grid.cell_at(0, 0).kind is CellKind.UNKNOWN
    grid.mark(0, 0, Cell.hit())
    grid.mark(1, 1, Cell.miss())

    assert grid.cell_at(0, 0).kind is CellKind.HIT
    assert grid.cell_at(1, 1).kind is CellKind.MISS
    assert grid.cell_at(0, 0).craft_id is None
    assert grid.rows() == (("x", "."), (".", "o"))


def test_cells_from_the_other_view_are_refused():
    with pytest.raises(InvalidConfiguration):
        Grid.tracking(2, 2).mark(0, 0, Cell.occupied("A"))
    with pytest.raises(InvalidConfiguration):
        Grid(2, 2).mark(0, 0, Cell.miss())


def test_rows_is_a_copy():
    grid = Grid(2, 2)
    rows = grid.rows()
    grid.mark(0, 0, Cell.occupied("A"))
    assert rows[0][0] == "."


def test_zero_attempts_places_nothing(rng):
    with pytest.raises(PlacementInfeasible):
        Grid(10, 10).place_fleet([Craft("raft", 1)], rng, max_attempts=0)
