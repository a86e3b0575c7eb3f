import pytest

from deducelib import (
    Grid,
    InvalidGrid,
    InvalidUpdate,
    Solution,
    Update,
    apply_solution,
    apply_update,
)
from deducelib.structs import DIGITS


def test_grid_from_string(puzzle):
    grid = Grid.from_string(puzzle)
    assert len(grid) == 81
    assert grid[0] == 5
    assert grid.is_settled(0)
    assert not grid.is_settled(2)
    assert grid.candidates(2) == DIGITS
    assert grid.candidates(0) == {5}
    assert str(grid) == puzzle
    assert not grid.is_solved


def test_grid_from_string_ignores_whitespace(puzzle):
    text = "\n".join(puzzle[i : i + 9] for i in range(0, 81, 9)).replace("0", ".")
    assert Grid.from_string(text) == Grid.from_string(puzzle)


@pytest.mark.parametrize(
    "cells",
    [
        [9] * 80,
        [9] * 82,
        [9] * 80 + [0],
        [9] * 80 + [10],
        [9] * 80 + [set()],
        [9] * 80 + [{0, 1}],
        [9] * 80 + [True],
        [9] * 80 + [None],
        [9] * 80 + [{1, "a"}],
    ],
)
def test_grid_rejects_malformed_cells(cells):
    with pytest.raises(InvalidGrid):
        Grid(cells)


def test_grid_rejects_bad_character(puzzle):
    with pytest.raises(InvalidGrid):
        Grid.from_string("x" + puzzle[1:])


def test_grid_settles_single_candidate(make_grid):
    grid = make_grid({4: {3}, 5: [1, 2]})
    assert grid[4] == 3
    assert grid[5] == frozenset({1, 2})
    assert list(grid.unsettled()) == [5]


def test_grid_is_immutable(make_grid):
    grid = make_grid({4: {1, 2}})
    with pytest.raises(TypeError):
        grid[4] = 1


def test_update_build(make_grid):
    grid = make_grid({30: {2, 5, 7}})
    update = Update.build(30, grid, [5])
    assert update.index == 30
    assert update.previous == {2, 5, 7}
    assert update.removal == {5}
    assert update.updated == {2, 7}
    assert not update.solves


def test_update_only(make_grid):
    grid = make_grid({30: {2, 5, 7}})
    update = Update.only(30, grid, [7])
    assert update.removal == {2, 5}
    assert update.updated == {7}
    assert update.solves


@pytest.mark.parametrize(
    "index, removal",
    [
        (0, [9]),  # settled cell
        (30, []),  # nothing removed
        (30, [3]),  # not a candidate
        (30, [2, 5, 7]),  # nothing left
    ],
)
def test_update_build_rejects(make_grid, index, removal):
    grid = make_grid({30: {2, 5, 7}})
    with pytest.raises(InvalidUpdate) as ctx:
        Update.build(index, grid, removal)
    assert ctx.value.index == index


def test_apply_update_returns_new_grid(make_grid):
    grid = make_grid({30: {2, 5, 7}})
    updated = apply_update(grid, Update.build(30, grid, [2, 5]))
    assert updated[30] == 7
    assert updated.is_solved
    assert grid[30] == frozenset({2, 5, 7})


def test_apply_update_that_strikes_nothing(make_grid):
    grid = make_grid({30: {2, 5, 7}})
    update = Update.build(30, grid, [5])
    narrowed = apply_update(grid, update)
    assert apply_update(narrowed, update) is narrowed


def test_apply_update_rejects_emptying(make_grid):
    grid = make_grid({30: {2, 5, 7}})
    settled = apply_update(grid, Update.only(30, grid, [2]))
    with pytest.raises(InvalidUpdate) as ctx:
        apply_update(settled, Update.only(30, grid, [5]))
    assert ctx.value.candidates == {2}


def test_solution_partitions_updates(make_grid):
    grid = make_grid({30: {2, 5, 7}, 31: {1, 4}})
    narrow = Update.build(30, grid, [5])
    solve = Update.only(31, grid, [4])
    solution = Solution("test", [30, 31], [narrow, solve])
    assert solution.cell_init == (30, 31)
    assert solution.narrow == (narrow,)
    assert solution.solved == (solve,)
    assert solution.notes is None

    result = apply_solution(grid, solution)
    assert result[30] == frozenset({2, 7})
    assert result[31] == 4
