import pytest

from deducelib import (
    Grid,
    solve_single_option,
    solve_single_option_full_grid,
    solve_single_param,
    solve_single_param_full_grid,
)
from deducelib.houses import get_box, get_column, get_row


def test_single_option_strikes_settled_peers(puzzle):
    grid = Grid.from_string(puzzle)
    solution = solve_single_option(grid, 2)
    assert solution.strategy == "singleOption"
    assert solution.cell_init == (2,)
    (update,) = solution.updates
    assert update.index == 2
    assert update.removal == {3, 5, 6, 7, 8, 9}
    assert update.updated == {1, 2, 4}
    assert solution.narrow == (update,)
    assert solution.solved == ()


def test_single_option_settles(make_grid):
    grid = make_grid({30: {7, 9}})
    solution = solve_single_option(grid, 30)
    assert solution.solved[0].updated == {7}


def test_single_option_rejection(puzzle, make_grid):
    grid = Grid.from_string(puzzle)
    assert solve_single_option(grid, 0) is None

    # Nothing settled around the cell shares a candidate with it.
    assert solve_single_option(make_grid({30: {7, 8}}), 30) is None

    # Striking would leave nothing; only a contradictory grid gets here.
    contradiction = make_grid({27: 1, 30: {1, 9}})
    assert solve_single_option(contradiction, 30) is None


def test_single_option_full_grid(puzzle, puzzle_solution):
    grid = Grid.from_string(puzzle)
    solutions = solve_single_option_full_grid(grid)
    assert [s.cell_init[0] for s in solutions] == list(grid.unsettled())
    for solution in solutions:
        (update,) = solution.updates
        assert int(puzzle_solution[update.index]) in update.updated


@pytest.mark.parametrize(
    "cells, house, kind, index, answer",
    [
        ({27: {1, 2}, 28: {1, 2, 7}, 29: {1, 2}}, get_row(27), "Row", 28, 7),
        ({1: {4, 5}, 10: {4, 5, 6}, 19: {4, 5}}, get_column(28), "Column", 10, 6),
        ({40: {1, 3, 8}, 41: {1, 3}, 49: {1, 3}}, get_box(30), "Box", 40, 8),
    ],
)
def test_single_param(make_grid, cells, house, kind, index, answer):
    solutions = solve_single_param(make_grid(cells), house)
    assert len(solutions) == 1
    solution = solutions[0]
    assert solution.strategy == f"singleParam-{kind}"
    assert solution.cell_init == (index,)
    assert solution.updates[0].index == index
    assert solution.updates[0].updated == {answer}
    assert solution.narrow == ()
    assert solution.solved == solution.updates


def test_single_param_rejection(puzzle):
    grid = Grid.from_string(puzzle)
    assert solve_single_param(grid, get_column(3)) == []
    assert solve_single_param(grid, get_row(72)) == []
    assert solve_single_param(grid, get_box(0)) == []


def test_single_param_full_grid_settles_cell_once(make_grid):
    # Cell 30 is alone in its row, column and box, so 7 and 8 both single it
    # out three times over.
    solutions = solve_single_param_full_grid(make_grid({30: {7, 8}}))
    assert len(solutions) == 1
    assert solutions[0].strategy == "singleParam-Row"
    assert solutions[0].updates[0].updated == {7}
