"""Base deduction strategies.

A strategy takes a `Grid` and returns a list of `Solution` instances, each
computed against that same grid. An empty list means the strategy found
nothing. Cell- and house-scoped helpers are exposed separately so they can be
composed with `solve_each()` or used on their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, List, Optional

from .houses import ALL_INDEX, HOUSES, get_peers
from .structs import Grid, Solution, Update

if TYPE_CHECKING:
    from .houses import House

Strategy = Callable[[Grid], List[Solution]]

SINGLE_OPTION = "singleOption"
SINGLE_PARAM = "singleParam"


def solve_each(
    per_cell: Callable[[Grid, int], Optional[Solution]],
    grid: Grid,
    indices: Iterable[int] = ALL_INDEX,
) -> List[Solution]:
    """Run a cell-scoped strategy over ``indices``, dropping empty results."""
    solutions = []
    for index in indices:
        solution = per_cell(grid, index)
        if solution is not None:
            solutions.append(solution)
    return solutions


def solve_single_option(grid: Grid, index: int) -> Optional[Solution]:
    """Strike digits settled in a cell's peers from its candidates.

    Returns ``None`` if the cell is settled, nothing can be struck, or
    striking would leave the cell empty. The last case only happens on a
    contradictory grid, such as a wrong hypothesis inside a chain; it is left
    alone so the grid stays well-formed.
    """
    if grid.is_settled(index):
        return None
    candidates = grid.candidates(index)
    removal = candidates.intersection(
        grid[peer] for peer in get_peers(index) if grid.is_settled(peer)
    )
    if not removal or removal == candidates:
        return None
    update = Update.build(index, grid, removal)
    return Solution(SINGLE_OPTION, [index], [update])


def solve_single_option_full_grid(grid: Grid) -> List[Solution]:
    return solve_each(solve_single_option, grid)


def solve_single_param(grid: Grid, house: House) -> List[Solution]:
    """Settle digits that fit in exactly one cell of a house.

    Digits already settled in the house are skipped. A cell is settled at
    most once, by the smallest digit that singles it out.
    """
    settled = {grid[i] for i in house.indices if grid.is_settled(i)}
    positions = {}
    for index in house.indices:
        if grid.is_settled(index):
            continue
        for digit in grid.candidates(index):
            positions.setdefault(digit, []).append(index)

    strategy = f"{SINGLE_PARAM}-{house.kind}"
    solutions = []
    claimed = set()
    for digit in sorted(positions):
        cells = positions[digit]
        if digit in settled or len(cells) != 1 or cells[0] in claimed:
            continue
        index = cells[0]
        claimed.add(index)
        update = Update.only(index, grid, [digit])
        solutions.append(Solution(strategy, [index], [update]))
    return solutions


def solve_single_param_full_grid(grid: Grid) -> List[Solution]:
    solutions = []
    claimed = set()
    for house in HOUSES:
        for solution in solve_single_param(grid, house):
            index = solution.cell_init[0]
            if index in claimed:
                continue
            claimed.add(index)
            solutions.append(solution)
    return solutions
