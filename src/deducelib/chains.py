"""Hypothesis-branching ("chain") deductions.

A chain picks a cell with a few candidates left, say ``{7, 8}``, and plays out
each candidate on its own copy of the grid. Every copy, or *branch*, is
driven with a set of simpler strategies, round by round. Whenever every
branch has struck a digit from some other cell, that digit is impossible
whichever candidate turns out to be right, so the strike holds for the real
grid too. A branch that runs into a contradiction is dropped, and when only
one is left its own deductions, including its answer for the branching
cell, hold for the real grid.

`ChainTemplate` builds a chain from any strategy driver and branching factor.
`solve_x_chain` is the two-branch chain driven by single-option eliminations.
"""

from __future__ import annotations

from collections import namedtuple
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple

from .drivers import apply_strategies
from .exceptions import InvalidUpdate
from .houses import ALL_INDEX
from .reporters import BaseReporter
from .strategies import solve_each, solve_single_option_full_grid
from .structs import (
    ChainNotes,
    ChainRound,
    Grid,
    Solution,
    Update,
    apply_solution,
    apply_solutions,
)

if TYPE_CHECKING:
    from typing import NamedTuple

    class Overlap(NamedTuple):
        updates: List[Update]
        history: Tuple[ChainRound, ...]
        rounds_elapsed: int

else:
    Overlap = namedtuple("Overlap", "updates history rounds_elapsed")


Driver = Callable[[Grid], List[Solution]]

# Label of the throwaway solutions that seed each branch.
CHAIN_ATTEMPT = "chain-attempt"

# Each round that does not end the search strikes at least one candidate in
# some branch. Hitting this cap means the driver is not narrowing.
DEFAULT_MAX_ROUNDS = 81


def overlap_updates(grid: Grid, branches: Sequence[Grid]) -> List[Update]:
    """Find the strikes every branch agrees on.

    For each cell, a digit survives if at least one branch still allows it.
    Cells settled in ``grid``, or whose surviving digits are not strictly
    fewer than their candidates in ``grid``, yield nothing.
    """
    updates = []
    for index in grid.unsettled():
        allowed = frozenset().union(*(b.candidates(index) for b in branches))
        if allowed and allowed < grid.candidates(index):
            updates.append(Update.only(index, grid, allowed))
    return updates


def find_chain_overlap_updates(
    grid: Grid,
    branches: Sequence[Grid],
    driver: Driver,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    reporter: Optional[BaseReporter] = None,
    index: int = -1,
) -> Optional[Overlap]:
    """Drive every branch round by round until they agree on something.

    Each round, ``driver`` runs on every branch independently. A branch that
    finds nothing carries its grid into the next round unchanged.

    A branch whose driver runs into a contradiction (`InvalidUpdate`) is
    refuted: it finds nothing from then on and no longer counts towards the
    overlap, since its hypothesis cannot hold. With a single branch left, the
    overlap is whatever that branch has deduced, the branching cell included.

    The search ends with ``None`` when a round brings neither a solution nor a
    refutation, when every branch is refuted, or when ``max_rounds`` rounds
    pass without agreement. ``index`` only labels reporter calls.
    """
    reporter = reporter or BaseReporter()
    history: List[ChainRound] = []
    current: List[Optional[Grid]] = list(branches)
    for round_index in range(1, max_rounds + 1):
        reporter.starting_round(index, round_index)
        found: List[Tuple[Solution, ...]] = []
        refuted = False
        for position, branch in enumerate(current):
            solutions: Tuple[Solution, ...] = ()
            if branch is not None:
                try:
                    solutions = tuple(driver(branch))
                    current[position] = apply_solutions(branch, solutions)
                except InvalidUpdate as e:
                    reporter.refuted(index, position, e)
                    current[position] = None
                    solutions = ()
                    refuted = True
            found.append(solutions)

        alive = [branch for branch in current if branch is not None]
        if not alive or not (refuted or any(found)):
            reporter.exhausted(index, round_index)
            return None

        chain_round = ChainRound(round=round_index, solutions=tuple(found))
        history.append(chain_round)
        reporter.ending_round(index, chain_round)

        updates = overlap_updates(grid, alive)
        if updates:
            overlap = Overlap(
                updates=updates,
                history=tuple(history),
                rounds_elapsed=round_index,
            )
            reporter.converged(index, overlap)
            return overlap

    reporter.exhausted(index, max_rounds)
    return None


class ChainTemplate:
    """A configured chain, callable as ``chain(grid, index)``.

    :param driver: Narrows a single branch grid. Any strategy works; a
        `StrategyDriver` makes each round run to a fixed point.
    :param answer_len: The number of candidates a cell must have for the chain
        to branch on it, which is also the number of branches.
    :param label: The strategy name given to the resulting solutions.
    :param max_rounds: Give up after this many rounds without agreement.
    :param reporter: A `BaseReporter` receiving progress callbacks.
    """

    def __init__(
        self,
        driver: Driver,
        answer_len: int,
        label: str,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        reporter: Optional[BaseReporter] = None,
    ) -> None:
        if answer_len < 2:
            raise ValueError(f"a chain needs at least 2 branches, not {answer_len}")
        self.driver = driver
        self.answer_len = answer_len
        self.label = label
        self.max_rounds = max_rounds
        self.reporter = reporter or BaseReporter()

    def __repr__(self) -> str:
        return "{}({!r}, answer_len={}, label={!r})".format(
            type(self).__name__, self.driver, self.answer_len, self.label
        )

    def build_branches(self, grid: Grid, index: int) -> List[Grid]:
        """Settle cell ``index`` to each of its candidates in turn."""
        branches = []
        for answer in sorted(grid.candidates(index)):
            update = Update.only(index, grid, [answer])
            attempt = Solution(CHAIN_ATTEMPT, [index], [update])
            branches.append(apply_solution(grid, attempt))
        return branches

    def __call__(self, grid: Grid, index: int) -> Optional[Solution]:
        if grid.is_settled(index) or len(grid.candidates(index)) != self.answer_len:
            return None

        branches = self.build_branches(grid, index)
        self.reporter.starting_chain(index, branches)
        overlap = find_chain_overlap_updates(
            grid,
            branches,
            self.driver,
            max_rounds=self.max_rounds,
            reporter=self.reporter,
            index=index,
        )
        if overlap is None:
            return None

        notes = ChainNotes(
            branches=tuple(branches),
            history=overlap.history,
            rounds_elapsed=overlap.rounds_elapsed,
        )
        return Solution(self.label, [index], overlap.updates, notes)

    def full_grid(self, grid: Grid) -> List[Solution]:
        """Try the chain on every cell, in index order.

        Solutions are collected, not applied, so every cell is searched
        against the same grid.
        """
        return solve_each(self, grid, ALL_INDEX)


def chain_template(
    driver: Driver, answer_len: int, label: str, **options
) -> ChainTemplate:
    """Build a `ChainTemplate`; keyword arguments are passed through."""
    return ChainTemplate(driver, answer_len, label, **options)


solve_x_chain = chain_template(
    apply_strategies([solve_single_option_full_grid]), 2, "X-Chain"
)


def solve_x_chain_full_grid(grid: Grid) -> List[Solution]:
    """Run `solve_x_chain` on every cell of ``grid``.

    Returns an empty list when no cell yields a deduction, so this can be
    used as a strategy in a `StrategyDriver`.
    """
    return solve_x_chain.full_grid(grid)
