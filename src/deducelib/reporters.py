from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .chains import Overlap
    from .drivers import Result
    from .exceptions import InvalidUpdate
    from .structs import ChainRound, Grid, Solution


logger = logging.getLogger(__name__)


class BaseReporter:
    """Delegate class to provide progress reporting for drivers and chains."""

    def starting(self, grid: Grid) -> None:
        """Called before a strategy driver starts working on a grid."""

    def applying(self, solution: Solution) -> None:
        """Called before a driver applies a solution to its working grid."""

    def ending(self, result: Result) -> None:
        """Called after a driver finds no further progress."""

    def starting_chain(self, index: int, branches: Sequence[Grid]) -> None:
        """Called after the branch grids of a chain are built.

        There is one branch per candidate of cell ``index``, in ascending
        order of candidate.
        """

    def starting_round(self, index: int, round_index: int) -> None:
        """Called before each round of the chain on cell ``index`` starts.

        The round index is one-based.
        """

    def ending_round(self, index: int, chain_round: ChainRound) -> None:
        """Called after every branch of the chain on cell ``index`` has been
        driven for a round.

        This is NOT called for a round in which no branch made progress or
        was refuted.
        """

    def refuted(self, index: int, branch: int, error: InvalidUpdate) -> None:
        """Called when a branch of the chain on cell ``index`` hits a
        contradiction.

        ``branch`` is the position of the branch, in ascending order of
        candidate. The branch takes no further part in the chain.
        """

    def converged(self, index: int, overlap: Overlap) -> None:
        """Called when all branches of the chain on cell ``index`` agree."""

    def exhausted(self, index: int, rounds: int) -> None:
        """Called when the chain on cell ``index`` gives up without a result."""


class LoggingReporter(BaseReporter):
    """Report progress through the standard logging module at DEBUG level."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    def starting(self, grid):
        self._logger.debug("driver starting on %s", grid)

    def applying(self, solution):
        self._logger.debug(
            "applying %s from cells %s: %d update(s)",
            solution.strategy,
            list(solution.cell_init),
            len(solution.updates),
        )

    def ending(self, result):
        self._logger.debug(
            "driver finished after %d solution(s)", len(result.solutions)
        )

    def starting_chain(self, index, branches):
        self._logger.debug("chain on cell %d with %d branches", index, len(branches))

    def starting_round(self, index, round_index):
        self._logger.debug("chain on cell %d: round %d", index, round_index)

    def ending_round(self, index, chain_round):
        self._logger.debug(
            "chain on cell %d: round %d progress per branch: %s",
            index,
            chain_round.round,
            [len(solutions) for solutions in chain_round.solutions],
        )

    def refuted(self, index, branch, error):
        self._logger.debug(
            "chain on cell %d: branch %d refuted: %s", index, branch, error
        )

    def converged(self, index, overlap):
        self._logger.debug(
            "chain on cell %d converged in %d round(s) on cells %s",
            index,
            overlap.rounds_elapsed,
            [update.index for update in overlap.updates],
        )

    def exhausted(self, index, rounds):
        self._logger.debug("chain on cell %d exhausted after %d round(s)", index, rounds)
