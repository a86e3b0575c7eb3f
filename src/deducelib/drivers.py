from __future__ import annotations

from collections import namedtuple
from typing import TYPE_CHECKING, Iterable, List, Optional

from .exceptions import DeductionTooDeep
from .reporters import BaseReporter
from .structs import Grid, Solution, apply_solutions

if TYPE_CHECKING:
    from typing import NamedTuple

    from .strategies import Strategy

    class Result(NamedTuple):
        grid: Grid
        solutions: List[Solution]

else:
    Result = namedtuple("Result", "grid solutions")


# Every applied solution strikes at least one candidate and a grid holds at
# most 81 * 8 strikable ones, plus one round to find nothing more.
DEFAULT_MAX_ROUNDS = 81 * 8 + 1


class StrategyDriver:
    """Apply a list of strategies to a grid until none of them finds more.

    Strategies are tried in order. As soon as one finds something, its
    solutions are applied and the search restarts from the first strategy, so
    cheaper strategies should come first.

    A driver is itself a strategy: calling it returns the accumulated list of
    solutions, empty if nothing was found.
    """

    def __init__(
        self,
        strategies: Iterable[Strategy],
        reporter: Optional[BaseReporter] = None,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
    ) -> None:
        self.strategies = list(strategies)
        self.reporter = reporter or BaseReporter()
        self.max_rounds = max_rounds

    def __repr__(self) -> str:
        names = ", ".join(getattr(s, "__name__", repr(s)) for s in self.strategies)
        return f"{type(self).__name__}([{names}])"

    def __call__(self, grid: Grid) -> List[Solution]:
        return self.run(grid).solutions

    def _find_next(self, grid: Grid) -> List[Solution]:
        for strategy in self.strategies:
            solutions = strategy(grid)
            if solutions:
                return list(solutions)
        return []

    def run(self, grid: Grid) -> Result:
        """Drive ``grid`` to a fixed point of the configured strategies.

        The return value is a tuple subclass with two members:

        * `grid`: the grid with every found solution applied.
        * `solutions`: the found solutions, in the order they were applied.

        `DeductionTooDeep` is raised if the strategies keep finding
        solutions for more than `max_rounds` rounds, which well-behaved
        strategies never do.
        """
        self.reporter.starting(grid)
        found: List[Solution] = []
        for _ in range(self.max_rounds):
            solutions = self._find_next(grid)
            if not solutions:
                result = Result(grid=grid, solutions=found)
                self.reporter.ending(result)
                return result
            for solution in solutions:
                self.reporter.applying(solution)
            grid = apply_solutions(grid, solutions)
            found.extend(solutions)
        raise DeductionTooDeep(self.max_rounds)


def apply_strategies(strategies: Iterable[Strategy], **options) -> StrategyDriver:
    """Build a driver over ``strategies``.

    Keyword arguments are passed on to `StrategyDriver`.
    """
    return StrategyDriver(strategies, **options)
