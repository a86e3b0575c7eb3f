from __future__ import annotations

from collections import namedtuple
from typing import (
    TYPE_CHECKING,
    Any,
    FrozenSet,
    Iterable,
    Iterator,
    NamedTuple,
    Sequence,
    Tuple,
    Union,
)

from .exceptions import InvalidGrid, InvalidUpdate

DIGITS = frozenset(range(1, 10))
CELL_COUNT = 81

# A settled digit, or the candidates still open for an unsettled cell.
Cell = Union[int, FrozenSet[int]]


def _normalize_cell(index: int, value: Any) -> Cell:
    if isinstance(value, bool):
        raise InvalidGrid(f"cell {index}: {value!r} is not a digit")
    if isinstance(value, int):
        if value not in DIGITS:
            raise InvalidGrid(f"cell {index}: {value!r} is not a digit")
        return value
    try:
        candidates = frozenset(value)
    except TypeError:
        raise InvalidGrid(f"cell {index}: {value!r} is not a digit or candidates")
    if not candidates:
        raise InvalidGrid(f"cell {index}: no candidates left")
    if not candidates <= DIGITS:
        raise InvalidGrid(
            f"cell {index}: {sorted(candidates, key=str)} are not digits"
        )
    if len(candidates) == 1:
        return next(iter(candidates))
    return candidates


class Grid(Sequence[Cell]):
    """An immutable 9x9 puzzle state.

    Cells are indexed 0 to 80 in row-major order. A settled cell holds its
    digit as an ``int``; an unsettled cell holds a ``frozenset`` of at least
    two candidate digits. Candidate sets with one member are settled on
    construction, so the two forms never overlap.

    Grids are values: every operation that changes a cell returns a new grid.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Union[int, Iterable[int]]]) -> None:
        normalized = tuple(_normalize_cell(i, v) for i, v in enumerate(cells))
        if len(normalized) != CELL_COUNT:
            raise InvalidGrid(
                f"expected {CELL_COUNT} cells, got {len(normalized)}"
            )
        self._cells: Tuple[Cell, ...] = normalized

    @classmethod
    def from_string(cls, text: str) -> Grid:
        """Build a grid from 81 characters.

        Digits ``1`` to ``9`` are settled cells; ``0`` and ``.`` are unsettled
        cells with every digit as a candidate. Whitespace is ignored.
        """
        cells = []
        for char in "".join(text.split()):
            if char in "0.":
                cells.append(DIGITS)
            elif char in "123456789":
                cells.append(int(char))
            else:
                raise InvalidGrid(f"unexpected character {char!r}")
        return cls(cells)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __str__(self) -> str:
        return "".join(
            str(cell) if isinstance(cell, int) else "0" for cell in self._cells
        )

    def __len__(self) -> int:
        return CELL_COUNT

    def __getitem__(self, index):  # type: ignore[override]
        return self._cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def is_settled(self, index: int) -> bool:
        return isinstance(self._cells[index], int)

    def candidates(self, index: int) -> FrozenSet[int]:
        """Digits still possible at a cell; a settled cell yields its digit."""
        cell = self._cells[index]
        if isinstance(cell, int):
            return frozenset((cell,))
        return cell

    def unsettled(self) -> Iterator[int]:
        return (i for i, cell in enumerate(self._cells) if not isinstance(cell, int))

    @property
    def is_solved(self) -> bool:
        return all(isinstance(cell, int) for cell in self._cells)

    def replace(self, index: int, candidates: Iterable[int]) -> Grid:
        """Return a copy with one cell's candidates swapped out."""
        cells = list(self._cells)
        cells[index] = frozenset(candidates)
        return type(self)(cells)


class Update(namedtuple("Update", "index previous removal")):
    """A proposed candidate removal at a single cell.

    * `index` is the cell the removal applies to.
    * `previous` is the cell's candidate set when the update was built.
    * `removal` is the non-empty set of digits to strike out.

    Build instances with `build()` or `only()`, which check the removal
    against the grid it is derived from.
    """

    __slots__ = ()

    @classmethod
    def build(cls, index: int, grid: Grid, removal: Iterable[int]) -> Update:
        previous = grid.candidates(index)
        removal = frozenset(removal)
        if (
            grid.is_settled(index)
            or not removal
            or not removal <= previous
            or removal == previous
        ):
            raise InvalidUpdate(index, previous, removal)
        return cls(index, previous, removal)

    @classmethod
    def only(cls, index: int, grid: Grid, allowed: Iterable[int]) -> Update:
        """Build the update that narrows a cell down to ``allowed``."""
        return cls.build(index, grid, grid.candidates(index) - frozenset(allowed))

    @property
    def updated(self) -> FrozenSet[int]:
        return self.previous - self.removal

    @property
    def solves(self) -> bool:
        return len(self.updated) == 1


class Solution(namedtuple("Solution", "strategy cell_init updates notes")):
    """A bundle of updates attributed to one strategy run.

    * `strategy` is the strategy's label.
    * `cell_init` holds the cell indices that triggered the deduction.
    * `updates` is a tuple of `Update` instances.
    * `notes` is an optional diagnostic payload, e.g. `ChainNotes`.
    """

    __slots__ = ()

    def __new__(
        cls,
        strategy: str,
        cell_init: Iterable[int],
        updates: Iterable[Update],
        notes: Any = None,
    ) -> Solution:
        return super().__new__(cls, strategy, tuple(cell_init), tuple(updates), notes)

    @property
    def narrow(self) -> Tuple[Update, ...]:
        return tuple(u for u in self.updates if not u.solves)

    @property
    def solved(self) -> Tuple[Update, ...]:
        return tuple(u for u in self.updates if u.solves)


if TYPE_CHECKING:

    class ChainRound(NamedTuple):
        """Solutions each branch found in one round of a chain."""

        round: int
        solutions: Tuple[Tuple[Solution, ...], ...]

    class ChainNotes(NamedTuple):
        """Diagnostics attached to a chain `Solution`."""

        branches: Tuple[Grid, ...]
        history: Tuple[ChainRound, ...]
        rounds_elapsed: int

else:
    ChainRound = namedtuple("ChainRound", ["round", "solutions"])
    ChainNotes = namedtuple("ChainNotes", ["branches", "history", "rounds_elapsed"])


def apply_update(grid: Grid, update: Update) -> Grid:
    """Apply one update, returning a new grid.

    The removal is taken against the cell's current candidates, which may
    already be narrower than `update.previous` when several solutions found on
    the same grid touch one cell. An update that strikes nothing is a no-op;
    one that strikes every remaining candidate raises `InvalidUpdate`.
    """
    current = grid.candidates(update.index)
    remaining = current - update.removal
    if not remaining:
        raise InvalidUpdate(update.index, current, update.removal)
    if remaining == current:
        return grid
    return grid.replace(update.index, remaining)


def apply_solution(grid: Grid, solution: Solution) -> Grid:
    for update in solution.updates:
        grid = apply_update(grid, update)
    return grid


def apply_solutions(grid: Grid, solutions: Iterable[Solution]) -> Grid:
    for solution in solutions:
        grid = apply_solution(grid, solution)
    return grid
