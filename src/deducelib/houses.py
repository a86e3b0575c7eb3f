"""Index arithmetic for the 9x9 grid.

A *house* is a row, column or 3x3 box: nine cells that must hold every digit
exactly once. Two cells are *peers* when they share at least one house.
"""

from __future__ import annotations

from collections import namedtuple
from typing import TYPE_CHECKING, List, Tuple

from .structs import CELL_COUNT

if TYPE_CHECKING:
    from typing import NamedTuple

    class House(NamedTuple):
        kind: str
        indices: Tuple[int, ...]

else:
    House = namedtuple("House", ["kind", "indices"])


ALL_INDEX: Tuple[int, ...] = tuple(range(CELL_COUNT))

ROWS: List[House] = [
    House("Row", tuple(range(r * 9, r * 9 + 9))) for r in range(9)
]
COLUMNS: List[House] = [
    House("Column", tuple(range(c, CELL_COUNT, 9))) for c in range(9)
]
BOXES: List[House] = [
    House(
        "Box",
        tuple(
            (b // 3 * 3 + i) * 9 + b % 3 * 3 + j for i in range(3) for j in range(3)
        ),
    )
    for b in range(9)
]
HOUSES: List[House] = ROWS + COLUMNS + BOXES


def row_of(index: int) -> int:
    return index // 9


def column_of(index: int) -> int:
    return index % 9


def box_of(index: int) -> int:
    return index // 27 * 3 + index % 9 // 3


def get_row(index: int) -> House:
    return ROWS[row_of(index)]


def get_column(index: int) -> House:
    return COLUMNS[column_of(index)]


def get_box(index: int) -> House:
    return BOXES[box_of(index)]


def _build_peers(index: int) -> Tuple[int, ...]:
    seen = set(get_row(index).indices)
    seen.update(get_column(index).indices)
    seen.update(get_box(index).indices)
    seen.discard(index)
    return tuple(sorted(seen))


_PEERS = [_build_peers(index) for index in ALL_INDEX]


def get_peers(index: int) -> Tuple[int, ...]:
    """The 20 cells sharing a house with ``index``, in ascending order."""
    return _PEERS[index]
