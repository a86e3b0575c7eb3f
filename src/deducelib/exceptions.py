from __future__ import annotations

from typing import Collection


class DeductionException(Exception):
    """A base class for all exceptions raised by this library.

    These signal malformed input or a misbehaving strategy. A deduction that
    simply cannot be made is never an exception; it is reported as ``None``
    or an empty list.
    """


class InvalidGrid(DeductionException, ValueError):
    pass


class InvalidUpdate(DeductionException):
    def __init__(
        self, index: int, candidates: Collection[int], removal: Collection[int]
    ) -> None:
        super().__init__(index, candidates, removal)
        self.index = index
        self.candidates = candidates
        self.removal = removal

    def __str__(self) -> str:
        return "Cannot remove {} from cell {} with candidates {}".format(
            sorted(self.removal), self.index, sorted(self.candidates)
        )


class DeductionTooDeep(DeductionException):
    def __init__(self, round_count: int) -> None:
        super().__init__(round_count)
        self.round_count = round_count
