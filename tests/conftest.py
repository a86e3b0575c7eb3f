import pytest

from deducelib import BaseReporter, Grid


class TestReporter(BaseReporter):
    def __init__(self):
        self._indent = 0
        self.events = []

    def starting_chain(self, index, branches):
        self.events.append(("chain", index, len(branches)))
        print(" " * self._indent, "Chain ", index, sep="")
        self._indent += 1

    def starting_round(self, index, round_index):
        self.events.append(("round", index, round_index))

    def refuted(self, index, branch, error):
        self.events.append(("refuted", index, branch))

    def converged(self, index, overlap):
        self._indent -= 1
        self.events.append(("converged", index, overlap.rounds_elapsed))
        print(" " * self._indent, "Found ", index, sep="")

    def exhausted(self, index, rounds):
        self._indent -= 1
        self.events.append(("exhausted", index, rounds))
        print(" " * self._indent, "Give up ", index, sep="")


@pytest.fixture(scope="session")
def reporter_cls():
    return TestReporter


@pytest.fixture()
def reporter(reporter_cls):
    return reporter_cls()


@pytest.fixture(scope="session")
def make_grid():
    """Build a grid of settled 9s with the given cells left open.

    Nothing outside the open cells interacts, so tests can reason about
    small candidate patterns in isolation.
    """

    def _make_grid(cells):
        values = [9] * 81
        for index, candidates in cells.items():
            values[index] = candidates
        return Grid(values)

    return _make_grid


@pytest.fixture(scope="session")
def puzzle():
    return (
        "530070000"
        "600195000"
        "098000060"
        "800060003"
        "400803001"
        "700020006"
        "060000280"
        "000419005"
        "000080079"
    )


@pytest.fixture(scope="session")
def puzzle_solution():
    return (
        "534678912"
        "672195348"
        "198342567"
        "859761423"
        "426853791"
        "713924856"
        "961537284"
        "287419635"
        "345286179"
    )
