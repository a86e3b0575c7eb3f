import deducelib

# Cells 30 and 31 (row 4) share the pair {7, 8}; cell 33 in the same row
# holds {3, 7}. Every other cell is settled to 9 so nothing else interacts.
pattern = {30: {7, 8}, 31: {7, 8}, 33: {3, 7}}


class Reporter(deducelib.BaseReporter):
    def starting(self, grid):
        print("    starting(...)")

    def applying(self, solution):
        print(f"      applying({solution.strategy}, {list(solution.cell_init)})")

    def ending(self, result):
        print(f"    ending({len(result.solutions)} solution(s))")

    def starting_chain(self, index, branches):
        print(f"starting_chain({index}, {len(branches)} branches)")

    def starting_round(self, index, round_index):
        print(f"  starting_round({index}, {round_index})")

    def ending_round(self, index, chain_round):
        counts = [len(found) for found in chain_round.solutions]
        print(f"  ending_round({index}, round={chain_round.round}, {counts})")

    def refuted(self, index, branch, error):
        print(f"  refuted({index}, branch={branch}: {error})")

    def converged(self, index, overlap):
        print(f"converged({index}, rounds={overlap.rounds_elapsed})")

    def exhausted(self, index, rounds):
        print(f"exhausted({index}, rounds={rounds})")


if __name__ == "__main__":
    from pprint import pprint

    reporter = Reporter()
    cells = [pattern.get(i, 9) for i in range(81)]
    grid = deducelib.Grid(cells)
    chain = deducelib.chain_template(
        deducelib.apply_strategies(
            [deducelib.solve_single_option_full_grid], reporter=reporter
        ),
        2,
        "X-Chain",
        reporter=reporter,
    )

    solution = chain(grid, 30)
    pprint(solution.updates)
