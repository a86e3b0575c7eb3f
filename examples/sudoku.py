from deducelib import (
    Grid,
    apply_strategies,
    solve_single_option_full_grid,
    solve_single_param_full_grid,
    solve_x_chain_full_grid,
)


def show(grid):
    for i in range(9):
        row = [grid[i * 9 + j] for j in range(9)]
        print(" ".join(str(v) if isinstance(v, int) else "." for v in row))


def main():
    clues = [
        [5, 3, 0, 0, 7, 0, 0, 0, 0],
        [6, 0, 0, 1, 9, 5, 0, 0, 0],
        [0, 9, 8, 0, 0, 0, 0, 6, 0],
        [8, 0, 0, 0, 6, 0, 0, 0, 3],
        [4, 0, 0, 8, 0, 3, 0, 0, 1],
        [7, 0, 0, 0, 2, 0, 0, 0, 6],
        [0, 6, 0, 0, 0, 0, 2, 8, 0],
        [0, 0, 0, 4, 1, 9, 0, 0, 5],
        [0, 0, 0, 0, 8, 0, 0, 7, 9],
    ]
    grid = Grid.from_string("".join(str(v) for row in clues for v in row))
    print("Clues:")
    show(grid)

    # Cheapest strategies first; the driver falls back to chains only when
    # singles run dry.
    driver = apply_strategies(
        [
            solve_single_option_full_grid,
            solve_single_param_full_grid,
            solve_x_chain_full_grid,
        ]
    )
    result = driver.run(grid)

    print("Steps:")
    for solution in result.solutions:
        changes = ", ".join(
            f"{u.index}->{sorted(u.updated)}" for u in solution.updates
        )
        print(f"  {solution.strategy} from {list(solution.cell_init)}: {changes}")
    print("Solved:" if result.grid.is_solved else "Stuck at:")
    show(result.grid)


if __name__ == "__main__":
    main()
