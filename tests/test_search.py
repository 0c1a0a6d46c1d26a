import numpy as np
import pytest

from sudoku_solver.csp.search import count_solutions, has_unique_solution, solve, solve_copy
from sudoku_solver.grid.board import is_valid_solution


def _unsolvable_grid():
    # 1 行目の (0, 8) には 9 しか入らないが、8 列目の (1, 8) に 9 がある
    grid = np.zeros((9, 9), dtype=np.int8)
    grid[0, :8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1, 8] = 9
    return grid


def test_solve_fills_grid_in_place(puzzle, solution):
    grid = puzzle.copy()
    assert solve(grid)
    assert np.array_equal(grid, solution)


def test_solve_is_deterministic(empty_grid):
    a = empty_grid.copy()
    b = empty_grid.copy()
    assert solve(a) and solve(b)
    assert np.array_equal(a, b)
    assert is_valid_solution(a)
    # 行優先・小さい数字から試すので、1 行目は 1..9 の順
    assert a[0].tolist() == list(range(1, 10))


def test_solve_failure_leaves_grid_unchanged():
    grid = _unsolvable_grid()
    before = grid.copy()
    assert not solve(grid)
    assert np.array_equal(grid, before)


def test_solve_rejects_conflicting_givens():
    grid = np.zeros((9, 9), dtype=np.int8)
    grid[0, 0] = grid[0, 5] = 4
    assert not solve(grid)


def test_solve_copy_raises_on_failure(puzzle, solution):
    assert np.array_equal(solve_copy(puzzle), solution)
    with pytest.raises(RuntimeError):
        solve_copy(_unsolvable_grid())


def test_count_solutions(puzzle, solution, empty_grid):
    assert count_solutions(puzzle, 2) == 1
    assert count_solutions(solution, 2) == 1
    assert count_solutions(empty_grid, 2) == 2
    assert count_solutions(empty_grid, 5) == 5
    assert count_solutions(_unsolvable_grid(), 2) == 0
    assert count_solutions(puzzle, 0) == 0


def test_count_solutions_does_not_touch_caller_grid(puzzle):
    before = puzzle.copy()
    count_solutions(puzzle, 2)
    assert np.array_equal(puzzle, before)


def test_has_unique_solution(puzzle, solution, empty_grid):
    assert has_unique_solution(puzzle)
    assert not has_unique_solution(empty_grid)

    grid = solution.copy()
    grid[0, 0] = 0
    assert has_unique_solution(grid)
