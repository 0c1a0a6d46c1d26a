import random

import numpy as np
import pytest

from sudoku_solver import config, hints
from sudoku_solver.csp.domains import digits_to_mask, get_all_candidates, mask_to_digits
from sudoku_solver.csp.propagation import apply_eliminations_to_candidates
from sudoku_solver.generator import generate_game
from sudoku_solver.hints import GUIDED_HINT, get_advanced_hint, get_hint
from sudoku_solver.strategies import find_naked_single, find_x_wing
from sudoku_solver.types import ACTION_ADD_VALUE, ACTION_REMOVE_NOTE, HintResult


def _stub_hint(strategy="Stub"):
    return HintResult(
        row=0, col=2, value=4, strategy=strategy,
        explanation="stub", action=ACTION_ADD_VALUE,
    )


def test_first_hint_on_classic_puzzle_is_naked_single(puzzle, solution):
    hint = get_advanced_hint(puzzle, solution)

    assert hint is not None
    assert hint.strategy == "Naked Single"
    assert hint.value == solution[hint.row, hint.col]


def test_single_gap_is_naked_single(solution):
    grid = solution.copy()
    grid[0, 2] = 0

    hint = get_advanced_hint(grid, solution)

    assert (hint.row, hint.col, hint.value) == (0, 2, 4)
    assert hint.strategy == "Naked Single"


def test_solved_grid_has_no_hint(solution):
    assert get_advanced_hint(solution, solution) is None
    assert get_hint(solution, solution) is None


def test_invalid_notes_come_first(puzzle, solution):
    hint = get_advanced_hint(puzzle, solution, notes={(0, 2): {1, 2, 5}})

    assert hint.strategy == "Remove Invalid Notes"
    assert hint.action == ACTION_REMOVE_NOTE
    assert hint.invalid_notes == (5,)


def test_cascade_stops_at_first_hit(monkeypatch, puzzle, solution):
    calls = []

    def miss(grid, candidates):
        calls.append("miss")
        return None

    def hit(grid, candidates):
        calls.append("hit")
        return _stub_hint("Hit")

    def later(grid, candidates):
        calls.append("later")
        return _stub_hint("Later")

    monkeypatch.setattr(hints, "STRATEGY_CASCADE", [("Miss", miss), ("Hit", hit), ("Later", later)])

    hint = get_advanced_hint(puzzle, solution)

    assert hint.strategy == "Hit"
    assert calls == ["miss", "hit"]


def test_failing_strategy_is_skipped(monkeypatch, puzzle, solution, caplog):
    def broken(grid, candidates):
        raise KeyError("boom")

    monkeypatch.setattr(
        hints, "STRATEGY_CASCADE", [("Broken", broken), ("Hit", lambda g, c: _stub_hint("Hit"))]
    )
    caplog.set_level("ERROR", logger="sudoku_solver")

    hint = get_advanced_hint(puzzle, solution)

    assert hint.strategy == "Hit"
    assert any("Broken" in rec.getMessage() for rec in caplog.records)


def test_guided_hint_when_no_strategy_applies(monkeypatch, puzzle, solution):
    monkeypatch.setattr(hints, "STRATEGY_CASCADE", [])

    hint = get_advanced_hint(puzzle, solution, rng=random.Random(3))

    assert hint.strategy == GUIDED_HINT
    assert puzzle[hint.row, hint.col] == 0
    assert hint.value == solution[hint.row, hint.col]
    assert hint.value in hint.candidates
    assert f"The correct value is {hint.value}." in hint.explanation


def test_guided_hint_points_at_wrong_cells(monkeypatch, solution):
    monkeypatch.setattr(hints, "STRATEGY_CASCADE", [])
    grid = solution.copy()
    grid[8, 8] = 1 if solution[8, 8] != 1 else 2

    hint = get_advanced_hint(grid, solution)

    assert (hint.row, hint.col) == (8, 8)
    assert hint.value == solution[8, 8]


def test_guided_hint_can_be_disabled(monkeypatch, puzzle, solution):
    monkeypatch.setattr(hints, "STRATEGY_CASCADE", [])
    monkeypatch.setattr(config, "GUIDED_HINT_ENABLED", False)

    assert get_advanced_hint(puzzle, solution) is None


def test_get_hint_returns_open_cell(puzzle, solution, rng):
    cell = get_hint(puzzle, solution, rng)

    assert cell is not None
    assert puzzle[cell] == 0


def test_inputs_are_not_mutated(puzzle, solution):
    grid = puzzle.copy()
    notes = {(0, 2): {1, 2, 4}}

    get_advanced_hint(grid, solution, notes=notes)

    assert np.array_equal(grid, puzzle)
    assert notes == {(0, 2): {1, 2, 4}}


def test_malformed_grid_is_rejected(solution):
    with pytest.raises(ValueError):
        get_advanced_hint(np.zeros((8, 9), dtype=int), solution)


@pytest.mark.parametrize("seed", [1, 7])
def test_following_hints_solves_generated_puzzle(seed):
    puzzle, solution = generate_game("easy", rng=random.Random(seed))
    grid = puzzle.copy()
    rng = random.Random(seed)

    for _ in range(81):
        hint = get_advanced_hint(grid, solution, rng=rng)
        if hint is None:
            break

        assert hint.action == ACTION_ADD_VALUE
        assert hint.value == solution[hint.row, hint.col]

        if hint.eliminations:
            cands = apply_eliminations_to_candidates(get_all_candidates(grid), hint.eliminations)
            assert mask_to_digits(cands[(hint.row, hint.col)]) == [hint.value]

        grid[hint.row, hint.col] = hint.value

    assert np.array_equal(grid, solution)


def test_naked_single_beats_x_wing(monkeypatch, solution):
    # 列 1, 7 の数字 5 で X-Wing（行 0, 4）、(8, 8) は候補 9 だけ
    cands = {
        cell: digits_to_mask(digits)
        for cell, digits in {
            (0, 1): {5, 1}, (0, 7): {5, 2},
            (4, 1): {5, 3}, (4, 7): {5, 4},
            (2, 1): {5, 8},
            (8, 8): {9},
        }.items()
    }
    grid = np.zeros((9, 9), dtype=np.int8)
    monkeypatch.setattr(hints, "get_all_candidates", lambda g: dict(cands))

    assert find_x_wing(grid, cands) is not None
    assert find_naked_single(grid, cands) is not None

    hint = get_advanced_hint(grid, solution)

    assert hint.strategy == "Naked Single"
    assert (hint.row, hint.col, hint.value) == (8, 8, 9)


@pytest.mark.parametrize("seed", range(10))
def test_naked_single_first_on_generated_puzzles(seed):
    puzzle, solution = generate_game("hard", rng=random.Random(seed))
    cands = get_all_candidates(puzzle)

    if find_naked_single(puzzle, cands) is None:
        pytest.skip("no naked single in this puzzle")

    hint = get_advanced_hint(puzzle, solution)

    assert hint.strategy == "Naked Single"
