import numpy as np
import pytest

from sudoku_solver.csp.domains import (
    FULL_MASK,
    candidate_mask,
    digit_mask,
    digits_to_mask,
    get_all_candidates,
    get_candidates,
    has_digit,
    mask_size,
    mask_to_digits,
)
from sudoku_solver.grid.board import is_legal_placement


def test_mask_helpers():
    mask = digits_to_mask([1, 4, 9])
    assert mask == 0b100001001
    assert mask_to_digits(mask) == [1, 4, 9]
    assert mask_size(mask) == 3
    assert has_digit(mask, 4)
    assert not has_digit(mask, 5)
    assert digit_mask(9) == 1 << 8
    assert mask_size(FULL_MASK) == 9


def test_get_candidates_examples(puzzle):
    assert get_candidates(puzzle, 0, 2) == {1, 2, 4}
    assert get_candidates(puzzle, 4, 4) == {5}


def test_get_candidates_filled_cell_is_empty(puzzle):
    assert get_candidates(puzzle, 0, 0) == set()
    assert candidate_mask(puzzle, 0, 0) == 0


def test_get_candidates_out_of_range(puzzle):
    with pytest.raises(ValueError):
        get_candidates(puzzle, 0, 9)


def test_get_candidates_is_idempotent(puzzle):
    before = puzzle.copy()
    assert get_candidates(puzzle, 2, 0) == get_candidates(puzzle, 2, 0)
    assert np.array_equal(puzzle, before)


def test_candidates_match_legal_placements(puzzle):
    for r in range(9):
        for c in range(9):
            if puzzle[r, c]:
                continue
            expected = {d for d in range(1, 10) if is_legal_placement(puzzle, r, c, d)}
            assert get_candidates(puzzle, r, c) == expected


def test_get_all_candidates_covers_empty_cells_only(puzzle):
    cands = get_all_candidates(puzzle)
    assert len(cands) == int(np.count_nonzero(puzzle == 0))
    assert (0, 0) not in cands
    assert list(cands)[:2] == [(0, 2), (0, 3)]
    assert mask_to_digits(cands[(4, 4)]) == [5]


def test_get_all_candidates_on_solved_grid(solution):
    assert get_all_candidates(solution) == {}


def test_candidates_accept_list_and_string_boards(puzzle):
    as_list = puzzle.tolist()
    as_text = "".join(str(int(v)) for v in puzzle.flatten())

    assert get_candidates(as_list, 0, 2) == {1, 2, 4}
    assert get_candidates(as_text, 0, 2) == {1, 2, 4}
    assert get_all_candidates(as_list) == get_all_candidates(puzzle)
