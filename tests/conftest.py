# tests/conftest.py
import random
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to sys.path so "sudoku_solver" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_solver.grid.parser import normalize_grid  # noqa: E402

PUZZLE = (
    "53..7...."
    "6..195..."
    ".98....6."
    "8...6...3"
    "4..8.3..1"
    "7...2...6"
    ".6....28."
    "...419..5"
    "....8..79"
)

SOLUTION = (
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


@pytest.fixture
def puzzle() -> np.ndarray:
    return normalize_grid(PUZZLE)


@pytest.fixture
def solution() -> np.ndarray:
    return normalize_grid(SOLUTION)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20241019)


@pytest.fixture
def empty_grid() -> np.ndarray:
    return np.zeros((9, 9), dtype=np.int8)


@pytest.fixture
def make_candidates():
    """{(row, col): {digits}} から候補のビット集合マップを作る。"""
    from sudoku_solver.csp.domains import digits_to_mask

    def _make(cells):
        return {cell: digits_to_mask(digits) for cell, digits in cells.items()}

    return _make
