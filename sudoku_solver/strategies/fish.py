# -*- coding: utf-8 -*-
"""
X-Wing / Swordfish の戦略です（行を基準に探します）。

X-Wing
    数字 n の候補が、2 つの行でちょうど同じ 2 列にだけあるなら、
    n はその 2 列の他の行には入りません。

Swordfish
    3 つの行で、数字 n の候補（各行 2〜3 マス）の列の和集合がちょうど 3 列なら、
    n はその 3 列の他の行には入りません。
"""

from __future__ import annotations

import itertools
from typing import List, Optional, Tuple

import numpy as np

from ..config import GRID_SIZE
from ..csp.domains import digit_mask
from ..types import CandidateMap, HintResult, Region
from .common import eliminate_from, elimination_hint, join_digits


def _rows_with_digit(
    candidates: CandidateMap,
    bit: int,
    min_cols: int,
    max_cols: int,
) -> List[Tuple[int, Tuple[int, ...]]]:
    """数字の候補が min_cols〜max_cols 列にある行を (row, 列のタプル) で返します。"""
    out = []
    for row in range(GRID_SIZE):
        cols = tuple(c for c in range(GRID_SIZE) if candidates.get((row, c), 0) & bit)
        if min_cols <= len(cols) <= max_cols:
            out.append((row, cols))
    return out


def find_x_wing(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    for num in range(1, GRID_SIZE + 1):
        bit = digit_mask(num)
        rows = _rows_with_digit(candidates, bit, 2, 2)

        for (r1, cols1), (r2, cols2) in itertools.combinations(rows, 2):
            if cols1 != cols2:
                continue

            col1, col2 = cols1
            targets = [
                (row, col)
                for row in range(GRID_SIZE) if row not in (r1, r2)
                for col in (col1, col2)
            ]
            eliminations = eliminate_from(targets, bit, candidates)
            hint = elimination_hint(
                candidates,
                eliminations,
                strategy="X-Wing",
                reason=(
                    f"An X-Wing for the number {num} was found in rows {r1 + 1} and "
                    f"{r2 + 1}, columns {col1 + 1} and {col2 + 1}. In these rows {num} "
                    f"must sit on opposite corners of the rectangle, so it can be removed "
                    f"from columns {col1 + 1} and {col2 + 1} in every other row."
                ),
                affected_cells=[(r1, col1), (r1, col2), (r2, col1), (r2, col2)],
                regions=[
                    Region("row", r1),
                    Region("row", r2),
                    Region("col", col1),
                    Region("col", col2),
                ],
            )
            if hint is not None:
                return hint

    return None


def find_swordfish(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    for num in range(1, GRID_SIZE + 1):
        bit = digit_mask(num)
        rows = _rows_with_digit(candidates, bit, 2, 3)
        if len(rows) < 3:
            continue

        for combo in itertools.combinations(rows, 3):
            cols = sorted({c for _, row_cols in combo for c in row_cols})
            if len(cols) != 3:
                continue

            fish_rows = [row for row, _ in combo]
            targets = [
                (row, col)
                for row in range(GRID_SIZE) if row not in fish_rows
                for col in cols
            ]
            eliminations = eliminate_from(targets, bit, candidates)
            hint = elimination_hint(
                candidates,
                eliminations,
                strategy="Swordfish",
                reason=(
                    f"A Swordfish for the number {num} was found in rows "
                    f"{join_digits(r + 1 for r in fish_rows)} and columns "
                    f"{join_digits(c + 1 for c in cols)}. In these three rows {num} "
                    f"must fill those three columns, so it can be removed from the "
                    f"other cells of these columns."
                ),
                affected_cells=[(row, c) for row, row_cols in combo for c in row_cols],
                regions=[Region("row", r) for r in fish_rows]
                + [Region("col", c) for c in cols],
            )
            if hint is not None:
                return hint

    return None
