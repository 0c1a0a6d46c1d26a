# -*- coding: utf-8 -*-
"""
ブロックと行（列）の交差に注目する戦略です。

Pointing Pair/Triple
    あるブロックの中で、数字 n の候補がすべて同じ行（列）に並んでいれば、
    n はその行（列）のブロック外のマスには入りません。

Box/Line Reduction
    その逆。ある行（列）の中で、数字 n の候補がすべて同じブロックに
    収まっていれば、n はそのブロックの他の行（列）には入りません。

どちらも、消去の結果として候補が 1 つになるマスがあるときだけヒントにします。
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..config import BOX_SIZE, GRID_SIZE
from ..csp.domains import digit_mask
from ..grid.board import block_cells, block_index, block_origin, col_cells, row_cells
from ..types import CandidateMap, HintResult, Region
from .common import eliminate_from, elimination_hint


def find_pointing_pair(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    for block in range(GRID_SIZE):
        r0, c0 = block_origin(block)

        for num in range(1, GRID_SIZE + 1):
            bit = digit_mask(num)
            positions = [cell for cell in block_cells(block) if candidates.get(cell, 0) & bit]
            if not 2 <= len(positions) <= 3:
                continue

            # 同じ行に並んでいる
            if all(r == positions[0][0] for r, _ in positions):
                row = positions[0][0]
                outside = [(row, c) for c in range(GRID_SIZE) if not c0 <= c < c0 + BOX_SIZE]
                eliminations = eliminate_from(outside, bit, candidates)
                hint = elimination_hint(
                    candidates,
                    eliminations,
                    strategy="Pointing Pair/Triple (Row)",
                    reason=(
                        f"In the block at row {r0 + 1}, column {c0 + 1}, the number {num} "
                        f"can only appear in row {row + 1}. So {num} cannot be anywhere "
                        f"else in row {row + 1} outside this block."
                    ),
                    affected_cells=list(eliminations),
                    regions=[Region("row", row), Region("block", block)],
                )
                if hint is not None:
                    return hint

            # 同じ列に並んでいる
            if all(c == positions[0][1] for _, c in positions):
                col = positions[0][1]
                outside = [(r, col) for r in range(GRID_SIZE) if not r0 <= r < r0 + BOX_SIZE]
                eliminations = eliminate_from(outside, bit, candidates)
                hint = elimination_hint(
                    candidates,
                    eliminations,
                    strategy="Pointing Pair/Triple (Column)",
                    reason=(
                        f"In the block at row {r0 + 1}, column {c0 + 1}, the number {num} "
                        f"can only appear in column {col + 1}. So {num} cannot be anywhere "
                        f"else in column {col + 1} outside this block."
                    ),
                    affected_cells=list(eliminations),
                    regions=[Region("col", col), Region("block", block)],
                )
                if hint is not None:
                    return hint

    return None


def find_box_line_reduction(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    # 行
    for row in range(GRID_SIZE):
        for num in range(1, GRID_SIZE + 1):
            bit = digit_mask(num)
            positions = [cell for cell in row_cells(row) if candidates.get(cell, 0) & bit]
            if not 2 <= len(positions) <= 3:
                continue

            block = block_index(*positions[0])
            if any(block_index(*cell) != block for cell in positions):
                continue

            r0, c0 = block_origin(block)
            others = [cell for cell in block_cells(block) if cell[0] != row]
            eliminations = eliminate_from(others, bit, candidates)
            hint = elimination_hint(
                candidates,
                eliminations,
                strategy="Box/Line Reduction (Row)",
                reason=(
                    f"In row {row + 1}, the number {num} only appears inside the block at "
                    f"row {r0 + 1}, column {c0 + 1}. So {num} cannot be in the other rows "
                    f"of this block."
                ),
                affected_cells=list(eliminations),
                regions=[Region("row", row), Region("block", block)],
            )
            if hint is not None:
                return hint

    # 列
    for col in range(GRID_SIZE):
        for num in range(1, GRID_SIZE + 1):
            bit = digit_mask(num)
            positions = [cell for cell in col_cells(col) if candidates.get(cell, 0) & bit]
            if not 2 <= len(positions) <= 3:
                continue

            block = block_index(*positions[0])
            if any(block_index(*cell) != block for cell in positions):
                continue

            r0, c0 = block_origin(block)
            others = [cell for cell in block_cells(block) if cell[1] != col]
            eliminations = eliminate_from(others, bit, candidates)
            hint = elimination_hint(
                candidates,
                eliminations,
                strategy="Box/Line Reduction (Column)",
                reason=(
                    f"In column {col + 1}, the number {num} only appears inside the block at "
                    f"row {r0 + 1}, column {c0 + 1}. So {num} cannot be in the other columns "
                    f"of this block."
                ),
                affected_cells=list(eliminations),
                regions=[Region("col", col), Region("block", block)],
            )
            if hint is not None:
                return hint

    return None
