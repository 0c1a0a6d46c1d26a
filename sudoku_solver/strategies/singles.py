# -*- coding: utf-8 -*-
"""
Naked Single / Hidden Single の戦略です。

- Naked Single  : 候補が 1 つしかないマス
- Hidden Single : ある行（列・ブロック）の中で、ある数字を置けるマスが 1 つしかない
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..config import GRID_SIZE
from ..csp.domains import digit_mask, mask_size, mask_to_digits
from ..grid.board import block_index, block_origin
from ..types import ACTION_ADD_VALUE, CandidateMap, HintResult, Region
from .common import UNITS, cell_name, region_name


def find_naked_single(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    """候補が 1 つだけの空きマスを、行優先で最初に見つかったものを返します。"""
    for (row, col), mask in candidates.items():
        if mask_size(mask) != 1:
            continue

        (value,) = mask_to_digits(mask)
        return HintResult(
            row=row,
            col=col,
            value=value,
            strategy="Naked Single",
            explanation=(
                f"The cell at {cell_name((row, col))} can only be {value}. "
                f"Every other number from 1 to 9 already appears in its row, column "
                f"or 3x3 block, which leaves {value} as the only option."
            ),
            action=ACTION_ADD_VALUE,
            highlighted_regions=(
                Region("row", row),
                Region("col", col),
                Region("block", block_index(row, col)),
            ),
        )
    return None


def find_hidden_single(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    """
    行 → 列 → ブロックの順に、各数字 1..9 について
    置けるマスが 1 つだけの場所を探します。
    """
    labels = {"row": "Row", "col": "Column", "block": "Block"}

    for region, cells in UNITS:
        for num in range(1, GRID_SIZE + 1):
            bit = digit_mask(num)
            positions = [cell for cell in cells if candidates.get(cell, 0) & bit]
            if len(positions) != 1:
                continue

            row, col = positions[0]
            if region.kind == "block":
                r0, c0 = block_origin(region.index)
                explanation = (
                    f"In the 3x3 block starting at row {r0 + 1}, column {c0 + 1}, "
                    f"the number {num} can only go in {cell_name((row, col))}. "
                    f"No other cell in this block can hold {num}."
                )
                affected = ()
            else:
                explanation = (
                    f"In {region_name(region)}, the number {num} can only go in "
                    f"{cell_name((row, col))}. This cell may have other candidates, "
                    f"but {num} has no other valid position in this {labels[region.kind].lower()}."
                )
                affected = tuple(cell for cell in cells if cell != (row, col))

            return HintResult(
                row=row,
                col=col,
                value=num,
                strategy=f"Hidden Single ({labels[region.kind]})",
                explanation=explanation,
                action=ACTION_ADD_VALUE,
                affected_cells=affected,
                highlighted_regions=(region,),
            )
    return None
