# -*- coding: utf-8 -*-
"""
Naked Pair / Hidden Pair / Naked Triple / Naked Quad の戦略です。

Naked Subset（N = 2, 3, 4）
    同じ領域の N 個のマスの候補の和集合がちょうど N 個の数字なら、
    その N 個の数字はその N マスに入るので、領域内の他のマスから消せます。

Hidden Pair
    ある行で、2 つの数字の候補がちょうど同じ 2 マスにしか無いなら、
    その 2 マスの他の候補は消せます。さらに 2 マスが同じブロックにあれば、
    2 つの数字をそのブロックの他のマスからも消せます。

探索範囲は戦略ごとに異なります（処理量とのバランスによるもの）。
- Naked Pair            : 行・列・ブロック
- Hidden Pair           : 行のみ
- Naked Triple / Quad   : 行のみ
"""

from __future__ import annotations

import itertools
from typing import List, Optional, Sequence

import numpy as np

from ..config import GRID_SIZE
from ..csp.domains import digit_mask, mask_size, mask_to_digits
from ..grid.board import block_cells, block_index, row_cells
from ..types import CandidateMap, CellCoord, HintResult, Region
from .common import (
    UNITS,
    eliminate_from,
    elimination_hint,
    join_digits,
    region_name,
    short_cell_name,
)

SUBSET_NAMES = {2: "Pair", 3: "Triple", 4: "Quad"}
SUBSET_WORDS = {2: "two", 3: "three", 4: "four"}
REGION_LABELS = {"row": "Row", "col": "Column", "block": "Block"}


def _find_naked_subset(
    candidates: CandidateMap,
    region: Region,
    cells: Sequence[CellCoord],
    size: int,
) -> Optional[HintResult]:
    """1 つの領域の中で、大きさ size の Naked Subset を探します。"""
    members = [
        cell for cell in cells
        if cell in candidates and 2 <= mask_size(candidates[cell]) <= size
    ]
    if len(members) < size:
        return None

    for combo in itertools.combinations(members, size):
        union = 0
        for cell in combo:
            union |= candidates[cell]
        if mask_size(union) != size:
            continue

        others = [cell for cell in cells if cell not in combo]
        eliminations = eliminate_from(others, union, candidates)
        digits = mask_to_digits(union)
        word = SUBSET_WORDS[size]
        name = SUBSET_NAMES[size]
        reason = (
            f"In {region_name(region)}, the cells "
            f"{', '.join(short_cell_name(c) for c in combo)} form a naked "
            f"{name.lower()} with candidates {join_digits(digits)}. These {word} numbers "
            f"must go in these {word} cells, so they can be removed from every other "
            f"cell in this {'column' if region.kind == 'col' else region.kind}."
        )
        hint = elimination_hint(
            candidates,
            eliminations,
            strategy=f"Naked {name} ({REGION_LABELS[region.kind]})",
            reason=reason,
            affected_cells=combo,
            regions=[region],
        )
        if hint is not None:
            return hint

    return None


def find_naked_pair(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    for region, cells in UNITS:
        hint = _find_naked_subset(candidates, region, cells, 2)
        if hint is not None:
            return hint
    return None


def find_naked_triple(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    for row in range(GRID_SIZE):
        hint = _find_naked_subset(candidates, Region("row", row), row_cells(row), 3)
        if hint is not None:
            return hint
    return None


def find_naked_quad(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    for row in range(GRID_SIZE):
        hint = _find_naked_subset(candidates, Region("row", row), row_cells(row), 4)
        if hint is not None:
            return hint
    return None


def find_hidden_pair(grid: np.ndarray, candidates: CandidateMap) -> Optional[HintResult]:
    for row in range(GRID_SIZE):
        cells = row_cells(row)

        for num1, num2 in itertools.combinations(range(1, GRID_SIZE + 1), 2):
            pair = digit_mask(num1) | digit_mask(num2)
            positions: List[CellCoord] = [
                cell for cell in cells if candidates.get(cell, 0) & pair
            ]
            if len(positions) != 2:
                continue

            # 2 マスとも両方の数字を候補に持つこと
            if any(candidates[cell] & pair != pair for cell in positions):
                continue
            # 余分な候補が無ければ何も消せない
            if all(candidates[cell] == pair for cell in positions):
                continue

            eliminations = eliminate_from(positions, ~pair, candidates)

            regions = [Region("row", row)]
            follow_up = ""
            block = block_index(*positions[0])
            if block_index(*positions[1]) == block:
                others = [cell for cell in block_cells(block) if cell not in positions]
                eliminate_from(others, pair, candidates, eliminations)
                regions.append(Region("block", block))
                follow_up = (
                    f" Both cells are also in the same 3x3 block, so {num1} and {num2} "
                    f"can be removed from the rest of that block."
                )

            col1, col2 = positions[0][1], positions[1][1]
            hint = elimination_hint(
                candidates,
                eliminations,
                strategy="Hidden Pair (Row)",
                reason=(
                    f"In row {row + 1}, the numbers {num1} and {num2} can only appear in "
                    f"columns {col1 + 1} and {col2 + 1}. All other candidates can be "
                    f"removed from these two cells.{follow_up}"
                ),
                affected_cells=positions,
                regions=regions,
            )
            if hint is not None:
                return hint

    return None
